"""Configuration classes for multiradix enumeration."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class EnumerationConfig:
    """Limits and diagnostics for product enumeration."""

    # Largest grid expand_grid() will produce before refusing
    max_expansions: int = 10_000

    # Emit a DEBUG progress line every N tuples; 0 disables
    progress_interval: int = 0

    def check_size(self, size: int, limit: Optional[int] = None) -> None:
        """Raise ValueError if ``size`` exceeds the expansion limit.

        Args:
            size: Number of items an expansion would produce.
            limit: Override for ``max_expansions``.
        """
        effective = self.max_expansions if limit is None else limit
        if size > effective:
            raise ValueError(
                f"Expansion would create {size} items (limit: {effective}). "
                f"Consider using fewer variables or splitting the grid."
            )


# Global configuration instance
ENUMERATION_CONFIG = EnumerationConfig()

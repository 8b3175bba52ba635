"""Schema definitions for parameter grids."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal


@dataclass
class GridSpec:
    """Specification of a parameter grid.

    Attributes:
        grid_vars: Mapping of parameter names to candidate values. Order of
            insertion is the order of the product positions.
        mode: How to combine the value lists.
            - "cartesian": All combinations (default)
            - "zip": Pair values by position
    """

    grid_vars: Dict[str, List[Any]] = field(default_factory=dict)
    mode: Literal["cartesian", "zip"] = "cartesian"

    def is_empty(self) -> bool:
        """Check if no parameters are defined."""
        return not self.grid_vars

    @property
    def names(self) -> List[str]:
        return list(self.grid_vars)

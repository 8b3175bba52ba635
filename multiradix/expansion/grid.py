"""Parameter grid expansion.

Pairs product tuples back onto parameter names so a simulation driver can
iterate over keyword dicts:

    spec = GridSpec(grid_vars={"agents": [10, 20], "signals": [2, 3]})
    for params in expand_grid(spec):
        run(**params)  # {"agents": 10, "signals": 2}, {"agents": 10, "signals": 3}, ...
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any, Dict, Iterator, Optional, Tuple

from multiradix.config import ENUMERATION_CONFIG
from multiradix.logging import get_logger
from multiradix.product import product

if TYPE_CHECKING:
    from .schema import GridSpec

__all__ = [
    "expand_grid",
    "grid_size",
]

logger = get_logger(__name__)


def grid_size(spec: "GridSpec") -> int:
    """Return the number of parameter dicts ``expand_grid(spec)`` yields.

    Raises:
        ValueError: If zip mode lists differ in length or the mode is unknown.
    """
    if spec.is_empty():
        return 1
    lengths = [len(v) for v in spec.grid_vars.values()]
    if spec.mode == "zip":
        if len(set(lengths)) != 1:
            raise ValueError(
                f"zip expansion requires equal-length lists; got lengths {lengths}"
            )
        return lengths[0]
    if spec.mode == "cartesian":
        return math.prod(lengths)
    raise ValueError(f"Unknown grid mode '{spec.mode}'")


def expand_grid(
    spec: "GridSpec", *, max_expansions: Optional[int] = None
) -> Iterator[Dict[str, Any]]:
    """Expand a grid into one dict per parameter combination.

    Validation runs before the first dict is produced.

    Args:
        spec: Grid specification with parameter lists and mode.
        max_expansions: Size limit; defaults to
            ``ENUMERATION_CONFIG.max_expansions``.

    Returns:
        Iterator of dicts keyed by parameter name, in declaration order.

    Raises:
        ValueError: If zip mode has mismatched list lengths, the mode is
            unknown, or the expansion exceeds the limit.
    """
    size = grid_size(spec)
    ENUMERATION_CONFIG.check_size(size, max_expansions)
    logger.debug("Expanding %s grid over %s (%d points)", spec.mode, spec.names, size)

    if spec.is_empty():
        return iter([{}])

    names = spec.names
    values = list(spec.grid_vars.values())
    combos: Iterator[Tuple[Any, ...]]
    if spec.mode == "zip":
        combos = zip(*values, strict=True)
    else:
        combos = product(values)
    return (dict(zip(names, combo, strict=True)) for combo in combos)

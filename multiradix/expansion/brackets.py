"""Bracket expressions as pools.

``parse_pool_expr("1,3,5-6")`` turns one bracket body into a pool, and
``expand_name_patterns("agent[1-2]_s[a,b]")`` treats every bracket in a name
as a pool and splices each product tuple back into the name.
"""

from __future__ import annotations

import re
from typing import List

from multiradix.product import product

__all__ = [
    "expand_name_patterns",
    "parse_pool_expr",
]

_BRACKET_REGEX = re.compile(r"\[([^\]]+)\]")
_RANGE_PART = re.compile(r"^(-?\d+)-(-?\d+)$")


def parse_pool_expr(expr: str) -> List[str]:
    """Parse a bracket body such as ``"1-3"`` or ``"a,b,1-2"`` into a pool.

    Supports:
    - Ranges: 1-3 -> 1, 2, 3 (inclusive; descending ranges count down)
    - Lists: a,b,c -> a, b, c
    - Mixed: 1,3,5-7 -> 1, 3, 5, 6, 7

    Args:
        expr: Bracket body without the surrounding brackets.

    Returns:
        Pool of strings in the order written.

    Raises:
        ValueError: If an item is empty.
    """
    values: List[str] = []
    for part in (x.strip() for x in expr.split(",")):
        if not part:
            raise ValueError(f"Empty item in pool expression '{expr}'")
        m = _RANGE_PART.match(part)
        if m is None:
            values.append(part)
            continue
        start, end = int(m.group(1)), int(m.group(2))
        step = 1 if end >= start else -1
        values.extend(str(v) for v in range(start, end + step, step))
    return values


def expand_name_patterns(name: str) -> List[str]:
    """Expand bracket expressions in a name.

    Multiple brackets combine as a Cartesian product, last bracket fastest.

    Examples:
        >>> expand_name_patterns("fa[1-3]")
        ['fa1', 'fa2', 'fa3']
        >>> expand_name_patterns("fa[1-2]_plane[5-6]")
        ['fa1_plane5', 'fa1_plane6', 'fa2_plane5', 'fa2_plane6']
    """
    matches = list(_BRACKET_REGEX.finditer(name))
    if not matches:
        return [name]

    # Literal text between brackets; one more segment than there are brackets
    segments: List[str] = []
    last_end = 0
    for match in matches:
        segments.append(name[last_end : match.start()])
        last_end = match.end()
    segments.append(name[last_end:])

    pools = [parse_pool_expr(match.group(1)) for match in matches]
    expanded: List[str] = []
    for combo in product(pools):
        parts = [segments[0]]
        for value, tail in zip(combo, segments[1:], strict=True):
            parts.append(value)
            parts.append(tail)
        expanded.append("".join(parts))
    return expanded

"""Lazy Cartesian product built on a mixed-radix counter.

The enumeration state is a single index vector with one entry per logical
position. Position ``i`` selects from ``pools[i % len(pools)]`` and counts in
radix ``len(pools[i % len(pools)])``. Stepping the vector is integer increment
with carry in that mixed radix, so every combination is visited exactly once,
last position fastest.

Usage:
    from multiradix.product import product

    for combo in product([["x", "y"], [1, 2, 3]]):
        print(combo)  # ("x", 1), ("x", 2), ("x", 3), ("y", 1), ...

    list(product([["A", "B"]], repeat=2))
    # [("A", "A"), ("A", "B"), ("B", "A"), ("B", "B")]
"""

from __future__ import annotations

import math
from typing import Any, Iterable, Iterator, List, Sequence, Tuple

from multiradix.config import ENUMERATION_CONFIG
from multiradix.logging import get_logger

__all__ = [
    "ProductSpace",
    "position_radices",
    "product",
    "product_size",
    "step_indices",
]

logger = get_logger(__name__)

Pools = Tuple[Tuple[Any, ...], ...]


def _normalize_pools(pools: Iterable[Iterable[Any]], repeat: int) -> Pools:
    """Validate arguments and snapshot each pool as a tuple.

    Raises:
        TypeError: If ``repeat`` is not an int.
        ValueError: If ``pools`` is empty or ``repeat`` < 1.
    """
    if isinstance(repeat, bool) or not isinstance(repeat, int):
        raise TypeError(f"repeat must be an int, got {type(repeat).__name__}")
    if repeat < 1:
        raise ValueError(f"repeat must be >= 1, got {repeat}")
    snapshot = tuple(tuple(pool) for pool in pools)
    if not snapshot:
        raise ValueError("At least one pool is required")
    return snapshot


def _radices(pools: Pools, repeat: int) -> List[int]:
    n_pools = len(pools)
    return [len(pools[i % n_pools]) for i in range(n_pools * repeat)]


def position_radices(pools: Iterable[Iterable[Any]], repeat: int = 1) -> List[int]:
    """Return the radix (pool length) of every logical position.

    Args:
        pools: Non-empty sequence of finite pools.
        repeat: How many times the pool list is repeated.

    Returns:
        List of length ``len(pools) * repeat``.
    """
    return _radices(_normalize_pools(pools, repeat), repeat)


def product_size(pools: Iterable[Iterable[Any]], repeat: int = 1) -> int:
    """Return the number of tuples ``product(pools, repeat)`` yields."""
    return math.prod(position_radices(pools, repeat))


def step_indices(indices: List[int], radices: Sequence[int]) -> bool:
    """Advance ``indices`` in place to the next mixed-radix value.

    Positions are scanned from last to first. A position that reaches its
    radix wraps to 0 and carries into the position on its left.

    Args:
        indices: Current index vector; mutated in place.
        radices: Radix of each position, same length as ``indices``.

    Returns:
        True if a next value exists, False if every position wrapped
        (the vector is back to all zeros and the enumeration is exhausted).
    """
    for pos in range(len(indices) - 1, -1, -1):
        indices[pos] += 1
        if indices[pos] < radices[pos]:
            return True
        indices[pos] = 0
    return False


def _iter_product(pools: Pools, repeat: int) -> Iterator[Tuple[Any, ...]]:
    n_pools = len(pools)
    radices = _radices(pools, repeat)
    if 0 in radices:
        logger.debug("Empty pool at position %d; product is empty", radices.index(0))
        return

    interval = ENUMERATION_CONFIG.progress_interval
    logger.debug(
        "Enumerating product of %d pools x%d (%d combinations)",
        n_pools,
        repeat,
        math.prod(radices),
    )

    indices = [0] * len(radices)
    produced = 0
    while True:
        yield tuple(pools[i % n_pools][idx] for i, idx in enumerate(indices))
        produced += 1
        if interval and produced % interval == 0:
            logger.debug("Produced %d combinations", produced)
        if not step_indices(indices, radices):
            break

    logger.debug("Product exhausted after %d combinations", produced)


def product(
    pools: Iterable[Iterable[Any]], repeat: int = 1
) -> Iterator[Tuple[Any, ...]]:
    """Lazily enumerate the Cartesian product of ``pools`` repeated ``repeat`` times.

    Arguments are validated immediately; the returned iterator is one-shot.
    Use :class:`ProductSpace` for an iterable that can be traversed again.

    Args:
        pools: Non-empty sequence of finite pools. Each pool is copied to a
            tuple, so the caller's containers are never mutated.
        repeat: Number of times the whole pool list is repeated to form the
            logical positions. Must be >= 1.

    Returns:
        Iterator over tuples of length ``len(pools) * repeat``. Yields nothing
        if any pool is empty.

    Raises:
        TypeError: If ``repeat`` is not an int.
        ValueError: If ``pools`` is empty or ``repeat`` < 1.

    Example:
        >>> list(product([[0, 1], [0, 1]]))
        [(0, 0), (0, 1), (1, 0), (1, 1)]
    """
    snapshot = _normalize_pools(pools, repeat)
    return _iter_product(snapshot, repeat)


class ProductSpace:
    """Restartable view of a Cartesian product.

    Each ``iter()`` starts a fresh enumeration with its own index vector,
    so several iterations may be in progress at once.

    Attributes:
        pools: Snapshot of the pools as tuples.
        repeat: Pool list repeat count.
    """

    def __init__(self, pools: Iterable[Iterable[Any]], repeat: int = 1) -> None:
        self.pools: Pools = _normalize_pools(pools, repeat)
        self.repeat = repeat

    @property
    def radices(self) -> List[int]:
        return _radices(self.pools, self.repeat)

    @property
    def width(self) -> int:
        """Length of every tuple in the space."""
        return len(self.pools) * self.repeat

    def __iter__(self) -> Iterator[Tuple[Any, ...]]:
        return _iter_product(self.pools, self.repeat)

    def __len__(self) -> int:
        return math.prod(self.radices)

    def __repr__(self) -> str:
        return (
            f"ProductSpace(radices={self.radices}, repeat={self.repeat}, "
            f"size={len(self)})"
        )

"""Alternative constructions of the Cartesian product.

These are the simpler approaches the index-based generator in
:mod:`multiradix.product` replaces. They accept the same arguments, validate
the same way and yield tuples in the same order, which makes them useful as
independent oracles and as a baseline when comparing methods from the CLI.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, Iterator, List, Tuple

from multiradix.product import _normalize_pools, product

__all__ = [
    "METHODS",
    "get_method",
    "product_accumulate",
    "product_recursive",
]

ProductMethod = Callable[..., Iterator[Tuple[Any, ...]]]


def _expand_positions(
    pools: Iterable[Iterable[Any]], repeat: int
) -> List[Tuple[Any, ...]]:
    snapshot = _normalize_pools(pools, repeat)
    return list(snapshot) * repeat


def product_recursive(
    pools: Iterable[Iterable[Any]], repeat: int = 1
) -> Iterator[Tuple[Any, ...]]:
    """Yield the product by pairing each head element with the product of the rest.

    Recursion depth grows with ``len(pools) * repeat``.
    """
    positions = _expand_positions(pools, repeat)

    def _walk(depth: int) -> Iterator[Tuple[Any, ...]]:
        if depth == len(positions):
            yield ()
            return
        for item in positions[depth]:
            for rest in _walk(depth + 1):
                yield (item,) + rest

    return _walk(0)


def product_accumulate(
    pools: Iterable[Iterable[Any]], repeat: int = 1
) -> Iterator[Tuple[Any, ...]]:
    """Build every partial tuple pool by pool, then yield the finished list.

    Memory grows with the size of the product.
    """
    positions = _expand_positions(pools, repeat)
    result: List[Tuple[Any, ...]] = [()]
    for pool in positions:
        result = [partial + (item,) for partial in result for item in pool]
    return iter(result)


METHODS: Dict[str, ProductMethod] = {
    "index": product,
    "recursive": product_recursive,
    "accumulate": product_accumulate,
}


def get_method(name: str) -> ProductMethod:
    """Look up a product construction by name.

    Raises:
        ValueError: If ``name`` is not registered.
    """
    try:
        return METHODS[name]
    except KeyError:
        raise ValueError(
            f"Unknown product method '{name}'. Available: {', '.join(METHODS)}"
        ) from None

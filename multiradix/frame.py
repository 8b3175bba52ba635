"""DataFrame views of products and grids for notebook use."""

from __future__ import annotations

from typing import Any, Iterable, Optional, Sequence

import pandas as pd

from multiradix.expansion.grid import expand_grid
from multiradix.expansion.schema import GridSpec
from multiradix.product import ProductSpace

__all__ = ["grid_frame", "product_frame"]


def product_frame(
    pools: Iterable[Iterable[Any]],
    columns: Optional[Sequence[str]] = None,
    repeat: int = 1,
) -> pd.DataFrame:
    """Return one row per product tuple.

    Args:
        pools: Non-empty sequence of finite pools.
        columns: Column names, one per logical position. Defaults to
            ``p0, p1, ...``.
        repeat: Pool list repeat count.

    Raises:
        ValueError: If ``columns`` does not match the tuple width.
    """
    space = ProductSpace(pools, repeat)
    if columns is None:
        columns = [f"p{i}" for i in range(space.width)]
    elif len(columns) != space.width:
        raise ValueError(f"Expected {space.width} column names, got {len(columns)}")
    return pd.DataFrame(list(space), columns=list(columns))


def grid_frame(spec: GridSpec) -> pd.DataFrame:
    """Return one row per grid point, columns in parameter order."""
    return pd.DataFrame(list(expand_grid(spec)), columns=spec.names)

"""multiradix: lazy Cartesian products for parameter sweeps.

Enumerates the Cartesian product of finite pools with a mixed-radix counter,
holding one index vector and one output tuple at a time.

Primary API:
    product() - One-shot lazy iterator over the product
    ProductSpace - Restartable product with len()
    product_size() - Number of combinations without enumerating them
    step_indices() - Advance an index vector by one with carry
    expand_grid() - Product of named parameter lists as dicts

Example:
    from multiradix import product, GridSpec, expand_grid

    list(product([["A", "B"]], repeat=2))
    # [("A", "A"), ("A", "B"), ("B", "A"), ("B", "B")]

    for params in expand_grid(GridSpec(grid_vars={"n": [10, 20], "k": [2, 3]})):
        simulate(**params)
"""

from __future__ import annotations

from multiradix import cli, logging
from multiradix._version import __version__
from multiradix.config import ENUMERATION_CONFIG, EnumerationConfig
from multiradix.expansion import (
    GridSpec,
    expand_grid,
    expand_name_patterns,
    grid_size,
    load_grid_yaml,
    parse_pool_expr,
)
from multiradix.product import (
    ProductSpace,
    position_radices,
    product,
    product_size,
    step_indices,
)
from multiradix.reference import product_accumulate, product_recursive

__all__ = [
    # Version
    "__version__",
    # Enumeration
    "product",
    "ProductSpace",
    "product_size",
    "position_radices",
    "step_indices",
    # Alternative constructions
    "product_recursive",
    "product_accumulate",
    # Grids and patterns
    "GridSpec",
    "expand_grid",
    "grid_size",
    "load_grid_yaml",
    "expand_name_patterns",
    "parse_pool_expr",
    # Configuration
    "EnumerationConfig",
    "ENUMERATION_CONFIG",
    # Utilities
    "cli",
    "logging",
]

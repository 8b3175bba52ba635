"""Parameter grid and bracket pattern expansion.

Usage:
    from multiradix.expansion import GridSpec, expand_grid, expand_name_patterns

    spec = GridSpec(grid_vars={"agents": [10, 20], "signals": [2, 3]})
    for params in expand_grid(spec):
        print(params)  # {"agents": 10, "signals": 2}, ...

    names = expand_name_patterns("agent[1-4]")  # ["agent1", ..., "agent4"]
"""

from .brackets import expand_name_patterns, parse_pool_expr
from .grid import expand_grid, grid_size
from .loader import load_grid_yaml
from .schema import GridSpec

__all__ = [
    # Schema
    "GridSpec",
    # Grid expansion
    "expand_grid",
    "grid_size",
    "load_grid_yaml",
    # Bracket expansion
    "expand_name_patterns",
    "parse_pool_expr",
]

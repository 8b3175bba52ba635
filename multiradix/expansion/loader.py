"""YAML loader for parameter grids.

Expected document shape::

    mode: cartesian        # optional, "cartesian" or "zip"
    grid:
      n_agents: [10, 20, 40]
      n_signals: "2-4"     # bracket expression body, values stay strings
      learning_rate: 0.1   # scalars become one-element lists
"""

from __future__ import annotations

from collections import Counter
from typing import Any, Dict, List

import yaml

from multiradix.expansion.brackets import parse_pool_expr
from multiradix.expansion.schema import GridSpec
from multiradix.utils.yaml_utils import normalize_yaml_dict_keys

__all__ = ["load_grid_yaml"]

_ALLOWED_KEYS = {"grid", "mode"}
_MODES = ("cartesian", "zip")


def _as_pool(name: str, raw: Any) -> List[Any]:
    if isinstance(raw, list):
        return raw
    if isinstance(raw, str):
        return parse_pool_expr(raw)
    if isinstance(raw, dict):
        raise ValueError(
            f"Grid parameter '{name}' must be a list or scalar, not a mapping"
        )
    return [raw]


def load_grid_yaml(yaml_str: str) -> GridSpec:
    """Parse a YAML grid document into a :class:`GridSpec`.

    Raises:
        ValueError: If the YAML is malformed, the document is not a mapping,
            has unknown keys, lacks a ``grid`` mapping, names an unknown mode,
            or two parameter names collide once converted to strings.
    """
    try:
        data = yaml.safe_load(yaml_str)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid grid YAML: {e}") from e
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError("The provided YAML must map to a dictionary at top-level.")

    unknown = sorted(str(k) for k in data if k not in _ALLOWED_KEYS)
    if unknown:
        raise ValueError(f"Unrecognized top-level keys: {', '.join(unknown)}")

    grid = data.get("grid")
    if not isinstance(grid, dict):
        raise ValueError("'grid' must be a mapping of parameter names to values")

    mode = data.get("mode", "cartesian")
    if mode not in _MODES:
        raise ValueError(f"'mode' must be one of {', '.join(_MODES)}; got {mode!r}")

    normalized = normalize_yaml_dict_keys(grid)
    if len(normalized) != len(grid):
        seen = Counter(str(key) for key in grid)
        dupes = sorted(k for k, n in seen.items() if n > 1)
        raise ValueError(
            "Duplicate grid parameter names after key normalization: "
            + ", ".join(dupes)
        )

    grid_vars: Dict[str, List[Any]] = {
        name: _as_pool(name, raw) for name, raw in normalized.items()
    }
    return GridSpec(grid_vars=grid_vars, mode=mode)

"""Tests for load_grid_yaml."""

import pytest

from multiradix.expansion import expand_grid, load_grid_yaml


def test_load_cartesian_grid() -> None:
    """Lists, bracket strings and scalars become pools."""
    spec = load_grid_yaml(
        """
grid:
  n_agents: [10, 20]
  n_signals: "2-3"
  learning_rate: 0.1
"""
    )
    assert spec.mode == "cartesian"
    assert spec.grid_vars == {
        "n_agents": [10, 20],
        "n_signals": ["2", "3"],
        "learning_rate": [0.1],
    }
    assert len(list(expand_grid(spec))) == 4


def test_load_zip_grid() -> None:
    """mode: zip is honored."""
    spec = load_grid_yaml("mode: zip\ngrid:\n  a: [1, 2]\n  b: [3, 4]\n")
    assert spec.mode == "zip"
    assert list(expand_grid(spec)) == [{"a": 1, "b": 3}, {"a": 2, "b": 4}]


def test_boolean_like_keys_normalized() -> None:
    """YAML 1.1 boolean and numeric keys become strings."""
    spec = load_grid_yaml("grid:\n  on: [1]\n  2: [3]\n")
    assert spec.names == ["True", "2"]


def test_empty_document_rejected() -> None:
    """A document without a grid mapping is rejected."""
    with pytest.raises(ValueError, match="'grid' must be a mapping"):
        load_grid_yaml("")


def test_non_mapping_document_rejected() -> None:
    """Top-level lists are rejected."""
    with pytest.raises(ValueError, match="must map to a dictionary"):
        load_grid_yaml("- a\n- b\n")


def test_unknown_top_level_key_rejected() -> None:
    """Typos in top-level keys are reported."""
    with pytest.raises(ValueError, match="Unrecognized top-level keys: grdi"):
        load_grid_yaml("grdi:\n  a: [1]\n")


def test_unknown_mode_rejected() -> None:
    """Only cartesian and zip are accepted."""
    with pytest.raises(ValueError, match="'mode' must be one of"):
        load_grid_yaml("mode: random\ngrid:\n  a: [1]\n")


def test_mapping_value_rejected() -> None:
    """Nested mappings are not pools."""
    with pytest.raises(ValueError, match="not a mapping"):
        load_grid_yaml("grid:\n  a:\n    b: 1\n")


def test_malformed_yaml_raises_value_error() -> None:
    """YAML syntax errors surface as ValueError."""
    with pytest.raises(ValueError, match="Invalid grid YAML"):
        load_grid_yaml("grid:\n  a: [1, 2\n")


def test_colliding_keys_rejected() -> None:
    """Keys that become equal strings are reported instead of merged."""
    with pytest.raises(ValueError, match="Duplicate grid parameter names.*: 1"):
        load_grid_yaml("grid:\n  1: [a]\n  '1': [b, c]\n")


def test_boolean_key_colliding_with_string_rejected() -> None:
    """A YAML boolean key and its string spelling collide."""
    with pytest.raises(ValueError, match="True"):
        load_grid_yaml("grid:\n  on: [1]\n  'True': [2]\n")

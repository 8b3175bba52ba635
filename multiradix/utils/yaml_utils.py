"""Helpers for YAML parsing quirks."""

from typing import Any, Dict, TypeVar

V = TypeVar("V")


def normalize_yaml_dict_keys(data: Dict[Any, V]) -> Dict[str, V]:
    """Return ``data`` with every key converted to ``str``.

    YAML 1.1 reads unquoted ``yes``/``no``/``on``/``off`` keys as booleans and
    bare numbers as ints. Grid parameter names must be strings, so ``True``
    becomes ``"True"`` and ``1`` becomes ``"1"``.

    Examples:
        >>> normalize_yaml_dict_keys({True: [1], 2: [3], "beta": [0.1]})
        {'True': [1], '2': [3], 'beta': [0.1]}
    """
    return {str(key): value for key, value in data.items()}

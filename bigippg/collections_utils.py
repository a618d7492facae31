"""
Collection utilities for configuration attributes.

Host configuration hands list- and set-shaped attributes over as generic
containers of dynamic values. These helpers convert them to and from plain
lists of strings.
"""

from collections.abc import Iterable
from typing import Any

from bigippg.errors import TypeMismatch


def make_string_list(items: Iterable[Any] | None) -> list[Any]:
    """Wrap a sequence as a generic list, preserving order."""
    if items is None:
        return []
    return list(items)


def make_string_set(items: Iterable[Any] | None) -> set[Any]:
    """Build an unordered set from a sequence; duplicates collapse."""
    if items is None:
        return set()
    return set(items)


def list_to_string_slice(values: Iterable[Any], key: str = "list") -> list[str]:
    """
    Convert a generic list to a list of strings.

    Args:
        values: List whose elements must all be strings
        key: Attribute name reported on a type mismatch

    Returns:
        New list with the same elements in the same order

    Raises:
        TypeMismatch: If any element is not a string
    """
    return [_require_string(value, key, index) for index, value in enumerate(values)]


def set_to_string_slice(values: Iterable[Any], key: str = "set") -> list[str]:
    """
    Convert a set to a list of strings.

    Iteration order is the set's own order and is not stable across calls.

    Raises:
        TypeMismatch: If any element is not a string
    """
    return [_require_string(value, key, index) for index, value in enumerate(values)]


def _require_string(value: Any, key: str, index: int) -> str:
    if not isinstance(value, str):
        raise TypeMismatch(f"{key}[{index}]", "str", type(value).__name__)
    return value

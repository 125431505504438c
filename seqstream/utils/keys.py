"""
Structural key helpers for grouping and distinct

group_by() and distinct() compare values by equality, not identity.
Values are frozen into hashable equivalents so a dict can be used as
the lookup table; values that still cannot be hashed are handled by a
linear equality scan.
"""

import warnings
from typing import Any, Optional


# Private container tags: [1, 2] and (1, 2) must not freeze equal
_LIST = object()
_TUPLE = object()
_SET = object()
_DICT = object()


def freeze(value: Any) -> Any:
    """
    Convert a value into a hashable equivalent

    Lists, tuples, sets and dicts become tagged tuples of their frozen
    contents, so two frozen values are equal exactly when the original
    values are. Sets and frozensets share a tag because they compare
    equal to each other. Other values are returned unchanged.

    Args:
        value: Value to freeze

    Returns:
        Hashable value with the same equality semantics
    """
    if isinstance(value, list):
        return (_LIST, tuple(freeze(item) for item in value))
    if isinstance(value, tuple):
        return (_TUPLE, tuple(freeze(item) for item in value))
    if isinstance(value, (set, frozenset)):
        return (_SET, frozenset(freeze(item) for item in value))
    if isinstance(value, dict):
        return (_DICT, frozenset((freeze(k), freeze(v)) for k, v in value.items()))
    return value


class KeyIndex:
    """
    Insertion-ordered lookup table keyed by structural equality

    Maps each distinct key to a slot number in first-seen order.
    Hashable keys go through a dict; unhashable keys fall back to a
    list scan with ==.
    """

    def __init__(self, operator_name: str):
        self.operator_name = operator_name
        self._hashed: dict[Any, int] = {}
        self._unhashable: list[tuple[Any, int]] = []
        self._size = 0
        self._warned = False

    def lookup(self, key: Any) -> Optional[int]:
        """Return the slot of key, or None if it has not been seen"""
        try:
            return self._hashed.get(freeze(key))
        except TypeError:
            for seen, slot in self._unhashable:
                if seen == key:
                    return slot
            return None

    def add(self, key: Any) -> int:
        """Register a key that lookup() reported as unseen, returning its slot"""
        slot = self._size
        try:
            self._hashed[freeze(key)] = slot
        except TypeError:
            if not self._warned:
                warnings.warn(
                    f"{self.operator_name}: unhashable key of type {type(key).__name__}; "
                    "falling back to linear equality scan",
                    UserWarning,
                    stacklevel=2,
                )
                self._warned = True
            self._unhashable.append((key, slot))
        self._size += 1
        return slot

    def __len__(self) -> int:
        return self._size

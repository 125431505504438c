"""
Composable predicates and projections

Predicates are first-class values that combine with ``&`` (and), ``|``
(or) and ``~`` (not). Python's operator precedence makes ``&`` bind
tighter than ``|``, so ``a | b & c`` means ``a | (b & c)``, the same as
``a or b and c``.

Example:
    >>> from seqstream.predicates import attr, ends_with, any_char, is_vowel
    >>> name = attr("name")
    >>> matches = ends_with("e").on(name) | any_char(is_vowel, ignore_case=True).on(name)
    >>> people.filter(matches).count()
    5
"""

from collections.abc import Iterable
from typing import Any, Callable

from seqstream.operators.base import describe


class Predicate:
    """
    Boolean function wrapper supporting &, | and ~

    Args:
        fn: Callable returning a truthy/falsy value
        label: Name shown in plans and repr
    """

    def __init__(self, fn: Callable[[Any], Any], label: str = None):
        self.fn = fn
        self.label = label or describe(fn)
        # plans name callables by __name__
        self.__name__ = self.label

    def __call__(self, value: Any) -> bool:
        return bool(self.fn(value))

    def __and__(self, other: Callable[[Any], Any]) -> "Predicate":
        return and_(self, other)

    def __rand__(self, other: Callable[[Any], Any]) -> "Predicate":
        return and_(other, self)

    def __or__(self, other: Callable[[Any], Any]) -> "Predicate":
        return or_(self, other)

    def __ror__(self, other: Callable[[Any], Any]) -> "Predicate":
        return or_(other, self)

    def __invert__(self) -> "Predicate":
        return not_(self)

    def on(self, projection: Callable[[Any], Any]) -> "Predicate":
        """
        Apply this predicate to a projected value

        Args:
            projection: Function from element to the value to test

        Returns:
            Predicate over the original element
        """
        label = f"{self.label}.on({describe(projection)})"
        return Predicate(lambda value: self(projection(value)), label)

    def __repr__(self) -> str:
        return self.label


def where(fn: Callable[[Any], Any], label: str = None) -> Predicate:
    """Lift a plain callable into a composable Predicate"""
    if isinstance(fn, Predicate) and label is None:
        return fn
    return Predicate(fn, label or describe(fn))


def and_(*predicates: Callable[[Any], Any]) -> Predicate:
    """All predicates hold; evaluated left to right, short-circuiting"""

    def check(value):
        for predicate in predicates:
            if not predicate(value):
                return False
        return True

    return Predicate(check, "(" + " & ".join(describe(p) for p in predicates) + ")")


def or_(*predicates: Callable[[Any], Any]) -> Predicate:
    """At least one predicate holds; evaluated left to right, short-circuiting"""

    def check(value):
        for predicate in predicates:
            if predicate(value):
                return True
        return False

    return Predicate(check, "(" + " | ".join(describe(p) for p in predicates) + ")")


def not_(predicate: Callable[[Any], Any]) -> Predicate:
    """Negation of predicate"""
    return Predicate(lambda value: not predicate(value), f"~{describe(predicate)}")


# ----------------------------------------------------------------------
# Projections
# ----------------------------------------------------------------------


def attr(name: str) -> Callable[[Any], Any]:
    """Projection reading an attribute, named after it in plans"""

    def get(record):
        return getattr(record, name)

    get.__name__ = name
    return get


def identity(value: Any) -> Any:
    """Projection returning its input"""
    return value


def words(text: str) -> list[str]:
    """Split text into words on runs of whitespace"""
    return text.split()


# ----------------------------------------------------------------------
# String predicates
# ----------------------------------------------------------------------


def _fold(value: Any, ignore_case: bool) -> Any:
    if ignore_case and isinstance(value, str):
        return value.casefold()
    return value


def starts_with(prefix: str, ignore_case: bool = False) -> Predicate:
    """Text starts with prefix"""
    needle = _fold(prefix, ignore_case)
    return Predicate(
        lambda text: _fold(text, ignore_case).startswith(needle),
        f"starts_with({prefix!r})",
    )


def ends_with(suffix: str, ignore_case: bool = False) -> Predicate:
    """Text ends with suffix"""
    needle = _fold(suffix, ignore_case)
    return Predicate(
        lambda text: _fold(text, ignore_case).endswith(needle),
        f"ends_with({suffix!r})",
    )


def contains(item: Any, ignore_case: bool = False) -> Predicate:
    """
    Container holds item

    For a string container this is a substring test; for any other
    iterable (e.g. a hobbies tuple) it is a membership test by equality.
    """
    needle = _fold(item, ignore_case)

    def check(container):
        if isinstance(container, str):
            return needle in _fold(container, ignore_case)
        if not isinstance(container, Iterable):
            raise TypeError(f"contains() needs a string or iterable, got {type(container).__name__}")
        return any(_fold(element, ignore_case) == needle for element in container)

    return Predicate(check, f"contains({item!r})")


def equals(expected: Any, ignore_case: bool = False) -> Predicate:
    """Value equals expected (case-insensitively for text when asked)"""
    target = _fold(expected, ignore_case)
    return Predicate(lambda value: _fold(value, ignore_case) == target, f"equals({expected!r})")


# ----------------------------------------------------------------------
# Character classification
# ----------------------------------------------------------------------

VOWELS = "aeiou"

is_alpha = Predicate(str.isalpha, "is_alpha")
is_digit = Predicate(str.isdigit, "is_digit")
is_upper = Predicate(str.isupper, "is_upper")
is_lower = Predicate(str.islower, "is_lower")
is_vowel = Predicate(lambda char: len(char) == 1 and char in VOWELS, "is_vowel")


def all_chars(predicate: Callable[[str], Any], ignore_case: bool = False) -> Predicate:
    """Every character of the text satisfies predicate (True for empty text)"""
    return Predicate(
        lambda text: all(predicate(char) for char in _fold(text, ignore_case)),
        f"all_chars({describe(predicate)})",
    )


def any_char(predicate: Callable[[str], Any], ignore_case: bool = False) -> Predicate:
    """At least one character of the text satisfies predicate"""
    return Predicate(
        lambda text: any(predicate(char) for char in _fold(text, ignore_case)),
        f"any_char({describe(predicate)})",
    )

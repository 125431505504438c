"""
Tests for composable predicates
"""

import pytest

from seqstream.predicates import (
    Predicate,
    all_chars,
    and_,
    any_char,
    attr,
    contains,
    ends_with,
    equals,
    identity,
    is_alpha,
    is_digit,
    is_lower,
    is_upper,
    is_vowel,
    not_,
    or_,
    starts_with,
    where,
    words,
)

name = attr("name")


class TestCombinators:
    """Test &, | and ~"""

    def test_and(self):
        """Test conjunction"""
        positive_even = where(lambda n: n > 0) & where(lambda n: n % 2 == 0)

        assert positive_even(4)
        assert not positive_even(3)
        assert not positive_even(-2)

    def test_or(self):
        """Test disjunction"""
        small_or_big = where(lambda n: n < 0) | where(lambda n: n > 10)

        assert small_or_big(-1)
        assert small_or_big(11)
        assert not small_or_big(5)

    def test_not(self):
        """Test negation"""
        assert (~starts_with("A"))("Bob")
        assert not (~starts_with("A"))("Alice")

    def test_and_binds_tighter_than_or(self):
        """Test a | b & c groups as a | (b & c)"""
        a = where(lambda s: s.endswith("e"))
        b = where(lambda s: "o" in s)
        c = where(lambda s: len(s) > 3)

        combined = a | b & c

        # "Bob": a False, b True, c False -> False under a | (b & c)
        assert combined("Bob") is False
        # "Eve": a True -> True regardless of b & c
        assert combined("Eve") is True
        assert ((a | b) & c)("Bob") is False

    def test_combine_with_plain_callables(self):
        """Test plain functions on either side"""
        assert (where(lambda n: n > 0) & (lambda n: n < 10))(5)
        assert ((lambda n: n > 0) & where(lambda n: n < 10))(5)
        assert ((lambda n: n < 0) | where(lambda n: n == 7))(7)

    def test_short_circuit(self):
        """Test and_/or_ stop at the deciding predicate"""

        def boom(value):
            raise AssertionError("should not be evaluated")

        assert not and_(lambda v: False, boom)(1)
        assert or_(lambda v: True, boom)(1)

    def test_not_function(self):
        """Test not_ on a plain callable"""
        assert not_(lambda v: v)(0)

    def test_predicate_returns_bool(self):
        """Test truthy results are coerced to bool"""
        assert Predicate(lambda v: v)("x") is True
        assert Predicate(lambda v: v)("") is False

    def test_errors_propagate(self):
        """Test exceptions from wrapped functions are not swallowed"""
        with pytest.raises(ZeroDivisionError):
            where(lambda n: 1 / n)(0)


class TestProjections:
    """Test on(), attr() and helpers"""

    def test_on(self, records):
        """Test applying a string predicate to a projected field"""
        a_names = starts_with("A").on(name)

        assert [p.name for p in records if a_names(p)] == ["Alice"]

    def test_attr_name(self):
        """Test attr projections are named after the attribute"""
        assert attr("age").__name__ == "age"

    def test_identity(self):
        """Test identity projection"""
        assert identity("x") == "x"

    def test_words_split_on_whitespace(self):
        """Test runs of whitespace separate words"""
        assert words("  rock   climbing\tdeep  ") == ["rock", "climbing", "deep"]
        assert words("") == []

    def test_labels(self):
        """Test labels used in plans"""
        assert repr(starts_with("A").on(name)) == "starts_with('A').on(name)"
        assert repr(~is_digit) == "~is_digit"
        assert repr(is_alpha & is_upper) == "(is_alpha & is_upper)"


class TestStringPredicates:
    """Test string primitives"""

    def test_starts_ends_with(self):
        """Test prefix and suffix"""
        assert starts_with("Gar")("Gardening")
        assert ends_with("e")("Alice")
        assert not ends_with("E")("Alice")
        assert ends_with("E", ignore_case=True)("Alice")
        assert starts_with("g", ignore_case=True)("Gaming")

    def test_contains_substring(self):
        """Test substring containment"""
        assert contains("in")("Reading")
        assert not contains("IN")("Reading")
        assert contains("IN", ignore_case=True)("Reading")

    def test_contains_membership(self, records):
        """Test membership for non-string sequences"""
        reads = contains("Reading").on(attr("hobbies"))

        assert [p.name for p in records if reads(p)] == ["Alice", "David"]
        assert contains("reading", ignore_case=True)(("Reading", "Writing"))
        assert not contains("Read")(("Reading",))

    def test_contains_rejects_non_iterable(self):
        """Test a clear error for non-container values"""
        with pytest.raises(TypeError, match="contains"):
            contains(1)(42)

    def test_equals(self):
        """Test plain and case-insensitive equality"""
        assert equals("Eve")("Eve")
        assert not equals("eve")("Eve")
        assert equals("eve", ignore_case=True)("EVE")
        assert equals(30)(30)


class TestCharacterClassification:
    """Test character predicates"""

    def test_char_predicates(self):
        """Test single-character classification"""
        assert is_alpha("a")
        assert is_digit("7")
        assert is_upper("A")
        assert is_lower("a")
        assert is_vowel("e")
        assert not is_vowel("E")

    def test_is_vowel_needs_one_character(self):
        """Test empty text and vowel runs are not vowels"""
        assert not is_vowel("")
        assert not is_vowel("ae")
        assert not is_vowel("aeiou")

    def test_all_chars(self):
        """Test lifting to every character"""
        assert all_chars(is_alpha)("Charlie")
        assert not all_chars(is_alpha)("R2D2")
        assert not all_chars(is_upper)("Bob")
        assert all_chars(is_upper)("BOB")
        assert all_chars(is_digit)("")

    def test_any_char(self):
        """Test lifting to some character"""
        assert any_char(is_digit)("R2D2")
        assert not any_char(is_digit)("Alice")
        assert not any_char(is_vowel)("EVE")
        assert any_char(is_vowel, ignore_case=True)("EVE")

"""
Practice-query catalog

Each practice query is a pipeline over a sequence of people, a terminal
operation and the result expected on the sample dataset. Queries are
registered with the @practice_query decorator and keep the numbering of
the practice set they come from (with its gaps).

Example:
    >>> from seqstream.catalog import get_query
    >>> get_query(7).run()
    'Eve'
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Callable, Optional

from seqstream.core.sequence import Sequence, from_iterable
from seqstream.core.types import Person
from seqstream.dataset import sample_people
from seqstream.operators.base import describe
from seqstream.predicates import (
    VOWELS,
    all_chars,
    any_char,
    attr,
    contains,
    ends_with,
    identity,
    is_alpha,
    is_digit,
    is_upper,
    is_vowel,
    starts_with,
    where,
    words,
)

TERMINALS = ("to_list", "count", "sum", "any", "all", "first", "last")

name = attr("name")
age = attr("age")
hobbies = attr("hobbies")


@dataclass(frozen=True)
class PracticeQuery:
    """
    One catalog entry

    Attributes:
        number: Query number within the practice set
        title: Short description
        pipeline: Builds the lazy pipeline from a sequence of people
        terminal: Name of the Sequence terminal operation to apply
        argument: Predicate/projection passed to the terminal, if any
        expected: Result on the sample dataset
    """

    number: int
    title: str
    pipeline: Callable[[Sequence], Sequence]
    terminal: str
    argument: Optional[Callable[[Any], Any]]
    expected: Any

    def evaluate(self, people: Sequence) -> Any:
        """Build the pipeline over people and apply the terminal operation"""
        operation = getattr(self.pipeline(people), self.terminal)
        if self.argument is None:
            return operation()
        return operation(self.argument)

    def run(self, records: Optional[Iterable[Person]] = None) -> Any:
        """
        Run the query

        Args:
            records: People to query; a fresh sample dataset when omitted

        Returns:
            Terminal result
        """
        if records is None:
            records = sample_people()
        return self.evaluate(from_iterable(records))

    def check(self, records: Optional[Iterable[Person]] = None) -> bool:
        """Whether the query result equals the expected result"""
        return self.run(records) == self.expected

    def explain(self) -> str:
        """Plan of the query over the sample dataset, terminal first"""
        terminal = self.terminal
        if self.argument is not None:
            terminal = f"{terminal}: {describe(self.argument)}"

        plan = self.pipeline(from_iterable(sample_people())).explain()
        indented = "\n".join("  " + line for line in plan.splitlines())
        return f"Terminal({terminal})\n{indented}"


_REGISTRY: dict[int, PracticeQuery] = {}


def practice_query(
    number: int,
    title: str,
    expected: Any,
    terminal: str = "to_list",
    argument: Optional[Callable[[Any], Any]] = None,
):
    """
    Decorator registering a pipeline function as a practice query

    Raises:
        ValueError: If the number is already registered or the terminal
            is not a known terminal operation
    """
    if terminal not in TERMINALS:
        raise ValueError(f"Unknown terminal: {terminal}. Available: {', '.join(TERMINALS)}")

    def register(pipeline: Callable[[Sequence], Sequence]):
        if number in _REGISTRY:
            raise ValueError(f"Practice query {number} is already registered")
        _REGISTRY[number] = PracticeQuery(number, title, pipeline, terminal, argument, expected)
        return pipeline

    return register


def get_query(number: int) -> PracticeQuery:
    """
    Get practice query by number

    Raises:
        ValueError: If no query has that number
    """
    if number not in _REGISTRY:
        available = ", ".join(str(n) for n in sorted(_REGISTRY))
        raise ValueError(f"Unknown query: {number}. Available queries: {available}")
    return _REGISTRY[number]


def all_queries() -> list[PracticeQuery]:
    """All practice queries sorted by number"""
    return [_REGISTRY[number] for number in sorted(_REGISTRY)]


def _hobby_seq(person: Person) -> Sequence:
    return from_iterable(person.hobbies)


def _has_unique_hobbies(person: Person) -> bool:
    return _hobby_seq(person).distinct().count() == len(person.hobbies)


def _has_hobby_starting_with_g(person: Person) -> bool:
    return _hobby_seq(person).any(starts_with("G"))


def _has_long_phrase_hobby(person: Person) -> bool:
    return _hobby_seq(person).any(lambda hobby: len(words(hobby)) > 2)


# ----------------------------------------------------------------------
# Filtering
# ----------------------------------------------------------------------


@practice_query(1, "People aged 30-40 who read", expected=["David"])
def readers_in_their_thirties(people):
    return (
        people.filter(lambda p: p.age >= 30)
        .filter(lambda p: p.age <= 40)
        .filter(contains("Reading").on(hobbies))
        .map(name)
    )


@practice_query(
    2,
    "People with at least two hobbies",
    expected=["Alice", "Bob", "Charlie", "David", "Eve"],
)
def at_least_two_hobbies(people):
    return people.filter(lambda p: len(p.hobbies) >= 2).map(name)


@practice_query(6, "Names starting with A, younger than 30", expected=["Alice"])
def young_a_names(people):
    return people.filter(starts_with("A").on(name) & where(lambda p: p.age < 30)).map(name)


@practice_query(11, "Names with exactly five letters", expected=["Alice", "David"])
def five_letter_names(people):
    return people.filter(lambda p: len(p.name) == 5).map(name)


@practice_query(
    14,
    "People with two distinct hobbies",
    expected=["Alice", "Bob", "Charlie", "David", "Eve"],
)
def two_distinct_hobbies(people):
    return people.filter(lambda p: _hobby_seq(p).distinct().count() == 2).map(name)


@practice_query(17, "People with a hobby starting with R", expected=["Alice", "David"])
def r_hobbyists(people):
    return people.filter(lambda p: _hobby_seq(p).count(starts_with("R")) >= 1).map(name)


@practice_query(20, "People with a hobby of more than two words", expected=[])
def long_phrase_hobbyists(people):
    return people.filter(_has_long_phrase_hobby).map(name)


@practice_query(
    21,
    "Names ending with e, or with a vowel and some hobby",
    expected=["Alice", "Bob", "Charlie", "David", "Eve"],
)
def e_or_vowel_names(people):
    # & binds tighter than |
    return people.filter(
        ends_with("e").on(name)
        | any_char(is_vowel, ignore_case=True).on(name) & where(lambda p: len(p.hobbies) > 0)
    ).map(name)


@practice_query(
    24,
    "Names made only of letters",
    expected=["Alice", "Bob", "Charlie", "David", "Eve"],
)
def letter_only_names(people):
    return people.filter(all_chars(is_alpha).on(name)).map(name)


@practice_query(28, "Names of even length", expected=[])
def even_length_names(people):
    return people.filter(lambda p: len(p.name) % 2 == 0).map(name)


@practice_query(
    30,
    "Names with repeated letters (case-insensitive)",
    expected=["Bob", "David", "Eve"],
)
def repeated_letter_names(people):
    return people.filter(
        lambda p: from_iterable(p.name.lower()).distinct().count() < len(p.name)
    ).map(name)


@practice_query(
    31,
    'People with more than one hobby containing "in"',
    expected=["Alice", "Bob", "Charlie", "David", "Eve"],
)
def in_hobbyists(people):
    return people.filter(
        lambda p: _hobby_seq(p).count(contains("in", ignore_case=True)) > 1
    ).map(name)


@practice_query(36, "Names in upper case only", expected=[])
def upper_case_names(people):
    return people.filter(all_chars(is_upper).on(name)).map(name)


@practice_query(38, "Names of more than two words", expected=[])
def long_names(people):
    return people.filter(lambda p: len(words(p.name)) > 2).map(name)


@practice_query(41, "People with a hobby longer than eight characters", expected=["Alice"])
def long_hobby_names(people):
    return people.filter(lambda p: _hobby_seq(p).any(lambda h: len(h) > 8)).map(name)


@practice_query(44, "Names containing digits", expected=[])
def digit_names(people):
    return people.filter(any_char(is_digit).on(name)).map(name)


@practice_query(50, "Names with a repeated word", expected=[])
def repeated_word_names(people):
    return people.filter(
        lambda p: from_iterable(words(p.name)).distinct().count() < len(words(p.name))
    ).map(name)


# ----------------------------------------------------------------------
# Aggregation
# ----------------------------------------------------------------------


@practice_query(3, "Total number of hobbies", expected=10, terminal="sum")
def total_hobbies(people):
    return people.map(lambda p: len(p.hobbies))


@practice_query(
    10,
    "People with a hobby starting with S",
    expected=2,
    terminal="count",
    argument=lambda p: _hobby_seq(p).any(starts_with("S")),
)
def s_hobbyists(people):
    return people


@practice_query(22, "Sum of all positive ages", expected=175, terminal="sum")
def total_age(people):
    return people.filter(lambda p: p.age > 0).map(age)


@practice_query(
    27,
    "Names with a vowel, scanned in reverse",
    expected=5,
    terminal="count",
    argument=lambda p: from_iterable(p.name.lower()).reverse().any(is_vowel),
)
def reversed_vowel_names(people):
    return people


@practice_query(
    34,
    "People with a hobby of more than two words",
    expected=0,
    terminal="count",
    argument=_has_long_phrase_hobby,
)
def count_long_phrase_hobbyists(people):
    return people


# ----------------------------------------------------------------------
# Grouping and ordering
# ----------------------------------------------------------------------


@practice_query(
    13,
    "Hobbies shared by at least two people",
    expected=["Reading", "Cooking", "Singing"],
)
def shared_hobbies(people):
    return people.flat_map(hobbies).group_by(identity).filter(lambda g: len(g) > 1).map(attr("key"))


@practice_query(
    15,
    "All hobbies in alphabetical order",
    expected=[
        "Cooking",
        "Cooking",
        "Gaming",
        "Gardening",
        "Painting",
        "Reading",
        "Reading",
        "Singing",
        "Singing",
        "Writing",
    ],
)
def sorted_hobbies(people):
    return people.flat_map(hobbies).sort_by(identity)


@practice_query(
    26,
    "People whose age nobody else shares",
    expected=["Alice", "Bob", "Charlie", "David", "Eve"],
)
def unique_ages(people):
    return people.group_by(age).filter(lambda g: g.count() == 1).flat_map(identity).map(name)


@practice_query(7, "Oldest person", expected="Eve", terminal="first")
def oldest(people):
    return people.sort_by(age, descending=True).map(name)


@practice_query(18, "Person with the longest name", expected="Charlie", terminal="first")
def longest_name(people):
    return people.sort_by(lambda p: len(p.name), descending=True).map(name)


@practice_query(40, "Person with the shortest name", expected="Bob", terminal="first")
def shortest_name(people):
    return people.sort_by(lambda p: len(p.name)).map(name)


# ----------------------------------------------------------------------
# Quantifiers
# ----------------------------------------------------------------------


@practice_query(
    5,
    "Someone's name contains every vowel",
    expected=False,
    terminal="any",
    argument=lambda p: from_iterable(VOWELS).all(lambda v: v in p.name.lower()),
)
def all_vowel_names(people):
    return people


@practice_query(
    8,
    "Someone has a hobby starting with G",
    expected=True,
    terminal="any",
    argument=_has_hobby_starting_with_g,
)
def g_hobbyists(people):
    return people


@practice_query(
    12, "Everyone is older than 20", expected=True, terminal="all", argument=lambda p: p.age > 20
)
def all_over_twenty(people):
    return people


@practice_query(
    16,
    "Someone's name repeats a character (case-sensitive)",
    expected=False,
    terminal="any",
    argument=lambda p: from_iterable(p.name).distinct().count() != len(p.name),
)
def repeated_char_names(people):
    return people


@practice_query(
    19, "Nobody repeats a hobby", expected=True, terminal="all", argument=_has_unique_hobbies
)
def unique_hobbies(people):
    return people


@practice_query(
    25,
    "Someone's hobbies all start with C",
    expected=False,
    terminal="any",
    argument=lambda p: _hobby_seq(p).all(starts_with("C")),
)
def all_c_hobbies(people):
    return people


@practice_query(
    29, "Every name is unique", expected=True, terminal="all", argument=lambda n: n == 1
)
def unique_names(people):
    return people.map(lambda p: people.count(lambda other: other.name == p.name))


@practice_query(
    33,
    "Someone older than 50 has a hobby starting with G",
    expected=False,
    terminal="any",
    argument=where(lambda p: p.age > 50) & _has_hobby_starting_with_g,
)
def old_g_hobbyists(people):
    return people


@practice_query(
    37,
    "Everyone has at least two hobbies",
    expected=True,
    terminal="all",
    argument=lambda p: len(p.hobbies) >= 2,
)
def all_two_hobbies(people):
    return people


@practice_query(
    42,
    'Someone\'s hobbies all contain "o"',
    expected=False,
    terminal="any",
    argument=lambda p: _hobby_seq(p).all(contains("o", ignore_case=True)),
)
def all_o_hobbies(people):
    return people


@practice_query(
    45, "Everyone's hobbies are distinct", expected=True, terminal="all", argument=_has_unique_hobbies
)
def distinct_hobbies(people):
    return people


@practice_query(
    49,
    'Someone older than 60 has an "x" in their name',
    expected=False,
    terminal="any",
    argument=where(lambda p: p.age > 60) & contains("x", ignore_case=True).on(name),
)
def old_x_names(people):
    return people

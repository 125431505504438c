"""
SeqStream - lazy, composable queries over in-memory sequences

This package provides filter/map/group/sort operators and terminal
operations (count, sum, any, all, first, last, to_list) over a
snapshotted sequence, evaluated with a pull-based operator tree.
"""

__version__ = "0.1.0"

# Main API
from seqstream.core.exceptions import EmptySequenceError, SeqStreamError
from seqstream.core.sequence import Sequence, from_iterable
from seqstream.core.types import Grouping, Person
from seqstream.dataset import people, sample_people

__all__ = [
    "__version__",
    "EmptySequenceError",
    "Grouping",
    "Person",
    "SeqStreamError",
    "Sequence",
    "from_iterable",
    "people",
    "sample_people",
]

"""
Exceptions raised by SeqStream
"""


class SeqStreamError(Exception):
    """Base class for all SeqStream errors"""


class EmptySequenceError(SeqStreamError, LookupError):
    """
    Raised when a terminal operation needs an element but none exists

    first() and last() raise this instead of returning a default value,
    both for an empty sequence and when no element matches the predicate.
    """

    def __init__(self, operation: str, filtered: bool = False):
        self.operation = operation
        self.filtered = filtered
        if filtered:
            message = f"{operation}() found no element matching the predicate"
        else:
            message = f"{operation}() called on an empty sequence"
        super().__init__(message)

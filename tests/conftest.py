"""
Pytest configuration and shared fixtures
"""

import pytest

from seqstream import from_iterable, sample_people


@pytest.fixture
def records():
    """Fresh sample people for each test"""
    return sample_people()


@pytest.fixture
def people(records):
    """Sequence over the sample people"""
    return from_iterable(records)


@pytest.fixture
def numbers():
    """Small integer sequence with duplicates"""
    return from_iterable([3, 1, 4, 1, 5, 9, 2, 6, 5, 3])

"""
Basic sanity tests for package setup
"""

import seqstream


def test_version():
    """Test that version is defined"""
    assert hasattr(seqstream, "__version__")
    assert seqstream.__version__ == "0.1.0"


def test_import():
    """Test that package can be imported"""
    import seqstream.catalog
    import seqstream.cli
    import seqstream.core
    import seqstream.operators
    import seqstream.predicates
    import seqstream.utils

    # All subpackages should be importable
    assert seqstream is not None


def test_public_api():
    """Test that the main API is exported at package level"""
    for name in ("Sequence", "from_iterable", "Person", "Grouping", "EmptySequenceError"):
        assert name in seqstream.__all__
        assert hasattr(seqstream, name)

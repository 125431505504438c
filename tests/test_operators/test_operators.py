"""
Tests for sequence operators (Volcano model)
"""

import pytest

from seqstream.operators.distinct import Distinct
from seqstream.operators.filter import Filter
from seqstream.operators.flatmap import FlatMap
from seqstream.operators.project import Project
from seqstream.operators.reverse import Reverse
from seqstream.operators.scan import Scan


@pytest.fixture
def sample_data():
    """Sample data for testing"""
    return [
        {"name": "Alice", "age": 30, "city": "NYC"},
        {"name": "Bob", "age": 25, "city": "LA"},
        {"name": "Charlie", "age": 35, "city": "SF"},
        {"name": "Diana", "age": 28, "city": "NYC"},
        {"name": "Eve", "age": 32, "city": "LA"},
    ]


class TestScanOperator:
    """Test Scan operator"""

    def test_scan_all_elements(self, sample_data):
        """Test that scan yields all source elements"""
        rows = list(Scan(sample_data))

        assert len(rows) == 5
        assert rows[0]["name"] == "Alice"
        assert rows[-1]["name"] == "Eve"

    def test_scan_empty(self):
        """Test scan with empty source"""
        assert list(Scan([])) == []

    def test_scan_lazy(self, sample_data):
        """Test that scan is lazy (generator)"""
        iterator = iter(Scan(sample_data))

        assert next(iterator)["name"] == "Alice"
        assert next(iterator)["name"] == "Bob"

    def test_scan_snapshots_source(self):
        """Test that later changes to the source list are not seen"""
        source = [1, 2, 3]
        scan = Scan(source)
        source.append(4)

        assert list(scan) == [1, 2, 3]

    def test_scan_restartable_from_generator(self):
        """Test that a one-shot generator source can be scanned twice"""
        scan = Scan(n * n for n in range(4))

        assert list(scan) == [0, 1, 4, 9]
        assert list(scan) == [0, 1, 4, 9]


class TestFilterOperator:
    """Test Filter operator"""

    def test_filter_single_predicate(self, sample_data):
        """Test filter with one predicate"""
        rows = list(Filter(Scan(sample_data), [lambda r: r["city"] == "NYC"]))

        assert [r["name"] for r in rows] == ["Alice", "Diana"]

    def test_filter_multiple_predicates(self, sample_data):
        """Test filter with multiple AND predicates"""
        filter_op = Filter(
            Scan(sample_data), [lambda r: r["age"] > 25, lambda r: r["city"] == "NYC"]
        )

        rows = list(filter_op)

        # Alice (30, NYC) and Diana (28, NYC)
        assert [r["name"] for r in rows] == ["Alice", "Diana"]

    def test_filter_short_circuits(self, sample_data):
        """Test that later predicates are skipped once one fails"""
        calls = []

        def record(row):
            calls.append(row["name"])
            return True

        list(Filter(Scan(sample_data), [lambda r: r["age"] > 30, record]))

        assert calls == ["Charlie", "Eve"]

    def test_filter_no_matches(self, sample_data):
        """Test filter that matches nothing"""
        assert list(Filter(Scan(sample_data), [lambda r: r["age"] > 100])) == []

    def test_filter_fuse(self, sample_data):
        """Test that fusing adds a predicate over the same child"""
        scan = Scan(sample_data)
        first = Filter(scan, [lambda r: r["age"] > 25])
        fused = first.fuse(lambda r: r["city"] == "LA")

        assert fused.child is scan
        assert len(fused.predicates) == 2
        assert len(first.predicates) == 1
        assert [r["name"] for r in fused] == ["Eve"]

    def test_filter_propagates_predicate_errors(self, sample_data):
        """Test that exceptions from a predicate reach the caller unchanged"""
        filter_op = Filter(Scan(sample_data), [lambda r: r["missing"]])

        with pytest.raises(KeyError, match="missing"):
            list(filter_op)


class TestProjectOperator:
    """Test Project operator"""

    def test_project_single(self, sample_data):
        """Test single projection keeps order and count"""
        rows = list(Project(Scan(sample_data), [lambda r: r["name"]]))

        assert rows == ["Alice", "Bob", "Charlie", "Diana", "Eve"]

    def test_project_chain(self, sample_data):
        """Test projections are applied left to right"""
        project = Project(Scan(sample_data), [lambda r: r["name"], len])

        assert list(project) == [5, 3, 7, 5, 3]

    def test_project_fuse(self, sample_data):
        """Test that fusing keeps the original operator unchanged"""
        project = Project(Scan(sample_data), [lambda r: r["age"]])
        fused = project.fuse(lambda age: age * 2)

        assert list(project) == [30, 25, 35, 28, 32]
        assert list(fused) == [60, 50, 70, 56, 64]


class TestFlatMapOperator:
    """Test FlatMap operator"""

    def test_flat_map_concatenates_in_order(self):
        """Test sub-sequences are concatenated in order"""
        flat = FlatMap(Scan([[1, 2], [], [3], [4, 5]]), lambda xs: xs)

        assert list(flat) == [1, 2, 3, 4, 5]

    def test_flat_map_strings(self, sample_data):
        """Test that strings flatten into characters"""
        flat = FlatMap(Scan(sample_data[:2]), lambda r: r["name"])

        assert "".join(flat) == "AliceBob"


class TestDistinctOperator:
    """Test Distinct operator"""

    def test_distinct_keeps_first_occurrence(self):
        """Test duplicates are dropped in first-seen order"""
        assert list(Distinct(Scan([3, 1, 3, 2, 1]))) == [3, 1, 2]

    def test_distinct_structural_equality(self):
        """Test that equal lists count as duplicates"""
        rows = list(Distinct(Scan([[1, 2], [1, 2], [2, 1]])))

        assert rows == [[1, 2], [2, 1]]

    def test_distinct_keeps_unequal_container_types(self):
        """Test a list and an equal-looking tuple are both kept"""
        assert list(Distinct(Scan([[1, 2], (1, 2)]))) == [[1, 2], (1, 2)]
        assert list(Distinct(Scan([{1: 2}, {(1, 2)}]))) == [{1: 2}, {(1, 2)}]

    def test_distinct_dicts(self, sample_data):
        """Test that equal dicts count as duplicates"""
        rows = list(Distinct(Scan(sample_data + [dict(sample_data[0])])))

        assert len(rows) == 5


class TestReverseOperator:
    """Test Reverse operator"""

    def test_reverse(self):
        """Test elements come out last to first"""
        assert list(Reverse(Scan("abc"))) == ["c", "b", "a"]

    def test_reverse_empty(self):
        """Test reversing nothing"""
        assert list(Reverse(Scan([]))) == []


class TestExplain:
    """Test plan rendering"""

    def test_explain_tree(self, sample_data):
        """Test nested operators are indented under their parent"""

        def adult(row):
            return row["age"] >= 30

        plan = Project(Filter(Scan(sample_data), [adult]), [lambda r: r["name"]]).explain()

        assert plan == [
            "Project(lambda)",
            "  Filter(adult)",
            "    Scan(5 elements)",
        ]

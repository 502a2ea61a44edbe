"""Tests for filtering and sorting enriched records."""

import pytest

from data_enrich.models.record import EnrichedRecord
from data_enrich.query import FilterMode, SortDir, apply_view, filter_records, sort_records


@pytest.fixture
def records() -> list[EnrichedRecord]:
    """Mixed records for filter/sort tests."""
    return [
        EnrichedRecord(name="carol", company="Beta", decision_maker="Yes", confidence="High"),
        EnrichedRecord(name="Alice", company="acme", decision_maker="No", confidence="Low"),
        EnrichedRecord(name="bob", company="Acme", decision_maker="yes", confidence="low"),
        EnrichedRecord(name="Dave", company="Gamma", decision_maker="N/A", confidence="Medium"),
    ]


class TestFilterRecords:
    """Tests for filter_records."""

    def test_all(self, records: list[EnrichedRecord]) -> None:
        """all keeps every record."""
        assert filter_records(records, "all") == records

    def test_low_confidence(self, records: list[EnrichedRecord]) -> None:
        """low_confidence matches 'low' case-insensitively, in order."""
        assert [r.name for r in filter_records(records, FilterMode.LOW_CONFIDENCE)] == ["Alice", "bob"]

    def test_decision_makers(self, records: list[EnrichedRecord]) -> None:
        """decision_makers matches 'yes' case-insensitively, in order."""
        assert [r.name for r in filter_records(records, "decision_makers")] == ["carol", "bob"]

    def test_unknown_mode(self, records: list[EnrichedRecord]) -> None:
        """Unknown filter modes are rejected."""
        with pytest.raises(ValueError):
            filter_records(records, "everything")


class TestSortRecords:
    """Tests for sort_records."""

    def test_case_insensitive_ascending(self, records: list[EnrichedRecord]) -> None:
        """Sorting ignores case."""
        assert [r.name for r in sort_records(records, "name")] == ["Alice", "bob", "carol", "Dave"]

    def test_descending(self, records: list[EnrichedRecord]) -> None:
        """desc reverses the order."""
        assert [r.name for r in sort_records(records, "name", SortDir.DESC)] == ["Dave", "carol", "bob", "Alice"]

    def test_stable_on_equal_keys(self, records: list[EnrichedRecord]) -> None:
        """Equal keys keep their prior relative order in both directions."""
        assert [r.name for r in sort_records(records, "company")] == ["Alice", "bob", "carol", "Dave"]
        assert [r.name for r in sort_records(records, "company", "desc")] == ["Dave", "carol", "Alice", "bob"]

    def test_unknown_field(self, records: list[EnrichedRecord]) -> None:
        """Sorting by a non-canonical field is rejected."""
        with pytest.raises(ValueError, match="Unknown sort field"):
            sort_records(records, "email")


class TestApplyView:
    """Tests for apply_view."""

    def test_filter_then_sort(self, records: list[EnrichedRecord]) -> None:
        """Filter is applied before sort."""
        view = apply_view(records, "decision_makers", "company", "desc")
        assert [r.name for r in view] == ["carol", "bob"]

    def test_idempotent(self, records: list[EnrichedRecord]) -> None:
        """Applying the same filter and sort twice changes nothing."""
        once = apply_view(records, "decision_makers", "company", "desc")
        twice = apply_view(once, "decision_makers", "company", "desc")
        assert once == twice

    def test_does_not_mutate_input(self, records: list[EnrichedRecord]) -> None:
        """The source list keeps its order."""
        before = list(records)
        apply_view(records, "all", "name", "desc")
        assert records == before

"""Property-based tests for SortCriteria."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from kp_query.query.sorting import SortCriteria, SortCriterion, SortDirection, SortField

criterion_st = st.builds(SortCriterion, st.sampled_from(list(SortField)), st.sampled_from(list(SortDirection)))
criteria_st = st.lists(criterion_st, max_size=12).map(SortCriteria)


class TestSortCriteriaProperties:
    @given(criteria_st)
    def test_export_import_round_trip(self, sort: SortCriteria) -> None:
        assert SortCriteria().import_criteria(sort.export_criteria()) == sort

    @given(criteria_st)
    def test_numeric_records_round_trip(self, sort: SortCriteria) -> None:
        records = [{"sortField": c.field.value, "sortType": c.direction.numeric} for c in sort]
        assert SortCriteria().import_criteria(records) == sort

    @given(criteria_st, st.sampled_from(list(SortField)))
    def test_toggle_twice_is_identity_for_present_fields(self, sort: SortCriteria, field: SortField) -> None:
        sort.add_sort(field)
        before = sort.export_criteria()
        sort.toggle(field).toggle(field)
        assert sort.export_criteria() == before

    @given(criteria_st)
    def test_fields_are_unique(self, sort: SortCriteria) -> None:
        fields = [c.field for c in sort]
        assert len(fields) == len(set(fields))

    @given(criteria_st)
    def test_dash_and_colon_have_one_token_per_criterion(self, sort: SortCriteria) -> None:
        if sort.is_empty():
            assert sort.to_dash_string() is None
        else:
            assert len(sort.to_dash_string().split(",")) == len(sort)  # type: ignore[union-attr]
            assert len(sort.to_colon_string().split(",")) == len(sort)  # type: ignore[union-attr]

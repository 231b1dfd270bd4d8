"""Filters – PersonSearchFilter for ``/v1.4/person``."""
from __future__ import annotations

from datetime import date
from typing import ClassVar

from kp_query.filters import capabilities
from kp_query.kernel.types import PersonProfession, PersonSex
from kp_query.query.filter_map import FilterMap
from kp_query.query.sorting import SortCriteria


class PersonSearchFilter:
    """Fluent person filter.

    Operator helpers always write ``field.<operator>`` keys, including
    ``.eq``. Profession filters use the Russian wire names.
    """

    explicit_eq: ClassVar[bool] = True

    def __init__(self) -> None:
        self._filters = FilterMap()
        self._sort = SortCriteria()

    add_filter = capabilities.add_filter
    add_range_filter = capabilities.add_range_filter
    remove_filter = capabilities.remove_filter
    id = capabilities.id
    search_by_name = capabilities.search_by_name
    search_by_en_name = capabilities.search_by_en_name
    search_by_description = capabilities.search_by_description
    not_null_fields = capabilities.not_null_fields
    select_fields = capabilities.select_fields
    page = capabilities.page
    limit = capabilities.limit
    get_filters = capabilities.get_filters
    reset = capabilities.reset

    sort_by = capabilities.sort_by
    sort_by_asc = capabilities.sort_by_asc
    sort_by_desc = capabilities.sort_by_desc
    toggle_sort = capabilities.toggle_sort
    remove_sort = capabilities.remove_sort
    clear_sort = capabilities.clear_sort
    add_multiple_sort = capabilities.add_multiple_sort
    export_sort_criteria = capabilities.export_sort_criteria
    import_sort_criteria = capabilities.import_sort_criteria
    sort_criteria = capabilities.sort_criteria
    _sort_params = capabilities.dash_sort_params

    def name(self, name: str, operator: str = "eq") -> "PersonSearchFilter":
        return self.add_filter("name", name, operator)

    def en_name(self, en_name: str, operator: str = "eq") -> "PersonSearchFilter":
        return self.add_filter("enName", en_name, operator)

    def age(self, age: int, operator: str = "eq") -> "PersonSearchFilter":
        return self.add_filter("age", age, operator)

    def age_range(self, min_age: int | None, max_age: int | None) -> "PersonSearchFilter":
        return self.add_range_filter("age", min_age, max_age)

    def sex(self, sex: PersonSex | str) -> "PersonSearchFilter":
        self._filters.set("sex", capabilities.wire_value(sex))
        return self

    def birth_place(self, birth_place: str, operator: str = "regex") -> "PersonSearchFilter":
        return self.add_filter("birthPlace.value", birth_place, operator)

    def birthday(self, birthday: date | str, operator: str = "eq") -> "PersonSearchFilter":
        return self.add_filter("birthday", birthday, operator)

    def death(self, death: date | str, operator: str = "eq") -> "PersonSearchFilter":
        return self.add_filter("death", death, operator)

    def count_awards(self, count: int, operator: str = "gte") -> "PersonSearchFilter":
        return self.add_filter("countAwards", count, operator)

    def profession(self, profession: PersonProfession | str, operator: str = "eq") -> "PersonSearchFilter":
        """Accepts a :class:`PersonProfession` or the raw Russian wire name."""
        if isinstance(profession, PersonProfession):
            profession = profession.russian_name
        return self.add_filter("profession", profession, operator)

    def only_actors(self) -> "PersonSearchFilter":
        return self.profession(PersonProfession.ACTOR)

    def only_directors(self) -> "PersonSearchFilter":
        return self.profession(PersonProfession.DIRECTOR)

    def only_writers(self) -> "PersonSearchFilter":
        return self.profession(PersonProfession.WRITER)

    def only_alive(self) -> "PersonSearchFilter":
        # No death date recorded.
        return self.add_filter("death", None, "eq")

    def __repr__(self) -> str:
        return f"PersonSearchFilter({self.get_filters()!r})"


__all__ = ["PersonSearchFilter"]

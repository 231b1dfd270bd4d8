"""Filters – ImageSearchFilter for ``/v1.4/image``."""
from __future__ import annotations

from typing import ClassVar

from kp_query.filters import capabilities
from kp_query.kernel.types import ImageType
from kp_query.query.filter_map import FilterMap
from kp_query.query.sorting import SortCriteria

FULL_HD = (1920, 1080)


class ImageSearchFilter:
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

    def movie_id(self, movie_id: int) -> "ImageSearchFilter":
        self._filters.set("movieId", movie_id)
        return self

    def name(self, name: str, operator: str = "eq") -> "ImageSearchFilter":
        return self.add_filter("name", name, operator)

    def type(self, image_type: ImageType | str, operator: str = "eq") -> "ImageSearchFilter":
        return self.add_filter("type", image_type, operator)

    def language(self, language: str) -> "ImageSearchFilter":
        self._filters.set("language", language)
        return self

    def width(self, width: int, operator: str = "eq") -> "ImageSearchFilter":
        return self.add_filter("width", width, operator)

    def height(self, height: int, operator: str = "eq") -> "ImageSearchFilter":
        return self.add_filter("height", height, operator)

    def min_resolution(self, min_width: int, min_height: int) -> "ImageSearchFilter":
        return self.width(min_width, "gte").height(min_height, "gte")

    def only_high_res(self) -> "ImageSearchFilter":
        """Full HD and above."""
        return self.min_resolution(*FULL_HD)

    def only_posters(self) -> "ImageSearchFilter":
        # Posters are published under the "cover" image type.
        return self.type(ImageType.COVER)

    def only_stills(self) -> "ImageSearchFilter":
        return self.type(ImageType.STILL)

    def only_shooting(self) -> "ImageSearchFilter":
        return self.type(ImageType.SHOOTING)

    def only_screenshots(self) -> "ImageSearchFilter":
        return self.type(ImageType.SCREENSHOT)

    def __repr__(self) -> str:
        return f"ImageSearchFilter({self.get_filters()!r})"


__all__ = ["FULL_HD", "ImageSearchFilter"]

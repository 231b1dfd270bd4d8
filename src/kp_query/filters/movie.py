"""Filters – MovieSearchFilter for ``/v1.4/movie``."""
from __future__ import annotations

from collections.abc import Mapping
from datetime import date
from typing import Any, ClassVar

from kp_query.config.settings import QuerySettings
from kp_query.filters import capabilities
from kp_query.kernel.types import MovieStatus, MovieType, PersonProfession, RatingMpaa, RatingSource
from kp_query.query.encoding import exclude, include, include_all
from kp_query.query.filter_map import FilterMap
from kp_query.query.sorting import SortCriteria, SortField

Source = RatingSource | str


def _source(source: Source) -> str:
    return source.value if isinstance(source, RatingSource) else source


class MovieSearchFilter:
    """Fluent movie filter.

    Equality is written as the bare field (``year=2023``); other operators
    use the ``field.<operator>`` key. Sorting is emitted as one dash-style
    ``sort`` parameter (``sort=-rating.kp,-year``).

    Example::

        params = (
            MovieSearchFilter()
            .with_min_rating(7.5)
            .with_year_between(2020, 2023)
            .with_included_genres(["драма", "триллер"])
            .sort_by_best()
            .get_filters()
        )
    """

    explicit_eq: ClassVar[bool] = False

    def __init__(self, default_rating_source: Source = RatingSource.KP) -> None:
        self._filters = FilterMap()
        self._sort = SortCriteria()
        self._default_source = _source(default_rating_source)

    @classmethod
    def from_settings(cls, settings: QuerySettings) -> "MovieSearchFilter":
        """Build a filter whose rating and votes helpers default to ``settings.default_rating_source``."""
        return cls(default_rating_source=settings.default_rating_source)

    # Shared capabilities
    add_filter = capabilities.add_filter
    add_range_filter = capabilities.add_range_filter
    add_nested_filter = capabilities.add_nested_filter
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

    # ------------------------------------------------------------------
    # Names and texts
    # ------------------------------------------------------------------

    def name(self, name: str, operator: str = "eq") -> "MovieSearchFilter":
        return self.add_filter("name", name, operator)

    def en_name(self, en_name: str, operator: str = "eq") -> "MovieSearchFilter":
        return self.add_filter("enName", en_name, operator)

    def alternative_name(self, alternative_name: str, operator: str = "eq") -> "MovieSearchFilter":
        return self.add_filter("alternativeName", alternative_name, operator)

    def names(self, names: str | list[str], operator: str = "eq") -> "MovieSearchFilter":
        return self.add_filter("names.name", names, operator)

    def description(self, description: str, operator: str = "regex") -> "MovieSearchFilter":
        return self.add_filter("description", description, operator)

    def short_description(self, short_description: str, operator: str = "regex") -> "MovieSearchFilter":
        return self.add_filter("shortDescription", short_description, operator)

    def slogan(self, slogan: str, operator: str = "regex") -> "MovieSearchFilter":
        return self.add_filter("slogan", slogan, operator)

    def search_by_alternative_name(self, query: str) -> "MovieSearchFilter":
        return self.add_filter("alternativeName", query, "regex")

    def search_by_all_names(self, query: str) -> "MovieSearchFilter":
        return self.add_filter("names.name", query, "regex")

    # ------------------------------------------------------------------
    # Type, status, release
    # ------------------------------------------------------------------

    def type(self, movie_type: MovieType | str, operator: str = "eq") -> "MovieSearchFilter":
        return self.add_filter("type", movie_type, operator)

    def type_number(self, type_number: int, operator: str = "eq") -> "MovieSearchFilter":
        return self.add_filter("typeNumber", type_number, operator)

    def is_series(self, is_series: bool) -> "MovieSearchFilter":
        self._filters.set("isSeries", is_series)
        return self

    def only_movies(self) -> "MovieSearchFilter":
        return self.is_series(False)

    def only_series(self) -> "MovieSearchFilter":
        return self.is_series(True)

    def status(self, status: MovieStatus | str, operator: str = "eq") -> "MovieSearchFilter":
        return self.add_filter("status", status, operator)

    def year(self, year: int, operator: str = "eq") -> "MovieSearchFilter":
        return self.add_filter("year", year, operator)

    def year_range(self, from_year: int | None, to_year: int | None) -> "MovieSearchFilter":
        return self.add_range_filter("year", from_year, to_year)

    with_year_between = year_range

    def premiere_range(
        self,
        from_date: date | str | None,
        to_date: date | str | None,
        country: str = "world",
    ) -> "MovieSearchFilter":
        """Premiere dates in ``dd.mm.yyyy`` (``date`` objects are formatted)."""
        return self.add_range_filter(f"premiere.{country}", from_date, to_date)

    with_premiere_range = premiere_range

    def tickets_on_sale(self, on_sale: bool = True) -> "MovieSearchFilter":
        self._filters.set("ticketsOnSale", on_sale)
        return self

    def created_at(self, created_at: str, operator: str = "eq") -> "MovieSearchFilter":
        return self.add_filter("createdAt", created_at, operator)

    def updated_at(self, updated_at: str, operator: str = "eq") -> "MovieSearchFilter":
        return self.add_filter("updatedAt", updated_at, operator)

    # ------------------------------------------------------------------
    # Ratings and votes
    # ------------------------------------------------------------------

    def rating(
        self,
        rating: float | Mapping[str, Any],
        source: Source | None = None,
        operator: str = "gte",
    ) -> "MovieSearchFilter":
        """One source's rating, or a ``{"kp": ..., "imdb": ...}`` mapping of several."""
        if isinstance(rating, Mapping):
            return self.add_nested_filter("rating", rating)
        return self.add_filter(self._rating_field(source), rating, operator)

    def with_min_rating(self, min_rating: float, source: Source | None = None) -> "MovieSearchFilter":
        return self.add_range_filter(self._rating_field(source), min_rating, None)

    def with_max_rating(self, max_rating: float, source: Source | None = None) -> "MovieSearchFilter":
        return self.add_range_filter(self._rating_field(source), None, max_rating)

    def rating_range(
        self,
        min_rating: float | None,
        max_rating: float | None,
        source: Source | None = None,
    ) -> "MovieSearchFilter":
        return self.add_range_filter(self._rating_field(source), min_rating, max_rating)

    with_rating_between = rating_range

    def rating_mpaa(self, rating_mpaa: RatingMpaa | str, operator: str = "eq") -> "MovieSearchFilter":
        return self.add_filter("ratingMpaa", rating_mpaa, operator)

    def age_rating(self, age_rating: int, operator: str = "eq") -> "MovieSearchFilter":
        return self.add_filter("ageRating", age_rating, operator)

    def votes(
        self,
        votes: int | Mapping[str, Any],
        source: Source | None = None,
        operator: str = "gte",
    ) -> "MovieSearchFilter":
        if isinstance(votes, Mapping):
            return self.add_nested_filter("votes", votes)
        return self.add_filter(self._votes_field(source), votes, operator)

    def with_min_votes(self, min_votes: int, source: Source | None = None) -> "MovieSearchFilter":
        return self.add_range_filter(self._votes_field(source), min_votes, None)

    def votes_range(
        self,
        min_votes: int | None,
        max_votes: int | None,
        source: Source | None = None,
    ) -> "MovieSearchFilter":
        return self.add_range_filter(self._votes_field(source), min_votes, max_votes)

    with_votes_between = votes_range

    def top10(self, position: int, operator: str = "eq") -> "MovieSearchFilter":
        return self.add_filter("top10", position, operator)

    def top250(self, position: int, operator: str = "eq") -> "MovieSearchFilter":
        return self.add_filter("top250", position, operator)

    def in_top10(self) -> "MovieSearchFilter":
        return self.top10(10, "lte")

    def in_top250(self) -> "MovieSearchFilter":
        return self.top250(250, "lte")

    # ------------------------------------------------------------------
    # Lengths
    # ------------------------------------------------------------------

    def movie_length(self, minutes: int, operator: str = "eq") -> "MovieSearchFilter":
        return self.add_filter("movieLength", minutes, operator)

    def series_length(self, minutes: int, operator: str = "eq") -> "MovieSearchFilter":
        return self.add_filter("seriesLength", minutes, operator)

    def total_series_length(self, minutes: int, operator: str = "eq") -> "MovieSearchFilter":
        return self.add_filter("totalSeriesLength", minutes, operator)

    # ------------------------------------------------------------------
    # Genres and countries
    #
    # include / exclude / all-of share the ``<field>.name`` key, so the
    # last call on a field wins.
    # ------------------------------------------------------------------

    def genres(self, genres: str | list[str], operator: str = "in") -> "MovieSearchFilter":
        return self.add_filter("genres.name", genres, operator)

    def with_all_genres(self, genres: str | list[str]) -> "MovieSearchFilter":
        self._filters.set("genres.name", include_all(genres))
        return self

    def with_included_genres(self, genres: str | list[str]) -> "MovieSearchFilter":
        self._filters.set("genres.name", include(genres))
        return self

    def with_excluded_genres(self, genres: str | list[str]) -> "MovieSearchFilter":
        self._filters.set("genres.name", exclude(genres))
        return self

    def countries(self, countries: str | list[str], operator: str = "in") -> "MovieSearchFilter":
        return self.add_filter("countries.name", countries, operator)

    def with_all_countries(self, countries: str | list[str]) -> "MovieSearchFilter":
        self._filters.set("countries.name", include_all(countries))
        return self

    def with_included_countries(self, countries: str | list[str]) -> "MovieSearchFilter":
        self._filters.set("countries.name", include(countries))
        return self

    def with_excluded_countries(self, countries: str | list[str]) -> "MovieSearchFilter":
        self._filters.set("countries.name", exclude(countries))
        return self

    # ------------------------------------------------------------------
    # Nested objects
    #
    # Mappings are passed through as dotted keys, e.g.
    # ``budget({"value": "1000-5000"})`` writes ``budget.value``.
    # ------------------------------------------------------------------

    def external_id(self, external_id: Mapping[str, Any]) -> "MovieSearchFilter":
        """``external_id({"imdb": "tt0133093"})`` → ``externalId.imdb``."""
        return self.add_nested_filter("externalId", external_id)

    def release_years(self, release_years: Mapping[str, Any] | Any) -> "MovieSearchFilter":
        return self.add_nested_filter("releaseYears", release_years)

    def seasons_info(self, seasons_info: Mapping[str, Any]) -> "MovieSearchFilter":
        return self.add_nested_filter("seasonsInfo", seasons_info)

    def budget(self, budget: Mapping[str, Any]) -> "MovieSearchFilter":
        return self.add_nested_filter("budget", budget)

    def audience(self, audience: Mapping[str, Any]) -> "MovieSearchFilter":
        return self.add_nested_filter("audience", audience)

    def poster(self, poster: Mapping[str, Any]) -> "MovieSearchFilter":
        return self.add_nested_filter("poster", poster)

    def backdrop(self, backdrop: Mapping[str, Any]) -> "MovieSearchFilter":
        return self.add_nested_filter("backdrop", backdrop)

    def logo(self, logo: Mapping[str, Any]) -> "MovieSearchFilter":
        return self.add_nested_filter("logo", logo)

    def videos(self, videos: Mapping[str, Any]) -> "MovieSearchFilter":
        return self.add_nested_filter("videos", videos)

    def networks(self, networks: Mapping[str, Any]) -> "MovieSearchFilter":
        return self.add_nested_filter("networks", networks)

    def persons(self, persons: Mapping[str, Any]) -> "MovieSearchFilter":
        return self.add_nested_filter("persons", persons)

    def facts(self, facts: Mapping[str, Any]) -> "MovieSearchFilter":
        return self.add_nested_filter("facts", facts)

    def fees(self, fees: Mapping[str, Any]) -> "MovieSearchFilter":
        """``fees({"world": {"value": "1000000-"}})`` → ``fees.world.value``."""
        return self.add_nested_filter("fees", fees)

    def premiere(self, premiere: Mapping[str, Any]) -> "MovieSearchFilter":
        return self.add_nested_filter("premiere", premiere)

    def similar_movies(self, similar_movies: Mapping[str, Any]) -> "MovieSearchFilter":
        return self.add_nested_filter("similarMovies", similar_movies)

    def sequels_and_prequels(self, sequels_and_prequels: Mapping[str, Any]) -> "MovieSearchFilter":
        return self.add_nested_filter("sequelsAndPrequels", sequels_and_prequels)

    def watchability(self, watchability: Mapping[str, Any]) -> "MovieSearchFilter":
        return self.add_nested_filter("watchability", watchability)

    def lists(self, lists: Mapping[str, Any] | Any) -> "MovieSearchFilter":
        return self.add_nested_filter("lists", lists)

    # ------------------------------------------------------------------
    # People
    # ------------------------------------------------------------------

    def with_actor(self, actor: int | str) -> "MovieSearchFilter":
        return self._with_person(actor, PersonProfession.ACTOR)

    def with_director(self, director: int | str) -> "MovieSearchFilter":
        return self._with_person(director, PersonProfession.DIRECTOR)

    def _with_person(self, person: int | str, profession: PersonProfession) -> "MovieSearchFilter":
        # An int is a person id; anything else is a name searched by regex.
        if isinstance(person, int) and not isinstance(person, bool):
            self._filters.set("persons.id", person)
        else:
            self.add_filter("persons.name", person, "regex")
        self._filters.set("persons.profession", profession.russian_name)
        return self

    # ------------------------------------------------------------------
    # Sort presets
    # ------------------------------------------------------------------

    def sort_by_kinopoisk_rating(self) -> "MovieSearchFilter":
        return self.sort_by_desc(SortField.RATING_KP)

    def sort_by_imdb_rating(self) -> "MovieSearchFilter":
        return self.sort_by_desc(SortField.RATING_IMDB)

    def sort_by_year(self) -> "MovieSearchFilter":
        return self.sort_by_desc(SortField.YEAR)

    def sort_by_year_old_first(self) -> "MovieSearchFilter":
        return self.sort_by_asc(SortField.YEAR)

    def sort_by_name(self) -> "MovieSearchFilter":
        return self.sort_by_asc(SortField.NAME)

    def sort_by_popularity(self) -> "MovieSearchFilter":
        return self.sort_by_desc(SortField.VOTES_KP)

    def sort_by_created(self) -> "MovieSearchFilter":
        return self.sort_by_desc(SortField.CREATED_AT)

    def sort_by_updated(self) -> "MovieSearchFilter":
        return self.sort_by_desc(SortField.UPDATED_AT)

    def sort_by_best(self) -> "MovieSearchFilter":
        """Kinopoisk rating first, then newest year."""
        return self.sort_by_kinopoisk_rating().sort_by_year()

    # ------------------------------------------------------------------

    def _rating_field(self, source: Source | None) -> str:
        return f"rating.{_source(source) if source is not None else self._default_source}"

    def _votes_field(self, source: Source | None) -> str:
        return f"votes.{_source(source) if source is not None else self._default_source}"

    def __repr__(self) -> str:
        return f"MovieSearchFilter({self.get_filters()!r})"


__all__ = ["MovieSearchFilter"]

"""
kp_query – filter and sort query builders for the kinopoisk.dev API.

Import path convention::

    from kp_query.filters import MovieSearchFilter, StudioSearchFilter
    from kp_query.query.sorting import SortCriteria, SortField
    from kp_query.query.pagination import PageRequest
    from kp_query.kernel.errors import ValidationError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]

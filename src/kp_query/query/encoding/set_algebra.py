"""Query encoding – set-algebra tokens for multi-valued fields.

``genres.name=+драма,+триллер`` keeps documents having any included
token, ``!ужасы`` drops documents having the token, and
``all:драма,триллер`` keeps documents having every token. All three
forms target the same key, so a later call replaces an earlier one.
"""
from __future__ import annotations

from typing import Any

from kp_query.query.encoding.operators import as_list

INCLUDE_PREFIX = "+"
EXCLUDE_PREFIX = "!"
ALL_PREFIX = "all:"


def include_all(tokens: Any) -> str:
    return ALL_PREFIX + ",".join(str(token) for token in as_list(tokens))


def include(tokens: Any) -> str:
    return ",".join(f"{INCLUDE_PREFIX}{token}" for token in as_list(tokens))


def exclude(tokens: Any) -> str:
    return ",".join(f"{EXCLUDE_PREFIX}{token}" for token in as_list(tokens))


__all__ = [
    "ALL_PREFIX",
    "EXCLUDE_PREFIX",
    "INCLUDE_PREFIX",
    "exclude",
    "include",
    "include_all",
]

"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    └── DomainError          (domain.py)
        └── ValidationError

Configuration failures live in :mod:`kp_query.config.validation` and also
derive from :class:`BaseError`.
"""

from kp_query.kernel.errors.base import BaseError
from kp_query.kernel.errors.domain import DomainError, ValidationError

__all__ = [
    "BaseError",
    "DomainError",
    "ValidationError",
]

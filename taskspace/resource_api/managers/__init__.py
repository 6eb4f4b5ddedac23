"""Data access managers for the resource API.

Each module provides async functions that encapsulate store operations and
request validation.  Managers accept an ``AsyncDatabase`` as a parameter
and raise domain exceptions (``LookupError``, ``ValueError``), never
HTTP exceptions -- that translation is the router's responsibility.
"""

from taskspace.resource_api.managers.base import DuplicateCodeError, MissingFieldsError, NoChangesError

__all__ = ["DuplicateCodeError", "MissingFieldsError", "NoChangesError"]

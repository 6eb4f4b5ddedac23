"""Shared validation rules and store helpers for the managers.

Required-field checks use truthiness, not ``None`` checks: an empty string,
an empty list or zero counts as missing.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel
from pymongo import ReturnDocument
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import DuplicateKeyError


class MissingFieldsError(ValueError):
    """Raised when required fields are absent or falsy."""

    def __init__(self, fields: list[str]) -> None:
        super().__init__(", ".join(fields))
        self.fields = fields


class NoChangesError(ValueError):
    """Raised when an update body carries no truthy field."""


class DuplicateCodeError(ValueError):
    """Raised when the store rejects a document for reusing a unique code."""


def require_fields(data: dict[str, Any], names: Iterable[str]) -> None:
    """Raise ``MissingFieldsError`` naming every falsy entry of *names*."""
    missing = [name for name in names if not data.get(name)]
    if missing:
        raise MissingFieldsError(missing)


def changed_fields(body: BaseModel) -> dict[str, Any]:
    """Return exactly the fields present in *body*, for a ``$set``.

    Fields the caller left out are omitted; fields sent as null or empty are
    kept and will overwrite the stored value.  Raises ``NoChangesError`` when
    no provided field is truthy.
    """
    changes = body.model_dump(exclude_unset=True)
    if not any(changes.values()):
        raise NoChangesError
    return changes


async def insert_document(collection: AsyncCollection, doc: dict[str, Any]) -> dict[str, Any]:
    """Insert *doc* and return it as re-read from the store."""
    try:
        result = await collection.insert_one(doc)
    except DuplicateKeyError as exc:
        raise DuplicateCodeError(str(exc)) from exc
    return await collection.find_one({"_id": result.inserted_id})


async def update_document(
    collection: AsyncCollection,
    query: dict[str, Any],
    update: dict[str, Any],
) -> dict[str, Any] | None:
    """Apply *update* to the first match and return the updated document, or None."""
    try:
        return await collection.find_one_and_update(query, update, return_document=ReturnDocument.AFTER)
    except DuplicateKeyError as exc:
        raise DuplicateCodeError(str(exc)) from exc

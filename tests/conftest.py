"""Shared test fixtures for the super-admin backend tests."""

import copy
import pytest
from datetime import datetime, timezone
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

from pymongo import ReturnDocument


class FakeCursor:
    """Just enough of a Motor cursor for find().sort().to_list()."""

    def __init__(self, docs):
        self._docs = docs

    def sort(self, key_or_list, direction=1):
        keys = key_or_list if isinstance(key_or_list, list) else [(key_or_list, direction)]
        # Stable sorts applied last-key-first; missing keys sort first, like MongoDB
        for key, key_direction in reversed(keys):
            self._docs.sort(
                key=lambda d: (key in d, d[key]) if key in d else (False,),
                reverse=key_direction == -1,
            )
        return self

    async def to_list(self, length=None):
        return [copy.deepcopy(d) for d in self._docs[:length]]


class FakeSettingsCollection:
    """
    In-memory stand-in for a Motor collection.

    Supports the subset of queries the pricing code issues: equality and
    $ne/$in on _id, plus $set/$setOnInsert upserts.
    """

    def __init__(self, docs=None):
        self.docs = [copy.deepcopy(d) for d in (docs or [])]

    def _matches(self, doc, query):
        for key, cond in query.items():
            value = doc.get(key)
            if isinstance(cond, dict):
                if "$ne" in cond and value == cond["$ne"]:
                    return False
                if "$in" in cond and value not in cond["$in"]:
                    return False
            elif value != cond:
                return False
        return True

    def find(self, query=None, projection=None):
        return FakeCursor([d for d in self.docs if self._matches(d, query or {})])

    async def find_one(self, query=None):
        for doc in self.docs:
            if self._matches(doc, query or {}):
                return copy.deepcopy(doc)
        return None

    async def insert_one(self, document):
        self.docs.append(copy.deepcopy(document))
        return SimpleNamespace(inserted_id=document.get("_id"))

    async def replace_one(self, query, replacement, upsert=False):
        for index, doc in enumerate(self.docs):
            if self._matches(doc, query):
                self.docs[index] = copy.deepcopy(replacement)
                return SimpleNamespace(matched_count=1, upserted_id=None)
        if upsert:
            self.docs.append(copy.deepcopy(replacement))
            return SimpleNamespace(matched_count=0, upserted_id=replacement.get("_id"))
        return SimpleNamespace(matched_count=0, upserted_id=None)

    async def delete_many(self, query):
        before = len(self.docs)
        self.docs = [d for d in self.docs if not self._matches(d, query)]
        return SimpleNamespace(deleted_count=before - len(self.docs))

    async def find_one_and_update(self, query, update, upsert=False, return_document=ReturnDocument.BEFORE):
        for doc in self.docs:
            if self._matches(doc, query):
                before = copy.deepcopy(doc)
                doc.update(update.get("$set", {}))
                return copy.deepcopy(doc) if return_document == ReturnDocument.AFTER else before

        if not upsert:
            return None

        doc = {k: v for k, v in query.items() if not isinstance(v, dict)}
        doc.update(update.get("$setOnInsert", {}))
        doc.update(update.get("$set", {}))
        self.docs.append(doc)
        return copy.deepcopy(doc) if return_document == ReturnDocument.AFTER else None


@pytest.fixture
def mock_collection():
    collection = AsyncMock()
    # Motor's find() returns a cursor synchronously (not a coroutine),
    # so use MagicMock for it.
    collection.find = MagicMock()
    collection.find_one = AsyncMock(return_value=None)
    return collection


@pytest.fixture
def mock_db(mock_collection):
    db = MagicMock()
    db.__getitem__ = MagicMock(return_value=mock_collection)
    return db


@pytest.fixture
def make_collection():
    return FakeSettingsCollection


@pytest.fixture
def fake_collection():
    return FakeSettingsCollection()


@pytest.fixture
def fake_db(fake_collection):
    db = MagicMock()
    db.__getitem__ = MagicMock(return_value=fake_collection)
    return db


@pytest.fixture
def sample_settings_doc():
    now = datetime.now(timezone.utc)
    return {
        "_id": "main_settings",
        "pricePerClient": 10,
        "restaurantPrice": 5,
        "createdAt": now,
        "updatedAt": now,
    }

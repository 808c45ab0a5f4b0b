"""
Shared fixtures for the transaction dashboard tests.

Provides an in-memory stand-in for a motor collection so the real
repository, service and routes run without a MongoDB server.
"""

from __future__ import annotations

import copy
import datetime
import re
from types import SimpleNamespace
from typing import Any

import pytest

from app.domains.transactions.models import TransactionRecord, format_price
from app.domains.transactions.repository import TransactionRepository
from app.domains.transactions.services import TransactionService

COLLECTION = "Transaction"


def _matches(doc: dict, query: dict) -> bool:
    for key, condition in query.items():
        if key == "$or":
            if not any(_matches(doc, sub) for sub in condition):
                return False
        elif key == "$expr":
            regex_match = condition["$regexMatch"]
            flags = re.IGNORECASE if "i" in regex_match.get("options", "") else 0
            if not re.search(regex_match["regex"], format_price(doc.get("price", 0)), flags):
                return False
        elif isinstance(condition, dict):
            value = doc.get(key)
            for op, operand in condition.items():
                if op == "$regex":
                    flags = re.IGNORECASE if "i" in condition.get("$options", "") else 0
                    if not isinstance(value, str) or not re.search(operand, value, flags):
                        return False
                elif op == "$gte":
                    if value is None or value < operand:
                        return False
                elif op == "$lt":
                    if value is None or value >= operand:
                        return False
        elif doc.get(key) != condition:
            return False
    return True


class FakeCursor:
    def __init__(self, docs: list[dict]) -> None:
        self._docs = docs
        self._skip = 0
        self._limit = 0

    def skip(self, count: int) -> "FakeCursor":
        if count < 0:
            raise ValueError("skip must be >= 0")
        self._skip = count
        return self

    def limit(self, count: int) -> "FakeCursor":
        self._limit = count
        return self

    async def to_list(self, length: int | None = None) -> list[dict]:
        docs = self._docs[self._skip:]
        if self._limit:
            docs = docs[: self._limit]
        if length is not None:
            docs = docs[:length]
        return docs


class FakeCollection:
    def __init__(self, docs: list[dict] | None = None) -> None:
        self.docs: list[dict] = []
        self.calls: list[str] = []
        self._next_id = 1
        for doc in docs or []:
            self._store(doc)

    def _store(self, doc: dict) -> None:
        stored = copy.deepcopy(doc)
        stored["_id"] = self._next_id
        self._next_id += 1
        self.docs.append(stored)

    async def count_documents(self, query: dict) -> int:
        self.calls.append("count_documents")
        return sum(1 for doc in self.docs if _matches(doc, query))

    def find(self, query: dict, projection: dict | None = None) -> FakeCursor:
        self.calls.append("find")
        hidden = {key for key, flag in (projection or {}).items() if not flag}
        selected = [
            {k: v for k, v in copy.deepcopy(doc).items() if k not in hidden}
            for doc in self.docs
            if _matches(doc, query)
        ]
        return FakeCursor(selected)

    async def delete_many(self, query: dict) -> SimpleNamespace:
        self.calls.append("delete_many")
        kept = [doc for doc in self.docs if not _matches(doc, query)]
        deleted = len(self.docs) - len(kept)
        self.docs = kept
        return SimpleNamespace(deleted_count=deleted)

    async def insert_many(self, docs: list[dict]) -> SimpleNamespace:
        self.calls.append("insert_many")
        for doc in docs:
            self._store(doc)
        return SimpleNamespace(inserted_ids=list(range(len(docs))))


def make_record(
    id: int,
    title: str = "Item",
    price: float = 10.0,
    category: str = "electronics",
    sold: bool = True,
    date: datetime.datetime | None = datetime.datetime(2022, 3, 15),
    description: str = "",
) -> dict[str, Any]:
    return {
        "id": id,
        "title": title,
        "description": description or f"Description of {title}",
        "price": price,
        "category": category,
        "image": f"https://example.com/images/{id}.jpg",
        "sold": sold,
        "dateOfSale": date,
    }


@pytest.fixture
def sample_docs() -> list[dict]:
    return [
        make_record(1, "Blue Shirt", 45.5, "men's clothing", True, datetime.datetime(2022, 3, 1)),
        make_record(2, "Gold Ring", 950.0, "jewelery", False, datetime.datetime(2022, 3, 31, 23, 59)),
        make_record(3, "Laptop Bag", 150.0, "electronics", True, datetime.datetime(2022, 3, 10)),
        make_record(4, "Dress", 100.0, "women's clothing", False, datetime.datetime(2022, 3, 20)),
        make_record(5, "Monitor", 329.85, "electronics", True, datetime.datetime(2022, 4, 1)),
        make_record(6, "Jacket", 101.0, "men's clothing", True, datetime.datetime(2021, 3, 15)),
        make_record(7, "Broken Date", 20.0, "electronics", False, None),
    ]


@pytest.fixture
def fake_collection(sample_docs) -> FakeCollection:
    return FakeCollection(sample_docs)


@pytest.fixture
def repository(fake_collection) -> TransactionRepository:
    return TransactionRepository(collection_name=COLLECTION, database={COLLECTION: fake_collection})


@pytest.fixture
def service(repository) -> TransactionService:
    return TransactionService(repository, year=2022)


@pytest.fixture
def records(sample_docs) -> list[TransactionRecord]:
    return [TransactionRecord(**doc) for doc in sample_docs]


@pytest.fixture
def record_factory():
    return make_record


@pytest.fixture
def collection_factory():
    return FakeCollection

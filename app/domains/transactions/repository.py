import datetime
import logging
import re
from typing import List, Optional, Sequence
from pymongo.errors import PyMongoError
from app.config.mongodb import mongodb
from app.config.setting import settings
from app.domains.transactions.models import TransactionRecord


class StorageError(Exception):
    """Raised when the transaction store cannot be read or written."""


def build_search_filter(search: Optional[str]) -> dict:
    """
    Case-insensitive substring match on title, description or the price rendered as text.

    An empty search matches every record.
    """
    if not search:
        return {}
    pattern = re.escape(search)
    return {
        "$or": [
            {"title": {"$regex": pattern, "$options": "i"}},
            {"description": {"$regex": pattern, "$options": "i"}},
            {"$expr": {"$regexMatch": {
                "input": {"$toString": "$price"},
                "regex": pattern,
                "options": "i",
            }}},
        ]
    }


class TransactionRepository:
    def __init__(self, collection_name: str = None, database=None):
        self.collection_name = collection_name or settings.mongo_collection
        self.database = database

    @property
    def collection(self):
        if self.database is not None:
            return self.database[self.collection_name]
        collection = mongodb.get_collection(self.collection_name)
        if collection is None:
            raise StorageError("MongoDB not connected")
        return collection

    async def count(self, query: dict) -> int:
        try:
            return await self.collection.count_documents(query)
        except PyMongoError as e:
            raise StorageError(f"Failed to count transactions: {e}") from e

    async def find(self, query: dict, skip: int = 0, limit: int = 0) -> List[TransactionRecord]:
        try:
            cursor = self.collection.find(query, {"_id": 0}).skip(skip).limit(limit)
            documents = await cursor.to_list(length=None)
        except PyMongoError as e:
            raise StorageError(f"Failed to fetch transactions: {e}") from e
        return [TransactionRecord(**doc) for doc in documents]

    async def find_in_range(self, start: datetime.datetime, end: datetime.datetime) -> List[TransactionRecord]:
        logging.info(f"Fetching transactions sold between {start:%Y-%m-%d} and {end:%Y-%m-%d}")
        return await self.find({"dateOfSale": {"$gte": start, "$lt": end}})

    async def replace_all(self, records: Sequence[TransactionRecord]) -> None:
        collection = self.collection
        try:
            deleted = await collection.delete_many({})
            logging.info(f"Deleted {deleted.deleted_count} existing transactions")
            if records:
                await collection.insert_many([record.model_dump() for record in records])
        except PyMongoError as e:
            raise StorageError(f"Failed to replace transactions: {e}") from e

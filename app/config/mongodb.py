from motor.motor_asyncio import AsyncIOMotorClient
from app.config.setting import settings
import logging

logger = logging.getLogger(__name__)


class MongoDB:
    """Process-wide motor client for the transactions database."""

    def __init__(self, uri: str, db_name: str, timeout_ms: int = 5000):
        self.uri = uri
        self.db_name = db_name
        self.timeout_ms = timeout_ms
        self.client = None
        self.db = None

    async def init_db(self, collection_name: str) -> int:
        """
        Connect, verify the server answers, and report how many records are stored.

        Raises the driver error when the server cannot be reached, which
        aborts application startup.
        """
        self.client = AsyncIOMotorClient(self.uri, serverSelectionTimeoutMS=self.timeout_ms)
        self.db = self.client[self.db_name]
        await self.db.command("ping")
        count = await self.get_collection(collection_name).count_documents({})
        logger.info(f"MongoDB connected to '{self.db_name}'. Found {count} documents in '{collection_name}'.")
        return count

    def get_collection(self, name: str):
        if self.db is None:
            return None
        return self.db[name]

    def close(self):
        if self.client is not None:
            self.client.close()
        self.client = None
        self.db = None


mongodb = MongoDB(
    uri=settings.mongo_uri,
    db_name=settings.mongo_db_name,
    timeout_ms=settings.mongo_timeout_ms,
)

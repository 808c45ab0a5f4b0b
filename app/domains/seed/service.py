import asyncio
import logging
from app.config.setting import settings
from app.domains.transactions.models import TransactionRecord
from app.domains.transactions.repository import StorageError, TransactionRepository
from app.shared.feed_service import ProductFeedAPI


class SeedError(Exception):
    """Raised when the product feed cannot be fetched or mapped."""


class Seeder:
    def __init__(self, repository: TransactionRepository, feed: ProductFeedAPI = None):
        self.repository = repository
        self.feed = feed or ProductFeedAPI(settings.seed_url, timeout=settings.seed_timeout)

    async def seed(self) -> int:
        """
        Replace every stored transaction with the contents of the product feed.

        Not atomic: existing records are deleted before the new ones are
        inserted, so a failed insert leaves the store empty.

        Returns:
            int: Number of records inserted.
        """
        try:
            items = await asyncio.to_thread(self.feed.fetch_products)
            records = [TransactionRecord.from_feed(item) for item in items]
        except Exception as e:
            logging.error(f"Error seeding database: {str(e)}")
            raise SeedError(f"Failed to load product feed: {e}") from e

        try:
            await self.repository.replace_all(records)
        except StorageError as e:
            logging.error(f"Error seeding database: {str(e)}")
            raise

        logging.info(f"Database seeded successfully with {len(records)} transactions")
        return len(records)

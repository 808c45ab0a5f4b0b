import asyncio
import logging
from typing import Dict, Optional
from app.config.setting import settings
from app.domains.transactions.aggregation import (
    compute_category_breakdown,
    compute_price_histogram,
    compute_statistics,
)
from app.domains.transactions.models import CombinedData, Statistics, TransactionPage
from app.domains.transactions.months import month_interval
from app.domains.transactions.repository import TransactionRepository, build_search_filter


class TransactionService:
    def __init__(self, repository: TransactionRepository, year: int = None):
        self.repository = repository
        self.year = year or settings.sales_year

    async def list_transactions(self, search: Optional[str] = None, page: int = 1, per_page: int = 10) -> TransactionPage:
        query = build_search_filter(search)
        total = await self.repository.count(query)
        transactions = await self.repository.find(query, skip=(page - 1) * per_page, limit=per_page)
        return TransactionPage(total=total, page=page, per_page=per_page, transactions=transactions)

    async def get_month_transactions(self, month: Optional[str]):
        start, end = month_interval(month, self.year)
        return await self.repository.find_in_range(start, end)

    async def get_statistics(self, month: Optional[str]) -> Statistics:
        transactions = await self.get_month_transactions(month)
        return compute_statistics(transactions)

    async def get_bar_chart(self, month: Optional[str]) -> Dict[str, int]:
        transactions = await self.get_month_transactions(month)
        return compute_price_histogram(transactions)

    async def get_pie_chart(self, month: Optional[str]) -> Dict[str, int]:
        transactions = await self.get_month_transactions(month)
        return compute_category_breakdown(transactions)

    async def get_combined_data(self, month: str) -> CombinedData:
        logging.info(f"Fetching combined data for month: {month}")
        results = await asyncio.gather(
            self.get_statistics(month),
            self.get_bar_chart(month),
            self.get_pie_chart(month),
            return_exceptions=True,
        )
        # Every read is awaited to completion; the first failure wins
        for result in results:
            if isinstance(result, BaseException):
                raise result
        statistics, bar_chart, pie_chart = results
        return CombinedData(statistics=statistics, barChart=bar_chart, pieChart=pie_chart)

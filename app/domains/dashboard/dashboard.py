import logging
from typing import List, Optional
from app.domains.dashboard.api_service import DashboardAPI
from app.domains.transactions.models import format_price
from app.domains.transactions.months import MONTH_NAMES

logger = logging.getLogger(__name__)

MONTHS = list(MONTH_NAMES)


def filter_transactions(transactions: List[dict], search: str) -> List[dict]:
    """Client-side filter over an already loaded page of transactions."""
    term = (search or "").strip().lower()
    if not term:
        return list(transactions)
    return [
        transaction for transaction in transactions
        if term in str(transaction.get("title", "")).lower()
        or term in str(transaction.get("description", "")).lower()
        or term in format_price(transaction.get("price", 0))
    ]


class Dashboard:
    """
    Data layer behind the transaction dashboard.

    Holds the selected month, the current page of transactions (paged on the
    server) and the search text, which only filters the loaded page.
    """

    def __init__(self, api: DashboardAPI = None, month: str = "March", per_page: int = 10):
        self.api = api or DashboardAPI()
        self.month = month
        self.page = 1
        self.per_page = per_page
        self.search = ""
        self.transactions: List[dict] = []
        self.filtered_transactions: List[dict] = []
        self.data: Optional[dict] = None

    def fetch_combined_data(self):
        try:
            self.data = self.api.get_combined_data(self.month)
        except Exception as e:
            logger.error(f"Error fetching data: {e}")

    def fetch_transactions(self):
        try:
            result = self.api.get_transactions("", self.page, self.per_page)
            self.transactions = result.get("transactions") or []
        except Exception as e:
            logger.error(f"Error fetching transactions: {e}")
            self.transactions = []
        self.filtered_transactions = filter_transactions(self.transactions, self.search)

    def refresh(self):
        self.fetch_combined_data()
        self.fetch_transactions()

    def set_month(self, month: str):
        self.month = month
        self.page = 1
        self.refresh()

    def next_page(self):
        self.page += 1
        self.fetch_transactions()

    def previous_page(self):
        self.page = max(self.page - 1, 1)
        self.fetch_transactions()

    def set_search(self, search: str):
        self.search = search.lower()
        self.filtered_transactions = filter_transactions(self.transactions, self.search)

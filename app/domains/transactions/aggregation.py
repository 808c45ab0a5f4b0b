from typing import Dict, Iterable
from app.domains.transactions.models import Statistics, TransactionRecord

# (label, inclusive upper bound); the last bucket is unbounded
PRICE_BUCKETS = [
    ("0-100", 100),
    ("101-200", 200),
    ("201-300", 300),
    ("301-400", 400),
    ("401-500", 500),
    ("501-600", 600),
    ("601-700", 700),
    ("701-800", 800),
    ("801-900", 900),
    ("901-above", None),
]


def price_bucket(price: float) -> str:
    for label, upper in PRICE_BUCKETS:
        if upper is None or price <= upper:
            return label
    return PRICE_BUCKETS[-1][0]


def compute_statistics(records: Iterable[TransactionRecord]) -> Statistics:
    """
    Sale totals for one month.

    totalSoldItems counts every record in the month, not only the ones
    flagged as sold.
    """
    records = list(records)
    return Statistics(
        totalSaleAmount=sum(record.price for record in records),
        totalSoldItems=len(records),
        totalNotSoldItems=sum(1 for record in records if not record.sold),
    )


def compute_price_histogram(records: Iterable[TransactionRecord]) -> Dict[str, int]:
    histogram = {label: 0 for label, _ in PRICE_BUCKETS}
    for record in records:
        histogram[price_bucket(record.price)] += 1
    return histogram


def compute_category_breakdown(records: Iterable[TransactionRecord]) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for record in records:
        counts[record.category] = counts.get(record.category, 0) + 1
    return counts

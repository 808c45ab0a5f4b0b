# app/domains/transactions/models.py

import datetime
from pydantic import BaseModel, field_serializer, field_validator
from typing import Dict, List, Optional, Union


def format_price(price) -> str:
    """Render a price the way the store's $toString and the dashboard do: 100, 329.85."""
    value = float(price)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def parse_sale_date(value) -> Optional[datetime.datetime]:
    """
    Parse a feed dateOfSale into a naive UTC datetime.

    Returns None when the value cannot be parsed, so the record never
    falls inside a month range.
    """
    if value is None:
        return None
    if isinstance(value, datetime.datetime):
        parsed = value
    elif isinstance(value, datetime.date):
        parsed = datetime.datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(datetime.timezone.utc).replace(tzinfo=None)
    return parsed


class TransactionRecord(BaseModel):
    id: int
    title: str = ""
    description: str = ""
    price: float = 0
    category: str = ""
    image: str = ""
    sold: bool = False
    dateOfSale: Optional[datetime.datetime] = None

    @field_validator("dateOfSale", mode="before")
    @classmethod
    def parse_date_of_sale(cls, value):
        return parse_sale_date(value)

    @field_serializer("dateOfSale", when_used="json")
    def serialize_date_of_sale(self, value: Optional[datetime.datetime]):
        # Stored naive in UTC; emit an explicit Z designator
        if value is None:
            return None
        return value.isoformat(timespec="milliseconds") + "Z"

    @classmethod
    def from_feed(cls, item: dict) -> "TransactionRecord":
        return cls(
            id=item["id"],
            title=item.get("title") or "",
            description=item.get("description") or "",
            price=item.get("price") or 0,
            category=item.get("category") or "",
            image=item.get("image") or "",
            sold=bool(item.get("sold")),
            dateOfSale=item.get("dateOfSale"),
        )


class TransactionPage(BaseModel):
    total: int
    page: int
    per_page: int
    transactions: List[TransactionRecord]


class Statistics(BaseModel):
    totalSaleAmount: Union[int, float]
    totalSoldItems: int
    totalNotSoldItems: int


class CombinedData(BaseModel):
    statistics: Statistics
    barChart: Dict[str, int]
    pieChart: Dict[str, int]

"""Bozulabilir stok lotu veri modelleri."""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Optional, Union

DateLike = Union[date, datetime, str]

DEFAULT_DATE_DISPLAY_FORMAT = "%d/%m/%Y"
DEFAULT_EXPIRY_WINDOW_DAYS = 7


def to_date(value: DateLike) -> date:
    """date, datetime veya ISO 8601 (YYYY-MM-DD) metnini takvim gününe çevirir."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(value)


class SaleOutcome(str, Enum):
    PARTIAL = "partial"
    SOLD_OUT = "sold_out"
    NOT_FOUND = "not_found"


@dataclass
class Item:
    name: str
    code: str
    quantity: int
    expiration_date: date

    def __post_init__(self) -> None:
        self.expiration_date = to_date(self.expiration_date)
        if self.quantity < 0:
            raise ValueError("Miktar negatif olamaz")

    def days_until_expiration(self, today: Optional[DateLike] = None) -> int:
        """Son kullanma tarihine kalan gün sayısı; negatifse lot vadesi geçmiştir."""
        ref = to_date(today) if today is not None else date.today()
        return (self.expiration_date - ref).days

    def describe(
        self,
        today: Optional[DateLike] = None,
        date_format: str = DEFAULT_DATE_DISPLAY_FORMAT,
    ) -> str:
        return (
            f"Ürün: {self.name} | Kod: {self.code} | Miktar: {self.quantity} | "
            f"SKT: {self.expiration_date.strftime(date_format)} | "
            f"Kalan gün: {self.days_until_expiration(today)}"
        )

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "code": self.code,
            "quantity": self.quantity,
            "expiration_date": self.expiration_date.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> Item:
        return cls(
            name=data["name"],
            code=data["code"],
            quantity=int(data["quantity"]),
            expiration_date=data["expiration_date"],
        )


@dataclass
class InventoryEntry:
    position: int
    item: Item
    description: str


@dataclass
class ExpiryInfo:
    name: str
    code: str
    quantity: int
    expiration_date: date
    days_until_expiration: int

    @property
    def is_expired(self) -> bool:
        return self.days_until_expiration <= 0

    @property
    def days_since_expiration(self) -> int:
        return abs(self.days_until_expiration)

    @classmethod
    def for_item(cls, item: Item, today: date) -> ExpiryInfo:
        return cls(
            name=item.name,
            code=item.code,
            quantity=item.quantity,
            expiration_date=item.expiration_date,
            days_until_expiration=item.days_until_expiration(today),
        )


@dataclass
class SaleResult:
    outcome: SaleOutcome
    code: str
    requested: int
    sold: int = 0
    remaining: int = 0
    item: Optional[Item] = None


@dataclass
class InventoryConfig:
    expiry_window_days: int = DEFAULT_EXPIRY_WINDOW_DAYS
    date_display_format: str = DEFAULT_DATE_DISPLAY_FORMAT

    @classmethod
    def from_env(cls) -> InventoryConfig:
        """Ortam değişkenlerinden (EXPIRY_WINDOW_DAYS, DATE_DISPLAY_FORMAT) ayar okur."""
        window = int(os.environ.get("EXPIRY_WINDOW_DAYS", DEFAULT_EXPIRY_WINDOW_DAYS))
        if window < 0:
            raise ValueError("Son kullanma penceresi negatif olamaz")
        return cls(
            expiry_window_days=window,
            date_display_format=os.environ.get(
                "DATE_DISPLAY_FORMAT", DEFAULT_DATE_DISPLAY_FORMAT
            ),
        )

"""FIFO Stok - son kullanma tarihine göre sıralı bozulabilir ürün stoğu.

- Lotlar her eklemede son kullanma tarihine göre (stabil) sıralanır
- Satış her zaman aynı koda sahip, en erken bozulacak lottan düşer
- Vadesi geçmiş lotlar raporlanır veya stoktan çıkarılır
- Yakında bozulacak lotlar pencere (varsayılan 7 gün) içinde listelenir
"""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Callable, Iterator, Optional

from src.inventory.notifications import NotificationLog, NotificationType
from src.models.item import (
    DateLike,
    ExpiryInfo,
    InventoryConfig,
    InventoryEntry,
    Item,
    SaleOutcome,
    SaleResult,
    to_date,
)

logger = logging.getLogger(__name__)

Clock = Callable[[], date]


class FifoInventory:
    """Son kullanma tarihine göre sıralı, tek sahipli bellek içi stok."""

    def __init__(
        self,
        config: Optional[InventoryConfig] = None,
        notifications: Optional[NotificationLog] = None,
        clock: Optional[Clock] = None,
    ):
        self.config = config if config is not None else InventoryConfig()
        # Saat ve bildirim kanalı - dependency injection destekli
        self.notifications = notifications if notifications is not None else NotificationLog()
        self._clock: Clock = clock if clock is not None else date.today
        self._items: list[Item] = []

    def _today(self, current_date: Optional[DateLike] = None) -> date:
        return to_date(current_date) if current_date is not None else self._clock()

    def _emit(self, kind: NotificationType, message: str, **payload) -> None:
        self.notifications.emit(kind, message, **payload)

    # --- Okuma yardımcıları ---

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(list(self._items))

    @property
    def items(self) -> list[Item]:
        return list(self._items)

    def find(self, code: str) -> Optional[Item]:
        """Koda uyan ilk (en erken bozulacak) lotu döndürür."""
        return next((item for item in self._items if item.code == code), None)

    def total_quantity(self, code: str) -> int:
        return sum(item.quantity for item in self._items if item.code == code)

    # --- Ekleme ve listeleme ---

    def add(self, item: Item) -> None:
        """Lotu ekler ve stoğu son kullanma tarihine göre yeniden sıralar."""
        self._items.append(item)
        # list.sort stabildir: aynı tarihli lotlar ekleme sırasını korur
        self._items.sort(key=lambda i: i.expiration_date)
        self._emit(NotificationType.ITEM_ADDED, f"Ürün eklendi: {item.name}", name=item.name)

    def list_items(self, current_date: Optional[DateLike] = None) -> list[InventoryEntry]:
        if not self._items:
            self._emit(NotificationType.INVENTORY_EMPTY, "Stok boş.")
            return []

        today = self._today(current_date)
        self._emit(
            NotificationType.INVENTORY_LISTED,
            "=== Ürün listesi (son kullanma tarihine göre) ===",
            count=len(self._items),
        )

        entries: list[InventoryEntry] = []
        for position, item in enumerate(self._items, start=1):
            description = item.describe(today, self.config.date_display_format)
            entries.append(InventoryEntry(position=position, item=item, description=description))
            self._emit(
                NotificationType.INVENTORY_ENTRY,
                f"{position}. {description}",
                position=position,
                code=item.code,
            )
        return entries

    # --- Çıkarma ---

    def remove_at(self, position: int) -> Optional[Item]:
        """0 tabanlı sıradaki lotu çıkarır; geçersiz sırada hiçbir şey değişmez."""
        if not 0 <= position < len(self._items):
            self._emit(
                NotificationType.INVALID_INDEX,
                f"Geçersiz sıra: {position}",
                position=position,
                size=len(self._items),
            )
            return None

        removed = self._items.pop(position)
        self._emit(NotificationType.ITEM_REMOVED, f"Ürün çıkarıldı: {removed.name}", name=removed.name)
        return removed

    def remove_expired(self, current_date: Optional[DateLike] = None) -> list[Item]:
        """Vadesi geçmiş (SKT <= bugün) lotları stoktan çıkarır."""
        today = self._today(current_date)
        expired = [item for item in self._items if item.expiration_date <= today]

        if not expired:
            self._emit(NotificationType.NO_EXPIRED_ITEMS, "Stokta vadesi geçmiş ürün yok.")
            return []

        self._items = [item for item in self._items if item.expiration_date > today]
        self._emit(
            NotificationType.EXPIRED_REMOVED,
            f"Vadesi geçmiş ürünler çıkarıldı: {len(expired)}",
            count=len(expired),
        )
        for item in expired:
            self._emit(
                NotificationType.EXPIRED_ITEM,
                f"- {item.name} (Kod: {item.code})",
                name=item.name,
                code=item.code,
            )
        return expired

    # --- Satış (FIFO) ---

    def sell(self, code: str, quantity: int) -> SaleResult:
        """Koda uyan en erken bozulacak lottan satış yapar.

        Talep edilen miktar lot miktarına eşit ya da fazlaysa lot tamamen
        stoktan çıkarılır; fazla talep ayrıca raporlanmaz.
        """
        if quantity < 0:
            raise ValueError("Satış miktarı negatif olamaz")

        index = next((i for i, item in enumerate(self._items) if item.code == code), None)
        if index is None:
            self._emit(
                NotificationType.ITEM_NOT_FOUND,
                f"Bu koda sahip ürün bulunamadı: {code}",
                code=code,
            )
            return SaleResult(outcome=SaleOutcome.NOT_FOUND, code=code, requested=quantity)

        item = self._items[index]
        if item.quantity <= quantity:
            del self._items[index]
            self._emit(
                NotificationType.ITEM_SOLD_OUT,
                f"Ürün satıldı (stok tükendi): {item.name}",
                name=item.name,
                code=code,
            )
            return SaleResult(
                outcome=SaleOutcome.SOLD_OUT,
                code=code,
                requested=quantity,
                sold=item.quantity,
                remaining=0,
                item=item,
            )

        item.quantity -= quantity
        self._emit(
            NotificationType.ITEM_SOLD,
            f"Ürün satıldı: {item.name} | Miktar: {quantity} | Kalan stok: {item.quantity}",
            name=item.name,
            code=code,
            sold=quantity,
            remaining=item.quantity,
        )
        return SaleResult(
            outcome=SaleOutcome.PARTIAL,
            code=code,
            requested=quantity,
            sold=quantity,
            remaining=item.quantity,
            item=item,
        )

    # --- Son kullanma raporları ---

    def _window(self, window_days: Optional[int]) -> int:
        if window_days is None:
            window_days = self.config.expiry_window_days
        if window_days < 0:
            raise ValueError("Son kullanma penceresi negatif olamaz")
        return window_days

    def _upcoming(self, today: date, window_days: int) -> list[ExpiryInfo]:
        horizon = today + timedelta(days=window_days)
        return [
            ExpiryInfo.for_item(item, today)
            for item in self._items
            if today < item.expiration_date <= horizon
        ]

    def _expired(self, today: date) -> list[ExpiryInfo]:
        return [
            ExpiryInfo.for_item(item, today)
            for item in self._items
            if item.expiration_date <= today
        ]

    def upcoming_expirations(
        self,
        current_date: Optional[DateLike] = None,
        window_days: Optional[int] = None,
    ) -> list[ExpiryInfo]:
        """Bugünden sonra, en fazla window_days gün içinde bozulacak lotlar."""
        window_days = self._window(window_days)
        upcoming = self._upcoming(self._today(current_date), window_days)

        if not upcoming:
            self._emit(
                NotificationType.NONE_UPCOMING,
                f"Yakında ({window_days} gün) bozulacak ürün yok.",
                window_days=window_days,
            )
            return []

        self._emit(
            NotificationType.UPCOMING_HEADER,
            f"=== Yakında bozulacak ürünler ({window_days} gün) ===",
            window_days=window_days,
            count=len(upcoming),
        )
        for info in upcoming:
            self._emit(
                NotificationType.UPCOMING_ITEM,
                f"- {info.name} | Kod: {info.code} | {info.days_until_expiration} gün içinde bozulacak",
                name=info.name,
                code=info.code,
                days_until_expiration=info.days_until_expiration,
            )
        return upcoming

    def expired_report(self, current_date: Optional[DateLike] = None) -> list[ExpiryInfo]:
        """Vadesi geçmiş lotları stoktan çıkarmadan raporlar."""
        expired = self._expired(self._today(current_date))

        self._emit(NotificationType.EXPIRED_REPORT, "=== Vadesi geçmiş ürünler raporu ===")
        if not expired:
            self._emit(NotificationType.NO_EXPIRED_ITEMS, "Stokta vadesi geçmiş ürün yok.")
            return []

        for info in expired:
            self._emit(
                NotificationType.EXPIRED_ITEM_REPORTED,
                f"- {info.name} | Kod: {info.code} | {info.days_since_expiration} gün önce bozuldu",
                name=info.name,
                code=info.code,
                days_since_expiration=info.days_since_expiration,
            )
        return expired

    def daily_report(self, current_date: Optional[DateLike] = None) -> dict:
        """Günlük son kullanma raporu oluşturur; bildirim üretmez."""
        today = self._today(current_date)
        expired = self._expired(today)
        upcoming = self._upcoming(today, self._window(None))

        logger.debug("Günlük rapor: %d vadesi geçmiş, %d yakında", len(expired), len(upcoming))

        return {
            "report_date": today.isoformat(),
            "total_lots": len(self._items),
            "total_units": sum(item.quantity for item in self._items),
            "expired": [
                {"name": e.name, "code": e.code, "days_since_expiration": e.days_since_expiration}
                for e in expired
            ],
            "upcoming": [
                {"name": u.name, "code": u.code, "days_until_expiration": u.days_until_expiration}
                for u in upcoming
            ],
        }

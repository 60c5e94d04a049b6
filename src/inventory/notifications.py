"""Stok bildirim kanalı - konsol çıktısı yerine yapılandırılmış olay kaydı.

- Her işlem bildirimleri üretildikleri sırayla kaydeder
- Bildirimler logging üzerinden de yazılır
- Kayıtlı handler'lara (ör. print) iletilir
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class NotificationType(str, Enum):
    ITEM_ADDED = "item_added"
    INVENTORY_EMPTY = "inventory_empty"
    INVENTORY_LISTED = "inventory_listed"
    INVENTORY_ENTRY = "inventory_entry"
    ITEM_REMOVED = "item_removed"
    INVALID_INDEX = "invalid_index"
    NO_EXPIRED_ITEMS = "no_expired_items"
    EXPIRED_REMOVED = "expired_removed"
    EXPIRED_ITEM = "expired_item"
    ITEM_NOT_FOUND = "item_not_found"
    ITEM_SOLD_OUT = "item_sold_out"
    ITEM_SOLD = "item_sold"
    NONE_UPCOMING = "none_upcoming"
    UPCOMING_HEADER = "upcoming_header"
    UPCOMING_ITEM = "upcoming_item"
    EXPIRED_REPORT = "expired_report"
    EXPIRED_ITEM_REPORTED = "expired_item_reported"


# Raporlanan ama ölümcül olmayan hata durumları
WARNING_TYPES = frozenset({NotificationType.INVALID_INDEX, NotificationType.ITEM_NOT_FOUND})


@dataclass
class Notification:
    kind: NotificationType
    message: str
    payload: dict = field(default_factory=dict)
    timestamp: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )


NotificationHandler = Callable[[Notification], None]


class NotificationLog:
    """Bildirimleri sıralı olarak saklar, loglar ve handler'lara dağıtır."""

    def __init__(self, handlers: Optional[list[NotificationHandler]] = None) -> None:
        self._notifications: list[Notification] = []
        self._handlers: list[NotificationHandler] = list(handlers or [])

    def register_handler(self, handler: NotificationHandler) -> None:
        self._handlers.append(handler)

    def emit(self, kind: NotificationType, message: str, **payload) -> Notification:
        notification = Notification(kind=kind, message=message, payload=payload)
        self._notifications.append(notification)

        level = logging.WARNING if kind in WARNING_TYPES else logging.INFO
        logger.log(level, "[%s] %s", kind.value, message)

        for handler in self._handlers:
            try:
                handler(notification)
            except Exception as e:
                logger.warning("Bildirim handler hatası (%s): %s", kind.value, e)

        return notification

    @property
    def notifications(self) -> list[Notification]:
        return list(self._notifications)

    @property
    def messages(self) -> list[str]:
        return [n.message for n in self._notifications]

    def kinds(self) -> list[NotificationType]:
        return [n.kind for n in self._notifications]

    def last(self) -> Optional[Notification]:
        return self._notifications[-1] if self._notifications else None

    def clear(self) -> None:
        self._notifications.clear()

    def __len__(self) -> int:
        return len(self._notifications)

"""Stok bildirim kanalı unit testleri."""

import logging
from unittest.mock import MagicMock

from src.inventory.notifications import NotificationLog, NotificationType


class TestNotificationLog:
    """Bildirimlerin sıralı kaydı ve handler'lara dağıtımı."""

    def test_emit_records_in_order(self):
        log = NotificationLog()
        log.emit(NotificationType.ITEM_ADDED, "Ürün eklendi: Süt", name="Süt")
        log.emit(NotificationType.INVENTORY_EMPTY, "Stok boş.")
        assert log.kinds() == [NotificationType.ITEM_ADDED, NotificationType.INVENTORY_EMPTY]
        assert log.messages == ["Ürün eklendi: Süt", "Stok boş."]
        assert log.notifications[0].payload == {"name": "Süt"}
        assert len(log) == 2

    def test_handler_receives_notification(self):
        handler = MagicMock()
        log = NotificationLog(handlers=[handler])
        notification = log.emit(NotificationType.ITEM_ADDED, "Ürün eklendi: Süt")
        handler.assert_called_once_with(notification)

    def test_registered_handler(self):
        log = NotificationLog()
        handler = MagicMock()
        log.register_handler(handler)
        log.emit(NotificationType.ITEM_ADDED, "x")
        assert handler.call_count == 1

    def test_failing_handler_does_not_abort(self):
        """Hatalı handler diğer handler'ları ve kaydı engellememeli."""
        failing = MagicMock(side_effect=RuntimeError("bozuk"))
        healthy = MagicMock()
        log = NotificationLog(handlers=[failing, healthy])
        log.emit(NotificationType.ITEM_ADDED, "x")
        healthy.assert_called_once()
        assert len(log) == 1

    def test_clear_and_last(self):
        log = NotificationLog()
        assert log.last() is None
        log.emit(NotificationType.ITEM_ADDED, "a")
        log.emit(NotificationType.ITEM_REMOVED, "b")
        assert log.last().kind == NotificationType.ITEM_REMOVED
        log.clear()
        assert len(log) == 0

    def test_warning_level_for_reported_errors(self, caplog):
        """Bulunamadı ve geçersiz sıra bildirimleri WARNING seviyesinde loglanmalı."""
        log = NotificationLog()
        with caplog.at_level(logging.INFO, logger="src.inventory.notifications"):
            log.emit(NotificationType.ITEM_NOT_FOUND, "bulunamadı")
            log.emit(NotificationType.ITEM_ADDED, "eklendi")
        levels = [r.levelno for r in caplog.records]
        assert levels == [logging.WARNING, logging.INFO]

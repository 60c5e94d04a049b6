from src.inventory.fifo_inventory import FifoInventory
from src.inventory.notifications import Notification, NotificationLog, NotificationType

__all__ = [
    "FifoInventory",
    "Notification",
    "NotificationLog",
    "NotificationType",
]

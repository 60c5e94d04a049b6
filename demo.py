"""
FIFO (son kullanma tarihine göre) stok yönetimi demo script'i.

Kullanım:
    export EXPIRY_WINDOW_DAYS="7"          # opsiyonel
    export DATE_DISPLAY_FORMAT="%d/%m/%Y"  # opsiyonel
    export LOG_LEVEL="WARNING"             # opsiyonel
    python demo.py
"""

import logging
import os

import env_loader  # noqa: F401

from src.inventory import FifoInventory, Notification, NotificationLog
from src.models.item import InventoryConfig, Item

logging.basicConfig(
    level=os.environ.get("LOG_LEVEL", "WARNING").upper(),
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
)

DEMO_ITEMS = [
    {"name": "Süt", "code": "L001", "quantity": 50, "expiration_date": "2025-04-15"},
    {"name": "Ekmek", "code": "P001", "quantity": 30, "expiration_date": "2025-03-25"},
    {"name": "Peynir", "code": "Q001", "quantity": 20, "expiration_date": "2025-05-10"},
    {"name": "Yoğurt", "code": "I001", "quantity": 40, "expiration_date": "2025-03-20"},
    {"name": "Tereyağı", "code": "M001", "quantity": 15, "expiration_date": "2025-06-01"},
]


def print_notification(notification: Notification) -> None:
    print(f"   {notification.message}")


def run_demo() -> FifoInventory:
    """Sabit çağrı dizisiyle stok işlemlerini gösterir."""
    print("🏭 FIFO Stok Yönetimi - Demo")
    print("=" * 60)

    inventory = FifoInventory(
        config=InventoryConfig.from_env(),
        notifications=NotificationLog(handlers=[print_notification]),
    )

    print("\n📦 1. Ürünler ekleniyor:")
    for data in DEMO_ITEMS:
        inventory.add(Item.from_dict(data))

    print("\n📋 2. Ürünler son kullanma tarihine göre listeleniyor (FIFO):")
    inventory.list_items()

    print("\n⏳ 3. Yakında bozulacak ürünler kontrol ediliyor:")
    inventory.upcoming_expirations()

    print("\n🛒 4. Satış yapılıyor:")
    inventory.sell("I001", 15)  # kısmi satış
    inventory.sell("P001", 30)  # tüm lot

    print("\n📋 5. Satış sonrası liste:")
    inventory.list_items()

    print("\n🗑️  6. Vadesi geçmiş ürünler çıkarılıyor:")
    inventory.remove_expired()

    print("\n📊 7. Vadesi geçmiş ürün raporu:")
    inventory.expired_report()

    print("\n📦 8. Vadesi geçmiş bir ürün ekleniyor:")
    inventory.add(Item("Çikolata", "C001", 10, "2025-01-01"))

    print("\n📊 9. Ekleme sonrası vadesi geçmiş ürün raporu:")
    inventory.expired_report()

    print("\n🗑️  10. Vadesi geçmiş ürünler çıkarılıyor:")
    inventory.remove_expired()

    print("\n📋 11. Son liste:")
    inventory.list_items()

    return inventory


if __name__ == "__main__":
    run_demo()

    print("\n" + "=" * 60)
    print("🎉 Demo tamamlandı!")

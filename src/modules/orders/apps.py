from django.apps import AppConfig


class OrdersConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "modules.orders"
    label = "orders"

    def ready(self) -> None:
        from django.conf import settings

        from modules.stocks.constants import StockLockingMode

        # Unknown STOCK_LOCKING_MODE values are rejected at startup.
        StockLockingMode(settings.STOCK_LOCKING_MODE)

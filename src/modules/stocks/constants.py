"""Stock domain constants.

The locking discipline that serializes concurrent deductions of the same
stock row is a deployment choice (``STOCK_LOCKING_MODE`` setting).
"""

from django.db import models


class StockLockingMode(models.TextChoices):
    # SELECT ... FOR UPDATE on the stock rows for the whole transaction.
    PESSIMISTIC = "pessimistic", "Pessimistic row lock"
    # Version-checked UPDATE; the order transaction is re-run on conflict.
    OPTIMISTIC = "optimistic", "Optimistic version check"

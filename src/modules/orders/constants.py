"""Order domain constants.

Only INIT is produced by order placement; the remaining statuses belong
to the payment and pickup flows.
"""

from django.db import models


class OrderStatus(models.TextChoices):
    INIT = "INIT", "Order created"
    CANCELED = "CANCELED", "Order canceled"
    PAYMENT_COMPLETED = "PAYMENT_COMPLETED", "Payment completed"
    PAYMENT_FAILED = "PAYMENT_FAILED", "Payment failed"
    RECEIVED = "RECEIVED", "Order received"
    COMPLETED = "COMPLETED", "Order completed"

"""Stock repositories package."""

from modules.stocks.repositories.django_repository import StockDjangoRepository
from modules.stocks.repositories.interfaces import IStockRepository

__all__ = ["IStockRepository", "StockDjangoRepository"]

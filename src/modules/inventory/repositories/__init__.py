"""Inventory repositories package."""

from modules.inventory.repositories.django_repository import (
    DeliveryDjangoRepository,
    StockDjangoCatalog,
    StockDjangoRepository,
)
from modules.inventory.repositories.interfaces import (
    IDeliveryRepository,
    IProductCatalog,
    IStockRepository,
)

__all__ = [
    "DeliveryDjangoRepository",
    "IDeliveryRepository",
    "IProductCatalog",
    "IStockRepository",
    "StockDjangoCatalog",
    "StockDjangoRepository",
]

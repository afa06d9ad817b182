"""Order repositories package."""

from modules.orders.repositories.django_repository import OrderLineDjangoStore
from modules.orders.repositories.interfaces import IOrderLineStore

__all__ = ["IOrderLineStore", "OrderLineDjangoStore"]

"""Inventory URL configuration."""

from __future__ import annotations

from rest_framework.routers import DefaultRouter

from modules.inventory.views import DeliveryViewSet, StockViewSet

router = DefaultRouter(trailing_slash=True)
router.register("stock", StockViewSet, basename="stock")
router.register("deliveries", DeliveryViewSet, basename="delivery")

urlpatterns = router.urls

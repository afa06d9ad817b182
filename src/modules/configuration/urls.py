"""Configuration URL configuration."""

from __future__ import annotations

from django.urls import path

from modules.configuration.views import VatSettingView

urlpatterns = [
    path("admin/vat/", VatSettingView.as_view(), name="vat-setting"),
]

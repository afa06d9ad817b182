from django.urls import path

from modules.core.views import CurrentAccountView, health_check

urlpatterns = [
    path("health", health_check, name="health_check"),
    path("api/v1/me", CurrentAccountView.as_view(), name="current_account"),
]

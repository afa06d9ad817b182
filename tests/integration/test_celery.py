"""Integration tests for the Celery configuration and tasks."""

import pytest

from modules.orders.models import PlacedLine, ToReceiveLine

pytestmark = pytest.mark.integration


class TestCeleryConfig:
    """Celery loads its settings from Django."""

    def test_celery_app_is_importable(self):
        from config.celery import app

        assert app.main == "storefront"

    def test_celery_app_exported_from_init(self):
        from config import celery_app

        assert celery_app.main == "storefront"

    def test_celery_serializer_is_json(self, settings):
        assert settings.CELERY_TASK_SERIALIZER == "json"
        assert settings.CELERY_RESULT_SERIALIZER == "json"
        assert settings.CELERY_ACCEPT_CONTENT == ["json"]

    def test_celery_timezone_matches_django(self, settings):
        assert settings.CELERY_TIMEZONE == settings.TIME_ZONE

    def test_advance_task_is_scheduled(self, settings):
        tasks = {entry["task"] for entry in settings.CELERY_BEAT_SCHEDULE.values()}
        assert "orders.advance_placed_orders" in tasks


class TestAdvancePlacedOrdersTask:
    def test_moves_due_lines(self, tee, make_placed):
        due = make_placed(tee, shipping_option="2000-01-01")
        make_placed(tee, shipping_option="2999-01-01")

        from modules.orders.tasks import advance_placed_orders

        result = advance_placed_orders.delay()

        assert result.successful()
        assert result.result == 1
        assert ToReceiveLine.objects.filter(id=due.id).exists()
        assert PlacedLine.objects.count() == 1

    def test_direct_call_with_nothing_due(self):
        from modules.orders.tasks import advance_placed_orders

        assert advance_placed_orders() == 0

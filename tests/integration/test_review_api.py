"""Integration tests for product reviews of received order lines."""

from __future__ import annotations

import pytest

from modules.reviews.models import ProductReview

pytestmark = pytest.mark.integration

URL = "/api/v1/reviews/"


def _payload(line, **overrides):
    payload = {"line_id": str(line.id), "username": "alice", "rating": 5, "review": "Love it."}
    payload.update(overrides)
    return payload


class TestSubmit:
    def test_submit(self, auth_client, tee, make_received):
        line = make_received(tee)

        response = auth_client.post(URL, _payload(line), format="json")

        assert response.status_code == 201
        assert response.json()["message"] == "Review submitted successfully!"
        assert response.json()["review"]["product_id"] == tee.product_id

    def test_placed_line_cannot_be_reviewed(self, auth_client, tee, make_placed):
        line = make_placed(tee)

        response = auth_client.post(URL, _payload(line), format="json")

        assert response.status_code == 404
        assert not ProductReview.objects.exists()

    def test_second_review_is_409(self, auth_client, tee, make_received):
        line = make_received(tee)
        auth_client.post(URL, _payload(line), format="json")

        response = auth_client.post(URL, _payload(line, rating=1), format="json")

        assert response.status_code == 409

    def test_missing_review_text_is_400(self, auth_client, tee, make_received):
        line = make_received(tee)

        response = auth_client.post(URL, _payload(line, review=""), format="json")

        assert response.status_code == 400


class TestUpdateAndRead:
    def test_update(self, auth_client, tee, make_received):
        line = make_received(tee)
        auth_client.post(URL, _payload(line), format="json")

        response = auth_client.put(URL, _payload(line, rating=3, review="Faded."), format="json")

        assert response.status_code == 200
        assert ProductReview.objects.get().rating == 3

    def test_has_reviewed(self, auth_client, tee, make_received):
        line = make_received(tee)
        detail = f"{URL}{line.id}/alice/"

        assert auth_client.get(detail).json() == {"has_reviewed": False}

        auth_client.post(URL, _payload(line), format="json")

        body = auth_client.get(detail).json()
        assert body["has_reviewed"] is True
        assert body["review"] == {"rating": 5, "review": "Love it.", "image_url": None}

    def test_reviews_by_product(self, auth_client, tee, hoodie, make_received):
        auth_client.post(URL, _payload(make_received(tee)), format="json")
        auth_client.post(URL, _payload(make_received(hoodie)), format="json")

        response = auth_client.get(f"{URL}product/{tee.product_id}/")

        assert response.status_code == 200
        assert [row["product_id"] for row in response.json()] == [tee.product_id]

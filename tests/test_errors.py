"""
Error body shape and the production gating of unexpected failures
"""
import pytest

from guestlist.services.guest_service import GuestService


@pytest.fixture()
def broken_guest_listing(monkeypatch):
    def explode(self, search=None, group_id=None):
        raise RuntimeError("database exploded")

    monkeypatch.setattr(GuestService, "get_guests", explode)


class TestErrorResponses:
    def test_unexpected_error_detail_outside_production(
        self, client, broken_guest_listing, monkeypatch
    ):
        monkeypatch.setenv("APP_ENV", "development")

        response = client.get("/api/guests")

        assert response.status_code == 500
        assert response.json() == {"error": "database exploded"}

    def test_unexpected_error_is_generic_in_production(
        self, client, broken_guest_listing, monkeypatch
    ):
        monkeypatch.setenv("APP_ENV", "production")

        response = client.get("/api/guests")

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to get guests"}

    def test_malformed_body_is_a_400_with_error_key(self, client):
        response = client.post("/api/guests", json={"name": "Ali", "ladies": "many"})

        assert response.status_code == 400
        assert list(response.json()) == ["error"]

    def test_unknown_route_uses_error_shape(self, client):
        response = client.get("/api/nothing-here")

        assert response.status_code == 404
        assert "error" in response.json()

"""
Dashboard totals and the service meta endpoints
"""


class TestDashboard:
    def test_empty(self, client):
        response = client.get("/api/dashboard")

        assert response.status_code == 200
        assert response.json() == {
            "totalGuests": 0,
            "totalFunctions": 0,
            "totalExpenses": 0,
            "totalRsvps": 0,
        }

    def test_totals(self, client, create_guest, create_function):
        create_guest("A")
        create_guest("B")
        create_function("Mehndi")
        for amount in (10.1, 20.2):
            client.post(
                "/api/expenses",
                json={"description": "x", "amount": amount, "paidBy": "bride"},
            )

        stats = client.get("/api/dashboard").json()

        assert stats["totalGuests"] == 2
        assert stats["totalFunctions"] == 1
        assert stats["totalExpenses"] == 30.3
        assert stats["totalRsvps"] == 0


class TestMeta:
    def test_root(self, client):
        assert client.get("/").json()["status"] == "running"

    def test_health(self, client):
        body = client.get("/health").json()

        assert body["status"] == "healthy"
        assert body["database"] == {"sqlalchemy": True}

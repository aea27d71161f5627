"""
Guest endpoints: creation rules, default group, listing and deletion
"""
from sqlalchemy.orm import sessionmaker

from guestlist.models import Group, Guest, Invite
from guestlist.services.group_service import GroupService


class TestCreateGuest:
    def test_guest_without_group_lands_in_general(self, client):
        response = client.post("/api/guests", json={"name": "Jane Doe"})

        assert response.status_code == 201, response.text
        guest = response.json()
        assert guest["name"] == "Jane Doe"
        assert guest["group"]["name"] == "General"
        assert guest["ladies"] == 0
        assert guest["gents"] == 0
        assert guest["children"] == 0

    def test_general_group_is_reused(self, client, create_guest):
        first = create_guest("Alice")
        second = create_guest("Bob")

        assert first["group"]["id"] == second["group"]["id"]
        groups = client.get("/api/groups").json()
        assert [g["name"] for g in groups].count("General") == 1

    def test_name_is_trimmed(self, create_guest):
        guest = create_guest("  Zahra Ali  ")
        assert guest["name"] == "Zahra Ali"

    def test_blank_name_rejected(self, client):
        response = client.post("/api/guests", json={"name": "   "})

        assert response.status_code == 400
        assert response.json() == {"error": "Name is required"}

    def test_missing_name_rejected(self, client):
        response = client.post("/api/guests", json={})

        assert response.status_code == 400
        assert response.json()["error"] == "Name is required"

    def test_duplicate_name_differing_in_case(self, client, create_guest):
        create_guest("Jane Doe")

        response = client.post("/api/guests", json={"name": "JANE doe"})

        assert response.status_code == 400
        assert response.json()["error"] == "A guest with this name already exists"

    def test_negative_count_rejected(self, client):
        response = client.post("/api/guests", json={"name": "Sam", "ladies": -1})

        assert response.status_code == 400
        assert "negative" in response.json()["error"]

    def test_oversized_count_rejected(self, client, db_session):
        response = client.post("/api/guests", json={"name": "Big", "ladies": 10**20})

        assert response.status_code == 400
        assert response.json() == {"error": "Ladies cannot exceed 1000"}
        assert db_session.query(Guest).count() == 0

    def test_unknown_group(self, client):
        response = client.post("/api/guests", json={"name": "Sam", "groupId": 999})

        assert response.status_code == 404
        assert response.json()["error"] == "Group not found"

    def test_explicit_group(self, client):
        group = client.post("/api/groups", json={"name": "tasneem"}).json()

        response = client.post(
            "/api/guests",
            json={"name": "Sam", "groupId": group["id"], "gents": 2, "notes": " hi "},
        )

        assert response.status_code == 201
        guest = response.json()
        assert guest["groupId"] == group["id"]
        assert guest["gents"] == 2
        assert guest["notes"] == "hi"

    def test_initial_invites_skip_bad_entries(self, client, create_function, db_session):
        mehndi = create_function("Mehndi")

        response = client.post(
            "/api/guests",
            json={
                "name": "Khozema",
                "functionInvites": [
                    {"functionId": mehndi["id"], "ladiesInvited": 2, "gentsInvited": -3},
                    {"functionId": mehndi["id"], "ladiesInvited": 5},
                    {"functionId": 12345, "ladiesInvited": 1},
                    {"ladiesInvited": 4},
                ],
            },
        )

        assert response.status_code == 201, response.text
        guest = response.json()
        assert len(guest["invites"]) == 1
        invite = guest["invites"][0]
        assert invite["functionId"] == mehndi["id"]
        assert invite["ladiesInvited"] == 2
        assert invite["gentsInvited"] == 0
        assert db_session.query(Invite).count() == 1


class TestListGuests:
    def test_newest_first_with_search_and_group_filter(self, client, create_guest):
        group = client.post("/api/groups", json={"name": "zahra"}).json()
        create_guest("Ahmed Khan")
        create_guest("Fatima Khan", groupId=group["id"])
        create_guest("Yusuf Ali")

        everyone = client.get("/api/guests").json()
        assert [g["name"] for g in everyone] == ["Yusuf Ali", "Fatima Khan", "Ahmed Khan"]

        khans = client.get("/api/guests", params={"search": "KHAN"}).json()
        assert {g["name"] for g in khans} == {"Ahmed Khan", "Fatima Khan"}

        in_group = client.get("/api/guests", params={"group": group["id"]}).json()
        assert [g["name"] for g in in_group] == ["Fatima Khan"]

    def test_get_single_guest(self, client, create_guest):
        guest = create_guest("Maryam")

        response = client.get(f"/api/guests/{guest['id']}")

        assert response.status_code == 200
        assert response.json()["name"] == "Maryam"
        assert client.get("/api/guests/999").status_code == 404


class TestDeleteGuests:
    def test_delete_one(self, client, create_guest):
        guest = create_guest("Maryam")

        response = client.delete(f"/api/guests/{guest['id']}")

        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert client.get(f"/api/guests/{guest['id']}").status_code == 404

    def test_delete_missing(self, client):
        response = client.delete("/api/guests/42")

        assert response.status_code == 404
        assert response.json() == {"error": "Guest not found"}

    def test_delete_all_removes_invites(self, client, create_guest, create_function, db_session):
        function = create_function("Walima")
        guest = create_guest("A")
        create_guest("B")
        client.post(
            f"/api/functions/{function['id']}/invites",
            json={"guestId": guest["id"], "ladiesInvited": 1},
        )

        response = client.delete("/api/guests")

        assert response.status_code == 200
        assert response.json() == {"success": True, "deletedCount": 2}
        assert db_session.query(Guest).count() == 0
        assert db_session.query(Invite).count() == 0


class TestDefaultGroupRace:
    def test_general_created_concurrently_is_reused(self, engine, db_session, monkeypatch):
        """Another request creates "General" between our lookup and our insert"""
        original_lookup = GroupService.find_group_by_name
        lookups = []

        def lookup_losing_the_race(self, name):
            lookups.append(name)
            if len(lookups) == 1:
                other = sessionmaker(bind=engine)()
                other.add(Group(name="general"))
                other.commit()
                other.close()
                return None
            return original_lookup(self, name)

        monkeypatch.setattr(GroupService, "find_group_by_name", lookup_losing_the_race)

        group = GroupService(db_session).get_default_group()

        assert group.name == "general"
        assert len(lookups) == 2
        assert db_session.query(Group).count() == 1

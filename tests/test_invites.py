"""
Invite upsert, full replacement, increments and the fixed decrement order
"""
import pytest

from guestlist.models import Invite


@pytest.fixture()
def pair(create_function, create_guest):
    return create_function("Mehndi"), create_guest("Ayesha")


def _invites_url(function):
    return f"/api/functions/{function['id']}/invites"


class TestUpsertInvite:
    def test_created_then_updated(self, client, pair, db_session):
        function, guest = pair
        body = {"guestId": guest["id"], "ladiesInvited": 2, "gentsInvited": 1}

        first = client.post(_invites_url(function), json=body)
        second = client.post(
            _invites_url(function), json={**body, "childrenInvited": 3, "gentsInvited": 0}
        )

        assert first.status_code == 201, first.text
        assert second.status_code == 200, second.text
        assert second.json()["id"] == first.json()["id"]
        assert second.json()["childrenInvited"] == 3
        assert second.json()["gentsInvited"] == 0
        assert db_session.query(Invite).count() == 1

    def test_response_carries_guest_and_function(self, client, pair):
        function, guest = pair

        invite = client.post(_invites_url(function), json={"guestId": guest["id"]}).json()

        assert invite["guest"]["name"] == "Ayesha"
        assert invite["function"]["name"] == "Mehndi"
        assert invite["ladiesInvited"] == 0

    def test_guest_id_required(self, client, pair):
        function, _ = pair

        response = client.post(_invites_url(function), json={"ladiesInvited": 1})

        assert response.status_code == 400
        assert response.json()["error"] == "Guest ID is required"

    def test_negative_counts(self, client, pair):
        function, guest = pair

        response = client.post(
            _invites_url(function), json={"guestId": guest["id"], "ladiesInvited": -1}
        )

        assert response.status_code == 400

    def test_missing_function_or_guest(self, client, pair):
        function, guest = pair

        assert (
            client.post("/api/functions/999/invites", json={"guestId": guest["id"]}).status_code
            == 404
        )
        assert client.post(_invites_url(function), json={"guestId": 999}).status_code == 404


class TestReplaceAndDeleteInvite:
    def test_full_replace(self, client, pair):
        function, guest = pair
        invite = client.post(
            _invites_url(function), json={"guestId": guest["id"], "ladiesInvited": 4}
        ).json()

        response = client.put(
            _invites_url(function), json={"inviteId": invite["id"], "gentsInvited": 2}
        )

        assert response.status_code == 200
        assert response.json()["ladiesInvited"] == 0
        assert response.json()["gentsInvited"] == 2

    def test_invite_of_another_function_is_forbidden(self, client, pair, create_function):
        function, guest = pair
        other = create_function("Walima")
        invite = client.post(_invites_url(function), json={"guestId": guest["id"]}).json()

        put = client.put(_invites_url(other), json={"inviteId": invite["id"]})
        delete = client.delete(_invites_url(other), params={"inviteId": invite["id"]})

        assert put.status_code == 403
        assert put.json() == {"error": "Invite does not belong to this function"}
        assert delete.status_code == 403

    def test_invite_id_required(self, client, pair):
        function, _ = pair

        assert client.put(_invites_url(function), json={}).status_code == 400
        assert client.delete(_invites_url(function)).status_code == 400

    def test_missing_invite(self, client, pair):
        function, _ = pair

        response = client.put(_invites_url(function), json={"inviteId": 321})

        assert response.status_code == 404
        assert response.json() == {"error": "Invite not found"}

    def test_delete(self, client, pair, db_session):
        function, guest = pair
        invite = client.post(_invites_url(function), json={"guestId": guest["id"]}).json()

        response = client.delete(_invites_url(function), params={"inviteId": invite["id"]})

        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert db_session.query(Invite).count() == 0


class TestIncrement:
    def test_first_increment_creates_the_invite(self, client, pair):
        function, guest = pair

        response = client.post(
            f"{_invites_url(function)}/increment",
            json={"guestId": guest["id"], "category": "children"},
        )

        assert response.status_code == 201, response.text
        invite = response.json()
        assert invite["childrenInvited"] == 1
        assert invite["ladiesInvited"] == 0
        assert invite["gentsInvited"] == 0

        again = client.post(
            f"{_invites_url(function)}/increment",
            json={"guestId": guest["id"], "category": "children"},
        )
        assert again.status_code == 200
        assert again.json()["childrenInvited"] == 2

    def test_increment_existing_invite(self, client, pair):
        function, guest = pair
        invite = client.post(_invites_url(function), json={"guestId": guest["id"]}).json()

        response = client.post(
            f"/api/invites/{invite['id']}/increment", json={"category": "gents"}
        )

        assert response.status_code == 200
        assert response.json()["gentsInvited"] == 1

    @pytest.mark.parametrize("category", [None, "", "adults"])
    def test_invalid_category(self, client, pair, category):
        function, guest = pair
        invite = client.post(_invites_url(function), json={"guestId": guest["id"]}).json()

        response = client.post(
            f"/api/invites/{invite['id']}/increment", json={"category": category}
        )

        assert response.status_code == 400
        assert response.json()["error"].startswith("Invalid category")

    def test_increment_stops_at_the_headcount_limit(self, client, pair):
        function, guest = pair
        invite = client.post(
            _invites_url(function), json={"guestId": guest["id"], "ladiesInvited": 1000}
        ).json()

        response = client.post(
            f"/api/invites/{invite['id']}/increment", json={"category": "ladies"}
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Count cannot exceed 1000"}

    def test_increment_missing_invite(self, client):
        response = client.post("/api/invites/55/increment", json={"category": "ladies"})

        assert response.status_code == 404


class TestDecrement:
    def test_children_then_gents_then_ladies(self, client, pair):
        function, guest = pair
        invite = client.post(
            _invites_url(function),
            json={
                "guestId": guest["id"],
                "ladiesInvited": 1,
                "gentsInvited": 1,
                "childrenInvited": 1,
            },
        ).json()
        url = f"/api/invites/{invite['id']}/increment"

        seen = []
        for _ in range(3):
            body = client.delete(url).json()
            seen.append(
                (body["ladiesInvited"], body["gentsInvited"], body["childrenInvited"])
            )

        assert seen == [(1, 1, 0), (1, 0, 0), (0, 0, 0)]

    def test_decrement_ignores_what_was_added_last(self, client, pair):
        function, guest = pair
        invite = client.post(
            _invites_url(function), json={"guestId": guest["id"], "childrenInvited": 1}
        ).json()
        client.post(f"/api/invites/{invite['id']}/increment", json={"category": "ladies"})

        body = client.delete(f"/api/invites/{invite['id']}/increment").json()

        assert body["childrenInvited"] == 0
        assert body["ladiesInvited"] == 1

    def test_all_zero_is_rejected_without_change(self, client, pair, db_session):
        function, guest = pair
        invite = client.post(_invites_url(function), json={"guestId": guest["id"]}).json()

        response = client.delete(f"/api/invites/{invite['id']}/increment")

        assert response.status_code == 400
        assert response.json() == {"error": "Count is already at zero"}
        stored = db_session.get(Invite, invite["id"])
        assert (stored.ladies_invited, stored.gents_invited, stored.children_invited) == (
            0,
            0,
            0,
        )

    def test_decrement_missing_invite(self, client):
        assert client.delete("/api/invites/8/increment").status_code == 404

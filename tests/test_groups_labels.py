"""
Groups, labels and the labels attached to groups
"""
from guestlist.models import GroupLabel


class TestGroups:
    def test_create_and_list(self, client, create_guest):
        response = client.post("/api/groups", json={"name": " adnan ", "isPredefined": True})
        assert response.status_code == 201, response.text
        group = response.json()
        assert group["name"] == "adnan"
        assert group["isPredefined"] is True

        create_guest("Guest One", groupId=group["id"])

        groups = client.get("/api/groups").json()
        listed = next(g for g in groups if g["id"] == group["id"])
        assert listed["guestCount"] == 1
        assert listed["labels"] == []

    def test_duplicate_group_name_any_case(self, client):
        client.post("/api/groups", json={"name": "Khozema"})

        response = client.post("/api/groups", json={"name": "KHOZEMA"})

        assert response.status_code == 400
        assert response.json()["error"] == "Group with this name already exists"

    def test_blank_group_name(self, client):
        response = client.post("/api/groups", json={"name": ""})
        assert response.status_code == 400


class TestLabels:
    def test_create_trims_name(self, client):
        response = client.post("/api/labels", json={"name": "  VIP "})

        assert response.status_code == 201
        assert response.json()["name"] == "VIP"

    def test_blank_label_name(self, client):
        response = client.post("/api/labels", json={"name": "  "})

        assert response.status_code == 400
        assert response.json() == {"error": "Label name is required"}

    def test_duplicate_label(self, client):
        client.post("/api/labels", json={"name": "Family"})

        response = client.post("/api/labels", json={"name": "family"})

        assert response.status_code == 400
        assert response.json() == {"error": "Label with this name already exists"}

    def test_delete_label_detaches_groups(self, client, db_session):
        group = client.post("/api/groups", json={"name": "zahra"}).json()
        label = client.post("/api/labels", json={"name": "Out of town"}).json()
        client.post(f"/api/groups/{group['id']}/labels", json={"labelId": label["id"]})

        response = client.delete(f"/api/labels/{label['id']}")

        assert response.status_code == 200
        assert db_session.query(GroupLabel).count() == 0
        assert client.get("/api/labels").json() == []

    def test_delete_missing_label(self, client):
        response = client.delete("/api/labels/77")

        assert response.status_code == 404
        assert response.json() == {"error": "Label not found"}


class TestGroupLabels:
    def _group_and_label(self, client):
        group = client.post("/api/groups", json={"name": "tasneem"}).json()
        label = client.post("/api/labels", json={"name": "Bride side"}).json()
        return group, label

    def test_attach_label(self, client):
        group, label = self._group_and_label(client)

        response = client.post(
            f"/api/groups/{group['id']}/labels", json={"labelId": label["id"]}
        )

        assert response.status_code == 201, response.text
        body = response.json()
        assert body["groupId"] == group["id"]
        assert body["label"]["name"] == "Bride side"

        listed = client.get("/api/groups").json()[0]
        assert [l["name"] for l in listed["labels"]] == ["Bride side"]
        labels = client.get("/api/labels").json()
        assert labels[0]["groupCount"] == 1

    def test_attach_twice(self, client):
        group, label = self._group_and_label(client)
        url = f"/api/groups/{group['id']}/labels"
        client.post(url, json={"labelId": label["id"]})

        response = client.post(url, json={"labelId": label["id"]})

        assert response.status_code == 400
        assert response.json()["error"] == "Label is already added to this group"

    def test_attach_requires_label_id(self, client):
        group, _ = self._group_and_label(client)

        response = client.post(f"/api/groups/{group['id']}/labels", json={})

        assert response.status_code == 400
        assert response.json()["error"] == "Label ID is required"

    def test_attach_to_missing_group_or_label(self, client):
        group, label = self._group_and_label(client)

        assert (
            client.post("/api/groups/999/labels", json={"labelId": label["id"]}).status_code
            == 404
        )
        assert (
            client.post(f"/api/groups/{group['id']}/labels", json={"labelId": 999}).status_code
            == 404
        )

    def test_detach(self, client):
        group, label = self._group_and_label(client)
        url = f"/api/groups/{group['id']}/labels"
        client.post(url, json={"labelId": label["id"]})

        response = client.delete(url, params={"labelId": label["id"]})
        assert response.status_code == 200
        assert response.json() == {"success": True}

        again = client.delete(url, params={"labelId": label["id"]})
        assert again.status_code == 404
        assert again.json()["error"] == "Label not found on this group"

    def test_detach_requires_label_id(self, client):
        group, _ = self._group_and_label(client)

        response = client.delete(f"/api/groups/{group['id']}/labels")

        assert response.status_code == 400
        assert response.json()["error"] == "Label ID is required"

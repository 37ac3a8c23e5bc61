from __future__ import annotations


def test_create_user_returns_200_with_record(client):
    resp = client.post("/api/users", json={"name": "Ada", "email": "ada@example.com"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["name"] == "Ada"
    assert body["email"] == "ada@example.com"
    assert isinstance(body["id"], int)
    assert body["createdAt"] == body["updatedAt"]


def test_create_user_with_invalid_email_mentions_field(client):
    resp = client.post("/api/users", json={"name": "A", "email": "not-an-email"})
    assert resp.status_code == 400
    assert "email" in resp.json()["message"]


def test_create_user_requires_non_empty_name(client):
    resp = client.post("/api/users", json={"name": "", "email": "a@example.com"})
    assert resp.status_code == 400
    assert '"name"' in resp.json()["message"]


def test_duplicate_email_is_conflict(client):
    assert client.post("/api/users", json={"name": "Ada", "email": "ada@example.com"}).status_code == 200
    resp = client.post("/api/users", json={"name": "Imposter", "email": "ada@example.com"})
    assert resp.status_code == 409
    assert "ada@example.com" in resp.json()["message"]


def test_get_user_by_id(client):
    user = client.post("/api/users", json={"name": "Ada", "email": "ada@example.com"}).json()
    resp = client.get(f"/api/users/{user['id']}")
    assert resp.status_code == 200
    assert resp.json() == user


def test_get_missing_user_returns_404(client):
    resp = client.get("/api/users/404")
    assert resp.status_code == 404
    assert resp.json() == {"message": "User not found"}


def test_list_receipts_for_user(client, receipt_payload):
    user = client.post("/api/users", json={"name": "Ada", "email": "ada@example.com"}).json()
    mine = client.post("/api/receipts", json={**receipt_payload, "userId": user["id"]}).json()
    client.post("/api/receipts", json=receipt_payload)

    resp = client.get(f"/api/users/{user['id']}/receipts")
    assert resp.status_code == 200
    assert resp.json() == [mine]

    assert client.get("/api/users/999/receipts").json() == []

from __future__ import annotations

import pytest


@pytest.fixture
def receipt(client, receipt_payload):
    return client.post("/api/receipts", json=receipt_payload).json()


def test_create_receipt_item_returns_200(client, receipt):
    resp = client.post(
        "/api/receipt-items",
        json={"receiptId": receipt["id"], "name": "Coffee", "price": 4.2, "quantity": 1},
    )
    assert resp.status_code == 200
    body = resp.json()
    assert body["receiptId"] == receipt["id"]
    assert body["name"] == "Coffee"
    assert body["price"] == 4.2


def test_create_receipt_item_requires_receipt_id(client, receipt):
    resp = client.post("/api/receipt-items", json={"name": "Coffee", "price": 4.2, "quantity": 1})
    assert resp.status_code == 400
    assert "receiptId" in resp.json()["message"]


def test_create_receipt_item_for_unknown_receipt_is_404(client):
    resp = client.post("/api/receipt-items", json={"receiptId": 31, "name": "Coffee", "price": 4.2, "quantity": 1})
    assert resp.status_code == 404
    assert resp.json() == {"message": "Receipt not found"}


def test_delete_receipt_item_removes_only_that_item(client, receipt):
    url = f"/api/receipts/{receipt['id']}/items"
    created = client.post(
        url,
        json=[
            {"name": "Milk", "price": 1, "quantity": 1},
            {"name": "Bread", "price": 2, "quantity": 1},
        ],
    ).json()

    resp = client.delete(f"/api/receipt-items/{created[0]['id']}")
    assert resp.status_code == 204
    assert resp.content == b""

    remaining = client.get(url).json()
    assert [item["id"] for item in remaining] == [created[1]["id"]]


def test_delete_missing_receipt_item_is_204(client):
    resp = client.delete("/api/receipt-items/999")
    assert resp.status_code == 204


@pytest.mark.parametrize("receipt_id", ["1", True])
def test_create_receipt_item_rejects_non_integer_receipt_id(client, receipt, receipt_id):
    resp = client.post(
        "/api/receipt-items",
        json={"receiptId": receipt_id, "name": "Coffee", "price": 4.2, "quantity": 1},
    )
    assert resp.status_code == 400
    assert '"receiptId"' in resp.json()["message"]

from __future__ import annotations


def test_health(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}
    assert client.head("/api/health").status_code == 200


def test_generate_pdf_is_informational(client):
    resp = client.post("/api/generate-pdf")
    assert resp.status_code == 200
    assert resp.json() == {"message": "PDF generation handled client-side"}


def test_fetch_product_derives_name_from_url(client):
    resp = client.post("/api/fetch-product", json={"url": "https://example.com/store/cool-blue-widget"})
    assert resp.status_code == 200
    assert resp.json() == {"name": "Cool Blue Widget", "price": "0.00"}


def test_fetch_product_rejects_non_url(client):
    resp = client.post("/api/fetch-product", json={"url": "definitely not a url"})
    assert resp.status_code == 400
    assert "url" in resp.json()["message"]


def test_cors_preflight_allows_any_origin(client):
    resp = client.options(
        "/api/receipts",
        headers={
            "Origin": "https://frontend.example",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "Content-Type",
        },
    )
    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] == "*"
    assert "POST" in resp.headers["access-control-allow-methods"]


def test_unknown_route_uses_message_body(client):
    resp = client.get("/api/nope")
    assert resp.status_code == 404
    assert resp.json() == {"message": "Not Found"}

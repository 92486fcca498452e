"""
Tests de la configuración CORS (django-cors-headers).
"""
import pytest


def _preflight(client, origin, method="PATCH"):
    return client.options(
        "/api/v2/products",
        HTTP_ORIGIN=origin,
        HTTP_ACCESS_CONTROL_REQUEST_METHOD=method,
        HTTP_ACCESS_CONTROL_REQUEST_HEADERS="authorization, content-type",
    )


@pytest.mark.parametrize("origin", [
    "http://localhost:3000",
    "http://localhost:5173",
    "https://paw-home-inventory-system.vercel.app",
    "https://preview-123.vercel.app",
])
def test_preflight_allowed_origins(client, origin):
    response = _preflight(client, origin)

    assert response.status_code == 200
    assert response["Access-Control-Allow-Origin"] == origin
    assert response["Access-Control-Allow-Credentials"] == "true"
    assert response["Access-Control-Max-Age"] == "3600"
    assert "PATCH" in response["Access-Control-Allow-Methods"]
    assert "authorization" in response["Access-Control-Allow-Headers"]


def test_preflight_rejects_unknown_origin(client):
    response = _preflight(client, "https://evil.example.com")

    assert "Access-Control-Allow-Origin" not in response


@pytest.mark.django_db
def test_simple_request_exposes_authorization(client):
    response = client.get("/api/v2/products", HTTP_ORIGIN="http://localhost:3000")

    assert response.status_code == 200
    assert response["Access-Control-Allow-Origin"] == "http://localhost:3000"
    assert "Authorization" in response["Access-Control-Expose-Headers"]

import json

import pytest
from django.core.exceptions import ObjectDoesNotExist, PermissionDenied
from django.db import DatabaseError
from django.http import Http404, HttpResponse
from django.test import RequestFactory

from api.middleware.secure_error_middleware import (
    SecureErrorMiddleware, SecureDebugMiddleware, classify_exception,
)


@pytest.mark.parametrize("exc, expected_status", [
    (Http404("x"), 404),
    (ObjectDoesNotExist("x"), 404),
    (PermissionDenied("x"), 403),
    (ValueError("x"), 400),
    (DatabaseError("x"), 500),
    (RuntimeError("x"), 500),
])
def test_classify_exception(exc, expected_status):
    _, status_code = classify_exception(exc)
    assert status_code == expected_status


def test_process_exception_returns_envelope_without_details(settings):
    settings.DEBUG = False
    request = RequestFactory().get("/api/v2/products")
    middleware = SecureErrorMiddleware(lambda r: HttpResponse())

    response = middleware.process_exception(
        request, DatabaseError("connection refused to db-host:3306"))
    body = json.loads(response.content)

    assert response.status_code == 500
    assert body["success"] is False
    assert "db-host" not in response.content.decode()
    assert body["data"]["error_code"] == "DatabaseError"
    assert "debug_info" not in body["data"]


def test_process_exception_includes_debug_info_in_debug(settings):
    settings.DEBUG = True
    request = RequestFactory().get("/api/v2/products")
    middleware = SecureErrorMiddleware(lambda r: HttpResponse())

    response = middleware.process_exception(request, RuntimeError("boom"))
    body = json.loads(response.content)

    assert body["data"]["debug_info"]["exception_message"] == "boom"


def test_secure_debug_middleware_masks_sensitive_content():
    request = RequestFactory().get("/api/v2/products")
    middleware = SecureDebugMiddleware(
        lambda r: HttpResponse("SECRET_KEY = 'abc'", status=500))

    response = middleware(request)
    body = json.loads(response.content)

    assert response["Content-Type"] == "application/json"
    assert "abc" not in response.content.decode()
    assert body["data"]["status_code"] == 500


def test_secure_debug_middleware_keeps_regular_errors():
    request = RequestFactory().get("/api/v2/products")
    original = HttpResponse("Producto no encontrado", status=404)
    middleware = SecureDebugMiddleware(lambda r: original)

    assert middleware(request) is original


@pytest.mark.django_db
def test_unhandled_view_error_becomes_safe_500(monkeypatch, client):
    from api.products import services

    def broken():
        raise DatabaseError("lost connection")

    monkeypatch.setattr(services, "list_active_products", broken)

    response = client.get("/api/v2/products")

    assert response.status_code == 500
    assert response.json()["success"] is False

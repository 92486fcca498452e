import pytest
from rest_framework import status

from api.notifications.models import Notification
from api.notifications.services import NotificationSink


@pytest.fixture
def notifications(product_factory):
    sink = NotificationSink()
    a = sink.generate_or_refresh(product_factory(name="A", stock=1, min_threshold=5))
    b = sink.generate_or_refresh(product_factory(name="B", stock=2, min_threshold=5))
    return a, b


@pytest.mark.django_db
def test_list_notifications_paginated(admin_client, notifications):
    resp = admin_client.get("/api/v2/admin/notifications")

    assert resp.status_code == status.HTTP_200_OK
    data = resp.json()["data"]
    assert data["count"] == 2
    assert {item["product_name"] for item in data["results"]} == {"A", "B"}


@pytest.mark.django_db
def test_list_unread_only(admin_client, notifications):
    a, _ = notifications
    Notification.objects.filter(id=a.id).update(read=True)

    resp = admin_client.get("/api/v2/admin/notifications?unread=true")

    assert resp.json()["data"]["count"] == 1


@pytest.mark.django_db
def test_unread_count_and_mark_read(admin_client, notifications):
    a, _ = notifications

    assert admin_client.get(
        "/api/v2/admin/notifications/unread-count").json()["data"] == {"unread": 2}

    resp = admin_client.patch(f"/api/v2/admin/notifications/{a.id}/read")
    assert resp.status_code == status.HTTP_200_OK
    assert resp.json()["data"]["read"] is True

    assert admin_client.get(
        "/api/v2/admin/notifications/unread-count").json()["data"] == {"unread": 1}


@pytest.mark.django_db
def test_mark_read_unknown_returns_404(admin_client):
    resp = admin_client.patch("/api/v2/admin/notifications/999/read")

    assert resp.status_code == status.HTTP_404_NOT_FOUND
    assert resp.json()["data"]["resource"] == "notification"


@pytest.mark.django_db
def test_notifications_require_admin(api_client, user):
    api_client.force_authenticate(user=user)

    resp = api_client.get("/api/v2/admin/notifications")

    assert resp.status_code == status.HTTP_403_FORBIDDEN

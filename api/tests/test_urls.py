import pytest
from django.urls import reverse, resolve


@pytest.mark.parametrize("name, kwargs, expected", [
    ("products:get_products", {}, "/api/v2/products"),
    ("products:get_low_stock_products", {}, "/api/v2/products/low-stock"),
    ("products:create_product", {}, "/api/v2/admin/products/create"),
    ("products:delete_product", {"code": 7}, "/api/v2/admin/products/7/delete"),
    ("products:increase_stock", {"code": 7}, "/api/v2/admin/products/7/increase-stock"),
    ("products:decrease_stock", {"code": 7}, "/api/v2/admin/products/7/decrease-stock"),
    ("products:update_threshold", {"code": 7}, "/api/v2/admin/products/7/threshold"),
    ("notifications:get_notifications", {}, "/api/v2/admin/notifications"),
    ("notifications:get_unread_count", {}, "/api/v2/admin/notifications/unread-count"),
    ("notifications:mark_notification_read", {"notification_id": 3},
     "/api/v2/admin/notifications/3/read"),
    ("suppliers-list", {}, "/api/v2/suppliers"),
    ("suppliers-detail", {"pk": 2}, "/api/v2/suppliers/2"),
    ("token_obtain_pair", {}, "/api/v2/token"),
    ("token_refresh", {}, "/api/v2/token/refresh"),
])
def test_reverse_routes(name, kwargs, expected):
    assert reverse(name, kwargs=kwargs) == expected


def test_resolve_uses_product_code_as_int():
    match = resolve("/api/v2/admin/products/15/decrease-stock")
    assert match.kwargs == {"code": 15}
    assert match.namespace == "products"
    assert match.url_name == "decrease_stock"
    assert match.func.cls.__name__ == "WrappedAPIView"

import pytest
from decimal import Decimal

from api.products import services
from api.products.exceptions import (
    DuplicateProduct, InsufficientStock, InvalidStockAmount,
    ProductNotFound, SupplierNotFound,
)
from api.products.models import Product
from api.notifications.models import Notification
from api.suppliers.models import Supplier


def _create(supplier, name="Dog Food", quantity=10, min_threshold=5, user=None):
    return services.create_product(
        name=name, supplier_id=supplier.id, quantity=quantity,
        unit_price=Decimal("25.50"), min_threshold=min_threshold, user=user)


@pytest.mark.django_db
def test_create_product_happy_path(supplier, admin_user):
    res = _create(supplier, user=admin_user)

    assert res["success"] is True
    product = res["data"]
    assert product.code is not None
    assert product.active is True
    assert product.stock == 10
    assert product.is_low_stock is False
    assert product.created_by == admin_user
    assert Product.objects.filter(code=product.code).exists()


@pytest.mark.django_db
def test_create_product_with_initial_low_stock_reports_flag(supplier):
    product = _create(supplier, quantity=2, min_threshold=5)["data"]

    assert product.is_low_stock is True
    assert Notification.objects.count() == 0


@pytest.mark.django_db
def test_create_duplicate_active_product_fails(supplier):
    _create(supplier)

    with pytest.raises(DuplicateProduct):
        services.create_product(
            name="Dog Food", supplier_id=supplier.id, quantity=99,
            unit_price=Decimal("3.10"), min_threshold=1,
            description="Otra presentación")

    assert Product.objects.filter(name="Dog Food").count() == 1


@pytest.mark.django_db
def test_same_name_other_supplier_is_allowed(supplier):
    other = Supplier.objects.create(name="Otro Proveedor")
    _create(supplier)

    res = _create(other)

    assert res["data"].supplier == other


@pytest.mark.django_db
def test_create_after_soft_delete_is_allowed(supplier):
    first = _create(supplier)["data"]
    services.delete_product(code=first.code)

    second = _create(supplier)["data"]

    assert second.code != first.code


@pytest.mark.django_db
def test_create_with_unknown_supplier_fails(db):
    with pytest.raises(SupplierNotFound) as excinfo:
        services.create_product(
            name="Dog Food", supplier_id=9999, quantity=1,
            unit_price=Decimal("1.00"), min_threshold=0)

    assert excinfo.value.supplier_id == 9999
    assert Product.objects.count() == 0


@pytest.mark.django_db
def test_duplicate_is_checked_before_supplier(monkeypatch):
    monkeypatch.setattr(
        services, "find_active_by_name_and_supplier", lambda name, supplier_id: object())
    monkeypatch.setattr(services, "get_supplier_by_id", lambda supplier_id: None)

    with pytest.raises(DuplicateProduct):
        services.create_product(
            name="Dog Food", supplier_id=1, quantity=1,
            unit_price=Decimal("1.00"), min_threshold=0)


@pytest.mark.django_db
def test_create_rejects_negative_quantity(supplier):
    with pytest.raises(InvalidStockAmount):
        _create(supplier, quantity=-1)


@pytest.mark.django_db
def test_list_active_products_excludes_deleted_and_orders_by_code(product_factory):
    a = product_factory(name="A")
    b = product_factory(name="B")
    c = product_factory(name="C")
    services.delete_product(code=b.code)

    res = services.list_active_products()

    assert [p.code for p in res["data"]] == [a.code, c.code]


@pytest.mark.django_db
def test_list_low_stock_products(product_factory):
    low = product_factory(name="Low", stock=5, min_threshold=5)
    product_factory(name="Ok", stock=6, min_threshold=5)
    product_factory(name="Gone", stock=0, min_threshold=5, active=False)

    res = services.list_low_stock_products()

    assert [p.code for p in res["data"]] == [low.code]


@pytest.mark.django_db
def test_delete_product_soft_deletes(product_factory):
    p = product_factory()

    services.delete_product(code=p.code)

    p.refresh_from_db()
    assert p.active is False
    assert Product.objects.filter(code=p.code).exists()


@pytest.mark.django_db
def test_delete_unknown_or_already_deleted_fails(product_factory):
    p = product_factory()
    services.delete_product(code=p.code)

    with pytest.raises(ProductNotFound):
        services.delete_product(code=p.code)
    with pytest.raises(ProductNotFound):
        services.delete_product(code=424242)


@pytest.mark.django_db
def test_increase_stock_clears_notifications_when_recovered(product_factory, recording_notifier):
    p = product_factory(stock=4, min_threshold=5)

    res = services.increase_stock(code=p.code, quantity=2, notifier=recording_notifier)

    assert res["data"].stock == 6
    assert recording_notifier.cleared == [p.code]


@pytest.mark.django_db
def test_increase_stock_still_low_does_not_clear(product_factory, recording_notifier):
    p = product_factory(stock=1, min_threshold=5)

    services.increase_stock(code=p.code, quantity=2, notifier=recording_notifier)

    assert recording_notifier.cleared == []
    p.refresh_from_db()
    assert p.stock == 3


@pytest.mark.django_db
def test_increase_by_zero_keeps_stock(product_factory, recording_notifier):
    p = product_factory(stock=10, min_threshold=5)

    res = services.increase_stock(code=p.code, quantity=0, notifier=recording_notifier)

    assert res["data"].stock == 10


@pytest.mark.django_db
def test_decrease_stock_always_calls_notifier(product_factory, recording_notifier):
    p = product_factory(stock=20, min_threshold=5)

    services.decrease_stock(code=p.code, quantity=1, notifier=recording_notifier)

    assert recording_notifier.generated == [(p.code, 19)]


@pytest.mark.django_db
def test_decrease_to_exactly_zero_is_allowed(product_factory, recording_notifier):
    p = product_factory(stock=3, min_threshold=1)

    res = services.decrease_stock(code=p.code, quantity=3, notifier=recording_notifier)

    assert res["data"].stock == 0
    assert res["data"].is_low_stock is True


@pytest.mark.django_db
def test_decrease_insufficient_stock_persists_nothing(product_factory, recording_notifier):
    p = product_factory(stock=10, min_threshold=5)

    with pytest.raises(InsufficientStock) as excinfo:
        services.decrease_stock(code=p.code, quantity=100, notifier=recording_notifier)

    assert excinfo.value.current_stock == 10
    assert "Stock actual: 10" in excinfo.value.message
    assert recording_notifier.generated == []
    p.refresh_from_db()
    assert p.stock == 10


@pytest.mark.django_db
@pytest.mark.parametrize("operation", [services.increase_stock, services.decrease_stock])
def test_negative_amounts_are_rejected(product_factory, recording_notifier, operation):
    p = product_factory(stock=10)

    with pytest.raises(InvalidStockAmount):
        operation(code=p.code, quantity=-3, notifier=recording_notifier)

    p.refresh_from_db()
    assert p.stock == 10


@pytest.mark.django_db
@pytest.mark.parametrize("operation", [services.increase_stock, services.decrease_stock])
def test_stock_operations_on_unknown_product(db, recording_notifier, operation):
    with pytest.raises(ProductNotFound):
        operation(code=31337, quantity=1, notifier=recording_notifier)


@pytest.mark.django_db
def test_update_threshold_does_not_touch_notifications(product_factory):
    p = product_factory(stock=4, min_threshold=5)
    services.decrease_stock(code=p.code, quantity=1)
    assert Notification.objects.filter(product=p).count() == 1

    res = services.update_threshold(code=p.code, new_threshold=1)

    assert res["data"].min_threshold == 1
    assert res["data"].is_low_stock is False
    assert Notification.objects.filter(product=p).count() == 1


@pytest.mark.django_db
def test_update_threshold_can_make_product_low_stock(product_factory):
    p = product_factory(stock=10, min_threshold=5)

    res = services.update_threshold(code=p.code, new_threshold=10)

    assert res["data"].is_low_stock is True
    assert Notification.objects.count() == 0


@pytest.mark.django_db
def test_update_threshold_unknown_product(db):
    with pytest.raises(ProductNotFound):
        services.update_threshold(code=5555, new_threshold=3)


@pytest.mark.django_db
def test_low_stock_lifecycle_with_default_notifier(supplier):
    product = _create(supplier, name="Dog Food", quantity=10, min_threshold=5)["data"]

    after_decrease = services.decrease_stock(code=product.code, quantity=6)["data"]
    assert after_decrease.stock == 4
    assert after_decrease.is_low_stock is True
    notification = Notification.objects.get(product=product)
    assert notification.stock_at_notification == 4

    after_increase = services.increase_stock(code=product.code, quantity=2)["data"]
    assert after_increase.stock == 6
    assert after_increase.is_low_stock is False
    assert not Notification.objects.filter(product=product).exists()


@pytest.mark.django_db
def test_decrease_more_than_available_leaves_product_intact(supplier):
    product = _create(supplier, quantity=10, min_threshold=5)["data"]

    with pytest.raises(InsufficientStock):
        services.decrease_stock(code=product.code, quantity=100)

    listed = {p.code: p for p in services.list_active_products()["data"]}
    assert listed[product.code].stock == 10
    assert Notification.objects.count() == 0


@pytest.mark.django_db
@pytest.mark.parametrize("operation, kwargs", [
    (services.increase_stock, {"quantity": 1}),
    (services.decrease_stock, {"quantity": 1}),
    (services.update_threshold, {"new_threshold": 2}),
])
def test_deleted_product_cannot_be_adjusted(supplier, operation, kwargs):
    product = _create(supplier)["data"]
    services.delete_product(code=product.code)

    with pytest.raises(ProductNotFound):
        operation(code=product.code, **kwargs)

    product.refresh_from_db()
    assert product.stock == 10
    assert product.min_threshold == 5

    assert product.code not in [p.code for p in services.list_active_products()["data"]]

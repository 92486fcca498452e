import pytest
from decimal import Decimal
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient


@pytest.fixture
def user(db):
    """Create and return a default (non admin) test user."""
    User = get_user_model()
    return User.objects.create_user(username="testuser", email="test@example.com", password="pwd")


@pytest.fixture
def admin_user(db):
    """Superuser, required by the admin endpoints."""
    User = get_user_model()
    return User.objects.create_superuser(username="admin", email="admin@example.com", password="adminpwd")


@pytest.fixture
def supplier(db):
    from api.suppliers.models import Supplier
    return Supplier.objects.create(name="Acme Pet Supplies", contact_email="ventas@acme.test")


@pytest.fixture
def product_factory(db, supplier):
    """Product factory for tests.

    Returns a callable that creates an active Product for the default
    supplier unless another one is passed.
    """
    from api.products.models import Product

    def _create(name="Dog Food", stock=10, min_threshold=5, price="10.00", supplier=supplier, active=True):
        return Product.objects.create(
            name=name, stock=stock, min_threshold=min_threshold,
            unit_price=Decimal(price), supplier=supplier, active=active)

    return _create


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def admin_client(api_client, admin_user):
    api_client.force_authenticate(user=admin_user)
    return api_client


class RecordingNotifier:
    """Notifier that only records the calls it receives."""

    def __init__(self):
        self.generated = []
        self.cleared = []

    def generate_or_refresh(self, product):
        self.generated.append((product.code, product.stock))

    def clear_for_product(self, code):
        self.cleared.append(code)


@pytest.fixture
def recording_notifier():
    return RecordingNotifier()

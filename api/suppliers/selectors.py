from typing import Optional

from django.db.models import Count, Q

from .models import Supplier


def list_suppliers():
    """Proveedores con la cantidad de productos activos ya calculada."""
    return Supplier.objects.annotate(
        active_products=Count('products', filter=Q(products__active=True))
    ).order_by("name", "id")


def get_supplier_by_id(supplier_id: int) -> Optional[Supplier]:
    """Devuelve el proveedor con ese id o None si no existe."""
    return Supplier.objects.filter(id=supplier_id).first()

from typing import Optional

from django.db.models import F

from .models import Product


def list_active():
    return Product.active_objects.select_related("supplier").order_by("code")


def list_low_stock():
    """Productos activos cuyo stock es menor o igual al umbral mínimo."""
    return list_active().filter(stock__lte=F("min_threshold"))


def find_active_by_name_and_supplier(name: str, supplier_id: int) -> Optional[Product]:
    return Product.active_objects.filter(
        name=name, supplier_id=supplier_id).first()


def find_active_by_code(code: int, for_update: bool = False) -> Optional[Product]:
    """
    Busca un producto activo por su código.

    Args:
        code (int): Código del producto.
        for_update (bool): Si es True bloquea la fila (SELECT ... FOR UPDATE);
            debe usarse dentro de una transacción.

    Returns:
        Product | None
    """
    if for_update:
        qs = Product.active_objects.select_for_update()
    else:
        qs = Product.active_objects.select_related("supplier")
    return qs.filter(code=code).first()

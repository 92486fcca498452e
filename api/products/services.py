"""
Servicio de inventario.

Concentra el ciclo de vida de los productos (alta, baja lógica, listados),
los ajustes de stock con la invariante de stock no negativo y la emisión
o retiro de notificaciones de stock bajo como efecto de esos ajustes.

Todas las operaciones devuelven la respuesta estándar del proyecto:
    {"success": True, "message": str, "data": Product | list[Product]}
y señalizan los errores con las excepciones de `api.products.exceptions`.
"""
import logging
from decimal import Decimal
from typing import Any, Dict, Optional, Protocol

from django.db import transaction

from .exceptions import (
    DuplicateProduct, InsufficientStock, InvalidStockAmount,
    ProductNotFound, SupplierNotFound,
)
from .models import Product
from .selectors import (
    find_active_by_code, find_active_by_name_and_supplier,
    list_active, list_low_stock,
)
from api.suppliers.selectors import get_supplier_by_id

logger = logging.getLogger(__name__)


class LowStockNotifier(Protocol):
    """Colaborador que mantiene las notificaciones de stock bajo."""

    def generate_or_refresh(self, product: Product) -> Any:
        ...

    def clear_for_product(self, code: int) -> Any:
        ...


def get_default_notifier() -> LowStockNotifier:
    from api.notifications.services import NotificationSink
    return NotificationSink()


def _validate_amount(amount) -> None:
    if not isinstance(amount, int) or isinstance(amount, bool) or amount < 0:
        raise InvalidStockAmount(amount)


def _get_product_or_raise(code: int) -> Product:
    product = find_active_by_code(code, for_update=True)
    if product is None:
        logger.warning(f"Producto activo no encontrado: {code}")
        raise ProductNotFound(code)
    return product


@transaction.atomic
def create_product(
        *, name: str, supplier_id: int, quantity: int, unit_price: Decimal,
        min_threshold: int, image: Optional[str] = None,
        description: Optional[str] = None, user=None) -> Dict[str, Any]:
    """
    Da de alta un producto activo.

    El chequeo de duplicado (mismo nombre y proveedor entre los productos
    activos) se hace antes de resolver el proveedor.

    Args:
        name (str): Nombre del producto.
        supplier_id (int): Id del proveedor.
        quantity (int): Stock inicial (>= 0).
        unit_price (Decimal): Precio unitario.
        min_threshold (int): Umbral mínimo de stock (>= 0).
        image (str, optional): URL o ruta de la imagen.
        description (str, optional): Descripción.
        user (User, optional): Usuario que crea el registro (auditoría).

    Returns:
        dict: {"success", "message", "data": Product}

    Raises:
        DuplicateProduct: Si ya existe un producto activo con ese nombre y proveedor.
        SupplierNotFound: Si el proveedor no existe.
        InvalidStockAmount: Si el stock inicial o el umbral son negativos.
    """
    _validate_amount(quantity)
    _validate_amount(min_threshold)

    if find_active_by_name_and_supplier(name, supplier_id) is not None:
        logger.warning(
            f"Producto duplicado: '{name}' ya existe para el proveedor {supplier_id}")
        raise DuplicateProduct(name, supplier_id)

    supplier = get_supplier_by_id(supplier_id)
    if supplier is None:
        raise SupplierNotFound(supplier_id)

    product = Product.objects.create(
        name=name,
        supplier=supplier,
        stock=quantity,
        unit_price=unit_price,
        min_threshold=min_threshold,
        image=image,
        description=description,
        active=True,
        created_by=user,
        updated_by=user,
    )

    logger.info(
        f"Producto creado: {product.code} - {product.name} (stock {product.stock})")
    return {
        "success": True,
        "message": "Producto creado exitosamente.",
        "data": product
    }


def list_active_products() -> Dict[str, Any]:
    products = list(list_active())
    return {
        "success": True,
        "message": f"{len(products)} productos activos.",
        "data": products
    }


def list_low_stock_products() -> Dict[str, Any]:
    products = list(list_low_stock())
    return {
        "success": True,
        "message": f"{len(products)} productos con stock bajo.",
        "data": products
    }


@transaction.atomic
def delete_product(*, code: int, user=None) -> Dict[str, Any]:
    """
    Baja lógica de un producto: lo marca como inactivo.

    La baja no se puede revertir por la API; el producto deja de aparecer
    en todas las lecturas.

    Raises:
        ProductNotFound: Si no hay un producto activo con ese código.
    """
    product = _get_product_or_raise(code)
    product.active = False
    product.updated_by = user
    product.save(update_fields=["active", "updated_by", "updated_at"])

    logger.info(f"Producto dado de baja: {code}")
    return {
        "success": True,
        "message": "Producto eliminado exitosamente.",
        "data": product
    }


@transaction.atomic
def increase_stock(
        *, code: int, quantity: int, user=None,
        notifier: Optional[LowStockNotifier] = None) -> Dict[str, Any]:
    """
    Suma unidades al stock de un producto.

    Si después del ingreso el producto ya no está en stock bajo, se
    retiran sus notificaciones.

    Raises:
        InvalidStockAmount: Si la cantidad es negativa.
        ProductNotFound: Si no hay un producto activo con ese código.
    """
    _validate_amount(quantity)
    notifier = notifier or get_default_notifier()

    product = _get_product_or_raise(code)
    product.stock += quantity
    product.updated_by = user
    product.save(update_fields=["stock", "updated_by", "updated_at"])

    logger.info(
        f"Stock aumentado: producto {code} +{quantity} -> {product.stock}")

    if not product.is_low_stock:
        notifier.clear_for_product(code)

    return {
        "success": True,
        "message": "Stock aumentado exitosamente.",
        "data": product
    }


@transaction.atomic
def decrease_stock(
        *, code: int, quantity: int, user=None,
        notifier: Optional[LowStockNotifier] = None) -> Dict[str, Any]:
    """
    Descuenta unidades del stock de un producto.

    Si el resultado fuera negativo no se persiste nada. Tras guardar se
    delega siempre en el notificador, que decide si corresponde generar
    o refrescar la notificación de stock bajo.

    Raises:
        InvalidStockAmount: Si la cantidad es negativa.
        ProductNotFound: Si no hay un producto activo con ese código.
        InsufficientStock: Si el stock quedaría negativo.
    """
    _validate_amount(quantity)
    notifier = notifier or get_default_notifier()

    product = _get_product_or_raise(code)
    new_stock = product.stock - quantity
    if new_stock < 0:
        logger.warning(
            f"Stock insuficiente: producto {code} tiene {product.stock}, se pidieron {quantity}")
        raise InsufficientStock(product.stock)

    product.stock = new_stock
    product.updated_by = user
    product.save(update_fields=["stock", "updated_by", "updated_at"])

    logger.info(
        f"Stock disminuido: producto {code} -{quantity} -> {product.stock}")

    notifier.generate_or_refresh(product)

    if product.is_low_stock:
        logger.warning(
            f"Stock bajo: producto {code} ({product.name}) stock {product.stock} "
            f"umbral {product.min_threshold}")

    return {
        "success": True,
        "message": "Stock disminuido exitosamente.",
        "data": product
    }


@transaction.atomic
def update_threshold(*, code: int, new_threshold: int, user=None) -> Dict[str, Any]:
    """
    Reemplaza el umbral mínimo de un producto.

    No genera ni retira notificaciones; el indicador de stock bajo se
    recalcula en la próxima lectura.

    Raises:
        InvalidStockAmount: Si el umbral es negativo.
        ProductNotFound: Si no hay un producto activo con ese código.
    """
    _validate_amount(new_threshold)

    product = _get_product_or_raise(code)
    product.min_threshold = new_threshold
    product.updated_by = user
    product.save(update_fields=["min_threshold", "updated_by", "updated_at"])

    logger.info(f"Umbral actualizado: producto {code} -> {new_threshold}")
    return {
        "success": True,
        "message": "Umbral mínimo actualizado exitosamente.",
        "data": product
    }

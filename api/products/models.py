from decimal import Decimal

from django.conf import settings
from django.db import models

from api.constants import InventoryDefaults
from api.suppliers.models import Supplier


def is_low_stock(stock: int, threshold: int) -> bool:
    """Un producto está en stock bajo cuando su stock no supera el umbral mínimo."""
    return stock <= threshold


class ActiveProductManager(models.Manager):
    """Manager que solo devuelve productos no dados de baja."""

    def get_queryset(self):
        return super().get_queryset().filter(active=True)


class Product(models.Model):
    """
    Modelo que representa un producto en el inventario de la tienda.

    Atributos:
        code (AutoField): Código numérico asignado al crear el producto.
        name (CharField): Nombre del producto.
        stock (PositiveIntegerField): Unidades disponibles, nunca negativo.
        unit_price (DecimalField): Precio unitario del producto.
        supplier (ForeignKey): Proveedor del producto.
        min_threshold (PositiveIntegerField): Umbral mínimo; en o por debajo hay stock bajo.
        image (CharField): URL o ruta de la imagen (opcional).
        description (TextField): Descripción del producto (opcional).
        active (BooleanField): False cuando el producto fue dado de baja (baja lógica).
        created_at (DateTimeField): Campo de auditoría almacena la fecha y hora que fue creado el registro.
        updated_at (DateTimeField): Campo de auditoría almacena la fecha y hora que fue modificado el registro.
        created_by (ForeignKey): Referencia al usuario que creó el registro.
        updated_by (ForeignKey): Referencia al usuario que actualizo el registro.
    """
    code = models.AutoField(primary_key=True)
    name = models.CharField(max_length=InventoryDefaults.MAX_NAME_LENGTH)
    stock = models.PositiveIntegerField(default=0)
    unit_price = models.DecimalField(
        max_digits=InventoryDefaults.PRICE_MAX_DIGITS,
        decimal_places=InventoryDefaults.PRICE_DECIMAL_PLACES,
        default=Decimal('0.00'))
    supplier = models.ForeignKey(
        Supplier,
        on_delete=models.PROTECT,
        related_name='products',
        help_text='Proveedor del producto'
    )
    min_threshold = models.PositiveIntegerField(
        default=InventoryDefaults.DEFAULT_MIN_THRESHOLD)
    image = models.CharField(
        max_length=InventoryDefaults.MAX_IMAGE_LENGTH, blank=True, null=True)
    description = models.TextField(blank=True, null=True)
    active = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)
    created_by = models.ForeignKey(settings.AUTH_USER_MODEL,
                                   on_delete=models.SET_NULL, null=True, blank=True,
                                   related_name="products_created")
    updated_by = models.ForeignKey(settings.AUTH_USER_MODEL,
                                   on_delete=models.SET_NULL, null=True, blank=True,
                                   related_name="products_updated")

    objects = models.Manager()
    active_objects = ActiveProductManager()

    class Meta:
        constraints = [
            models.UniqueConstraint(
                fields=['name', 'supplier'],
                condition=models.Q(active=True),
                name='uq_active_product_name_supplier'
            ),
            models.CheckConstraint(
                condition=models.Q(stock__gte=0),
                name='ck_product_stock_non_negative'
            ),
        ]
        indexes = [
            models.Index(fields=['name'], name='idx_product_name'),
            models.Index(fields=['active'], name='idx_product_active'),
        ]
        ordering = ['code']
        verbose_name = 'Producto'
        verbose_name_plural = 'Productos'

    def __str__(self):
        return f"{self.code} - {self.name}"

    @property
    def is_low_stock(self) -> bool:
        return is_low_stock(self.stock, self.min_threshold)

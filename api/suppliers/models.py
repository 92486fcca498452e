from django.db import models
from django.conf import settings


class Supplier(models.Model):
    """
    Modelo que representa un proveedor de productos de la tienda.

    Atributos:
        name (CharField): Nombre visible del proveedor.
        contact_email (EmailField): Email de contacto (opcional).
        phone (CharField): Teléfono de contacto (opcional).
        created_at (DateTimeField): Campo de auditoría almacena la fecha y hora que fue creado el registro.
        updated_at (DateTimeField): Campo de auditoría almacena la fecha y hora que fue modificado el registro.
        created_by (ForeignKey): Referencia al usuario que creó el registro.
        updated_by (ForeignKey): Referencia al usuario que actualizo el registro.
    """
    name = models.CharField(max_length=120)
    contact_email = models.EmailField(blank=True, default="")
    phone = models.CharField(max_length=40, blank=True, default="")

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)
    created_by = models.ForeignKey(settings.AUTH_USER_MODEL,
                                   on_delete=models.SET_NULL, null=True, blank=True,
                                   related_name="suppliers_created")
    updated_by = models.ForeignKey(settings.AUTH_USER_MODEL,
                                   on_delete=models.SET_NULL, null=True, blank=True,
                                   related_name="suppliers_updated")

    class Meta:
        indexes = [
            models.Index(fields=['name'], name='idx_supplier_name'),
        ]
        ordering = ['name']
        verbose_name = 'Proveedor'
        verbose_name_plural = 'Proveedores'

    def __str__(self):
        return self.name

from django.db import models

from api.constants import NotificationSettings


class Notification(models.Model):
    """
    Notificación de stock bajo asociada a un producto.

    Por producto se mantiene a lo sumo una notificación sin leer: cuando el
    stock vuelve a bajar se refresca la existente en lugar de crear otra.

    Atributos:
        product (ForeignKey): Producto al que refiere la notificación.
        message (CharField): Texto de la alerta.
        stock_at_notification (PositiveIntegerField): Stock al momento de la alerta.
        threshold_at_notification (PositiveIntegerField): Umbral mínimo al momento de la alerta.
        read (BooleanField): Marcada como leída por un administrador.
        created_at (DateTimeField): Fecha y hora de creación.
        updated_at (DateTimeField): Fecha y hora del último refresco.
    """
    product = models.ForeignKey(
        'products.Product',
        on_delete=models.CASCADE,
        related_name='notifications',
        help_text='Producto con stock bajo'
    )
    message = models.CharField(max_length=NotificationSettings.MAX_MESSAGE_LENGTH)
    stock_at_notification = models.PositiveIntegerField()
    threshold_at_notification = models.PositiveIntegerField()
    read = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        indexes = [
            models.Index(fields=['product', 'read'], name='idx_notif_product_read'),
            models.Index(fields=['-created_at'], name='idx_notif_created'),
        ]
        ordering = ['-updated_at', '-id']
        verbose_name = 'Notificación'
        verbose_name_plural = 'Notificaciones'

    def __str__(self):
        return f"Notificación {self.id} - producto {self.product_id}"

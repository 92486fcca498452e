"""
Notificaciones de stock bajo.

`NotificationSink` es la implementación por defecto del notificador que
usa el servicio de inventario: persiste las alertas y, si hay
destinatarios configurados, encola un email por cada alerta nueva.
"""
import logging
from typing import List, Optional

from django.conf import settings
from django.core.mail import send_mail
from django.db import transaction

from api.constants import NotificationSettings
from .models import Notification

logger = logging.getLogger(__name__)


def build_low_stock_message(product) -> str:
    return (
        f"Stock bajo para '{product.name}' (código {product.code}): "
        f"quedan {product.stock} unidades, umbral mínimo {product.min_threshold}."
    )


def get_alert_recipients() -> List[str]:
    return [email for email in getattr(settings, 'LOW_STOCK_ALERT_EMAILS', []) if email]


class NotificationSink:
    """
    Genera, refresca y retira notificaciones de stock bajo.
    """

    @transaction.atomic
    def generate_or_refresh(self, product) -> Optional[Notification]:
        """
        Crea o actualiza la notificación sin leer del producto.

        Si el producto no está en stock bajo no hace nada y devuelve None.
        Si ya existe una notificación sin leer se actualizan sus datos; si
        no, se crea una nueva y se encola la alerta por email.
        """
        if not product.is_low_stock:
            return None

        message = build_low_stock_message(product)
        notification = (
            Notification.objects
            .select_for_update()
            .filter(product_id=product.code, read=False)
            .order_by('-id')
            .first()
        )

        if notification is not None:
            notification.message = message
            notification.stock_at_notification = product.stock
            notification.threshold_at_notification = product.min_threshold
            notification.save(update_fields=[
                'message', 'stock_at_notification',
                'threshold_at_notification', 'updated_at'])
            logger.info(
                f"Notificación {notification.id} refrescada para producto {product.code}")
            return notification

        notification = Notification.objects.create(
            product_id=product.code,
            message=message,
            stock_at_notification=product.stock,
            threshold_at_notification=product.min_threshold,
        )
        logger.info(
            f"Notificación {notification.id} creada para producto {product.code}")

        if get_alert_recipients():
            from .tasks import send_low_stock_alert_task
            transaction.on_commit(
                lambda: send_low_stock_alert_task.delay(notification.id))

        return notification

    def clear_for_product(self, code: int) -> int:
        """Elimina las notificaciones del producto. Devuelve cuántas se borraron."""
        deleted, _ = Notification.objects.filter(product_id=code).delete()
        if deleted:
            logger.info(
                f"{deleted} notificaciones eliminadas para producto {code}")
        return deleted


def mark_as_read(notification_id: int) -> Optional[Notification]:
    notification = Notification.objects.filter(id=notification_id).first()
    if notification is None:
        return None
    if not notification.read:
        notification.read = True
        notification.save(update_fields=['read', 'updated_at'])
    return notification


def send_low_stock_email(notification: Notification) -> int:
    """
    Envía el email de alerta de stock bajo a los destinatarios configurados.

    Returns:
        int: Cantidad de emails enviados (0 si no hay destinatarios).
    """
    recipients = get_alert_recipients()
    if not recipients:
        logger.info(
            f"Sin destinatarios para la alerta de la notificación {notification.id}")
        return 0

    product = notification.product
    subject = f"{NotificationSettings.EMAIL_SUBJECT_PREFIX}Stock bajo: {product.name}"
    return send_mail(
        subject=subject[:NotificationSettings.MAX_SUBJECT_LENGTH],
        message=notification.message,
        from_email=settings.DEFAULT_FROM_EMAIL,
        recipient_list=recipients,
        fail_silently=False,
    )

import logging

from celery import shared_task

from api.constants import NotificationSettings
from .models import Notification
from .services import send_low_stock_email

logger = logging.getLogger(__name__)


@shared_task(bind=True, max_retries=NotificationSettings.EMAIL_MAX_RETRIES)
def send_low_stock_alert_task(self, notification_id):
    try:
        notification = Notification.objects.select_related(
            'product').get(id=notification_id)
    except Notification.DoesNotExist:
        # El producto se repuso y la notificación fue retirada antes del envío
        logger.info(
            f"Notificación {notification_id} ya no existe, no se envía alerta")
        return 0

    try:
        return send_low_stock_email(notification)
    except Exception as exc:
        logger.error(
            f"Error enviando alerta de stock bajo. "
            f"Notificación: {notification_id}, Error: {exc}"
        )
        raise self.retry(
            exc=exc, countdown=NotificationSettings.EMAIL_RETRY_COUNTDOWN)

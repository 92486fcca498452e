"""
Constantes del sistema de inventario.

Este módulo centraliza las constantes utilizadas en el sistema,
proporcionando un punto único de verdad para valores que se utilizan
en múltiples módulos.
"""


class InventoryDefaults:
    """
    Valores por defecto y límites de los productos del inventario.
    """

    MAX_NAME_LENGTH = 120
    MAX_IMAGE_LENGTH = 500
    PRICE_MAX_DIGITS = 12
    PRICE_DECIMAL_PLACES = 2
    DEFAULT_MIN_THRESHOLD = 5


class NotificationSettings:
    """
    Configuraciones relacionadas con las notificaciones de stock bajo.
    """

    MAX_MESSAGE_LENGTH = 255
    MAX_SUBJECT_LENGTH = 180

    # Prefijo para el asunto de los emails de alerta
    EMAIL_SUBJECT_PREFIX = "[Paw Home] "

    # Reintentos de la tarea de Celery
    EMAIL_MAX_RETRIES = 3
    EMAIL_RETRY_COUNTDOWN = 60

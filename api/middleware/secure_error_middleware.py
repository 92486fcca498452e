"""Middleware de manejo seguro de errores.

Registra las excepciones no manejadas y responde al cliente con el
sobre estándar de la API, sin exponer detalles internos.
"""

import json
import logging
from datetime import datetime

from django.conf import settings
from django.core.exceptions import ObjectDoesNotExist, PermissionDenied
from django.db import DatabaseError
from django.http import Http404, JsonResponse
from rest_framework import status


logger = logging.getLogger(__name__)

SENSITIVE_PATTERNS = (
    'SECRET_KEY',
    'PASSWORD',
    'EMAIL_HOST_PASSWORD',
    'REDIS_PASSWORD',
    'MYSQL_PASSWORD',
    'DATABASE_URL',
    'django.core.handlers',
    'wsgi.errors',
    'Traceback (most recent call last)',
)


def classify_exception(exception):
    """
    Traduce una excepción no manejada en un mensaje seguro y un código HTTP.

    Returns:
        tuple: (mensaje, status_code)
    """
    if isinstance(exception, (Http404, ObjectDoesNotExist)):
        return "El recurso solicitado no fue encontrado.", status.HTTP_404_NOT_FOUND
    if isinstance(exception, PermissionDenied):
        return "No tiene permisos para realizar esta acción.", status.HTTP_403_FORBIDDEN
    if isinstance(exception, (ValueError, TypeError)):
        return "Error de validación en los datos proporcionados.", status.HTTP_400_BAD_REQUEST
    if isinstance(exception, DatabaseError):
        return "Error de persistencia. Intente nuevamente más tarde.", status.HTTP_500_INTERNAL_SERVER_ERROR
    return "Error interno del servidor. Contacte al administrador.", status.HTTP_500_INTERNAL_SERVER_ERROR


class SecureErrorMiddleware:
    """Captura excepciones no manejadas y retorna respuestas seguras."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        return self.get_response(request)

    def process_exception(self, request, exception):
        user = getattr(request, 'user', None)
        logger.error(
            f"Error no manejado en {request.method} {request.path}: {exception}",
            exc_info=True,
            extra={
                'request_path': request.path,
                'request_method': request.method,
                'user_id': getattr(user, 'id', None),
                'exception_type': type(exception).__name__,
            }
        )

        error_msg, status_code = classify_exception(exception)

        data = {
            "error_code": type(exception).__name__,
            "timestamp": datetime.now().isoformat(),
            "path": request.path,
            "method": request.method,
        }
        if settings.DEBUG:
            data["debug_info"] = {"exception_message": str(exception)}

        return JsonResponse(
            {"success": False, "message": error_msg, "data": data},
            status=status_code,
        )


class SecureDebugMiddleware:
    """Filtra respuestas de error para evitar exponer información sensible."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        response = self.get_response(request)

        if getattr(response, 'status_code', 200) < 400 or getattr(response, 'streaming', False):
            return response

        try:
            content_str = response.content.decode('utf-8')
        except UnicodeDecodeError:
            return response

        if not any(pattern in content_str for pattern in SENSITIVE_PATTERNS):
            return response

        logger.warning(
            f"Respuesta con información sensible interceptada en {request.path}",
            extra={'status_code': response.status_code,
                   'content_length': len(content_str)}
        )

        safe_content = {
            "success": False,
            "message": "Error interno del servidor. Contacte al administrador.",
            "data": {
                "error_code": "INTERNAL_SERVER_ERROR",
                "status_code": response.status_code,
                "path": request.path,
                "method": request.method,
            }
        }
        response.content = json.dumps(safe_content).encode('utf-8')
        response['Content-Type'] = 'application/json'
        return response

"""Módulo de utilidades para manejo de respuestas de error de permisos y recursos.
"""
from typing import Dict, Any, Optional
import logging

logger = logging.getLogger(__name__)


class PermissionDenied:
    """
    Clase para generar respuestas estandarizadas de recursos inexistentes.
    """

    @staticmethod
    def resource_not_found(resource_type: str, resource_id: Optional[int]) -> Dict[str, Any]:
        resource_messages = {
            'notification': 'La notificación especificada no existe.',
        }

        message = resource_messages.get(
            resource_type, f"El recurso '{resource_type}' no existe.")

        logger.info(f"Resource not found - {resource_type} {resource_id}")

        return {
            "success": False,
            "message": message,
            "data": {
                "error_type": "resource_not_found",
                "resource": resource_type,
                "resource_id": resource_id
            }
        }

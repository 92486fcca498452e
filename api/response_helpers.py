"""
Funciones helper para respuestas estándar de la API.

Este módulo centraliza la creación de respuestas para mantener
consistencia en toda la API.

Estructura estándar:
{
    "success": true/false,
    "message": "Mensaje descriptivo",
    "data": {...} // Datos específicos (opcional)
}
"""

from django.http import JsonResponse
from rest_framework import status


def success_response(message: str, data=None, status_code=status.HTTP_200_OK):
    """
    Crea una respuesta de éxito estándar.

    Args:
        message (str): Mensaje descriptivo del éxito
        data: Datos a incluir en la respuesta (opcional)
        status_code (int): Código de estado HTTP (default: 200)

    Returns:
        JsonResponse: Respuesta formateada con estructura estándar

    Example:
        return success_response("Producto creado exitosamente", {"code": 1, "name": "Producto"})
    """
    response_data = {
        "success": True,
        "message": message,
        "data": data
    }
    return JsonResponse(response_data, status=status_code)


def error_response(message: str, data=None, status_code=status.HTTP_400_BAD_REQUEST):
    """
    Crea una respuesta de error estándar.

    Args:
        message (str): Mensaje descriptivo del error
        data: Datos adicionales del error (opcional)
        status_code (int): Código de estado HTTP (default: 400)

    Returns:
        JsonResponse: Respuesta formateada con estructura estándar
    """
    response_data = {
        "success": False,
        "message": message,
        "data": data
    }
    return JsonResponse(response_data, status=status_code)


def validation_error_response(message: str, data=None):
    """
    Crea una respuesta de error de validación (400).
    """
    return error_response(message, data, status.HTTP_400_BAD_REQUEST)


"""Paquete de permisos.

Exporta las clases de permiso y las respuestas estandarizadas de acceso
denegado para uso desde `api.permissions`.
"""
from .responses import PermissionDenied
from .permissions import IsAdminUser

__all__ = [
    'PermissionDenied',
    'IsAdminUser'
]

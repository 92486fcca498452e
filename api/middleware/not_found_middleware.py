"""
Middleware para manejo centralizado de errores 404.

Intercepta respuestas 404 y las convierte en respuestas JSON estructuradas
siguiendo los estándares del proyecto.
"""

import json
import logging
from django.http import JsonResponse
from django.utils.deprecation import MiddlewareMixin

logger = logging.getLogger(__name__)

ENDPOINT_MESSAGES = (
    ('/api/v2/admin/products', "El endpoint de administración de productos solicitado no existe."),
    ('/api/v2/products', "El endpoint de productos solicitado no existe."),
    ('/api/v2/suppliers', "El endpoint de proveedores solicitado no existe."),
    ('/api/v2/admin/notifications', "El endpoint de notificaciones solicitado no existe."),
)


class NotFoundErrorMiddleware(MiddlewareMixin):
    """
    Middleware que intercepta respuestas 404 y devuelve respuestas JSON estructuradas.

    Las respuestas 404 que ya vienen en formato JSON (por ejemplo un producto
    inexistente devuelto por una vista) se dejan intactas.
    """

    def process_response(self, request, response):
        if response.status_code != 404:
            return response

        # Ya es una respuesta JSON estructurada, no la modificamos
        if self._is_json_response(response):
            return response

        if not self._is_api_request(request):
            return response

        user = getattr(request, 'user', None)
        user_info = getattr(user, 'username', None) or 'anonymous'
        logger.info(
            f"404 error for API endpoint: {request.method} {request.path} - "
            f"User: {user_info}"
        )
        return self._create_404_response(request)

    def _is_json_response(self, response):
        content_type = response.get('Content-Type', '')
        if 'application/json' in content_type:
            return True

        try:
            parsed = json.loads(response.content.decode('utf-8'))
            return isinstance(parsed, dict) and ('success' in parsed or 'message' in parsed)
        except (ValueError, UnicodeDecodeError):
            return False

    def _is_api_request(self, request):
        if request.path.startswith('/api/'):
            return True

        accept_header = request.META.get('HTTP_ACCEPT', '')
        return 'application/json' in accept_header

    def _create_404_response(self, request):
        """
        Crea una respuesta JSON estructurada para errores 404.

        Args:
            request: HttpRequest object

        Returns:
            JsonResponse: Respuesta JSON estructurada según los estándares del proyecto
        """
        endpoint_path = request.path

        for prefix, text in ENDPOINT_MESSAGES:
            if endpoint_path.startswith(prefix):
                message = f"{text} Verifica la URL y los parámetros proporcionados."
                break
        else:
            if endpoint_path.startswith('/api/v2/'):
                message = "El endpoint de la API solicitado no existe. Consulta la documentación para ver los endpoints disponibles."
            else:
                message = "El recurso solicitado no fue encontrado. Verifica la URL y consulta la documentación de la API."

        response_data = {
            "success": False,
            "message": message,
            "data": {
                "error_type": "endpoint_not_found",
                "requested_path": endpoint_path,
                "method": request.method,
                "available_versions": ["v2"],
                "documentation_url": "/api/v2/schema/swagger-ui/",
                "suggestions": self._get_endpoint_suggestions(endpoint_path)
            }
        }

        return JsonResponse(response_data, status=404)

    def _get_endpoint_suggestions(self, path):
        suggestions = []
        lowered = path.lower()

        if '/api/v1/' in path:
            suggestions.append(
                "Usa /api/v2/ en lugar de /api/v1/ (versión obsoleta)")

        if 'notification' in lowered:
            suggestions.extend([
                "/api/v2/admin/notifications - Lista de notificaciones",
                "/api/v2/admin/notifications/unread-count - Notificaciones sin leer",
            ])
        elif 'stock' in lowered:
            suggestions.extend([
                "/api/v2/products/low-stock - Productos con stock bajo",
                "/api/v2/admin/products/{code}/increase-stock - Aumentar stock",
                "/api/v2/admin/products/{code}/decrease-stock - Disminuir stock",
            ])
        elif 'product' in lowered:
            suggestions.extend([
                "/api/v2/products - Lista de productos activos",
                "/api/v2/admin/products/create - Alta de producto",
            ])
        elif 'supplier' in lowered:
            suggestions.extend([
                "/api/v2/suppliers - Lista de proveedores",
                "/api/v2/suppliers/{id} - Detalle de proveedor",
            ])
        else:
            suggestions.extend([
                "/api/v2/products - Gestión de productos",
                "/api/v2/suppliers - Proveedores",
                "/api/v2/schema/swagger-ui/ - Documentación completa"
            ])

        return suggestions[:3]

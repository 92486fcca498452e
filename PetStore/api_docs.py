"""
Configuraciones y hooks para la documentación de la API con drf-spectacular.

Este archivo contiene funciones de preprocesamiento y postprocesamiento
para personalizar la documentación OpenAPI generada automáticamente.

Basado en la documentación oficial de drf-spectacular:
https://drf-spectacular.readthedocs.io/en/latest/customization.html#preprocessing-hooks
"""
import logging

logger = logging.getLogger(__name__)

EXCLUDED_PATHS = (
    '/admin/',
    '/api-auth/',
    '/static/',
    '/media/',
)


def preprocessing_filter_spec(endpoints):
    """
    Filtra los endpoints antes de generar la documentación.

    Excluye rutas administrativas de Django y de desarrollo, y descarta
    endpoints sin callback.

    Args:
        endpoints (list): Lista de tuplas (path, path_regex, method, callback)
                         detectados por drf-spectacular

    Returns:
        list: Lista filtrada de endpoints
    """
    filtered = []

    for (path, path_regex, method, callback) in endpoints:
        if any(path.startswith(excluded) for excluded in EXCLUDED_PATHS):
            logger.debug(f"Excluyendo endpoint: {method} {path}")
            continue

        if callback is None:
            logger.warning(f"Callback nulo para endpoint: {method} {path}")
            continue

        filtered.append((path, path_regex, method, callback))

    logger.info(
        f"Filtrados {len(filtered)} endpoints de {len(endpoints)} totales")
    return filtered


def postprocessing_hook(result, generator, request, public):
    """
    Modifica el esquema OpenAPI después de su generación.

    Agrega el esquema de seguridad JWT, la seguridad global y los grupos
    de tags (x-tagGroups) que usa ReDoc.

    Args:
        result (dict): Esquema OpenAPI generado
        generator: Instancia del generador de esquemas de drf-spectacular
        request: Request HTTP actual (puede ser None)
        public (bool): Si es una vista pública o no

    Returns:
        dict: Esquema OpenAPI modificado
    """
    if not isinstance(result, dict):
        logger.error(
            f"Resultado inválido en postprocessing_hook: {type(result)}")
        return result

    result.setdefault('info', {})
    result['info']['license'] = {
        'name': 'MIT License',
        'url': 'https://opensource.org/licenses/MIT'
    }

    security_schemes = result.setdefault(
        'components', {}).setdefault('securitySchemes', {})
    security_schemes['bearerAuth'] = {
        'type': 'http',
        'scheme': 'bearer',
        'bearerFormat': 'JWT',
        'description': (
            'Incluir el token obtenido en `/api/v2/token` como '
            '`Authorization: Bearer <token>`.'
        ),
    }

    security = result.setdefault('security', [])
    if {'bearerAuth': []} not in security:
        security.append({'bearerAuth': []})

    if 'x-tagGroups' not in result:
        from api.view_tags import tag_name

        result['x-tagGroups'] = [
            {'name': category, 'tags': [
                tag_name(category, 'Public'),
                tag_name(category, 'Admin'),
            ]}
            for category in ('Products', 'Suppliers', 'Notifications')
        ]

    logger.info("Esquema OpenAPI personalizado exitosamente")
    return result

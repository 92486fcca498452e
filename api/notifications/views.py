import logging

from django.http import JsonResponse
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.pagination import PageNumberPagination
from drf_yasg import openapi
from drf_yasg.utils import swagger_auto_schema
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse

from api.permissions import IsAdminUser, PermissionDenied
from api.response_helpers import success_response
from api.view_tags import notifications_admin
from .selectors import count_unread, list_notifications
from .serializers import NotificationSerializer
from .services import mark_as_read

logger = logging.getLogger(__name__)

PAGINATION_PAGE_SIZE_NOTIFICATIONS = 20


@swagger_auto_schema(
    method='get',
    operation_summary="Listar notificaciones de stock bajo",
    manual_parameters=[
        openapi.Parameter('unread', openapi.IN_QUERY, description='Si true, solo notificaciones sin leer',
                          type=openapi.TYPE_BOOLEAN, required=False),
        openapi.Parameter('page', openapi.IN_QUERY, description='Número de página',
                          type=openapi.TYPE_INTEGER, required=False),
    ],
    responses={200: NotificationSerializer(many=True)},
    tags=notifications_admin()
)
@extend_schema(
    summary="Listar notificaciones de stock bajo",
    parameters=[
        OpenApiParameter('unread', OpenApiTypes.BOOL, OpenApiParameter.QUERY,
                         description='Si true, solo notificaciones sin leer', required=False),
        OpenApiParameter('page', OpenApiTypes.INT, OpenApiParameter.QUERY,
                         description='Número de página', required=False),
    ],
    responses={200: NotificationSerializer(many=True)},
    tags=notifications_admin(),
)
@api_view(['GET'])
@permission_classes([IsAdminUser])
def get_notifications(request):
    """
    Lista paginada de notificaciones, las más recientes primero.
    """
    unread_only = request.query_params.get('unread', '').lower() in ('1', 'true', 'yes')

    paginator = PageNumberPagination()
    paginator.page_size = PAGINATION_PAGE_SIZE_NOTIFICATIONS
    page = paginator.paginate_queryset(list_notifications(unread_only), request)
    paginated = paginator.get_paginated_response(
        NotificationSerializer(page, many=True).data)

    return success_response("Notificaciones obtenidas exitosamente", paginated.data)


@swagger_auto_schema(
    method='get',
    operation_summary="Cantidad de notificaciones sin leer",
    tags=notifications_admin()
)
@extend_schema(
    summary="Cantidad de notificaciones sin leer",
    responses={200: OpenApiResponse(description="{'unread': int}")},
    tags=notifications_admin(),
)
@api_view(['GET'])
@permission_classes([IsAdminUser])
def get_unread_count(request):
    return success_response("Notificaciones sin leer", {"unread": count_unread()})


@swagger_auto_schema(
    method='patch',
    operation_summary="Marcar notificación como leída",
    responses={200: NotificationSerializer, 404: "Notificación no encontrada"},
    tags=notifications_admin()
)
@extend_schema(
    summary="Marcar notificación como leída",
    request=None,
    responses={200: NotificationSerializer,
               404: OpenApiResponse(description="Notificación no encontrada")},
    tags=notifications_admin(),
)
@api_view(['PATCH'])
@permission_classes([IsAdminUser])
def mark_notification_read(request, notification_id):
    notification = mark_as_read(notification_id)
    if notification is None:
        return JsonResponse(
            PermissionDenied.resource_not_found('notification', notification_id),
            status=status.HTTP_404_NOT_FOUND)

    logger.info(
        f"Notificación {notification_id} marcada como leída por el usuario {request.user.id}")
    return success_response(
        "Notificación marcada como leída", NotificationSerializer(notification).data)

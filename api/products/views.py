import logging

from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from drf_yasg.utils import swagger_auto_schema
from drf_spectacular.utils import extend_schema, OpenApiResponse

from api.permissions import IsAdminUser
from api.response_helpers import success_response, error_response, validation_error_response
from api.view_tags import products_public, products_admin
from . import services
from .exceptions import InventoryServiceError
from .serializers import (
    ProductSerializer, ProductCreateSerializer,
    StockUpdateSerializer, ThresholdUpdateSerializer,
)

logger = logging.getLogger(__name__)


def _inventory_error_response(exc: InventoryServiceError):
    """Traduce un error del servicio de inventario al sobre de respuesta estándar."""
    return error_response(exc.message, exc.to_data(), exc.status_code)


def _invalid_data_response(serializer):
    logger.warning(f"Datos inválidos: {serializer.errors}")
    return validation_error_response(
        "Error de validación en los datos enviados", serializer.errors)


@swagger_auto_schema(
    method='get',
    operation_summary="Listar productos activos",
    operation_description="Devuelve todos los productos activos con el indicador de stock bajo calculado.",
    responses={200: ProductSerializer(many=True)},
    tags=products_public()
)
@extend_schema(
    summary="Listar productos activos",
    responses={200: ProductSerializer(many=True)},
    tags=products_public(),
)
@api_view(['GET'])
@permission_classes([AllowAny])
def get_products(request):
    """
    Lista los productos activos ordenados por código.

    Cada producto incluye `low_stock`, recalculado en cada consulta.
    """
    result = services.list_active_products()
    data = ProductSerializer(result["data"], many=True).data
    return success_response(result["message"], data)


@swagger_auto_schema(
    method='get',
    operation_summary="Listar productos con stock bajo",
    operation_description="Devuelve los productos activos cuyo stock es menor o igual a su umbral mínimo.",
    responses={200: ProductSerializer(many=True)},
    tags=products_public()
)
@extend_schema(
    summary="Listar productos con stock bajo",
    responses={200: ProductSerializer(many=True)},
    tags=products_public(),
)
@api_view(['GET'])
@permission_classes([AllowAny])
def get_low_stock_products(request):
    result = services.list_low_stock_products()
    data = ProductSerializer(result["data"], many=True).data
    return success_response(result["message"], data)


@swagger_auto_schema(
    method='post',
    operation_summary="Crear producto",
    operation_description="Da de alta un producto activo. Falla con 409 si ya existe uno activo con el mismo nombre y proveedor.",
    request_body=ProductCreateSerializer,
    responses={201: ProductSerializer, 400: "Datos inválidos",
               404: "Proveedor no encontrado", 409: "Producto duplicado"},
    tags=products_admin()
)
@extend_schema(
    summary="Crear producto",
    request=ProductCreateSerializer,
    responses={
        201: ProductSerializer,
        400: OpenApiResponse(description="Datos inválidos"),
        404: OpenApiResponse(description="Proveedor no encontrado"),
        409: OpenApiResponse(description="Producto duplicado"),
    },
    tags=products_admin(),
)
@api_view(['POST'])
@permission_classes([IsAdminUser])
def create_product(request):
    """
    Crea un producto nuevo (solo administradores).

    Body:
        name, supplier_id, quantity, unit_price, min_threshold,
        image (opcional), description (opcional)
    """
    serializer = ProductCreateSerializer(data=request.data)
    if not serializer.is_valid():
        return _invalid_data_response(serializer)

    try:
        result = services.create_product(
            **serializer.validated_data, user=request.user)
    except InventoryServiceError as exc:
        return _inventory_error_response(exc)

    logger.info(
        f"Producto '{result['data'].name}' creado por el usuario {request.user.id}")
    return success_response(
        result["message"],
        ProductSerializer(result["data"]).data,
        status.HTTP_201_CREATED
    )


@swagger_auto_schema(
    method='delete',
    operation_summary="Eliminar producto",
    operation_description="Baja lógica del producto. Deja de aparecer en los listados.",
    responses={200: ProductSerializer, 404: "Producto no encontrado"},
    tags=products_admin()
)
@extend_schema(
    summary="Eliminar producto",
    responses={200: ProductSerializer,
               404: OpenApiResponse(description="Producto no encontrado")},
    tags=products_admin(),
)
@api_view(['DELETE'])
@permission_classes([IsAdminUser])
def delete_product(request, code):
    try:
        result = services.delete_product(code=code, user=request.user)
    except InventoryServiceError as exc:
        return _inventory_error_response(exc)

    return success_response(result["message"], {"code": code})


def _adjust_stock(request, code, operation):
    serializer = StockUpdateSerializer(data=request.data)
    if not serializer.is_valid():
        return _invalid_data_response(serializer)

    try:
        result = operation(
            code=code,
            quantity=serializer.validated_data["quantity"],
            user=request.user
        )
    except InventoryServiceError as exc:
        return _inventory_error_response(exc)

    return success_response(result["message"], ProductSerializer(result["data"]).data)


@swagger_auto_schema(
    method='patch',
    operation_summary="Aumentar stock",
    operation_description="Suma unidades al stock. Si el producto sale de stock bajo se retiran sus notificaciones.",
    request_body=StockUpdateSerializer,
    responses={200: ProductSerializer, 400: "Cantidad inválida",
               404: "Producto no encontrado"},
    tags=products_admin()
)
@extend_schema(
    summary="Aumentar stock",
    request=StockUpdateSerializer,
    responses={200: ProductSerializer,
               400: OpenApiResponse(description="Cantidad inválida"),
               404: OpenApiResponse(description="Producto no encontrado")},
    tags=products_admin(),
)
@api_view(['PATCH'])
@permission_classes([IsAdminUser])
def increase_stock(request, code):
    return _adjust_stock(request, code, services.increase_stock)


@swagger_auto_schema(
    method='patch',
    operation_summary="Disminuir stock",
    operation_description="Descuenta unidades del stock. Falla con 400 si el stock quedaría negativo.",
    request_body=StockUpdateSerializer,
    responses={200: ProductSerializer, 400: "Stock insuficiente o cantidad inválida",
               404: "Producto no encontrado"},
    tags=products_admin()
)
@extend_schema(
    summary="Disminuir stock",
    request=StockUpdateSerializer,
    responses={200: ProductSerializer,
               400: OpenApiResponse(description="Stock insuficiente o cantidad inválida"),
               404: OpenApiResponse(description="Producto no encontrado")},
    tags=products_admin(),
)
@api_view(['PATCH'])
@permission_classes([IsAdminUser])
def decrease_stock(request, code):
    return _adjust_stock(request, code, services.decrease_stock)


@swagger_auto_schema(
    method='patch',
    operation_summary="Actualizar umbral mínimo",
    request_body=ThresholdUpdateSerializer,
    responses={200: ProductSerializer, 404: "Producto no encontrado"},
    tags=products_admin()
)
@extend_schema(
    summary="Actualizar umbral mínimo",
    request=ThresholdUpdateSerializer,
    responses={200: ProductSerializer,
               404: OpenApiResponse(description="Producto no encontrado")},
    tags=products_admin(),
)
@api_view(['PATCH'])
@permission_classes([IsAdminUser])
def update_threshold(request, code):
    serializer = ThresholdUpdateSerializer(data=request.data)
    if not serializer.is_valid():
        return _invalid_data_response(serializer)

    try:
        result = services.update_threshold(
            code=code,
            new_threshold=serializer.validated_data["min_threshold"],
            user=request.user
        )
    except InventoryServiceError as exc:
        return _inventory_error_response(exc)

    return success_response(result["message"], ProductSerializer(result["data"]).data)

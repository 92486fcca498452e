from rest_framework import viewsets
from rest_framework.permissions import AllowAny
from drf_spectacular.utils import extend_schema, extend_schema_view

from api.view_tags import suppliers_public
from .selectors import list_suppliers
from .serializers import SupplierSerializer


@extend_schema_view(
    list=extend_schema(
        summary="Listar proveedores",
        description="Devuelve los proveedores registrados, ordenados por nombre.",
        tags=suppliers_public(),
    ),
    retrieve=extend_schema(
        summary="Detalle de proveedor",
        description="Devuelve un proveedor por su id.",
        tags=suppliers_public(),
    ),
)
class SupplierViewSet(viewsets.ReadOnlyModelViewSet):
    """
    API de solo lectura para proveedores.

    Los proveedores se administran desde el panel de Django; la API los
    expone para que el frontend pueda elegir uno al dar de alta un producto.
    """
    serializer_class = SupplierSerializer
    permission_classes = [AllowAny]
    pagination_class = None

    def get_queryset(self):
        return list_suppliers()

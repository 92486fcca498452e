from decimal import Decimal

from rest_framework import serializers

from api.constants import InventoryDefaults
from .models import Product


class ProductSerializer(serializers.ModelSerializer):
    """
    Representación pública de un producto.

    `low_stock` se calcula en cada serialización a partir del stock y el
    umbral mínimo vigentes.
    """
    supplier_id = serializers.IntegerField(read_only=True)
    supplier_name = serializers.CharField(source='supplier.name', read_only=True)
    low_stock = serializers.BooleanField(source='is_low_stock', read_only=True)

    class Meta:
        model = Product
        fields = [
            'code', 'name', 'stock', 'unit_price', 'supplier_id',
            'supplier_name', 'min_threshold', 'low_stock', 'image',
            'description'
        ]
        read_only_fields = fields


class ProductCreateSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=InventoryDefaults.MAX_NAME_LENGTH)
    supplier_id = serializers.IntegerField(min_value=1)
    quantity = serializers.IntegerField(min_value=0)
    unit_price = serializers.DecimalField(
        max_digits=InventoryDefaults.PRICE_MAX_DIGITS,
        decimal_places=InventoryDefaults.PRICE_DECIMAL_PLACES,
        min_value=Decimal('0.00'))
    min_threshold = serializers.IntegerField(min_value=0)
    image = serializers.CharField(
        max_length=InventoryDefaults.MAX_IMAGE_LENGTH,
        required=False, allow_null=True, allow_blank=True)
    description = serializers.CharField(
        required=False, allow_null=True, allow_blank=True)

    def validate_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("El nombre no puede estar vacío.")
        return value


class StockUpdateSerializer(serializers.Serializer):
    quantity = serializers.IntegerField(min_value=1)


class ThresholdUpdateSerializer(serializers.Serializer):
    min_threshold = serializers.IntegerField(min_value=0)

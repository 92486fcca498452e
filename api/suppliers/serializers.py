from rest_framework import serializers
from api.serializer_mixins import AuditableWithUserSerializerMixin
from .models import Supplier


class SupplierSerializer(AuditableWithUserSerializerMixin, serializers.ModelSerializer):
    # Viene anotado por selectors.list_suppliers
    active_products = serializers.IntegerField(read_only=True)

    class Meta(AuditableWithUserSerializerMixin.Meta):
        model = Supplier
        fields = ['id', 'name', 'contact_email', 'phone',
                  'active_products', 'created_at', 'updated_at']

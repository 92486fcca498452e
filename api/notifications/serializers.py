from rest_framework import serializers
from .models import Notification


class NotificationSerializer(serializers.ModelSerializer):
    product_code = serializers.IntegerField(source='product_id', read_only=True)
    product_name = serializers.CharField(source='product.name', read_only=True)

    class Meta:
        model = Notification
        fields = ['id', 'product_code', 'product_name', 'message',
                  'stock_at_notification', 'threshold_at_notification',
                  'read', 'created_at', 'updated_at']
        read_only_fields = fields

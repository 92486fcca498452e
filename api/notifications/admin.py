from django.contrib import admin
from .models import Notification


@admin.register(Notification)
class NotificationAdmin(admin.ModelAdmin):
    list_display = ('id', 'product', 'stock_at_notification',
                    'threshold_at_notification', 'read', 'updated_at')
    list_filter = ('read',)
    search_fields = ('product__name', 'message')
    readonly_fields = ('created_at', 'updated_at')

from django.contrib import admin
from .models import Product


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ('code', 'name', 'supplier', 'stock',
                    'min_threshold', 'low_stock', 'active')
    list_filter = ('active', 'supplier')
    search_fields = ('name', 'description')
    readonly_fields = ('created_at', 'updated_at', 'created_by', 'updated_by')

    @admin.display(boolean=True, description='Stock bajo')
    def low_stock(self, obj):
        return obj.is_low_stock

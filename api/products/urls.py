from django.urls import path
from . import views

app_name = 'products'

urlpatterns = [
    path('products', views.get_products, name='get_products'),
    path('products/low-stock', views.get_low_stock_products,
         name='get_low_stock_products'),
    path('admin/products/create', views.create_product, name='create_product'),
    path('admin/products/<int:code>/delete',
         views.delete_product, name='delete_product'),
    path('admin/products/<int:code>/increase-stock',
         views.increase_stock, name='increase_stock'),
    path('admin/products/<int:code>/decrease-stock',
         views.decrease_stock, name='decrease_stock'),
    path('admin/products/<int:code>/threshold',
         views.update_threshold, name='update_threshold'),
]

from rest_framework.routers import DefaultRouter
from .views import SupplierViewSet

router = DefaultRouter(trailing_slash=False)
router.register(r'suppliers', SupplierViewSet, basename='suppliers')

urlpatterns = router.urls

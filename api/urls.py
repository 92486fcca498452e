from django.urls import path, include
from rest_framework_simplejwt.views import (
    TokenObtainPairView,
    TokenRefreshView,
)

urlpatterns = [
    # === Autenticación JWT ===#
    path('token', TokenObtainPairView.as_view(), name='token_obtain_pair'),
    path('token/refresh', TokenRefreshView.as_view(), name='token_refresh'),

    # === Products - Function-based views ===#
    path('', include('api.products.urls', namespace='products')),

    # === Notifications - Function-based views ===#
    path('', include('api.notifications.urls', namespace='notifications')),

    # === Suppliers - Router de ViewSets ===#
    path('', include('api.suppliers.urls')),
]

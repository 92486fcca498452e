from django.urls import path
from . import views

app_name = 'notifications'

urlpatterns = [
    path('admin/notifications', views.get_notifications, name='get_notifications'),
    path('admin/notifications/unread-count',
         views.get_unread_count, name='get_unread_count'),
    path('admin/notifications/<int:notification_id>/read',
         views.mark_notification_read, name='mark_notification_read'),
]

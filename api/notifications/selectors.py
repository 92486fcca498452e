from .models import Notification


def list_notifications(unread_only: bool = False):
    qs = Notification.objects.select_related("product")
    if unread_only:
        qs = qs.filter(read=False)
    return qs.order_by("-updated_at", "-id")


def count_unread() -> int:
    return Notification.objects.filter(read=False).count()

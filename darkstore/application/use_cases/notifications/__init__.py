"""Use cases for targeted notifications."""

from .create_notification import create_notification
from .get_notification import get_notification
from .list_notifications import list_all_notifications, list_notifications_for
from .mark_all_read import mark_all_read_for

__all__ = [
    "create_notification",
    "get_notification",
    "list_all_notifications",
    "list_notifications_for",
    "mark_all_read_for",
]

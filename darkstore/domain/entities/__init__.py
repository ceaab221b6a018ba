"""Domain entities exposed by the application."""

from .account import Account
from .notification import (
    ALL_ROLES_TOKEN,
    NOTIFICATION_PRIORITIES,
    NOTIFICATION_TARGET_ALL,
    NOTIFICATION_TARGET_ROLE,
    NOTIFICATION_TARGET_TYPES,
    NOTIFICATION_TARGET_USER,
    Notification,
)
from .role import PRIVILEGED_ROLE, AccountRole

__all__ = [
    "Account",
    "AccountRole",
    "PRIVILEGED_ROLE",
    "Notification",
    "ALL_ROLES_TOKEN",
    "NOTIFICATION_PRIORITIES",
    "NOTIFICATION_TARGET_ALL",
    "NOTIFICATION_TARGET_ROLE",
    "NOTIFICATION_TARGET_TYPES",
    "NOTIFICATION_TARGET_USER",
]

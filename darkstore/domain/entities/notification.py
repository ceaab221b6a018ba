"""Domain entity representing a targeted notification."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

NOTIFICATION_TARGET_USER = "user"
NOTIFICATION_TARGET_ROLE = "role"
NOTIFICATION_TARGET_ALL = "all"
NOTIFICATION_TARGET_TYPES = (
    NOTIFICATION_TARGET_USER,
    NOTIFICATION_TARGET_ROLE,
    NOTIFICATION_TARGET_ALL,
)

# Role token meaning "every role" inside ``target_roles``.
ALL_ROLES_TOKEN = "all"

NOTIFICATION_PRIORITIES = ("low", "normal", "high", "urgent")


@dataclass
class Notification:
    """Message addressed to one account, to the holders of a role, or to everyone.

    ``user_id`` is only set for ``user`` targets and ``target_roles`` only
    for ``role`` targets. ``read_at`` stays ``None`` while ``is_read`` is
    false.
    """

    id: int | None
    title: str
    message: str
    target_type: str
    user_id: int | None = None
    target_roles: str | None = None
    type: str = "info"
    priority: str = "normal"
    link: str | None = None
    image_url: str | None = None
    is_read: bool = False
    read_at: datetime | None = None
    expires_at: datetime | None = None
    created_by: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


__all__ = [
    "ALL_ROLES_TOKEN",
    "NOTIFICATION_PRIORITIES",
    "NOTIFICATION_TARGET_ALL",
    "NOTIFICATION_TARGET_ROLE",
    "NOTIFICATION_TARGET_TYPES",
    "NOTIFICATION_TARGET_USER",
    "Notification",
]

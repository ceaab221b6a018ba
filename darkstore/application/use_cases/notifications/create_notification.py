"""Use case for creating notifications."""

import json
import logging
from collections.abc import Sequence
from datetime import datetime

from sqlalchemy.orm import Session

from darkstore.domain.entities import (
    NOTIFICATION_PRIORITIES,
    NOTIFICATION_TARGET_ALL,
    NOTIFICATION_TARGET_ROLE,
    NOTIFICATION_TARGET_TYPES,
    NOTIFICATION_TARGET_USER,
    Notification,
)
from darkstore.domain.exceptions import AccountNotFoundError, InvalidNotificationError
from darkstore.infrastructure.repositories import AccountRepository, NotificationRepository
from darkstore.utils import now_in_app_timezone

logger = logging.getLogger(__name__)


def create_notification(
    session: Session,
    *,
    title: str,
    message: str,
    target_type: str = NOTIFICATION_TARGET_ALL,
    user_id: int | None = None,
    target_roles: Sequence[str] | None = None,
    notification_type: str = "info",
    priority: str = "normal",
    link: str | None = None,
    image_url: str | None = None,
    expires_at: datetime | None = None,
    created_by: int | None = None,
) -> Notification:
    """Persist a new unread notification.

    ``user`` targets need an existing ``user_id`` and ``role`` targets at
    least one role; the unused targeting field is always stored empty. Role
    lists are stored JSON encoded.
    """

    title = (title or "").strip()
    message = (message or "").strip()
    if not title or not message:
        raise InvalidNotificationError("Title and message are required")

    if target_type not in NOTIFICATION_TARGET_TYPES:
        raise InvalidNotificationError(f"Unknown target type '{target_type}'")

    if priority not in NOTIFICATION_PRIORITIES:
        raise InvalidNotificationError(f"Unknown priority '{priority}'")

    stored_user_id: int | None = None
    stored_roles: str | None = None
    if target_type == NOTIFICATION_TARGET_USER:
        if user_id is None:
            raise InvalidNotificationError("user_id is required for user notifications")
        if not AccountRepository(session).exists(user_id):
            raise AccountNotFoundError(user_id)
        stored_user_id = user_id
    elif target_type == NOTIFICATION_TARGET_ROLE:
        roles = [role.strip() for role in target_roles or [] if role and role.strip()]
        if not roles:
            raise InvalidNotificationError("target_roles is required for role notifications")
        stored_roles = json.dumps(roles)

    notification = Notification(
        id=None,
        title=title,
        message=message,
        target_type=target_type,
        user_id=stored_user_id,
        target_roles=stored_roles,
        type=notification_type or "info",
        priority=priority,
        link=link,
        image_url=image_url,
        is_read=False,
        read_at=None,
        expires_at=expires_at,
        created_by=created_by,
        created_at=now_in_app_timezone(),
    )
    saved = NotificationRepository(session).create(notification)
    logger.info("Created %s notification %s", saved.target_type, saved.id)
    return saved

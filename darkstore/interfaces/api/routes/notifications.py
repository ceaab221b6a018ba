"""Endpoints for publishing, listing and acknowledging notifications."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from darkstore.application.use_cases.notifications import (
    create_notification as create_notification_uc,
    get_notification as get_notification_uc,
    list_all_notifications as list_all_notifications_uc,
    list_notifications_for as list_notifications_for_uc,
    mark_all_read_for as mark_all_read_for_uc,
)
from darkstore.domain.audience import Recipient
from darkstore.infrastructure.database import get_db
from darkstore.interfaces.api.routes_helpers import http_error_for
from darkstore.interfaces.api.schemas import (
    MarkAllReadRequest,
    MarkAllReadResponse,
    NotificationCreate,
    NotificationRead,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])
logger = logging.getLogger(__name__)


@router.get("/", response_model=list[NotificationRead])
def list_notifications(
    user_id: int | None = Query(default=None),
    role: str | None = Query(default=None),
    unread_only: bool = Query(default=False),
    admin_view: bool = Query(
        default=False,
        description="Return the latest notifications of every target instead of one recipient's",
    ),
    db: Session = Depends(get_db),
) -> list[NotificationRead]:
    """Return the notifications visible to the given recipient."""

    if admin_view:
        notifications = list_all_notifications_uc(db)
    else:
        notifications = list_notifications_for_uc(
            db, Recipient(user_id=user_id, role=role), unread_only=unread_only
        )
    return [NotificationRead.model_validate(notification) for notification in notifications]


@router.post("/", response_model=NotificationRead, status_code=status.HTTP_201_CREATED)
def publish_notification(
    notification_in: NotificationCreate,
    db: Session = Depends(get_db),
) -> NotificationRead:
    """Create a notification addressed to a user, to roles or to everyone."""

    try:
        notification = create_notification_uc(
            db,
            title=notification_in.title,
            message=notification_in.message,
            target_type=notification_in.target_type,
            user_id=notification_in.user_id,
            target_roles=notification_in.target_roles,
            notification_type=notification_in.type,
            priority=notification_in.priority,
            link=notification_in.link,
            image_url=notification_in.image_url,
            expires_at=notification_in.expires_at,
            created_by=notification_in.created_by,
        )
    except ValueError as exc:
        raise http_error_for(exc) from exc
    return NotificationRead.model_validate(notification)


@router.post("/read-all", response_model=MarkAllReadResponse)
def mark_all_notifications_read(
    request: MarkAllReadRequest,
    db: Session = Depends(get_db),
) -> MarkAllReadResponse:
    """Mark every unread notification addressed to the recipient as read."""

    recipient = Recipient(user_id=request.user_id, role=request.role)
    try:
        updated = mark_all_read_for_uc(db, recipient)
    except ValueError as exc:
        raise http_error_for(exc) from exc
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("Failed to mark notifications as read for %s", recipient)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to mark notifications as read",
        ) from exc
    return MarkAllReadResponse(message="All notifications marked as read", updated=updated)


@router.get("/{notification_id}", response_model=NotificationRead)
def read_notification(
    notification_id: int,
    db: Session = Depends(get_db),
) -> NotificationRead:
    """Return the notification identified by ``notification_id``."""

    try:
        notification = get_notification_uc(db, notification_id)
    except ValueError as exc:
        raise http_error_for(exc) from exc
    return NotificationRead.model_validate(notification)

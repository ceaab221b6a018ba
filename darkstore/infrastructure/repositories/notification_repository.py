"""Persistence helpers for notification entities."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy import and_, case, or_
from sqlalchemy.orm import Session
from sqlalchemy.sql.elements import ColumnElement

from darkstore.domain.audience import Recipient, resolve_role_term
from darkstore.domain.entities import (
    NOTIFICATION_TARGET_ALL,
    NOTIFICATION_TARGET_ROLE,
    NOTIFICATION_TARGET_USER,
    Notification,
)
from darkstore.infrastructure.models import NotificationModel
from darkstore.utils import ensure_app_naive_datetime, ensure_app_timezone

_PRIORITY_RANK = case(
    {"urgent": 3, "high": 2, "normal": 1, "low": 0},
    value=NotificationModel.priority,
    else_=1,
)


def audience_filter(recipient: Recipient, *, unread_only: bool = True) -> ColumnElement[bool]:
    """Return the SQL condition selecting notifications addressed to ``recipient``.

    Mirrors :func:`darkstore.domain.audience.is_in_audience`; the user clause
    is only added when the recipient carries a user id and the role clause
    only when a role term can be resolved.
    """

    clauses: list[ColumnElement[bool]] = [
        NotificationModel.target_type == NOTIFICATION_TARGET_ALL
    ]
    if recipient.user_id is not None:
        clauses.append(
            and_(
                NotificationModel.target_type == NOTIFICATION_TARGET_USER,
                NotificationModel.user_id == recipient.user_id,
            )
        )
    role_term = resolve_role_term(recipient)
    if role_term is not None:
        clauses.append(
            and_(
                NotificationModel.target_type == NOTIFICATION_TARGET_ROLE,
                NotificationModel.target_roles.contains(role_term, autoescape=True),
            )
        )

    condition = or_(*clauses)
    if unread_only:
        condition = and_(NotificationModel.is_read.is_(False), condition)
    return condition


class NotificationRepository:
    """Provide persistence operations for :class:`Notification` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, notification_id: int) -> Notification | None:
        model = self.session.get(NotificationModel, notification_id)
        return self._to_entity(model) if model else None

    def list_recent(self, *, limit: int | None = 100) -> Sequence[Notification]:
        query = self.session.query(NotificationModel).order_by(
            NotificationModel.created_at.desc(), NotificationModel.id.desc()
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def list_matching(
        self,
        recipient: Recipient,
        *,
        now: datetime,
        unread_only: bool = False,
        limit: int | None = 50,
    ) -> Sequence[Notification]:
        """Return the non-expired notifications addressed to ``recipient``."""

        naive_now = ensure_app_naive_datetime(now)
        query = (
            self.session.query(NotificationModel)
            .filter(audience_filter(recipient, unread_only=unread_only))
            .filter(
                or_(
                    NotificationModel.expires_at.is_(None),
                    NotificationModel.expires_at >= naive_now,
                )
            )
            .order_by(
                _PRIORITY_RANK.desc(),
                NotificationModel.created_at.desc(),
                NotificationModel.id.desc(),
            )
        )
        if limit is not None:
            query = query.limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def mark_read_matching(self, recipient: Recipient, *, read_at: datetime) -> int:
        """Mark every unread notification addressed to ``recipient`` as read.

        Runs as one ``UPDATE`` statement and one commit; returns the number of
        rows changed.
        """

        naive_read_at = ensure_app_naive_datetime(read_at)
        updated = (
            self.session.query(NotificationModel)
            .filter(audience_filter(recipient, unread_only=True))
            .update(
                {
                    NotificationModel.is_read: True,
                    NotificationModel.read_at: naive_read_at,
                    NotificationModel.updated_at: naive_read_at,
                },
                synchronize_session=False,
            )
        )
        self.session.commit()
        return updated

    def create(self, notification: Notification) -> Notification:
        model = NotificationModel()
        self._apply_entity_to_model(model, notification)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _apply_entity_to_model(model: NotificationModel, notification: Notification) -> None:
        model.title = notification.title
        model.message = notification.message
        model.type = notification.type
        model.priority = notification.priority
        model.target_type = notification.target_type
        model.user_id = notification.user_id
        model.target_roles = notification.target_roles
        model.link = notification.link
        model.image_url = notification.image_url
        model.is_read = notification.is_read
        model.read_at = ensure_app_naive_datetime(notification.read_at)
        model.expires_at = ensure_app_naive_datetime(notification.expires_at)
        model.created_by = notification.created_by
        if notification.created_at is not None:
            model.created_at = ensure_app_naive_datetime(notification.created_at)

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            title=model.title,
            message=model.message,
            target_type=model.target_type,
            user_id=model.user_id,
            target_roles=model.target_roles,
            type=model.type,
            priority=model.priority,
            link=model.link,
            image_url=model.image_url,
            is_read=bool(model.is_read),
            read_at=ensure_app_timezone(model.read_at),
            expires_at=ensure_app_timezone(model.expires_at),
            created_by=model.created_by,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )


__all__ = ["NotificationRepository", "audience_filter"]

"""SQLAlchemy model for persisted notifications."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.sql import expression

from darkstore.infrastructure.database import Base
from darkstore.utils import now_in_app_naive_datetime


class NotificationModel(Base):
    """Database representation for targeted notifications."""

    __tablename__ = "notification"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(200), nullable=False)
    message = Column(Text, nullable=False)
    type = Column(String(30), nullable=False, default="info")
    priority = Column(String(20), nullable=False, default="normal")
    target_type = Column(String(10), nullable=False, default="all", index=True)
    user_id = Column(
        Integer, ForeignKey("account.id", ondelete="CASCADE"), nullable=True, index=True
    )
    target_roles = Column(Text, nullable=True)
    link = Column(String(500), nullable=True)
    image_url = Column(String(500), nullable=True)
    is_read = Column(
        Boolean, nullable=False, default=False, server_default=expression.false(), index=True
    )
    read_at = Column(DateTime(), nullable=True)
    expires_at = Column(DateTime(), nullable=True)
    created_by = Column(Integer, nullable=True)
    created_at = Column(DateTime(), nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(
        DateTime(),
        nullable=False,
        default=now_in_app_naive_datetime,
        onupdate=now_in_app_naive_datetime,
    )


__all__ = ["NotificationModel"]

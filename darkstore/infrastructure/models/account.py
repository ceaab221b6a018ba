"""SQLAlchemy model for the account table."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String, Text
from sqlalchemy.sql import expression

from darkstore.infrastructure.database import Base
from darkstore.utils import now_in_app_naive_datetime


class AccountModel(Base):
    """Database representation of a platform account."""

    __tablename__ = "account"

    id = Column(Integer, primary_key=True, index=True)
    role = Column(String(30), nullable=False, index=True, default="customer")
    name = Column(String(100), nullable=False)
    email = Column(String(120), nullable=True, index=True)
    phone = Column(String(20), nullable=True, index=True)
    is_active = Column(
        Boolean, nullable=False, default=True, server_default=expression.true()
    )
    is_suspended = Column(
        Boolean, nullable=False, default=False, server_default=expression.false()
    )
    suspension_reason = Column(Text, nullable=True)
    locked_until = Column(DateTime, nullable=True)
    failed_login_attempts = Column(Integer, nullable=False, default=0, server_default="0")
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)
    updated_at = Column(DateTime, nullable=True, onupdate=now_in_app_naive_datetime)
    last_login_at = Column(DateTime, nullable=True)


__all__ = ["AccountModel"]

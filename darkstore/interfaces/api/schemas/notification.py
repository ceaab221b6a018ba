"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class NotificationCreate(BaseModel):
    """Payload used to publish a notification."""

    title: str = Field(..., max_length=200)
    message: str
    type: str = Field(default="info", max_length=30)
    target_type: Literal["user", "role", "all"] = "all"
    user_id: int | None = None
    target_roles: list[str] | None = None
    priority: Literal["low", "normal", "high", "urgent"] = "normal"
    link: str | None = Field(default=None, max_length=500)
    image_url: str | None = Field(default=None, max_length=500)
    expires_at: datetime | None = None
    created_by: int | None = None

    model_config = ConfigDict(extra="forbid")


class MarkAllReadRequest(BaseModel):
    """Recipient whose audience should be marked as read."""

    user_id: int | None = Field(default=None, description="Recipient account id")
    role: str | None = Field(default=None, max_length=30, description="Recipient role")

    model_config = ConfigDict(extra="forbid")


class MarkAllReadResponse(BaseModel):
    message: str
    updated: int


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    id: int
    title: str
    message: str
    type: str
    priority: str
    target_type: str
    user_id: int | None = None
    target_roles: str | None = None
    link: str | None = None
    image_url: str | None = None
    is_read: bool
    read_at: datetime | None = None
    expires_at: datetime | None = None
    created_by: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


__all__ = [
    "MarkAllReadRequest",
    "MarkAllReadResponse",
    "NotificationCreate",
    "NotificationRead",
]

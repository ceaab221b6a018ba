"""Account schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from darkstore.domain.entities import AccountRole


class AccountRead(BaseModel):
    id: int
    role: AccountRole
    name: str
    email: EmailStr | None
    phone: str | None
    is_active: bool
    is_suspended: bool
    suspension_reason: str | None
    locked_until: datetime | None
    failed_login_attempts: int
    created_at: datetime | None
    last_login_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class SuspendAccountRequest(BaseModel):
    """Optional body of the suspend endpoint."""

    reason: str | None = Field(default=None, max_length=500)

    model_config = ConfigDict(extra="forbid")


class AccountStatusRead(BaseModel):
    """Result of a status transition.

    Only the fields written by the transition are set; the route serializes
    with ``response_model_exclude_unset`` so the others are omitted.
    """

    id: int
    message: str
    is_active: bool | None = None
    is_suspended: bool | None = None
    suspension_reason: str | None = None
    locked_until: datetime | None = None
    failed_login_attempts: int | None = None

"""Use case for suspending an account."""

from sqlalchemy.orm import Session

from .lifecycle import AccountStatusChange, apply_status_change

DEFAULT_SUSPENSION_REASON = "Account suspended by administrator"


def suspend_account(
    session: Session, account_id: int, *, reason: str | None = None
) -> AccountStatusChange:
    """Suspend the account, recording ``reason`` or the default message."""

    normalized_reason = (reason or "").strip() or DEFAULT_SUSPENSION_REASON
    return apply_status_change(
        session,
        account_id,
        {"is_suspended": True, "suspension_reason": normalized_reason},
    )

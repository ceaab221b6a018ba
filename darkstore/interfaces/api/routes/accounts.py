"""Routes exposing account details and status transitions."""

import logging
from collections.abc import Callable

from fastapi import APIRouter, Body, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from darkstore.application.use_cases.accounts import (
    AccountStatusChange,
    activate_account as activate_account_uc,
    deactivate_account as deactivate_account_uc,
    get_account as get_account_uc,
    suspend_account as suspend_account_uc,
    unlock_account as unlock_account_uc,
    unsuspend_account as unsuspend_account_uc,
)
from darkstore.infrastructure.database import get_db
from darkstore.interfaces.api.routes_helpers import http_error_for, status_change_to_response
from darkstore.interfaces.api.schemas import AccountRead, AccountStatusRead, SuspendAccountRequest

router = APIRouter(prefix="/users", tags=["users"])
logger = logging.getLogger(__name__)


def _run_transition(
    db: Session,
    user_id: int,
    transition: Callable[[], AccountStatusChange],
    *,
    success_message: str,
    failure_message: str,
) -> AccountStatusRead:
    try:
        change = transition()
    except ValueError as exc:
        raise http_error_for(exc) from exc
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception("%s (account %s)", failure_message, user_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=failure_message
        ) from exc
    return status_change_to_response(change, success_message)


@router.get("/{user_id}", response_model=AccountRead)
def read_user(user_id: int, db: Session = Depends(get_db)):
    """Return the account identified by ``user_id``."""

    try:
        account = get_account_uc(db, user_id)
    except ValueError as exc:
        raise http_error_for(exc) from exc
    return AccountRead.model_validate(account)


@router.post(
    "/{user_id}/activate",
    response_model=AccountStatusRead,
    response_model_exclude_unset=True,
)
def activate_user(user_id: int, db: Session = Depends(get_db)):
    """Activate the account."""

    return _run_transition(
        db,
        user_id,
        lambda: activate_account_uc(db, user_id),
        success_message="Account activated successfully",
        failure_message="Failed to activate account",
    )


@router.post(
    "/{user_id}/deactivate",
    response_model=AccountStatusRead,
    response_model_exclude_unset=True,
)
def deactivate_user(user_id: int, db: Session = Depends(get_db)):
    """Deactivate the account."""

    return _run_transition(
        db,
        user_id,
        lambda: deactivate_account_uc(db, user_id),
        success_message="Account deactivated successfully",
        failure_message="Failed to deactivate account",
    )


@router.post(
    "/{user_id}/suspend",
    response_model=AccountStatusRead,
    response_model_exclude_unset=True,
)
def suspend_user(
    user_id: int,
    payload: SuspendAccountRequest | None = Body(default=None),
    db: Session = Depends(get_db),
):
    """Suspend the account with an optional reason."""

    reason = payload.reason if payload is not None else None
    return _run_transition(
        db,
        user_id,
        lambda: suspend_account_uc(db, user_id, reason=reason),
        success_message="Account suspended successfully",
        failure_message="Failed to suspend account",
    )


@router.post(
    "/{user_id}/unsuspend",
    response_model=AccountStatusRead,
    response_model_exclude_unset=True,
)
def unsuspend_user(user_id: int, db: Session = Depends(get_db)):
    """Lift the suspension of the account."""

    return _run_transition(
        db,
        user_id,
        lambda: unsuspend_account_uc(db, user_id),
        success_message="Account unsuspended successfully",
        failure_message="Failed to unsuspend account",
    )


@router.post(
    "/{user_id}/unlock",
    response_model=AccountStatusRead,
    response_model_exclude_unset=True,
)
def unlock_user(user_id: int, db: Session = Depends(get_db)):
    """Unlock the account and reset its failed login counter."""

    return _run_transition(
        db,
        user_id,
        lambda: unlock_account_uc(db, user_id),
        success_message="Account unlocked successfully",
        failure_message="Failed to unlock account",
    )

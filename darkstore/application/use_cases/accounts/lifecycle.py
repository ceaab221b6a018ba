"""Shared read-check-write flow for account status transitions."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from sqlalchemy.orm import Session

from darkstore.domain.entities import Account
from darkstore.domain.exceptions import AccountNotFoundError, PrivilegedAccountError
from darkstore.infrastructure.repositories import AccountRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AccountStatusChange:
    """Identifier of the changed account and the values of the fields written."""

    account_id: int
    changes: dict[str, Any] = field(default_factory=dict)


def load_mutable_account(repository: AccountRepository, account_id: int) -> Account:
    """Return the account if its status may be changed.

    Raises :class:`AccountNotFoundError` for unknown ids and
    :class:`PrivilegedAccountError` for super admin accounts.
    """

    account = repository.get(account_id)
    if account is None:
        raise AccountNotFoundError(account_id)
    if account.is_privileged():
        logger.warning(
            "Rejected status change on privileged account %s (%s)",
            account_id,
            account.role.value,
        )
        raise PrivilegedAccountError(account_id)
    return account


def apply_status_change(
    session: Session, account_id: int, values: Mapping[str, Any]
) -> AccountStatusChange:
    """Guard ``account_id`` and write exactly the field group in ``values``."""

    repository = AccountRepository(session)
    load_mutable_account(repository, account_id)
    account = repository.update_fields(account_id, values)
    logger.info("Updated account %s: %s", account_id, ", ".join(sorted(values)))
    return AccountStatusChange(
        account_id=account.id,
        changes={name: getattr(account, name) for name in values},
    )


__all__ = ["AccountStatusChange", "apply_status_change", "load_mutable_account"]

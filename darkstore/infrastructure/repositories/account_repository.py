"""Persistence layer for account data."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sqlalchemy.orm import Session

from darkstore.domain.entities import PRIVILEGED_ROLE, Account, AccountRole
from darkstore.domain.exceptions import (
    AccountNotFoundError,
    PrivilegedAccountError,
    UnknownAccountRoleError,
)
from darkstore.infrastructure.models import AccountModel
from darkstore.utils import ensure_app_naive_datetime, ensure_app_timezone

_DATETIME_FIELDS = frozenset({"locked_until", "last_login_at"})


class AccountRepository:
    """Read accounts and write back status field groups."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, account_id: int) -> Account | None:
        model = self.session.get(AccountModel, account_id)
        return self._to_entity(model) if model else None

    def exists(self, account_id: int) -> bool:
        return self.session.get(AccountModel, account_id) is not None

    def update_fields(self, account_id: int, values: Mapping[str, Any]) -> Account:
        """Write ``values`` onto a non-privileged account in one ``UPDATE``.

        Only the given columns are part of the statement, so concurrent writers
        touching other status dimensions are not overwritten. The statement
        also filters on the role, so an account promoted to super admin after
        it was read is left untouched.
        """

        if not values:
            raise ValueError("At least one field is required for an account update")

        payload = {
            name: ensure_app_naive_datetime(value) if name in _DATETIME_FIELDS else value
            for name, value in values.items()
        }
        updated = (
            self.session.query(AccountModel)
            .filter(
                AccountModel.id == account_id,
                AccountModel.role != PRIVILEGED_ROLE.value,
            )
            .update(payload, synchronize_session=False)
        )
        if not updated:
            self.session.rollback()
            current = self.session.get(AccountModel, account_id, populate_existing=True)
            if current is None:
                raise AccountNotFoundError(account_id)
            raise PrivilegedAccountError(account_id)
        self.session.commit()

        model = self.session.get(AccountModel, account_id, populate_existing=True)
        if model is None:
            raise AccountNotFoundError(account_id)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: AccountModel) -> Account:
        try:
            role = AccountRole(model.role)
        except ValueError as exc:
            raise UnknownAccountRoleError(model.id, model.role) from exc

        return Account(
            id=model.id,
            role=role,
            name=model.name,
            email=model.email,
            phone=model.phone,
            is_active=bool(model.is_active),
            is_suspended=bool(model.is_suspended),
            suspension_reason=model.suspension_reason,
            locked_until=ensure_app_timezone(model.locked_until),
            failed_login_attempts=model.failed_login_attempts or 0,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
            last_login_at=ensure_app_timezone(model.last_login_at),
        )


__all__ = ["AccountRepository"]

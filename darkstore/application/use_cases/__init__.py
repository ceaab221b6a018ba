"""Aggregate application use cases."""

from .accounts import (
    activate_account,
    deactivate_account,
    suspend_account,
    unlock_account,
    unsuspend_account,
)
from .notifications import mark_all_read_for

__all__ = [
    "activate_account",
    "deactivate_account",
    "mark_all_read_for",
    "suspend_account",
    "unlock_account",
    "unsuspend_account",
]

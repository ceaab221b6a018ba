"""Roles an account can hold."""

from enum import Enum


class AccountRole(str, Enum):
    """Role values stored on an account."""

    SUPER_ADMIN = "super_admin"
    ADMIN = "admin"
    DARK_STORE_OWNER = "dark_store_owner"
    DELIVERY_PARTNER = "delivery_partner"
    CUSTOMER = "customer"


# The only role whose status fields can never be changed.
PRIVILEGED_ROLE = AccountRole.SUPER_ADMIN


__all__ = ["AccountRole", "PRIVILEGED_ROLE"]

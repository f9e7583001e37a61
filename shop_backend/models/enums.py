"""
Account enums
"""

from enum import Enum


class AccountKind(str, Enum):
    """Discriminator for the two account tables sharing the login endpoint."""
    ADMIN = 'admin'
    CUSTOMER = 'customer'


class AdminRole(str, Enum):
    ADMIN = 'admin'
    SUPER_ADMIN = 'super_admin'

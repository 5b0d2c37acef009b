"""Domain enums shared by models, schemas and the lifecycle rules.

str Enums so values serialize to JSON and store in String columns as-is.
"""
from enum import Enum


class PropertyStatus(str, Enum):
    """Listing lifecycle states — maps to `properties.status`."""
    PENDING_PAYMENT = "pending_payment"
    PENDING_APPROVAL = "pending_approval"
    ACTIVE = "active"
    REJECTED = "rejected"


class ContactOverride(str, Enum):
    """Who answers buyer outreach for a listing."""
    OWNER = "owner"
    ADMIN = "admin"


class AccountType(str, Enum):
    PARTICULAR = "particular"
    CORRETOR = "corretor"
    IMOBILIARIA = "imobiliaria"


class UserRole(str, Enum):
    USER = "user"
    ADMIN = "admin"


class UserStatus(str, Enum):
    ACTIVE = "active"
    BLOCKED = "blocked"


class ValidationStatus(str, Enum):
    """Professional account validation — independent from listing approval."""
    NOT_SUBMITTED = "not_submitted"
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


PROFESSIONAL_ACCOUNT_TYPES = frozenset({AccountType.CORRETOR, AccountType.IMOBILIARIA})

DEFAULT_PROPERTY_TYPES = ("Apartment", "House", "Land")

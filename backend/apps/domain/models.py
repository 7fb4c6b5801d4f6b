# apps/domain/models.py

"""
Domain Models - Value Objects and Exceptions

Value Objects: Immutable, defined by attributes (e.g., SubscriptionResult)
"""

from dataclasses import dataclass
from enum import Enum


class SubscriptionStatus(str, Enum):
    """Outcome of an enrollment attempt"""
    SUBSCRIBED = "subscribed"
    ALREADY_SUBSCRIBED = "already_subscribed"


# ============================================================
# VALUE OBJECTS (Immutable)
# ============================================================

@dataclass(frozen=True)
class SubscriptionResult:
    """
    Result of subscribing an email address

    The email is kept exactly as received; the subscriber set treats
    addresses as opaque strings.
    """
    email: str
    status: SubscriptionStatus

    @property
    def is_new(self) -> bool:
        return self.status == SubscriptionStatus.SUBSCRIBED


def mask_email(email: str) -> str:
    """
    Hide most of the local part of an address for log output

    Examples:
        >>> mask_email("ferris@rust-lang.org")
        'f*****@rust-lang.org'
        >>> mask_email("x")
        '*'
    """
    local, sep, domain = str(email).partition("@")
    if not local:
        return f"{sep}{domain}"
    masked = local[0] + "*" * (len(local) - 1) if len(local) > 1 else "*"
    return f"{masked}{sep}{domain}"


# ============================================================
# DOMAIN EXCEPTIONS
# ============================================================

class DomainException(Exception):
    """Base exception for domain layer"""
    pass


class ValidationError(DomainException):
    """Raised when domain validation fails"""
    pass


class StoreConnectivityError(DomainException):
    """Raised when the subscriber store cannot be reached or a command fails"""
    pass

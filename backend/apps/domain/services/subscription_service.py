# apps/domain/services/subscription_service.py

"""
Subscription Service - Orchestrates newsletter enrollment

This service applies the enrollment rules on top of a subscriber store
and is shared by the subscribe and count endpoints.
"""

import logging
from typing import List

from apps.domain.models import (
    SubscriptionResult,
    SubscriptionStatus,
    ValidationError,
    mask_email,
)
from apps.domain.ports.subscribers import ISubscriberStore

logger = logging.getLogger(__name__)


class SubscriptionService:
    """
    Subscription service for the tutorial site's mailing list

    Responsibilities:
    - Reject empty addresses before touching the store
    - Enroll addresses idempotently
    - Report subscriber counts
    """

    def __init__(self, store: ISubscriberStore, store_type: str = "unknown"):
        """
        Initialize subscription service

        Args:
            store: Subscriber store implementation
            store_type: Name of the configured store, used in reports
        """
        self._store = store
        self.store_type = store_type

    def subscribe(self, email: str) -> SubscriptionResult:
        """
        Add an email to the subscriber set

        The membership check and the insert are a single store call, so a
        repeated or concurrent request for the same address never inserts
        twice.

        Args:
            email: Candidate address, stored exactly as given

        Returns:
            SubscriptionResult with SUBSCRIBED or ALREADY_SUBSCRIBED status

        Raises:
            ValidationError: If email is missing or empty
            StoreConnectivityError: If the store cannot be reached
        """
        if not email:
            raise ValidationError("Missing required fields")

        if self._store.add(email):
            logger.info(f"New subscriber: {mask_email(email)}")
            return SubscriptionResult(email=email, status=SubscriptionStatus.SUBSCRIBED)

        logger.info(f"Duplicate subscription ignored: {mask_email(email)}")
        return SubscriptionResult(
            email=email, status=SubscriptionStatus.ALREADY_SUBSCRIBED
        )

    def count(self) -> int:
        """Number of distinct subscribers"""
        count = self._store.count()
        logger.debug(f"Subscriber count: {count}")
        return count

    def is_subscribed(self, email: str) -> bool:
        """Check whether an email is already subscribed"""
        if not email:
            return False
        return self._store.contains(email)

    def list_subscribers(self) -> List[str]:
        """All subscribers in sorted order"""
        return sorted(self._store.members())

    def ping(self) -> bool:
        """Check the subscriber store is reachable"""
        return self._store.ping()

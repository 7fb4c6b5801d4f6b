# apps/domain/ports/subscribers.py

"""
Subscriber Store Port - Interface for the subscriber set

The store is a set of email strings; uniqueness comes from set semantics.
"""

from typing import Protocol, Set


class ISubscriberStore(Protocol):
    """
    Interface for subscriber persistence

    Implementations must make add() atomic: two concurrent calls for the
    same new address must not both report it as new.
    """

    def add(self, email: str) -> bool:
        """
        Insert an email if it is not already a member

        Args:
            email: Address to store, kept as-is

        Returns:
            True if the email was added, False if it was already present

        Raises:
            StoreConnectivityError: If the store cannot be reached
        """
        ...

    def contains(self, email: str) -> bool:
        """
        Check membership

        Raises:
            StoreConnectivityError: If the store cannot be reached
        """
        ...

    def count(self) -> int:
        """
        Number of distinct subscribed emails

        Raises:
            StoreConnectivityError: If the store cannot be reached
        """
        ...

    def members(self) -> Set[str]:
        """
        All subscribed emails

        Raises:
            StoreConnectivityError: If the store cannot be reached
        """
        ...

    def ping(self) -> bool:
        """
        Check the store is reachable

        Raises:
            StoreConnectivityError: If the store cannot be reached
        """
        ...

# apps/adapters/stores/inmemory_store.py
"""
In-Memory Subscriber Store for testing and local runs
"""
from typing import Iterable, List, Optional, Set


class InMemorySubscriberStore:
    """
    In-memory subscriber set

    Records every operation name in `operations` so tests can check
    whether the store was touched at all.
    """

    def __init__(self, emails: Optional[Iterable[str]] = None):
        self._emails: Set[str] = set(emails or [])
        self.operations: List[str] = []

    @property
    def touched(self) -> bool:
        return bool(self.operations)

    def add(self, email: str) -> bool:
        """Add email, report whether it was new"""
        self.operations.append("add")
        if email in self._emails:
            return False
        self._emails.add(email)
        return True

    def contains(self, email: str) -> bool:
        self.operations.append("contains")
        return email in self._emails

    def count(self) -> int:
        self.operations.append("count")
        return len(self._emails)

    def members(self) -> Set[str]:
        self.operations.append("members")
        return set(self._emails)

    def ping(self) -> bool:
        self.operations.append("ping")
        return True

    def clear(self):
        """Remove all subscribers"""
        self._emails.clear()
        self.operations.clear()

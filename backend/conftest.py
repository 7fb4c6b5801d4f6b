# backend/conftest.py

"""
Pytest configuration and fixtures.
"""
import pytest
from django.apps import apps as django_apps
from django.core.cache import cache

from apps.adapters.stores.inmemory_store import InMemorySubscriberStore
from apps.domain.services.subscription_service import SubscriptionService


@pytest.fixture(autouse=True)
def clear_throttle_cache():
    """Throttle counters live in the cache; start every test from zero."""
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def subscriber_store():
    """Empty in-memory subscriber set."""
    return InMemorySubscriberStore()


@pytest.fixture
def subscription_service(subscriber_store, monkeypatch):
    """Service wired to the in-memory store and installed for the views."""
    service = SubscriptionService(store=subscriber_store, store_type="inmemory")
    monkeypatch.setattr(
        django_apps.get_app_config("subscriptions"), "subscription_service", service
    )
    return service

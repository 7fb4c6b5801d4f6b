# apps/subscriptions/tests/test_subscriber_report.py
"""
Tests for the subscriber_report management command
"""
from io import StringIO
from unittest.mock import MagicMock

import pytest
from django.apps import apps as django_apps
from django.core.management import call_command
from django.core.management.base import CommandError

from apps.domain.models import StoreConnectivityError
from apps.domain.services.subscription_service import SubscriptionService


def _run(*args):
    out = StringIO()
    call_command("subscriber_report", *args, stdout=out)
    return out.getvalue()


class TestSubscriberReport:

    def test_reports_count_and_store(self, subscription_service, subscriber_store):
        subscriber_store.add("a@x.com")
        subscriber_store.add("b@y.com")

        output = _run()

        assert "store: inmemory" in output
        assert "Total Subscribers: 2" in output

    def test_list_is_sorted(self, subscription_service, subscriber_store):
        for email in ["c@z.com", "a@x.com", "b@y.com"]:
            subscriber_store.add(email)

        output = _run("--list")

        assert output.index("a@x.com") < output.index("b@y.com") < output.index("c@z.com")

    def test_list_empty(self, subscription_service):
        assert "(none)" in _run("--list")

    def test_check(self, subscription_service, subscriber_store):
        subscriber_store.add("a@x.com")

        assert "a@x.com is subscribed" in _run("--check", "a@x.com")
        assert "z@x.com is not subscribed" in _run("--check", "z@x.com")

    def test_store_failure_raises_command_error(self, monkeypatch):
        store = MagicMock()
        store.count.side_effect = StoreConnectivityError("Subscriber store SCARD failed")
        monkeypatch.setattr(
            django_apps.get_app_config("subscriptions"),
            "subscription_service",
            SubscriptionService(store=store, store_type="redis"),
        )

        with pytest.raises(CommandError, match="unavailable"):
            _run()

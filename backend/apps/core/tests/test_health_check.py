# backend/apps/core/tests/test_health_check.py
"""
Tests for health check and discovery endpoints
"""
import itertools
import logging
from unittest.mock import MagicMock, patch

from django.apps import apps as django_apps
from django.test import Client
from django.urls import reverse

from apps.domain.models import StoreConnectivityError
from apps.domain.services.subscription_service import SubscriptionService


class TestStoreHealthCheck:
    """Test store health check endpoint"""

    def test_health_check_success(self, subscription_service):
        """Test successful health check"""
        client = Client()
        response = client.get(reverse("core:store_health"))

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert isinstance(data["latency_ms"], (int, float))
        assert data["latency_ms"] >= 0

    def test_health_check_includes_store_type(self, subscription_service):
        """Test response names the configured store"""
        client = Client()
        response = client.get(reverse("core:store_health"))

        assert response.json()["store"] == "inmemory"

    def test_health_check_store_failure(self, monkeypatch):
        """Test health check when the store is unreachable"""
        store = MagicMock()
        store.ping.side_effect = StoreConnectivityError("Subscriber store PING failed")
        monkeypatch.setattr(
            django_apps.get_app_config("subscriptions"),
            "subscription_service",
            SubscriptionService(store=store, store_type="redis"),
        )

        client = Client()
        response = client.get(reverse("core:store_health"))

        assert response.status_code == 503
        data = response.json()
        assert data["status"] == "unhealthy"
        assert data["error"] == "store unreachable"

    def test_health_check_high_latency_warning(self, subscription_service, caplog):
        """Test warning is logged for high latency"""
        client = Client()

        with patch("apps.core.views.time.time") as mock_time:
            mock_time.side_effect = itertools.chain([0, 0.15], itertools.repeat(0.15))

            with caplog.at_level(logging.WARNING):
                response = client.get(reverse("core:store_health"))

        assert response.status_code == 200
        assert response.json()["latency_ms"] == 150.0
        assert any(
            "Store health check latency is high" in record.message
            for record in caplog.records
        )

    def test_health_check_no_cache(self, subscription_service):
        """Test response has no-cache headers"""
        client = Client()
        response = client.get(reverse("core:store_health"))

        cache_control = response.get("Cache-Control", "").lower()
        assert (
            "no-cache" in cache_control
            or "no-store" in cache_control
            or "max-age=0" in cache_control
        )

    def test_health_check_only_get_method(self, subscription_service):
        """Test endpoint only accepts GET requests"""
        client = Client()

        assert client.post(reverse("core:store_health")).status_code == 405
        assert client.put(reverse("core:store_health")).status_code == 405
        assert client.delete(reverse("core:store_health")).status_code == 405


class TestApiRoot:
    """Test API discovery endpoints"""

    def test_api_root_lists_endpoints(self):
        response = Client().get(reverse("core:api_root"))

        assert response.status_code == 200
        endpoints = response.json()["endpoints"]
        assert endpoints["subscribe"] == "/api/save-email"
        assert endpoints["count"] == "/api/get-count"

    def test_schema_available(self):
        response = Client().get(reverse("schema"))

        assert response.status_code == 200
        assert b"/api/save-email" in response.content


class TestServiceWiring:
    """Test the service built at startup"""

    def test_app_config_builds_service(self):
        service = django_apps.get_app_config("subscriptions").subscription_service

        assert isinstance(service, SubscriptionService)
        assert service.store_type == "inmemory"

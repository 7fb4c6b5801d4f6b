# backend/apps/subscriptions/apps.py
"""
Subscriptions app configuration
"""
import logging

from django.apps import AppConfig

logger = logging.getLogger(__name__)


class SubscriptionsConfig(AppConfig):
    """
    Builds the subscription service once per process

    Views read `subscription_service` from this config instead of
    constructing their own store client per request.
    """

    name = "apps.subscriptions"
    label = "subscriptions"
    verbose_name = "Subscriptions"

    subscription_service = None

    def ready(self):
        from apps.infrastructure.container import create_subscription_service

        self.subscription_service = create_subscription_service()

# apps/core/throttling.py
"""
Django REST Framework Throttle Classes

Custom throttling for the public subscription endpoints.
"""
import logging

from django.conf import settings
from rest_framework.throttling import AnonRateThrottle

from apps.infrastructure.rate_limit import DEFAULT_SUBSCRIBE_RATE, get_rate_limit_config

logger = logging.getLogger(__name__)


class SubscribeEndpointThrottle(AnonRateThrottle):
    """
    Per-IP rate limiting for the subscribe endpoint

    Keeps scripted signups from flooding the subscriber set.
    """

    scope = "subscribe"

    def get_rate(self):
        """Rate comes from the environment's rate limit config"""
        config = get_rate_limit_config(settings.ENVIRONMENT)
        return config.get("subscribe_rate", DEFAULT_SUBSCRIBE_RATE)

    def allow_request(self, request, view):
        """Check if request is allowed"""
        config = get_rate_limit_config(settings.ENVIRONMENT)

        if not config.get("enabled", True):
            return True  # Rate limiting disabled

        allowed = super().allow_request(request, view)

        if not allowed:
            logger.warning(
                f"Rate limit exceeded for IP {self.get_ident(request)} "
                f"on {request.path}"
            )

        return allowed

# backend/apps/core/views.py
"""
Core application views including health checks
"""
import logging
import time

from django.apps import apps as django_apps
from django.http import JsonResponse
from django.views.decorators.cache import never_cache
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import extend_schema
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny

from apps.domain.models import StoreConnectivityError

logger = logging.getLogger(__name__)

LATENCY_WARNING_MS = 100


@extend_schema(
    tags=["Health"],
    summary="Subscriber store health check",
    description="Check if the subscriber store is reachable and measure latency.",
    responses={
        200: OpenApiTypes.OBJECT,
        503: OpenApiTypes.OBJECT,
    },
)
@api_view(["GET"])
@permission_classes([AllowAny])
@never_cache
def store_health_check(request):
    """
    Subscriber store health check endpoint for load balancers and monitoring.

    Returns:
        200: Store is healthy
        503: Store is unreachable

    Response format:
        {"status": "healthy", "latency_ms": 2.1, "store": "redis"}
        {"status": "unhealthy", "error": "store unreachable", "latency_ms": 5000.3}
    """
    service = django_apps.get_app_config("subscriptions").subscription_service
    start_time = time.time()

    try:
        service.ping()

        latency_ms = round((time.time() - start_time) * 1000, 2)

        if latency_ms > LATENCY_WARNING_MS:
            logger.warning(
                f"Store health check latency is high: {latency_ms}ms",
                extra={
                    "latency_ms": latency_ms,
                    "threshold_ms": LATENCY_WARNING_MS,
                },
            )

        return JsonResponse(
            {
                "status": "healthy",
                "latency_ms": latency_ms,
                "store": service.store_type,
            },
            status=200,
        )

    except StoreConnectivityError as e:
        latency_ms = round((time.time() - start_time) * 1000, 2)

        logger.error(
            f"Store health check failed: {e}",
            extra={"latency_ms": latency_ms},
            exc_info=True,
        )

        return JsonResponse(
            {
                "status": "unhealthy",
                "error": "store unreachable",
                "latency_ms": latency_ms,
            },
            status=503,
        )


def api_root(request):
    """API root endpoint showing available endpoints"""
    return JsonResponse(
        {
            "message": "Rust For JS Devs API",
            "version": "1.0",
            "endpoints": {
                "subscribe": "/api/save-email",
                "count": "/api/get-count",
                "health": "/api/health/store",
                "schema": "/api/schema/",
            },
        }
    )

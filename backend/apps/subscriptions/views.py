# apps/subscriptions/views.py
"""
Subscription API views

POST save-email enrolls an address, GET get-count reports the number of
subscribers. Both share the process-wide SubscriptionService.
"""
import logging

from django.apps import apps as django_apps
from django.conf import settings
from django.views.decorators.cache import never_cache
from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes, throttle_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from apps.core.throttling import SubscribeEndpointThrottle
from apps.domain.models import StoreConnectivityError, ValidationError

from . import messages
from .serializers import (
    CountResponseSerializer,
    MessageResponseSerializer,
    SubscribeRequestSerializer,
)

logger = logging.getLogger(__name__)


def get_subscription_service():
    """Service built by SubscriptionsConfig.ready()"""
    return django_apps.get_app_config("subscriptions").subscription_service


def _missing_fields_response():
    # SUBSCRIPTION_STRICT_STATUS=False restores the old always-200 behavior
    strict = getattr(settings, "SUBSCRIPTION_STRICT_STATUS", True)
    return Response(
        {"message": messages.get_message(messages.MISSING_FIELDS)},
        status=status.HTTP_400_BAD_REQUEST if strict else status.HTTP_200_OK,
    )


def _unavailable_response():
    return Response(
        {"message": messages.get_message(messages.UNAVAILABLE)},
        status=status.HTTP_503_SERVICE_UNAVAILABLE,
    )


@extend_schema(
    tags=["Subscriptions"],
    summary="Subscribe an email address",
    request=SubscribeRequestSerializer,
    responses={
        200: MessageResponseSerializer,
        400: MessageResponseSerializer,
        503: MessageResponseSerializer,
    },
)
@api_view(["POST"])
@permission_classes([AllowAny])
@throttle_classes([SubscribeEndpointThrottle])
def save_email(request):
    """
    Add an email to the subscriber set

    Responses:
        {"message": "Success"}                   new subscriber
        {"message": "Already subscribed"}        email already present
        {"message": "Missing required fields"}   no email given, store untouched
    """
    serializer = SubscribeRequestSerializer(data=request.data)
    if not serializer.is_valid():
        logger.info(f"Subscribe request rejected: {serializer.errors}")
        return _missing_fields_response()

    email = serializer.validated_data["email"]

    try:
        result = get_subscription_service().subscribe(email)
    except ValidationError:
        return _missing_fields_response()
    except StoreConnectivityError as e:
        logger.error(f"Subscribe failed, store unavailable: {e}", exc_info=True)
        return _unavailable_response()

    return Response({"message": messages.get_message(result.status.value)})


@extend_schema(
    tags=["Subscriptions"],
    summary="Count subscribers",
    responses={
        200: CountResponseSerializer,
        503: MessageResponseSerializer,
    },
)
@api_view(["GET"])
@permission_classes([AllowAny])
@never_cache
def get_count(request):
    """
    Number of distinct subscribed emails

    Response format:
        {"message": 42}
    """
    try:
        count = get_subscription_service().count()
    except StoreConnectivityError as e:
        logger.error(f"Count failed, store unavailable: {e}", exc_info=True)
        return _unavailable_response()

    logger.info(f"Subscriber count requested: {count}")
    return Response({"message": count})

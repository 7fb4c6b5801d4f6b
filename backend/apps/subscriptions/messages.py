# backend/apps/subscriptions/messages.py
"""
Response wording for the subscription endpoints

The catalog is chosen once through the SUBSCRIPTION_MESSAGE_LOCALE
setting; requests do not negotiate a language.
"""
from typing import Optional

from django.conf import settings

DEFAULT_LOCALE = "en"

MISSING_FIELDS = "missing_fields"
SUBSCRIBED = "subscribed"
ALREADY_SUBSCRIBED = "already_subscribed"
UNAVAILABLE = "unavailable"

MESSAGES = {
    "en": {
        MISSING_FIELDS: "Missing required fields",
        SUBSCRIBED: "Success",
        ALREADY_SUBSCRIBED: "Already subscribed",
        UNAVAILABLE: "Subscription service is temporarily unavailable",
    },
    "es": {
        MISSING_FIELDS: "Faltan campos requeridos",
        SUBSCRIBED: "¡Éxito!",
        ALREADY_SUBSCRIBED: "Ya estás suscrito",
        UNAVAILABLE: "El servicio de suscripción no está disponible temporalmente",
    },
}


def get_message(key: str, locale: Optional[str] = None) -> str:
    """
    Look up a response message

    Args:
        key: Message id (MISSING_FIELDS, SUBSCRIBED, ...)
        locale: Catalog to use, defaults to SUBSCRIPTION_MESSAGE_LOCALE

    Returns:
        Message text, from the English catalog if the locale is unknown
    """
    locale = locale or getattr(settings, "SUBSCRIPTION_MESSAGE_LOCALE", DEFAULT_LOCALE)
    catalog = MESSAGES.get(locale, MESSAGES[DEFAULT_LOCALE])
    return catalog[key]

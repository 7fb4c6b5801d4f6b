# backend/config/settings/production.py
"""
Production settings.

REDIS_URL, SECRET_KEY, ALLOWED_HOSTS and CORS_ALLOWED_ORIGINS must come
from the environment.
"""
from .base import *

ENVIRONMENT = os.environ.setdefault("ENVIRONMENT", "production")

DEBUG = False

ALLOWED_HOSTS = [h for h in os.getenv("ALLOWED_HOSTS", "").split(",") if h]

SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")
SECURE_CONTENT_TYPE_NOSNIFF = True

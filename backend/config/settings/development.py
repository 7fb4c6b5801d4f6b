# backend/config/settings/development.py
from .base import *

DEBUG = True

CORS_ALLOWED_ORIGINS = os.getenv(
    'CORS_ALLOWED_ORIGINS', 'http://localhost:4321,http://localhost:3000'
).split(',')

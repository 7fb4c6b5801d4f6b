# backend/config/wsgi.py
"""
WSGI config for the Rust For JS Devs API.
"""
import os
from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.development')

application = get_wsgi_application()

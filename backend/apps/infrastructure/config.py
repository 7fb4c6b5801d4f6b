# apps/infrastructure/config.py

"""
Configuration Management

Environment-specific configurations for different deployment contexts.
Values are read from the process environment when get_config() is called.
"""

import os
from typing import Any, Dict, Optional

DEFAULT_REDIS_URL = "redis://localhost:6379/0"
DEFAULT_SUBSCRIBERS_KEY = "emails"


def get_environment() -> str:
    """
    Get current environment from environment variable

    Returns:
        Environment name: 'test', 'development', 'staging', or 'production'
    """
    return os.getenv("ENVIRONMENT", "development")


def get_config() -> Dict[str, Any]:
    """
    Get configuration for current environment

    Returns:
        Configuration dictionary for active environment
    """
    env = get_environment()

    config_functions = {
        "test": _test_config,
        "development": _development_config,
        "staging": _staging_config,
        "production": _production_config,
    }

    config = config_functions.get(env, _development_config)()
    config["environment"] = env

    return config


def get_redis_url(default: Optional[str] = None) -> Optional[str]:
    """
    Store URL from REDIS_URL, falling back to VITE_REDIS_URL

    VITE_REDIS_URL is the name the site's frontend build already uses.
    """
    return os.getenv("REDIS_URL") or os.getenv("VITE_REDIS_URL") or default


def _redis_store_config(url: Optional[str]) -> Dict[str, Any]:
    return {
        "type": "redis",
        "url": url,
        "key": os.getenv("SUBSCRIBERS_KEY", DEFAULT_SUBSCRIBERS_KEY),
        "socket_timeout": float(os.getenv("REDIS_SOCKET_TIMEOUT", "5")),
        "socket_connect_timeout": float(os.getenv("REDIS_CONNECT_TIMEOUT", "5")),
    }


# ============================================================
# ENVIRONMENT CONFIGURATIONS
# ============================================================

def _test_config() -> Dict[str, Any]:
    """In-memory store, no network access"""
    return {
        "store": {"type": "inmemory", "key": DEFAULT_SUBSCRIBERS_KEY},
    }


def _development_config() -> Dict[str, Any]:
    """Local Redis (docker run -p 6379:6379 redis)"""
    return {
        "store": _redis_store_config(get_redis_url(DEFAULT_REDIS_URL)),
    }


def _staging_config() -> Dict[str, Any]:
    """Hosted Redis; REDIS_URL is required"""
    return {
        "store": _redis_store_config(get_redis_url()),
    }


def _production_config() -> Dict[str, Any]:
    """Hosted Redis; REDIS_URL is required"""
    return {
        "store": _redis_store_config(get_redis_url()),
    }


# ============================================================
# CONFIGURATION HELPERS
# ============================================================


def get_store_config() -> Dict[str, Any]:
    """Get subscriber store configuration for current environment"""
    return get_config()["store"]


def is_production() -> bool:
    """Check if running in production environment"""
    return get_environment() == "production"


def is_test() -> bool:
    """Check if running in test environment"""
    return get_environment() == "test"

# apps/infrastructure/rate_limit.py
"""
Rate Limiting Configuration

Defines rate limits per environment and provides helper functions.
"""
from typing import Dict

# Rate limit configurations by environment
RATE_LIMIT_CONFIGS = {
    "test": {
        "enabled": True,
        "subscribe_rate": "1000/min",  # Permissive for tests
    },
    "development": {
        "enabled": True,
        "subscribe_rate": "10/min",  # Per-IP signups
    },
    "staging": {
        "enabled": True,
        "subscribe_rate": "10/min",
    },
    "production": {
        "enabled": True,
        "subscribe_rate": "10/min",
    },
}

DEFAULT_SUBSCRIBE_RATE = "10/min"


def get_rate_limit_config(environment: str) -> Dict:
    """
    Get rate limit configuration for environment

    Args:
        environment: Environment name (test, development, staging, production)

    Returns:
        Configuration dictionary
    """
    return RATE_LIMIT_CONFIGS.get(environment, RATE_LIMIT_CONFIGS["development"])

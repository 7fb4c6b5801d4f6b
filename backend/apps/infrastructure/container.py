# apps/infrastructure/container.py

"""
Dependency Injection Container

Simple factory functions for creating fully-wired services.
No magic, no framework - just explicit construction.
"""

from typing import Dict, Any, Optional
import logging

from apps.domain.models import DomainException
from apps.infrastructure.config import get_config

logger = logging.getLogger(__name__)


# ============================================================
# ADAPTER FACTORIES
# ============================================================

def create_subscriber_store(config: Dict[str, Any]):
    """
    Factory for subscriber store based on configuration

    Args:
        config: Store configuration dict with 'type' key

    Returns:
        Implementation of ISubscriberStore

    Raises:
        ValueError: If store type is unknown or misconfigured
    """
    store_type = config.get('type', 'inmemory')

    if store_type == 'inmemory':
        from apps.adapters.stores.inmemory_store import InMemorySubscriberStore
        return InMemorySubscriberStore()

    elif store_type == 'redis':
        from apps.adapters.stores.redis_store import RedisSubscriberStore

        url = config.get('url')
        if not url:
            raise ValueError("Redis store requires a URL (set REDIS_URL)")

        return RedisSubscriberStore.from_url(
            url,
            key=config.get('key', 'emails'),
            socket_timeout=config.get('socket_timeout', 5.0),
            socket_connect_timeout=config.get('socket_connect_timeout', 5.0),
        )

    else:
        raise ValueError(f"Unknown subscriber store type: {store_type}")


# ============================================================
# SERVICE FACTORIES
# ============================================================

def create_subscription_service(config: Optional[Dict] = None):
    """
    Create fully-wired SubscriptionService

    Called once per process (see SubscriptionsConfig.ready); the returned
    service and its pooled store client are shared by every request.

    Args:
        config: Optional configuration dict. If None, uses environment config.

    Returns:
        SubscriptionService instance with its store injected

    Raises:
        DomainException: If the configuration is invalid
    """
    config = config or get_config()

    try:
        validate_config(config)

        store = create_subscriber_store(config['store'])

        from apps.domain.services.subscription_service import SubscriptionService
        service = SubscriptionService(store=store, store_type=config['store']['type'])

        logger.info(
            f"Created SubscriptionService with store={config['store']['type']}, "
            f"key={config['store'].get('key', 'emails')}"
        )

        return service

    except Exception as e:
        logger.error(f"Failed to create subscription service: {e}")
        raise DomainException(f"Service initialization failed: {e}") from e


# ============================================================
# VALIDATION
# ============================================================

def validate_config(config: Dict[str, Any]) -> bool:
    """
    Validate configuration structure

    Args:
        config: Configuration dictionary to validate

    Returns:
        True if valid

    Raises:
        ValueError: If configuration is invalid
    """
    if 'store' not in config:
        raise ValueError("Missing required config key: store")

    if 'type' not in config['store']:
        raise ValueError("Store config missing 'type' key")

    if config['store']['type'] == 'redis' and not config['store'].get('url'):
        raise ValueError("Redis store config requires 'url' (set REDIS_URL)")

    return True


# ============================================================
# HELPER FUNCTIONS
# ============================================================

def get_service_info(config: Optional[Dict] = None) -> Dict[str, Any]:
    """
    Get information about configured services

    Args:
        config: Optional config dict, uses environment config if None

    Returns:
        Dict with service configuration info (no credentials)
    """
    config = config or get_config()
    store = config.get('store', {})

    return {
        'environment': config.get('environment', 'unknown'),
        'store': {
            'type': store.get('type'),
            'key': store.get('key', 'emails'),
        },
    }

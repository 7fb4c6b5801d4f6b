# apps/domain/__init__.py
"""
Domain Layer - Pure Python Business Logic

This package contains the subscription rules of the site's mailing list.
It has ZERO dependencies on Django, Redis, or external services.

Key principles:
- Pure Python (no framework imports)
- Fully unit testable without infrastructure
- Independent of delivery mechanism (HTTP, management commands)
"""

__version__ = "1.0.0"

# backend/apps/core/__init__.py
"""
Core app: API root, health checks, throttling
"""

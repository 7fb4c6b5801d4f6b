# backend/apps/subscriptions/__init__.py
"""
Newsletter subscriptions for the tutorial site
"""

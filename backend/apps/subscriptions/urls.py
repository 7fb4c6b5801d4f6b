# backend/apps/subscriptions/urls.py

"""
Subscription endpoints

Paths match the ones the static site's signup form already calls.
"""
from django.urls import path

from . import views

app_name = "subscriptions"

urlpatterns = [
    path("save-email", views.save_email, name="save-email"),
    path("get-count", views.get_count, name="get-count"),
]

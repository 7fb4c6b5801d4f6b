# backend/apps/subscriptions/serializers.py
"""
Subscription API serializers
"""
from rest_framework import serializers


class SubscribeRequestSerializer(serializers.Serializer):
    """
    Body of a subscribe request

    The address is opaque: no format checks, no trimming. Only a missing
    or falsy value is rejected.
    """

    email = serializers.CharField(trim_whitespace=False)

    def validate_email(self, value):
        # CharField turns 0 into "0"; the raw value decides
        if not self.initial_data.get("email"):
            raise serializers.ValidationError("This field may not be blank.")
        return value


class MessageResponseSerializer(serializers.Serializer):
    """Response body of the subscribe endpoint"""

    message = serializers.CharField()


class CountResponseSerializer(serializers.Serializer):
    """Response body of the count endpoint"""

    message = serializers.IntegerField(min_value=0)

"""Serializers for purchase requests and responses."""

from rest_framework import serializers


class RawField(serializers.Field):
    """Passes the JSON value through untouched.

    Integer fields would coerce "2" or 2.0 to 2; the domain decides instead.
    """

    def to_internal_value(self, data):
        return data

    def to_representation(self, value):
        return value


class TicketRequestSerializer(serializers.Serializer):
    """One ``{"type": ..., "count": ...}`` entry of a purchase request."""

    type = serializers.CharField()
    count = RawField()


class PurchaseRequestSerializer(serializers.Serializer):
    """Body of POST /api/purchases."""

    account_id = RawField()
    tickets = TicketRequestSerializer(many=True, allow_empty=True)


class PurchaseOutcomeSerializer(serializers.Serializer):
    """Serializer for PurchaseOutcome domain model."""

    transaction_id = serializers.CharField()
    success = serializers.BooleanField()
    total_cost = serializers.DecimalField(max_digits=10, decimal_places=2)
    total_seats = serializers.IntegerField()
    account_id = serializers.IntegerField()

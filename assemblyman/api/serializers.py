"""
Assemblyman API Serializers.
"""

from rest_framework import serializers

from assemblyman.models import Material, ProductionRecord
from assemblyman.utils import MAX_WHOLE_NUMBER

# A century of history is the widest report window.
MAX_REPORT_DAYS = 36500


class MaterialSerializer(serializers.ModelSerializer):
    """Serializer for Material (stock is read-only, written via actions)."""

    status = serializers.CharField(read_only=True)

    class Meta:
        model = Material
        fields = [
            "uuid",
            "name",
            "unit",
            "current_stock",
            "reorder_point",
            "status",
            "updated_at",
        ]
        read_only_fields = fields


class ProductionRecordSerializer(serializers.ModelSerializer):
    """Serializer for ProductionRecord."""

    user = serializers.StringRelatedField()

    class Meta:
        model = ProductionRecord
        fields = ["uuid", "product_name", "quantity", "produced_at", "user"]
        read_only_fields = fields


class ProduceSerializer(serializers.Serializer):
    """
    Input for recording production.

    quantity is passed through untouched: an empty or invalid quantity is
    a no-op, not a validation error.
    """

    product = serializers.CharField(max_length=120)
    quantity = serializers.CharField(required=False, allow_blank=True, default="")


class RestockSerializer(serializers.Serializer):
    quantity = serializers.CharField(allow_blank=True)


class SetStockSerializer(serializers.Serializer):
    value = serializers.CharField(allow_blank=True)


class ReorderSuggestionSerializer(serializers.Serializer):
    """Serializer for results.ReorderSuggestion."""

    material = MaterialSerializer(read_only=True)
    quantity = serializers.IntegerField(read_only=True)
    status = serializers.CharField(read_only=True)


class PurchaseOrderRequestSerializer(serializers.Serializer):
    supplier = serializers.CharField(max_length=200, allow_blank=True, default="")
    materials = serializers.ListField(
        child=serializers.UUIDField(),
        required=False,
        help_text="Material UUIDs to order; defaults to everything needing attention",
    )


class PurchaseOrderSerializer(serializers.Serializer):
    """Serializer for results.PurchaseOrderDraft."""

    number = serializers.CharField(read_only=True)
    supplier = serializers.CharField(read_only=True)
    lines = ReorderSuggestionSerializer(many=True, read_only=True)
    total_units = serializers.IntegerField(read_only=True)


class ProductionQuerySerializer(serializers.Serializer):
    """Query parameters of the production history list."""

    since = serializers.DateTimeField(required=False)
    until = serializers.DateTimeField(required=False)
    limit = serializers.IntegerField(required=False, min_value=1, max_value=MAX_WHOLE_NUMBER)
    all = serializers.BooleanField(default=False)


class ReportQuerySerializer(serializers.Serializer):
    days = serializers.IntegerField(required=False, min_value=1, max_value=MAX_REPORT_DAYS)

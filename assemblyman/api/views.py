"""
Assemblyman API ViewSets.
"""

from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from assemblyman import workshop
from assemblyman.exceptions import AssemblyError
from assemblyman.models import Material, ProductionRecord
from assemblyman.services import reorder, reports
from .serializers import (
    MaterialSerializer,
    ProduceSerializer,
    ProductionQuerySerializer,
    ProductionRecordSerializer,
    PurchaseOrderRequestSerializer,
    PurchaseOrderSerializer,
    ReorderSuggestionSerializer,
    ReportQuerySerializer,
    RestockSerializer,
    SetStockSerializer,
)

STATUS_BY_CODE = {
    "NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "NO_RECIPE": status.HTTP_404_NOT_FOUND,
    "INSUFFICIENT_MATERIAL": status.HTTP_409_CONFLICT,
    "INSUFFICIENT_STOCK": status.HTTP_409_CONFLICT,
    "STOCK_CONFLICT": status.HTTP_409_CONFLICT,
    "NO_USER": status.HTTP_403_FORBIDDEN,
    "COMMIT_FAILED": status.HTTP_503_SERVICE_UNAVAILABLE,
    "TIMEOUT": status.HTTP_503_SERVICE_UNAVAILABLE,
    "ROLLBACK_FAILED": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


# Details kept out of responses (raw database/driver messages).
INTERNAL_DETAILS = ("cause",)


def error_response(error: AssemblyError) -> Response:
    """Translate an AssemblyError into {"error": code, "message": ..., **details}."""
    body = {k: v for k, v in error.as_dict().items() if k not in INTERNAL_DETAILS}
    body["error"] = error.code
    return Response(
        body,
        status=STATUS_BY_CODE.get(error.code, status.HTTP_400_BAD_REQUEST),
    )


class MaterialViewSet(viewsets.ReadOnlyModelViewSet):
    """
    ViewSet for Material.

    list: All materials, by name
    retrieve: One material by UUID
    restock: Add received stock
    set_stock: Overwrite stock after a count
    """

    permission_classes = [IsAuthenticated]
    queryset = Material.objects.all()
    serializer_class = MaterialSerializer
    lookup_field = "uuid"

    @action(detail=True, methods=["post"])
    def restock(self, request, uuid=None):
        """
        POST /api/assemblyman/materials/{uuid}/restock/
        {"quantity": 50}
        """
        material = self.get_object()
        serializer = RestockSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        try:
            material = workshop.restock(
                material.name, serializer.validated_data["quantity"], user=request.user
            )
        except AssemblyError as e:
            return error_response(e)
        return Response(MaterialSerializer(material).data)

    @action(detail=True, methods=["post"], url_path="set-stock")
    def set_stock(self, request, uuid=None):
        """
        POST /api/assemblyman/materials/{uuid}/set-stock/
        {"value": 120}
        """
        material = self.get_object()
        serializer = SetStockSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        try:
            material = workshop.set_stock(
                material.name, serializer.validated_data["value"], user=request.user
            )
        except AssemblyError as e:
            return error_response(e)
        return Response(MaterialSerializer(material).data)


class ProductionViewSet(mixins.ListModelMixin, viewsets.GenericViewSet):
    """
    ViewSet for production.

    list: The current user's production records, newest first
          (?since=&until= ISO datetimes, ?limit=N, ?all=1 for every user)
    create: Record production of a product
    """

    permission_classes = [IsAuthenticated]
    queryset = ProductionRecord.objects.all()
    serializer_class = ProductionRecordSerializer

    def list(self, request, *args, **kwargs):
        query = ProductionQuerySerializer(data=request.query_params)
        if not query.is_valid():
            return Response(query.errors, status=status.HTTP_400_BAD_REQUEST)
        params = query.validated_data

        records = reports.production_history(
            user=None if params["all"] else request.user,
            since=params.get("since"),
            until=params.get("until"),
            limit=params.get("limit"),
        )
        return Response(ProductionRecordSerializer(records, many=True).data)

    def create(self, request, *args, **kwargs):
        """
        POST /api/assemblyman/production/
        {"product": "Booster Assembly", "quantity": 10}
        """
        serializer = ProduceSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        try:
            result = workshop.produce(
                serializer.validated_data["product"],
                serializer.validated_data["quantity"],
                user=request.user,
            )
        except AssemblyError as e:
            return error_response(e)

        if result is None:
            return Response({"produced": False})

        return Response(
            {
                "produced": True,
                "record": ProductionRecordSerializer(result.record).data,
                "materials": MaterialSerializer(result.materials, many=True).data,
            },
            status=status.HTTP_201_CREATED,
        )


class RecipeViewSet(viewsets.ViewSet):
    """
    Recipe catalog (read-only).

    GET /api/assemblyman/recipes/ → {"Booster Assembly": {"Resistor 1k": 1, ...}, ...}
    """

    permission_classes = [IsAuthenticated]

    def list(self, request):
        return Response(workshop.recipes())


class ReorderViewSet(viewsets.ViewSet):
    """
    Reorder advice.

    list: Materials needing attention with suggested quantities
    purchase_order: Draft a purchase order for a supplier
    """

    permission_classes = [IsAuthenticated]

    def list(self, request):
        suggestions = reorder.reorder_suggestions()
        return Response(ReorderSuggestionSerializer(suggestions, many=True).data)

    @action(detail=False, methods=["post"], url_path="purchase-order")
    def purchase_order(self, request):
        """
        POST /api/assemblyman/reorder/purchase-order/
        {"supplier": "Lanka Components", "materials": ["<uuid>", ...]}
        """
        serializer = PurchaseOrderRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        uuids = serializer.validated_data.get("materials")
        materials = None if uuids is None else list(Material.objects.filter(uuid__in=uuids))

        try:
            draft = workshop.purchase_order(serializer.validated_data["supplier"], materials)
        except AssemblyError as e:
            return error_response(e)
        return Response(PurchaseOrderSerializer(draft).data, status=status.HTTP_201_CREATED)


class ReportViewSet(viewsets.ViewSet):
    """Production reports."""

    permission_classes = [IsAuthenticated]

    @action(detail=False, methods=["get"])
    def summary(self, request):
        """
        GET /api/assemblyman/reports/summary/?days=30
        """
        query = ReportQuerySerializer(data=request.query_params)
        if not query.is_valid():
            return Response(query.errors, status=status.HTTP_400_BAD_REQUEST)
        days = query.validated_data.get("days")

        return Response(
            {
                "production": reports.production_summary(days),
                "materials": reports.material_usage(days),
            }
        )

"""
Assemblyman Service - Thin wrapper over the ledger and services.

Entry point for the presentation layer (views, API, management commands).

Usage:
    from assemblyman import workshop, AssemblyError

    try:
        result = workshop.produce("COMPLETE ANTENNA UNIT", 5, user=request.user)
    except AssemblyError as e:
        messages.error(request, e.message)

    workshop.restock("Resistor 1k", 500, user=request.user)
    workshop.set_stock("Resistor 1k", 0, user=request.user)

    for material in workshop.materials_needing_attention():
        print(material.name, workshop.suggested_reorder_quantity(material))
"""

from datetime import datetime

from assemblyman.catalog import get_catalog
from assemblyman.ledger import MaterialLedger
from assemblyman.models import Material, ProductionRecord
from assemblyman.results import PurchaseOrderDraft, ProductionResult
from assemblyman.services import adjustments, production, reorder, reports


class Workshop:
    """
    Main API for Assemblyman (thin wrapper).

    Every stock write goes through MaterialLedger.
    """

    # ══════════════════════════════════════════════════════════════
    # PRODUCTION
    # ══════════════════════════════════════════════════════════════

    @classmethod
    def produce(cls, product_name: str, quantity, user=None) -> ProductionResult | None:
        """
        Record production, consuming the product's recipe.

        Returns None when quantity is empty or not a positive whole number.
        """
        return production.ProductionEngine(ledger=MaterialLedger()).produce(
            product_name, quantity, user=user
        )

    # ══════════════════════════════════════════════════════════════
    # ADJUSTMENTS
    # ══════════════════════════════════════════════════════════════

    @classmethod
    def restock(cls, material_name: str, quantity, user=None) -> Material:
        return adjustments.restock(material_name, quantity, user=user)

    @classmethod
    def set_stock(cls, material_name: str, value, user=None) -> Material:
        return adjustments.set_stock(material_name, value, user=user)

    # ══════════════════════════════════════════════════════════════
    # REORDER
    # ══════════════════════════════════════════════════════════════

    @classmethod
    def materials_needing_attention(cls) -> list[Material]:
        return reorder.materials_needing_attention()

    @classmethod
    def suggested_reorder_quantity(cls, material: Material) -> int:
        return reorder.suggested_reorder_quantity(material)

    @classmethod
    def purchase_order(cls, supplier: str, materials=None) -> PurchaseOrderDraft:
        return reorder.purchase_order(supplier, materials)

    # ══════════════════════════════════════════════════════════════
    # QUERIES
    # ══════════════════════════════════════════════════════════════

    @classmethod
    def materials(cls) -> list[Material]:
        """All materials, by name."""
        return MaterialLedger().list_all()

    @classmethod
    def get_material(cls, name: str) -> Material:
        return MaterialLedger().get(name)

    @classmethod
    def recipes(cls) -> dict[str, dict[str, int]]:
        """Catalog as plain dicts (for serialization)."""
        return {name: dict(recipe) for name, recipe in get_catalog().items()}

    @classmethod
    def history(
        cls,
        user=None,
        since: datetime = None,
        until: datetime = None,
        limit: int = None,
    ) -> list[ProductionRecord]:
        return reports.production_history(user=user, since=since, until=until, limit=limit)

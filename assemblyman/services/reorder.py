"""
Reorder Advisor.

Read-only signals derived from the ledger:

- stock_status(): critical / warning / ok
- materials_needing_attention(): everything at warning level or below
- suggested_reorder_quantity(): how much to order to reach a safe level
- purchase_order(): draft for the purchase-order document generator

Thresholds are business policy, configurable via settings:
    ATTENTION_FACTOR (default 1.5) and REORDER_MULTIPLIER (default 2).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from django.utils import timezone

from assemblyman.conf import get_attention_factor, get_setting
from assemblyman.exceptions import AssemblyError
from assemblyman.ledger import MaterialLedger
from assemblyman.models import Material, StockStatus
from assemblyman.results import PurchaseOrderDraft, ReorderSuggestion

logger = logging.getLogger(__name__)


def _attention_level(material: Material):
    return material.reorder_point * get_attention_factor()


def stock_status(material: Material) -> str:
    """Classify a material for display (computed on read, never stored)."""
    if material.current_stock <= material.reorder_point:
        return StockStatus.CRITICAL
    if material.current_stock <= _attention_level(material):
        return StockStatus.WARNING
    return StockStatus.OK


def materials_needing_attention(ledger: MaterialLedger | None = None) -> list[Material]:
    """Materials at or below reorder_point × ATTENTION_FACTOR, by name."""
    ledger = ledger or MaterialLedger()
    return [m for m in ledger.list_all() if m.current_stock <= _attention_level(m)]


def suggested_reorder_quantity(material: Material) -> int:
    """max(1, reorder_point × REORDER_MULTIPLIER − current_stock)."""
    multiplier = int(get_setting("REORDER_MULTIPLIER"))
    return max(1, material.reorder_point * multiplier - material.current_stock)


def reorder_suggestions(ledger: MaterialLedger | None = None) -> list[ReorderSuggestion]:
    """One suggestion per material needing attention."""
    return [
        ReorderSuggestion(
            material=material,
            quantity=suggested_reorder_quantity(material),
            status=stock_status(material),
        )
        for material in materials_needing_attention(ledger)
    ]


def purchase_order(
    supplier: str,
    materials: Iterable[Material] | None = None,
    ledger: MaterialLedger | None = None,
) -> PurchaseOrderDraft:
    """
    Build the (material, quantity) list for a purchase order.

    Args:
        supplier: Supplier name printed on the order
        materials: Materials to order; defaults to everything needing attention

    Raises:
        AssemblyError: NOTHING_TO_ORDER if the selection is empty
    """
    if materials is None:
        lines = reorder_suggestions(ledger)
    else:
        lines = [
            ReorderSuggestion(
                material=material,
                quantity=suggested_reorder_quantity(material),
                status=stock_status(material),
            )
            for material in sorted(materials, key=lambda m: m.name)
        ]

    if not lines:
        raise AssemblyError("NOTHING_TO_ORDER", supplier=supplier)

    number = f"PO-{int(timezone.now().timestamp() * 1000)}"

    logger.info(
        f"Drafted purchase order {number} for {supplier or 'unnamed supplier'}",
        extra={"number": number, "supplier": supplier, "lines": len(lines)},
    )

    return PurchaseOrderDraft(number=number, supplier=supplier, lines=lines)

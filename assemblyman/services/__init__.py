"""
Assemblyman Services.

Business logic over the ledger:
- production: BOM explosion, validation and all-or-nothing commit
- adjustments: restock and manual stock correction
- reorder: stock status, attention list and purchase-order drafts
- reports: production history, summary and material usage
- seeding: initial materials from settings
"""

from assemblyman.services.adjustments import restock, set_stock
from assemblyman.services.production import ProductionEngine, produce
from assemblyman.services.reorder import (
    materials_needing_attention,
    purchase_order,
    reorder_suggestions,
    stock_status,
    suggested_reorder_quantity,
)
from assemblyman.services.reports import material_usage, production_history, production_summary
from assemblyman.services.seeding import seed_materials

__all__ = [
    "ProductionEngine",
    "produce",
    "restock",
    "set_stock",
    "stock_status",
    "materials_needing_attention",
    "suggested_reorder_quantity",
    "reorder_suggestions",
    "purchase_order",
    "production_history",
    "production_summary",
    "material_usage",
    "seed_materials",
]

"""
Assemblyman Models.

- Material: raw material with current stock (the ledger rows)
- ProductionRecord: append-only log of committed production events
"""

from assemblyman.models.material import Material, StockStatus
from assemblyman.models.production import ProductionRecord

__all__ = [
    "Material",
    "StockStatus",
    "ProductionRecord",
]

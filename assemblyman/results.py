"""
Assemblyman Result Types.

Structured results for production and reorder operations.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from assemblyman.models import Material, ProductionRecord


@dataclass(frozen=True)
class MaterialShortage:
    """Material without enough stock for a production request."""

    material: str
    required: int
    available: int

    @property
    def shortage(self) -> int:
        return self.required - self.available

    def as_dict(self) -> dict:
        return {
            "material": self.material,
            "required": self.required,
            "available": self.available,
        }


@dataclass
class ProductionResult:
    """
    Committed production event.

    materials: updated Material rows, in recipe order
    """

    record: ProductionRecord
    materials: list[Material] = field(default_factory=list)

    @property
    def product_name(self) -> str:
        return self.record.product_name

    @property
    def quantity(self) -> int:
        return self.record.quantity


@dataclass(frozen=True)
class ReorderSuggestion:
    """Material to replenish and how much to order."""

    material: Material
    quantity: int
    status: str


@dataclass
class PurchaseOrderDraft:
    """Input for the external purchase-order document generator."""

    number: str
    supplier: str
    lines: list[ReorderSuggestion] = field(default_factory=list)

    @property
    def total_units(self) -> int:
        return sum(line.quantity for line in self.lines)

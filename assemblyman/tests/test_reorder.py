"""
Tests for the reorder advisor (assemblyman.services.reorder).
"""

from decimal import Decimal

import pytest

from assemblyman import AssemblyError
from assemblyman.models import Material, StockStatus
from assemblyman.services.reorder import (
    materials_needing_attention,
    purchase_order,
    reorder_suggestions,
    stock_status,
    suggested_reorder_quantity,
)


def make(name, stock, reorder_point=200):
    return Material.objects.create(name=name, current_stock=stock, reorder_point=reorder_point)


@pytest.fixture
def stockroom(db):
    """
    Resistor 1k   150 / 200  critical
    PF 39         250 / 200  warning
    Macking Coil   70 /  50  warning
    Transformer   500 /  50  ok
    """
    return {
        "resistor": make("Resistor 1k", 150),
        "pf39": make("PF 39", 250),
        "coil": make("Macking Coil", 70, reorder_point=50),
        "transformer": make("Transformer", 500, reorder_point=50),
    }


# ═══════════════════════════════════════════════════════════════════
# Status
# ═══════════════════════════════════════════════════════════════════


class TestStockStatus:
    @pytest.mark.parametrize(
        "stock,expected",
        [
            (0, StockStatus.CRITICAL),
            (200, StockStatus.CRITICAL),
            (201, StockStatus.WARNING),
            (300, StockStatus.WARNING),
            (301, StockStatus.OK),
        ],
    )
    def test_boundaries(self, stock, expected):
        material = Material(name="Resistor 1k", current_stock=stock, reorder_point=200)

        assert stock_status(material) == expected

    def test_zero_reorder_point(self):
        assert stock_status(Material(name="Label", current_stock=0, reorder_point=0)) == StockStatus.CRITICAL
        assert stock_status(Material(name="Label", current_stock=1, reorder_point=0)) == StockStatus.OK

    def test_model_property(self):
        assert Material(name="PF 39", current_stock=250, reorder_point=200).status == "warning"

    def test_attention_factor_setting(self, settings):
        settings.ASSEMBLYMAN = {"ATTENTION_FACTOR": "2"}

        material = Material(name="PF 39", current_stock=400, reorder_point=200)

        assert stock_status(material) == StockStatus.WARNING


# ═══════════════════════════════════════════════════════════════════
# Attention list and suggestions
# ═══════════════════════════════════════════════════════════════════


class TestMaterialsNeedingAttention:
    def test_ordered_by_name(self, stockroom):
        names = [m.name for m in materials_needing_attention()]

        assert names == ["Macking Coil", "PF 39", "Resistor 1k"]

    def test_empty_stockroom(self, db):
        assert materials_needing_attention() == []

    def test_read_only(self, stockroom):
        first = [(m.name, m.current_stock) for m in materials_needing_attention()]
        second = [(m.name, m.current_stock) for m in materials_needing_attention()]

        assert first == second
        assert Material.objects.get(name="Resistor 1k").current_stock == 150

    def test_factor_setting(self, stockroom, settings):
        settings.ASSEMBLYMAN = {"ATTENTION_FACTOR": Decimal("1")}

        assert [m.name for m in materials_needing_attention()] == ["Resistor 1k"]


class TestSuggestedReorderQuantity:
    def test_fills_to_twice_reorder_point(self):
        assert suggested_reorder_quantity(Material(current_stock=150, reorder_point=200)) == 250

    def test_at_least_one(self):
        assert suggested_reorder_quantity(Material(current_stock=500, reorder_point=200)) == 1
        assert suggested_reorder_quantity(Material(current_stock=0, reorder_point=0)) == 1

    def test_multiplier_setting(self, settings):
        settings.ASSEMBLYMAN_REORDER_MULTIPLIER = 3

        assert suggested_reorder_quantity(Material(current_stock=150, reorder_point=200)) == 450

    def test_suggestions(self, stockroom):
        suggestions = reorder_suggestions()

        assert [(s.material.name, s.quantity, s.status) for s in suggestions] == [
            ("Macking Coil", 30, StockStatus.WARNING),
            ("PF 39", 150, StockStatus.WARNING),
            ("Resistor 1k", 250, StockStatus.CRITICAL),
        ]


# ═══════════════════════════════════════════════════════════════════
# Purchase order
# ═══════════════════════════════════════════════════════════════════


class TestPurchaseOrder:
    def test_defaults_to_attention_list(self, stockroom):
        draft = purchase_order("Lanka Components")

        assert draft.supplier == "Lanka Components"
        assert draft.number.startswith("PO-")
        assert [line.material.name for line in draft.lines] == ["Macking Coil", "PF 39", "Resistor 1k"]
        assert draft.total_units == 430

    def test_explicit_selection_sorted(self, stockroom):
        draft = purchase_order("Lanka Components", [stockroom["transformer"], stockroom["resistor"]])

        assert [(line.material.name, line.quantity) for line in draft.lines] == [
            ("Resistor 1k", 250),
            ("Transformer", 1),
        ]

    def test_nothing_to_order(self, db):
        with pytest.raises(AssemblyError) as exc:
            purchase_order("Lanka Components")

        assert exc.value.code == "NOTHING_TO_ORDER"
        assert exc.value.details == {"supplier": "Lanka Components"}

    def test_empty_selection(self, stockroom):
        with pytest.raises(AssemblyError) as exc:
            purchase_order("Lanka Components", [])

        assert exc.value.code == "NOTHING_TO_ORDER"

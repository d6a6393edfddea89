"""
Tests for restock and manual stock correction (assemblyman.services.adjustments).
"""

import pytest
from django.contrib.auth import get_user_model

from assemblyman import AssemblyError
from assemblyman.ledger import MAX_STOCK
from assemblyman.models import Material, ProductionRecord
from assemblyman.services.adjustments import restock, set_stock

User = get_user_model()


@pytest.fixture
def resistor(db):
    return Material.objects.create(name="Resistor 1k", current_stock=290, reorder_point=200)


@pytest.fixture
def user(db):
    return User.objects.create_user(username="storekeeper", password="test123")


class TestRestock:
    def test_adds_quantity(self, resistor, user):
        material = restock("Resistor 1k", 50, user=user)

        assert material.current_stock == 340
        resistor.refresh_from_db()
        assert resistor.current_stock == 340

    def test_numeric_string(self, resistor):
        assert restock("Resistor 1k", "10").current_stock == 300

    @pytest.mark.parametrize("quantity", [0, -5, "", "abc", None, 1.5])
    def test_invalid_quantity(self, resistor, quantity):
        with pytest.raises(AssemblyError) as exc:
            restock("Resistor 1k", quantity)

        assert exc.value.code == "INVALID_QUANTITY"
        assert exc.value.details["material"] == "Resistor 1k"
        resistor.refresh_from_db()
        assert resistor.current_stock == 290

    def test_unknown_material(self, db):
        with pytest.raises(AssemblyError) as exc:
            restock("Flux Capacitor", 5)

        assert exc.value.code == "NOT_FOUND"

    def test_history(self, resistor, user):
        restock("Resistor 1k", 50, user=user)

        latest = resistor.history.first()
        assert latest.history_change_reason == "restock"
        assert latest.history_user == user

    def test_no_production_record(self, resistor, user):
        restock("Resistor 1k", 50, user=user)

        assert ProductionRecord.objects.count() == 0


class TestSetStock:
    def test_overwrites(self, resistor):
        assert set_stock("Resistor 1k", 120).current_stock == 120

    def test_zero(self, resistor):
        assert set_stock("Resistor 1k", 0).current_stock == 0

    def test_negative(self, resistor):
        with pytest.raises(AssemblyError) as exc:
            set_stock("Resistor 1k", -5)

        assert exc.value.code == "INVALID_VALUE"
        assert exc.value.is_validation
        resistor.refresh_from_db()
        assert resistor.current_stock == 290

    def test_unknown_material(self, db):
        with pytest.raises(AssemblyError) as exc:
            set_stock("Flux Capacitor", 5)

        assert exc.value.code == "NOT_FOUND"

    def test_history(self, resistor, user):
        set_stock("Resistor 1k", 120, user=user)

        latest = resistor.history.first()
        assert latest.current_stock == 120
        assert latest.history_change_reason == "set_stock"


class TestStockLimits:
    """Quantities beyond what the stock column holds are refused before writing."""

    def test_restock_huge_exponent(self, resistor):
        with pytest.raises(AssemblyError) as exc:
            restock("Resistor 1k", "1e2000000")

        assert exc.value.code == "INVALID_QUANTITY"

    def test_restock_beyond_column(self, resistor):
        with pytest.raises(AssemblyError) as exc:
            restock("Resistor 1k", "1e30")

        assert exc.value.code == "INVALID_QUANTITY"
        resistor.refresh_from_db()
        assert resistor.current_stock == 290

    def test_restock_total_beyond_column(self, resistor):
        with pytest.raises(AssemblyError) as exc:
            restock("Resistor 1k", MAX_STOCK)

        assert exc.value.code == "INVALID_QUANTITY"
        resistor.refresh_from_db()
        assert resistor.current_stock == 290

    def test_set_stock_beyond_column(self, resistor):
        with pytest.raises(AssemblyError) as exc:
            set_stock("Resistor 1k", "99999999999999999999")

        assert exc.value.code == "INVALID_VALUE"
        resistor.refresh_from_db()
        assert resistor.current_stock == 290

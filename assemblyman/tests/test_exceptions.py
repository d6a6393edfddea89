"""
Tests for AssemblyError and input parsing helpers.
"""

import time

import pytest

from assemblyman import AssemblyError
from assemblyman.utils import MAX_WHOLE_NUMBER, parse_whole_number


class TestAssemblyError:
    def test_code_and_details(self):
        error = AssemblyError("NO_RECIPE", product="Booster Assembly")

        assert error.code == "NO_RECIPE"
        assert error.details == {"product": "Booster Assembly"}
        assert str(error) == "AssemblyError(NO_RECIPE: product=Booster Assembly)"

    def test_str_without_details(self):
        assert str(AssemblyError("NO_USER")) == "AssemblyError(NO_USER)"

    def test_message(self):
        error = AssemblyError(
            "INSUFFICIENT_MATERIAL", material="Resistor 1k", required=10, available=5
        )

        assert error.message == "Insufficient materials: Resistor 1k needs 10, only 5 in stock."

    def test_message_missing_details(self):
        assert AssemblyError("STOCK_CONFLICT").message == "Operation failed: stock conflict."

    def test_unknown_code(self):
        assert AssemblyError("SOMETHING_ELSE").message == "Operation failed: something else."

    def test_as_dict(self):
        error = AssemblyError("NO_RECIPE", product="Flux Capacitor")

        assert error.as_dict() == {
            "code": "NO_RECIPE",
            "message": "No recipe found for Flux Capacitor.",
            "product": "Flux Capacitor",
        }

    @pytest.mark.parametrize(
        "code,validation,recoverable",
        [
            ("INSUFFICIENT_MATERIAL", True, True),
            ("NO_USER", True, True),
            ("STOCK_CONFLICT", False, True),
            ("COMMIT_FAILED", False, True),
            ("TIMEOUT", False, True),
            ("ROLLBACK_FAILED", False, False),
        ],
    )
    def test_classification(self, code, validation, recoverable):
        error = AssemblyError(code)

        assert error.is_validation is validation
        assert error.recoverable is recoverable
        assert error.requires_reconciliation is not recoverable


class TestParseWholeNumber:
    @pytest.mark.parametrize(
        "value,expected",
        [
            (10, 10),
            ("10", 10),
            (" 12 ", 12),
            ("12.0", 12),
            (0, 0),
            (-3, -3),
            ("", None),
            ("   ", None),
            (None, None),
            ("abc", None),
            (2.5, None),
            ("1.5", None),
            (True, None),
            (float("inf"), None),
            ("nan", None),
            (MAX_WHOLE_NUMBER, MAX_WHOLE_NUMBER),
            (str(-MAX_WHOLE_NUMBER), -MAX_WHOLE_NUMBER),
            (MAX_WHOLE_NUMBER + 1, None),
            ("99999999999999999999", None),
            (10**40, None),
            ("1e30", None),
            ("2e9", 2000000000),
        ],
    )
    def test_parse(self, value, expected):
        assert parse_whole_number(value) == expected

    @pytest.mark.parametrize("value", ["1e2000000", "-1e20000000", "1e-2000000"])
    def test_huge_exponent_rejected_quickly(self, value):
        start = time.monotonic()

        assert parse_whole_number(value) is None
        assert time.monotonic() - start < 1

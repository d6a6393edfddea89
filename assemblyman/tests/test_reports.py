"""
Tests for production reports (assemblyman.services.reports).
"""

from datetime import timedelta

import pytest
from django.contrib.auth import get_user_model
from django.utils import timezone

from assemblyman.catalog import RecipeCatalog
from assemblyman.models import ProductionRecord
from assemblyman.services.reports import material_usage, production_history, production_summary

User = get_user_model()


@pytest.fixture
def alice(db):
    return User.objects.create_user(username="alice", password="test123")


@pytest.fixture
def bob(db):
    return User.objects.create_user(username="bob", password="test123")


def record(user, product, quantity, days_ago=0):
    return ProductionRecord.objects.create(
        user=user,
        product_name=product,
        quantity=quantity,
        produced_at=timezone.now() - timedelta(days=days_ago),
    )


@pytest.fixture
def records(alice, bob):
    return {
        "old": record(alice, "Booster Assembly", 5, days_ago=40),
        "alice": record(alice, "Booster Assembly", 10, days_ago=2),
        "bob": record(bob, "Wire Assembly", 4, days_ago=1),
        "latest": record(alice, "Booster Assembly", 3),
    }


class TestProductionHistory:
    def test_newest_first(self, records):
        assert production_history() == [
            records["latest"],
            records["bob"],
            records["alice"],
            records["old"],
        ]

    def test_by_user(self, records, bob):
        assert production_history(user=bob) == [records["bob"]]

    def test_time_window(self, records):
        since = timezone.now() - timedelta(days=3)
        until = timezone.now() - timedelta(hours=12)

        assert production_history(since=since, until=until) == [records["bob"], records["alice"]]

    def test_limit(self, records):
        assert production_history(limit=2) == [records["latest"], records["bob"]]

    def test_limit_setting(self, records, settings):
        settings.ASSEMBLYMAN = {"HISTORY_LIMIT": 1}

        assert production_history() == [records["latest"]]


class TestProductionSummary:
    def test_default_window(self, records):
        assert production_summary() == {"Booster Assembly": 13, "Wire Assembly": 4}

    def test_custom_window(self, records):
        assert production_summary(days=60) == {"Booster Assembly": 18, "Wire Assembly": 4}

    def test_by_user(self, records, alice):
        assert production_summary(user=alice) == {"Booster Assembly": 13}

    def test_empty(self, db):
        assert production_summary() == {}


class TestMaterialUsage:
    def test_booster_usage(self, alice):
        record(alice, "Booster Assembly", 10)

        usage = material_usage()

        assert usage["PF 39"] == 20
        assert usage["Resistor 1k"] == 10
        assert list(usage) == sorted(usage)

    def test_sums_across_products(self, alice):
        record(alice, "Booster Assembly", 1)
        record(alice, "Power Supply Assembly", 1)

        assert material_usage()["F-Connector Female (2002)"] == 2

    def test_unknown_product_skipped(self, alice):
        record(alice, "Retired Kit", 7)
        catalog = RecipeCatalog({"Wire Assembly": {"16 1/2 Ygr Wire": 1}})
        record(alice, "Wire Assembly", 2)

        assert material_usage(catalog=catalog) == {"16 1/2 Ygr Wire": 2}

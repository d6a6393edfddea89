"""
Production reports.

Uses aggregate()/annotate() so totals are computed in SQL.
"""

from __future__ import annotations

from collections import defaultdict
from datetime import datetime, timedelta

from django.db.models import Sum
from django.utils import timezone

from assemblyman.catalog import RecipeCatalog, get_catalog
from assemblyman.conf import get_setting
from assemblyman.models import ProductionRecord


def _window_start(days: int | None) -> datetime:
    if days is None:
        days = get_setting("REPORT_WINDOW_DAYS")
    return timezone.now() - timedelta(days=days)


def production_history(
    user=None,
    since: datetime | None = None,
    until: datetime | None = None,
    limit: int | None = None,
) -> list[ProductionRecord]:
    """Production records, newest first, optionally by user and time window."""
    qs = ProductionRecord.objects.select_related("user")

    if user is not None:
        qs = qs.filter(user=user)
    if since is not None:
        qs = qs.filter(produced_at__gte=since)
    if until is not None:
        qs = qs.filter(produced_at__lte=until)

    if limit is None:
        limit = get_setting("HISTORY_LIMIT")

    return list(qs.order_by("-produced_at", "-id")[:limit])


def production_summary(days: int | None = None, user=None) -> dict[str, int]:
    """
    Units produced per product within the window.

    Returns:
        {"Booster Assembly": 120, "COMPLETE ANTENNA UNIT": 40}
    """
    qs = ProductionRecord.objects.filter(produced_at__gt=_window_start(days))
    if user is not None:
        qs = qs.filter(user=user)

    rows = qs.values("product_name").annotate(total=Sum("quantity")).order_by("product_name")
    return {row["product_name"]: row["total"] for row in rows}


def material_usage(
    days: int | None = None,
    user=None,
    catalog: RecipeCatalog | None = None,
) -> dict[str, int]:
    """
    Units of each material consumed by production within the window.

    Products no longer in the catalog are skipped.
    """
    catalog = catalog or get_catalog()
    usage: dict[str, int] = defaultdict(int)

    for product_name, total in production_summary(days, user=user).items():
        recipe = catalog.find(product_name)
        if recipe is None:
            continue
        for material, per_unit in recipe.items():
            usage[material] += per_unit * total

    return dict(sorted(usage.items()))

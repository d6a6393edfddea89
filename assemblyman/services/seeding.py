"""
Material seeding.

Creates one Material per configured entry (ASSEMBLYMAN["MATERIALS"]),
always with zero stock. Runs only against an empty table unless
`only_missing=True`, which adds the names not yet present.
"""

import logging

from django.core.exceptions import ImproperlyConfigured
from django.db import transaction
from simple_history.utils import bulk_create_with_history

from assemblyman.conf import get_setting
from assemblyman.models import Material
from assemblyman.utils import parse_whole_number

logger = logging.getLogger(__name__)


def _build_material(entry: dict) -> Material:
    name = entry.get("name")
    if not name:
        raise ImproperlyConfigured(f"Material entry without a name: {entry!r}")

    reorder_point = parse_whole_number(entry.get("reorder_point", 0))
    if reorder_point is None or reorder_point < 0:
        raise ImproperlyConfigured(
            f"Material {name!r}: reorder_point must be a whole number >= 0"
        )

    return Material(
        name=name,
        unit=entry.get("unit") or "pcs",
        current_stock=0,
        reorder_point=reorder_point,
    )


@transaction.atomic
def seed_materials(only_missing: bool = False) -> list[Material]:
    """
    Seed materials from settings.

    Returns:
        The materials created (empty if nothing was seeded)
    """
    existing = set(Material.objects.values_list("name", flat=True))
    if existing and not only_missing:
        logger.info(f"Materials already present ({len(existing)}), skipping seed")
        return []

    to_create = []
    for entry in get_setting("MATERIALS"):
        material = _build_material(entry)
        if material.name in existing:
            continue
        existing.add(material.name)
        to_create.append(material)

    if not to_create:
        return []

    created = bulk_create_with_history(
        to_create,
        Material,
        default_change_reason="seed",
    )

    logger.info(
        f"Seeded {len(created)} materials",
        extra={"materials": [m.name for m in created]},
    )
    return created

"""
Material Ledger.

The single authoritative writer of stock. Every stock change in the app
goes through one of two primitives:

    ledger.apply_delta("Resistor 1k", -10, expected=300)
    ledger.set_absolute("Resistor 1k", 0)

Each primitive is one conditional UPDATE, so the check (stock bounds,
expected previous value) and the write are a single atomic step per row.
On failure the stored value is left unchanged.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from django.db import transaction
from django.db.models import F
from django.utils import timezone
from simple_history.utils import get_history_manager_for_model

from assemblyman.exceptions import AssemblyError
from assemblyman.models import Material
from assemblyman.signals import stock_changed
from assemblyman.utils import MAX_WHOLE_NUMBER, parse_whole_number

logger = logging.getLogger(__name__)

MAX_STOCK = MAX_WHOLE_NUMBER


def _acting_user(user):
    """Only authenticated users are stored on history rows."""
    if user is not None and getattr(user, "is_authenticated", False):
        return user
    return None


class MaterialLedger:
    """
    Query and mutation entry point for Material stock.

    Usage:
        from assemblyman.ledger import MaterialLedger

        ledger = MaterialLedger()
        material = ledger.apply_delta("Resistor 1k", 50, reason="restock")
    """

    # ══════════════════════════════════════════════════════════════
    # QUERIES
    # ══════════════════════════════════════════════════════════════

    def get(self, name: str) -> Material:
        """Return a material by name; NOT_FOUND if unknown."""
        try:
            return Material.objects.get(name=name)
        except Material.DoesNotExist:
            raise AssemblyError("NOT_FOUND", kind="material", name=name)

    def list_all(self) -> list[Material]:
        """All materials, ordered by name."""
        return list(Material.objects.order_by("name", "pk"))

    def snapshot(self, names: Iterable[str]) -> dict[str, Material]:
        """
        Read several materials in one query.

        Missing names are simply absent from the result.
        """
        return {m.name: m for m in Material.objects.filter(name__in=list(names))}

    # ══════════════════════════════════════════════════════════════
    # MUTATIONS
    # ══════════════════════════════════════════════════════════════

    def apply_delta(
        self,
        name: str,
        delta: int,
        *,
        expected: int | None = None,
        user=None,
        reason: str = "",
    ) -> Material:
        """
        Add delta (may be negative) to a material's stock.

        Args:
            name: Material name
            delta: Signed change
            expected: Stock the caller last read; the write only happens
                      if it is still current (optimistic concurrency)
            user: Acting user, stored on the history row
            reason: Change reason for history

        Raises:
            AssemblyError: NOT_FOUND, INSUFFICIENT_STOCK, STOCK_CONFLICT,
                INVALID_QUANTITY (result would exceed MAX_STOCK)
        """
        if isinstance(delta, bool) or not isinstance(delta, int):
            raise TypeError(f"delta must be an int, got {delta!r}")
        if abs(delta) > MAX_STOCK:
            raise AssemblyError("INVALID_QUANTITY", material=name, quantity=delta)

        qs = Material.objects.filter(name=name)
        if expected is not None:
            qs = qs.filter(current_stock=expected)
        if delta < 0:
            qs = qs.filter(current_stock__gte=-delta)
        else:
            qs = qs.filter(current_stock__lte=MAX_STOCK - delta)

        updated = qs.update(
            current_stock=F("current_stock") + delta,
            updated_at=timezone.now(),
        )

        if not updated:
            current = self.get(name)
            if expected is not None and current.current_stock != expected:
                raise AssemblyError(
                    "STOCK_CONFLICT",
                    material=name,
                    expected=expected,
                    actual=current.current_stock,
                )
            if delta > 0:
                raise AssemblyError(
                    "INVALID_QUANTITY",
                    material=name,
                    quantity=delta,
                    available=current.current_stock,
                    limit=MAX_STOCK,
                )
            raise AssemblyError(
                "INSUFFICIENT_STOCK",
                material=name,
                delta=delta,
                available=current.current_stock,
            )

        material = self.get(name)
        self._after_write(material, material.current_stock - delta, reason, user)
        return material

    def set_absolute(
        self,
        name: str,
        value,
        *,
        expected: int | None = None,
        user=None,
        reason: str = "",
    ) -> Material:
        """
        Overwrite a material's stock.

        Raises:
            AssemblyError: INVALID_VALUE, NOT_FOUND, STOCK_CONFLICT
        """
        new_value = parse_whole_number(value)
        if new_value is None or not 0 <= new_value <= MAX_STOCK:
            raise AssemblyError("INVALID_VALUE", material=name, value=value)

        previous = self.get(name)

        qs = Material.objects.filter(pk=previous.pk)
        if expected is not None:
            qs = qs.filter(current_stock=expected)

        updated = qs.update(current_stock=new_value, updated_at=timezone.now())
        if not updated:
            current = self.get(name)
            raise AssemblyError(
                "STOCK_CONFLICT",
                material=name,
                expected=expected,
                actual=current.current_stock,
            )

        material = self.get(name)
        self._after_write(material, previous.current_stock, reason, user)
        return material

    # ══════════════════════════════════════════════════════════════
    # INTERNALS
    # ══════════════════════════════════════════════════════════════

    def _after_write(self, material: Material, previous: int, reason: str, user) -> None:
        """Record history and notify listeners of a successful write."""
        acting = _acting_user(user)

        # QuerySet.update() bypasses simple_history's signals.
        get_history_manager_for_model(Material).bulk_history_create(
            [material],
            update=True,
            default_user=acting,
            default_change_reason=reason[:100],
        )

        logger.info(
            f"Stock of {material.name}: {previous} → {material.current_stock}",
            extra={
                "material": material.name,
                "previous": previous,
                "current": material.current_stock,
                "reason": reason,
            },
        )

        # Listeners never see a write that is later rolled back.
        transaction.on_commit(
            lambda: stock_changed.send(
                sender=self.__class__,
                material=material,
                previous=previous,
                reason=reason,
                user=acting,
            )
        )

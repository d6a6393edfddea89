"""
Production Engine.

Records production of a product: explodes its recipe, validates stock for
every material on one snapshot, then commits all decrements plus the
ProductionRecord as an all-or-nothing unit.

Usage:
    from assemblyman.services.production import produce

    result = produce("Booster Assembly", 10, user=request.user)
    if result is None:
        ...  # empty/invalid quantity, nothing happened

Commit strategies (ASSEMBLYMAN["COMMIT_STRATEGY"]):
    transaction   one transaction.atomic() block, rolled back by the database
    compensating  sequential writes, compensating increments on failure
    auto          transaction when the database supports it (default)
"""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from contextlib import contextmanager

from django.db import DatabaseError, transaction

from assemblyman.catalog import RecipeCatalog, get_catalog
from assemblyman.conf import get_commit_strategy, get_setting
from assemblyman.exceptions import AssemblyError
from assemblyman.ledger import MaterialLedger
from assemblyman.models import Material, ProductionRecord
from assemblyman.results import MaterialShortage, ProductionResult
from assemblyman.signals import production_recorded
from assemblyman.utils import parse_whole_number

logger = logging.getLogger(__name__)

# Commit-phase errors surfaced as-is; anything else becomes COMMIT_FAILED.
_PASSTHROUGH_CODES = ("STOCK_CONFLICT", "TIMEOUT")


class Deadline:
    """Time budget for one production event."""

    def __init__(self, seconds: float | None, operation: str = "production"):
        self.seconds = seconds
        self.operation = operation
        self.expires_at = None if seconds is None else time.monotonic() + float(seconds)

    def remaining(self) -> float | None:
        if self.expires_at is None:
            return None
        return self.expires_at - time.monotonic()

    def check(self, step: str) -> None:
        remaining = self.remaining()
        if remaining is not None and remaining <= 0:
            raise AssemblyError(
                "TIMEOUT",
                operation=self.operation,
                step=step,
                seconds=self.seconds,
            )


@contextmanager
def statement_timeout(deadline: Deadline):
    """
    Bound each SQL statement by the remaining deadline (PostgreSQL only).

    Must be entered inside transaction.atomic(); SET LOCAL ends with it.
    """
    remaining = deadline.remaining()
    connection = transaction.get_connection()
    if remaining is not None and connection.vendor == "postgresql":
        milliseconds = max(1, int(remaining * 1000))
        with connection.cursor() as cursor:
            cursor.execute(f"SET LOCAL statement_timeout = {milliseconds}")
    yield


def explode(recipe: Mapping[str, int], quantity: int) -> list[tuple[str, int]]:
    """(material, required) pairs for `quantity` units, in recipe order."""
    return [(material, per_unit * quantity) for material, per_unit in recipe.items()]


def find_shortages(
    requirements: list[tuple[str, int]],
    snapshot: Mapping[str, Material],
) -> list[MaterialShortage]:
    """Every requirement the snapshot cannot cover (unknown material = 0)."""
    shortages = []
    for material, required in requirements:
        row = snapshot.get(material)
        available = row.current_stock if row is not None else 0
        if available < required:
            shortages.append(
                MaterialShortage(material=material, required=required, available=available)
            )
    return shortages


class ProductionEngine:
    """
    Validate-then-commit production of finished goods.

    Args:
        ledger: Material ledger used for every stock write
        catalog: Recipe catalog (defaults to the one built from settings)
    """

    def __init__(
        self,
        ledger: MaterialLedger | None = None,
        catalog: RecipeCatalog | None = None,
    ):
        self.ledger = ledger or MaterialLedger()
        self._catalog = catalog

    @property
    def catalog(self) -> RecipeCatalog:
        return self._catalog or get_catalog()

    def produce(self, product_name: str, quantity, user=None) -> ProductionResult | None:
        """
        Record production of `quantity` units of `product_name`.

        Returns None (no-op) when quantity is not a positive whole number.

        Raises:
            AssemblyError: NO_RECIPE, NO_USER, INSUFFICIENT_MATERIAL (no
                mutation happened); STOCK_CONFLICT, TIMEOUT, COMMIT_FAILED
                (everything rolled back); ROLLBACK_FAILED (ledger needs
                manual reconciliation)
        """
        units = parse_whole_number(quantity)
        if units is None or units <= 0:
            logger.debug(f"Ignoring production of {product_name} with quantity {quantity!r}")
            return None

        recipe = self.catalog.find(product_name)
        if recipe is None:
            raise AssemblyError("NO_RECIPE", product=product_name)

        if user is None or not getattr(user, "is_authenticated", False):
            raise AssemblyError("NO_USER", product=product_name)

        deadline = Deadline(get_setting("OPERATION_TIMEOUT"))

        # 1. Validate everything on one snapshot
        requirements = explode(recipe, units)
        snapshot = self.ledger.snapshot(material for material, _ in requirements)
        deadline.check("fetching materials")

        shortages = find_shortages(requirements, snapshot)
        if shortages:
            first = shortages[0]
            logger.warning(
                f"Production of {units}x {product_name} refused: insufficient materials",
                extra={
                    "product": product_name,
                    "quantity": units,
                    "shortages": [s.as_dict() for s in shortages],
                },
            )
            raise AssemblyError(
                "INSUFFICIENT_MATERIAL",
                product=product_name,
                quantity=units,
                material=first.material,
                required=first.required,
                available=first.available,
                shortages=[s.as_dict() for s in shortages],
            )

        # 2. Commit all-or-nothing
        if self._strategy() == "transaction":
            result = self._commit_transaction(product_name, units, requirements, snapshot, user, deadline)
        else:
            result = self._commit_compensating(product_name, units, requirements, snapshot, user, deadline)

        logger.info(
            f"Produced {units}x {product_name}",
            extra={
                "product": product_name,
                "quantity": units,
                "record": str(result.record.uuid),
                "materials": len(result.materials),
            },
        )

        transaction.on_commit(
            lambda: production_recorded.send(
                sender=self.__class__,
                record=result.record,
                materials=result.materials,
            )
        )

        return result

    # ══════════════════════════════════════════════════════════════
    # COMMIT STRATEGIES
    # ══════════════════════════════════════════════════════════════

    def _strategy(self) -> str:
        strategy = get_commit_strategy()
        if strategy == "auto":
            connection = transaction.get_connection()
            return "transaction" if connection.features.supports_transactions else "compensating"
        return strategy

    def _decrement(self, material: str, required: int, snapshot, user, product_name: str) -> Material:
        return self.ledger.apply_delta(
            material,
            -required,
            expected=snapshot[material].current_stock,
            user=user,
            reason=f"production: {product_name}",
        )

    def _create_record(self, product_name: str, units: int, user) -> ProductionRecord:
        return ProductionRecord.objects.create(
            product_name=product_name,
            quantity=units,
            user=user,
        )

    def _commit_transaction(self, product_name, units, requirements, snapshot, user, deadline):
        """Decrements and record in one database transaction."""
        try:
            with transaction.atomic():
                with statement_timeout(deadline):
                    materials = []
                    for material, required in requirements:
                        materials.append(
                            self._decrement(material, required, snapshot, user, product_name)
                        )
                        deadline.check(f"decrementing {material}")
                    record = self._create_record(product_name, units, user)
        except (AssemblyError, DatabaseError) as exc:
            error = self._commit_error(exc, product_name, units)
            if error is exc:
                raise
            raise error from exc

        return ProductionResult(record=record, materials=materials)

    def _commit_compensating(self, product_name, units, requirements, snapshot, user, deadline):
        """Sequential decrements, undone in reverse order if any step fails."""
        applied: list[tuple[str, int]] = []
        materials = []
        try:
            for material, required in requirements:
                materials.append(
                    self._decrement(material, required, snapshot, user, product_name)
                )
                applied.append((material, required))
                deadline.check(f"decrementing {material}")
            record = self._create_record(product_name, units, user)
        except Exception as exc:
            self._compensate(applied, product_name, units, user, exc)
            if not isinstance(exc, (AssemblyError, DatabaseError)):
                raise
            error = self._commit_error(exc, product_name, units)
            if error is exc:
                raise
            raise error from exc

        return ProductionResult(record=record, materials=materials)

    def _compensate(self, applied, product_name, units, user, cause) -> None:
        """Give back every applied decrement; ROLLBACK_FAILED if any cannot be."""
        failed = []
        for material, required in reversed(applied):
            try:
                self.ledger.apply_delta(
                    material,
                    required,
                    user=user,
                    reason=f"rollback: {product_name}",
                )
            except (AssemblyError, DatabaseError) as exc:
                logger.error(
                    f"Could not restore {required} of {material}: {exc}",
                    extra={"material": material, "quantity": required},
                )
                failed.append(material)

        if failed:
            logger.critical(
                f"Production of {units}x {product_name} left the ledger inconsistent",
                extra={
                    "product": product_name,
                    "quantity": units,
                    "materials": failed,
                    "cause": str(cause),
                },
            )
            raise AssemblyError(
                "ROLLBACK_FAILED",
                operation="production",
                product=product_name,
                quantity=units,
                materials=failed,
                cause=str(cause),
            ) from cause

        if applied:
            logger.warning(
                f"Rolled back {len(applied)} decrements of {units}x {product_name}",
                extra={"product": product_name, "materials": [m for m, _ in applied]},
            )

    def _commit_error(self, exc: Exception, product_name: str, units: int) -> AssemblyError:
        if isinstance(exc, AssemblyError) and exc.code in _PASSTHROUGH_CODES:
            if exc.code == "STOCK_CONFLICT":
                logger.warning(f"Production of {units}x {product_name} conflicted: {exc}")
            return exc

        logger.error(
            f"Production of {units}x {product_name} failed during commit: {exc}",
            extra={"product": product_name, "quantity": units},
        )
        return AssemblyError(
            "COMMIT_FAILED",
            operation="production",
            product=product_name,
            quantity=units,
            cause=str(exc),
        )


def produce(product_name: str, quantity, user=None) -> ProductionResult | None:
    """Record production using the default ledger and catalog."""
    return ProductionEngine().produce(product_name, quantity, user=user)

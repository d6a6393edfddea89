"""
Material model.

Material = one raw material of the workshop with its current stock.

Stock is written ONLY through assemblyman.ledger.MaterialLedger
(apply_delta / set_absolute). Never assign current_stock and save().
"""

import uuid

from django.db import models
from django.utils.translation import gettext_lazy as _
from simple_history.models import HistoricalRecords


class StockStatus(models.TextChoices):
    """Computed stock status (never stored)."""

    CRITICAL = "critical", _("Critical")
    WARNING = "warning", _("Warning")
    OK = "ok", _("OK")


class Material(models.Model):
    """
    Raw material tracked by the ledger.

    Lifecycle: seeded once with stock 0, then mutated by production
    (decrement), restock (increment) and manual correction (absolute set).
    """

    # Stable identifier for external references
    uuid = models.UUIDField(
        default=uuid.uuid4,
        editable=False,
        unique=True,
        verbose_name=_("UUID"),
    )

    name = models.CharField(
        unique=True,
        max_length=120,
        verbose_name=_("Name"),
        help_text=_("Unique name used by recipes (e.g. Resistor 1k)"),
    )
    unit = models.CharField(
        max_length=20,
        default="pcs",
        verbose_name=_("Unit"),
    )

    current_stock = models.PositiveIntegerField(
        default=0,
        verbose_name=_("Current Stock"),
    )
    reorder_point = models.PositiveIntegerField(
        default=0,
        verbose_name=_("Reorder Point"),
        help_text=_("Stock level at or below which the material is critical"),
    )

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True, verbose_name=_("created at"))
    updated_at = models.DateTimeField(auto_now=True, verbose_name=_("updated at"))

    # History
    history = HistoricalRecords()

    class Meta:
        db_table = "assemblyman_material"
        verbose_name = _("Material")
        verbose_name_plural = _("Materials")
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name

    @property
    def status(self) -> str:
        from assemblyman.services.reorder import stock_status

        return stock_status(self)

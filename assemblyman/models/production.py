"""
ProductionRecord model.

One row per committed production event. Append-only.
"""

import uuid

from django.conf import settings
from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _


class ProductionRecord(models.Model):
    """
    Completed production of a product.

    Only created after every material decrement of the same event
    has been committed (see assemblyman.services.production).
    """

    uuid = models.UUIDField(
        default=uuid.uuid4,
        editable=False,
        unique=True,
        verbose_name=_("UUID"),
    )

    product_name = models.CharField(
        max_length=120,
        db_index=True,
        verbose_name=_("Product"),
    )
    quantity = models.PositiveIntegerField(
        verbose_name=_("Quantity"),
    )
    produced_at = models.DateTimeField(
        default=timezone.now,
        db_index=True,
        verbose_name=_("Produced at"),
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="production_records",
        verbose_name=_("Recorded by"),
    )

    class Meta:
        db_table = "assemblyman_production_record"
        verbose_name = _("Production Record")
        verbose_name_plural = _("Production Records")
        ordering = ["-produced_at", "-id"]
        indexes = [
            models.Index(fields=["user", "produced_at"], name="assemblyman_prod_user_dt_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.quantity}x {self.product_name}"

"""
Assemblyman Admin: Material and ProductionRecord.

Stock is read-only here: every change must go through the ledger
(restock / set stock / production), which keeps history consistent.
"""

from django.contrib import admin
from django.core.exceptions import PermissionDenied
from simple_history.admin import SimpleHistoryAdmin

from assemblyman.models import Material, ProductionRecord


@admin.register(Material)
class MaterialAdmin(SimpleHistoryAdmin):
    """Admin for raw materials."""

    list_display = ("name", "unit", "current_stock", "reorder_point", "stock_status", "updated_at")
    search_fields = ("name",)
    readonly_fields = ("uuid", "current_stock", "created_at", "updated_at")
    fields = ("name", "unit", "reorder_point", "current_stock", "uuid", "created_at", "updated_at")

    @admin.display(description="Status")
    def stock_status(self, obj):
        return obj.status

    def has_delete_permission(self, request, obj=None):
        return False

    # History is browse-only: reverting would save() stock past the ledger.
    def revert_disabled(self, request, obj=None):
        return True

    def history_form_view(self, request, object_id, version_id, extra_context=None):
        if request.method == "POST":
            raise PermissionDenied
        return super().history_form_view(request, object_id, version_id, extra_context)


@admin.register(ProductionRecord)
class ProductionRecordAdmin(admin.ModelAdmin):
    """Admin for the production log (append-only)."""

    list_display = ("product_name", "quantity", "user", "produced_at")
    list_filter = ("product_name",)
    date_hierarchy = "produced_at"
    raw_id_fields = ("user",)
    readonly_fields = ("uuid", "product_name", "quantity", "user", "produced_at")

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

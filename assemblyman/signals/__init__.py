"""
Assemblyman Signals.

Lets the presentation layer (dashboards, notifications) react to ledger
changes without the core depending on it.

Signals:
    stock_changed: A material's stock was written by the ledger
    production_recorded: A production event was committed
"""

from django.dispatch import Signal

# Sent by MaterialLedger once a write is committed
# Args: material, previous, reason, user
stock_changed = Signal()

# Sent by the production engine once the production event is committed
# Args: record, materials (list of updated Material)
production_recorded = Signal()

__all__ = ["stock_changed", "production_recorded"]

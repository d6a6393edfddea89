"""
Assemblyman Settings.

Supports two formats (dict takes priority):

    # Option 1: Dict
    ASSEMBLYMAN = {
        "COMMIT_STRATEGY": "transaction",
        "OPERATION_TIMEOUT": 10,
    }

    # Option 2: Flat
    ASSEMBLYMAN_COMMIT_STRATEGY = "transaction"
    ASSEMBLYMAN_OPERATION_TIMEOUT = 10

All settings have sensible defaults, zero configuration required.
The default catalog is the antenna workshop's (see assemblyman.defaults).
"""

from decimal import Decimal

from django.conf import settings

from assemblyman import defaults


# ── Defaults ──

DEFAULTS = {
    "MATERIALS": defaults.MATERIALS,
    "SUB_ASSEMBLIES": defaults.SUB_ASSEMBLIES,
    "COMPLETE_UNITS": defaults.COMPLETE_UNITS,
    # "auto" | "transaction" | "compensating"
    "COMMIT_STRATEGY": "auto",
    # Seconds per production event; None disables the deadline.
    "OPERATION_TIMEOUT": 15,
    "ATTENTION_FACTOR": Decimal("1.5"),
    "REORDER_MULTIPLIER": 2,
    "HISTORY_LIMIT": 100,
    "REPORT_WINDOW_DAYS": 30,
}

COMMIT_STRATEGIES = ("auto", "transaction", "compensating")


# ── Accessors ──

_sentinel = object()


def get_setting(name, default=_sentinel):
    """
    Get an assemblyman setting.

    Looks up in order:
    1. ASSEMBLYMAN dict (e.g. ASSEMBLYMAN = {"OPERATION_TIMEOUT": 10})
    2. Flat setting (e.g. ASSEMBLYMAN_OPERATION_TIMEOUT = 10)
    3. DEFAULTS
    """
    assemblyman_dict = getattr(settings, "ASSEMBLYMAN", {})
    if name in assemblyman_dict:
        return assemblyman_dict[name]

    flat_value = getattr(settings, f"ASSEMBLYMAN_{name}", _sentinel)
    if flat_value is not _sentinel:
        return flat_value

    if default is not _sentinel:
        return default

    return DEFAULTS.get(name)


def get_commit_strategy() -> str:
    """Return the configured commit strategy, validated."""
    from django.core.exceptions import ImproperlyConfigured

    strategy = get_setting("COMMIT_STRATEGY")
    if strategy not in COMMIT_STRATEGIES:
        raise ImproperlyConfigured(
            f"ASSEMBLYMAN COMMIT_STRATEGY must be one of {COMMIT_STRATEGIES}, "
            f"got {strategy!r}"
        )
    return strategy


def get_attention_factor() -> Decimal:
    return Decimal(str(get_setting("ATTENTION_FACTOR")))

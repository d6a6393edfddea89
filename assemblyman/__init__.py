"""
Django Assemblyman - Headless BOM production tracker.

Material stock, production against bills of materials, restocking and
reorder advice for a small assembly workshop.

Usage:
    from assemblyman import workshop, AssemblyError

    try:
        result = workshop.produce("Booster Assembly", 10, user=operator)
    except AssemblyError as error:
        if error.code == "INSUFFICIENT_MATERIAL":
            print(f"Missing {error.details['material']}: "
                  f"need {error.details['required']}, have {error.details['available']}")

    workshop.restock("Resistor 1k", 500, user=operator)
    low = workshop.materials_needing_attention()
"""

from assemblyman.exceptions import AssemblyError


def __getattr__(name):
    """Lazy import to avoid AppRegistryNotReady errors."""
    if name in ("workshop", "Workshop"):
        from assemblyman.service import Workshop

        return Workshop
    if name == "ProductionResult":
        from assemblyman.results import ProductionResult

        return ProductionResult
    if name == "MaterialShortage":
        from assemblyman.results import MaterialShortage

        return MaterialShortage
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["workshop", "Workshop", "AssemblyError", "ProductionResult", "MaterialShortage"]
__version__ = "0.1.0"

"""
Recipe Catalog.

Static BOMs (material name → quantity per unit) for every sub-assembly,
plus "complete unit" recipes flattened from their sub-assemblies.

The catalog is built once from settings and is read-only afterwards:

    from assemblyman.catalog import get_catalog

    catalog = get_catalog()
    recipe = catalog.get_recipe("Booster Assembly")
    recipe["Resistor 1k"]  # → 1
"""

from __future__ import annotations

import logging
import threading
from collections import defaultdict
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from django.core.exceptions import ImproperlyConfigured
from django.core.signals import setting_changed
from django.dispatch import receiver

from assemblyman.conf import get_setting
from assemblyman.exceptions import AssemblyError
from assemblyman.utils import parse_whole_number

logger = logging.getLogger(__name__)

Recipe = Mapping[str, int]


def build_complete_unit_recipe(sub_assembly_recipes: Iterable[Recipe]) -> dict[str, int]:
    """
    Flatten sub-assembly recipes into one "complete unit" recipe.

    Every material's requirement is the sum of its requirement across all
    sub-assemblies. Pure summation, so input order never changes the result.
    """
    totals: dict[str, int] = defaultdict(int)
    for recipe in sub_assembly_recipes:
        for material, quantity in recipe.items():
            totals[material] += quantity
    return dict(totals)


def _validate_recipe(product: str, recipe) -> dict[str, int]:
    if not isinstance(recipe, Mapping) or not recipe:
        raise ImproperlyConfigured(f"Recipe for {product!r} must be a non-empty mapping")

    cleaned = {}
    for material, quantity in recipe.items():
        value = parse_whole_number(quantity)
        if value is None or value <= 0:
            raise ImproperlyConfigured(
                f"Recipe {product!r}: quantity for {material!r} must be a "
                f"positive whole number, got {quantity!r}"
            )
        cleaned[str(material)] = value
    return cleaned


class RecipeCatalog:
    """
    Immutable set of named recipes.

    Args:
        sub_assemblies: product name → {material name: quantity per unit}
        complete_units: product name → ordered list of sub-assembly names
    """

    def __init__(
        self,
        sub_assemblies: Mapping[str, Recipe],
        complete_units: Mapping[str, list[str]] | None = None,
    ):
        recipes: dict[str, Recipe] = {}

        for product, recipe in sub_assemblies.items():
            recipes[product] = MappingProxyType(_validate_recipe(product, recipe))

        for product, parts in (complete_units or {}).items():
            if product in recipes:
                raise ImproperlyConfigured(
                    f"Complete unit {product!r} clashes with a sub-assembly name"
                )
            missing = [part for part in parts if part not in recipes]
            if missing or not parts:
                raise ImproperlyConfigured(
                    f"Complete unit {product!r} references unknown sub-assemblies: {missing}"
                )
            recipes[product] = MappingProxyType(
                build_complete_unit_recipe(recipes[part] for part in parts)
            )

        self._recipes = MappingProxyType(recipes)

    @classmethod
    def from_settings(cls) -> RecipeCatalog:
        return cls(
            get_setting("SUB_ASSEMBLIES"),
            get_setting("COMPLETE_UNITS"),
        )

    def __contains__(self, product: str) -> bool:
        return product in self._recipes

    def __len__(self) -> int:
        return len(self._recipes)

    def names(self) -> list[str]:
        """Product names in configuration order."""
        return list(self._recipes)

    def items(self):
        return self._recipes.items()

    def find(self, product: str) -> Recipe | None:
        """Return the recipe for a product, or None."""
        return self._recipes.get(product)

    def get_recipe(self, product: str) -> Recipe:
        """Return the recipe for a product; NOT_FOUND if unknown."""
        recipe = self._recipes.get(product)
        if recipe is None:
            raise AssemblyError("NOT_FOUND", kind="recipe", name=product)
        return recipe

    def materials(self) -> set[str]:
        """Every material referenced by any recipe."""
        return {material for recipe in self._recipes.values() for material in recipe}


# ── Singleton ──

_catalog_lock = threading.Lock()
_catalog_instance: RecipeCatalog | None = None


def get_catalog() -> RecipeCatalog:
    """Return the catalog built from settings (loaded once)."""
    global _catalog_instance

    if _catalog_instance is None:
        with _catalog_lock:
            if _catalog_instance is None:  # double-checked
                _catalog_instance = RecipeCatalog.from_settings()
                logger.info(
                    f"Loaded recipe catalog with {len(_catalog_instance)} recipes",
                    extra={"recipes": _catalog_instance.names()},
                )

    return _catalog_instance


def reset_catalog() -> None:
    """Reset singleton (for tests and settings changes)."""
    global _catalog_instance
    _catalog_instance = None


@receiver(setting_changed)
def _reset_catalog_on_setting_change(sender, setting, **kwargs):
    if setting.startswith("ASSEMBLYMAN"):
        reset_catalog()

"""
Restock and manual stock correction.

Single-material changes outside of production. No ProductionRecord is
created; the ledger's history keeps the trail.
"""

import logging

from assemblyman.exceptions import AssemblyError
from assemblyman.ledger import MaterialLedger
from assemblyman.models import Material
from assemblyman.utils import parse_whole_number

logger = logging.getLogger(__name__)


def restock(material_name: str, quantity, user=None, ledger: MaterialLedger | None = None) -> Material:
    """
    Add received stock to a material.

    Raises:
        AssemblyError: INVALID_QUANTITY (quantity not a positive whole
            number), NOT_FOUND (unknown material)
    """
    units = parse_whole_number(quantity)
    if units is None or units <= 0:
        raise AssemblyError("INVALID_QUANTITY", material=material_name, quantity=quantity)

    ledger = ledger or MaterialLedger()
    material = ledger.apply_delta(material_name, units, user=user, reason="restock")

    logger.info(
        f"Restocked {units} {material.unit} of {material_name}",
        extra={"material": material_name, "quantity": units},
    )
    return material


def set_stock(material_name: str, value, user=None, ledger: MaterialLedger | None = None) -> Material:
    """
    Overwrite a material's stock after a physical count.

    Raises:
        AssemblyError: INVALID_VALUE (negative or not a whole number),
            NOT_FOUND (unknown material)
    """
    ledger = ledger or MaterialLedger()
    material = ledger.set_absolute(material_name, value, user=user, reason="set_stock")

    logger.info(
        f"Stock for {material_name} set to {material.current_stock}",
        extra={"material": material_name, "value": material.current_stock},
    )
    return material

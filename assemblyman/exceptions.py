"""
Assemblyman Exceptions.

All assemblyman errors are wrapped in AssemblyError for consistent handling.
"""

from typing import Any


# Human-readable messages, formatted with the error details.
MESSAGES = {
    "NOT_FOUND": "{kind} '{name}' not found.",
    "NO_RECIPE": "No recipe found for {product}.",
    "INSUFFICIENT_MATERIAL": (
        "Insufficient materials: {material} needs {required}, only {available} in stock."
    ),
    "INSUFFICIENT_STOCK": "Not enough {material} in stock ({available} available).",
    "INVALID_QUANTITY": "Quantity must be a positive whole number.",
    "INVALID_VALUE": "Stock must be a whole number of zero or more.",
    "NO_USER": "User not identified. Cannot record production.",
    "STOCK_CONFLICT": "Stock of {material} changed while saving. Please try again.",
    "COMMIT_FAILED": "Could not save {operation}. No stock was changed, please try again.",
    "TIMEOUT": "Operation timed out: {operation}. Please try again.",
    "ROLLBACK_FAILED": (
        "Saving {operation} failed and stock could not be restored. "
        "Manual reconciliation required for: {materials}."
    ),
    "NOTHING_TO_ORDER": "No materials selected for the purchase order.",
}

# Raised before any mutation; safe to retry after correcting input.
VALIDATION_CODES = frozenset(
    {
        "NOT_FOUND",
        "NO_RECIPE",
        "INSUFFICIENT_MATERIAL",
        "INSUFFICIENT_STOCK",
        "INVALID_QUANTITY",
        "INVALID_VALUE",
        "NO_USER",
        "NOTHING_TO_ORDER",
    }
)


class AssemblyError(Exception):
    """
    Base exception for all Assemblyman errors.

    Usage:
        raise AssemblyError('NO_RECIPE', product='Booster Assembly')

    Attributes:
        code: Error code (NO_RECIPE, INSUFFICIENT_MATERIAL, etc.)
        details: Additional context as keyword arguments
    """

    def __init__(self, code: str, **details: Any):
        self.code = code
        self.details = details
        message = f"{code}: {details}" if details else code
        super().__init__(message)

    @property
    def message(self) -> str:
        """Message suitable for showing to workshop staff."""
        template = MESSAGES.get(self.code)
        if template is not None:
            try:
                return template.format(**self.details)
            except KeyError:
                pass
        return f"Operation failed: {self.code.replace('_', ' ').lower()}."

    @property
    def recoverable(self) -> bool:
        """False only when the ledger may be left inconsistent."""
        return self.code != "ROLLBACK_FAILED"

    @property
    def requires_reconciliation(self) -> bool:
        return self.code == "ROLLBACK_FAILED"

    @property
    def is_validation(self) -> bool:
        return self.code in VALIDATION_CODES

    def as_dict(self) -> dict:
        """Return error as dictionary for API responses."""
        return {"code": self.code, "message": self.message, **self.details}

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"AssemblyError({self.code}: {details_str})"
        return f"AssemblyError({self.code})"


# Error codes
# NOT_FOUND: Material or recipe does not exist
# NO_RECIPE: Production requested for an unknown product
# INSUFFICIENT_MATERIAL: Production validation failed (material, required, available)
# INSUFFICIENT_STOCK: Ledger refused a decrement below zero
# INVALID_QUANTITY / INVALID_VALUE: Bad restock quantity / stock value
# NO_USER: No acting identity for production
# STOCK_CONFLICT: Stock changed between read and conditional write
# COMMIT_FAILED / TIMEOUT: Persistence failed mid-operation, rolled back
# ROLLBACK_FAILED: Compensation failed, ledger needs manual reconciliation

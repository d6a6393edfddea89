"""
Input coercion shared by the catalog, ledger and engines.
"""

from decimal import Decimal, InvalidOperation

# Upper bound of PositiveIntegerField on every supported database.
MAX_WHOLE_NUMBER = 2**31 - 1


def parse_whole_number(value) -> int | None:
    """
    Coerce form/API input to an int.

    Accepts ints, integral Decimals/floats and numeric strings ("12", "12.0").
    Returns None for anything else (blank, non-numeric, fractional, bool)
    and for magnitudes above MAX_WHOLE_NUMBER.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return None
    if not number.is_finite():
        return None
    # Checked on the exponent so "1e2000000" never becomes a huge int.
    if number.adjusted() >= len(str(MAX_WHOLE_NUMBER)):
        return None
    if number != number.to_integral_value():
        return None
    result = int(number)
    if abs(result) > MAX_WHOLE_NUMBER:
        return None
    return result

"""
Check digit validation for GTIN-family barcodes.
"""

import re

from barcode_generator.barcode.exceptions import BarcodeOverflowError, InvalidBarcodeFormat
from barcode_generator.config import get_settings

# Plain ASCII decimal literal: no sign, separators or surrounding whitespace
_DIGITS_RE = re.compile(r"[0-9]+")


def digit_weight(index: int) -> int:
    """
    Weight of a base digit.

    Index 0 is the ones digit of the base (the digit next to the check
    digit). Even indices weigh 3, odd indices weigh 1.
    """
    return 3 if index % 2 == 0 else 1


def ensure_representable(value: int) -> int:
    """Raise BarcodeOverflowError if value is above settings.max_barcode, when set."""
    limit = get_settings().max_barcode
    if limit is not None and value > limit:
        raise BarcodeOverflowError(value, limit)
    return value


def parse_barcode(value: int | str) -> int:
    """
    Normalize a barcode given as an int or a decimal digit string.

    Args:
        value: Non-negative int or its canonical decimal string

    Returns:
        The barcode as an int

    Raises:
        InvalidBarcodeFormat: value is not a plain non-negative integer
        BarcodeOverflowError: value is above the configured maximum
    """
    if isinstance(value, str):
        if not _DIGITS_RE.fullmatch(value):
            raise InvalidBarcodeFormat(f"Not a plain decimal barcode: {value!r}")
        barcode = int(value)
    elif isinstance(value, bool) or not isinstance(value, int):
        raise InvalidBarcodeFormat(f"Unsupported barcode type: {type(value).__name__}")
    else:
        if value < 0:
            raise InvalidBarcodeFormat(f"Barcode must be non-negative, got {value}")
        barcode = value

    return ensure_representable(barcode)


def split_barcode(barcode: int) -> tuple[int, int]:
    """Split a barcode into (base, check_digit)."""
    return divmod(barcode, 10)


def weighted_sum(base: int) -> int:
    """
    Calculate the weighted digit sum of a base.

    Algorithm:
    1. Read the digits least-significant first
    2. Multiply digits at even indices (0, 2, 4, ...) by 3
    3. Multiply digits at odd indices (1, 3, 5, ...) by 1
    4. Sum all results
    """
    total = 0
    for index, digit in enumerate(reversed(str(base))):
        total += int(digit) * digit_weight(index)
    return total


def check_digit_for_sum(total: int) -> int:
    """Check digit that brings a weighted sum to a multiple of 10."""
    return (10 - (total % 10)) % 10


def calculate_check_digit(base: int) -> int:
    """
    Calculate the check digit for a base.

    Checksum = (10 - (weighted_sum mod 10)) mod 10
    """
    return check_digit_for_sum(weighted_sum(base))


def complete_barcode(base: int) -> int:
    """Append the check digit to a base."""
    return base * 10 + calculate_check_digit(base)


def is_valid(barcode: int | str) -> bool:
    """
    Validate a barcode's check digit.

    Args:
        barcode: Full barcode (int or decimal string) including its check digit

    Returns:
        True if the check digit matches

    Raises:
        InvalidBarcodeFormat: malformed input
        BarcodeOverflowError: value above the configured maximum
    """
    base, check_digit = split_barcode(parse_barcode(barcode))
    return check_digit == calculate_check_digit(base)

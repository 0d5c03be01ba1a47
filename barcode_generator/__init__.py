"""
Efficient GTIN barcode generation and check digit validation.
"""

from barcode_generator.barcode import (
    BarcodeError,
    BarcodeOverflowError,
    InvalidBarcodeFormat,
    calculate_check_digit,
    generate,
    generate_lazy,
    generate_partitioned,
    is_valid,
)

__version__ = "1.0.0"
__all__ = [
    "BarcodeError",
    "BarcodeOverflowError",
    "InvalidBarcodeFormat",
    "calculate_check_digit",
    "generate",
    "generate_lazy",
    "generate_partitioned",
    "is_valid",
]

"""
GTIN check digit validation and barcode range generation.
"""

from barcode_generator.barcode.exceptions import (
    BarcodeError,
    BarcodeOverflowError,
    InvalidBarcodeFormat,
)
from barcode_generator.barcode.generator import (
    generate,
    generate_lazy,
    generate_partition,
    generate_partitioned,
)
from barcode_generator.barcode.sequencer import BarcodeStream, BaseSequencer, for_each_base_in_range
from barcode_generator.barcode.stack import DigitSumStack, StackEntry
from barcode_generator.barcode.validator import (
    calculate_check_digit,
    complete_barcode,
    is_valid,
    parse_barcode,
    split_barcode,
)

__all__ = [
    "BarcodeError",
    "BarcodeOverflowError",
    "InvalidBarcodeFormat",
    "generate",
    "generate_lazy",
    "generate_partition",
    "generate_partitioned",
    "BarcodeStream",
    "BaseSequencer",
    "for_each_base_in_range",
    "DigitSumStack",
    "StackEntry",
    "calculate_check_digit",
    "complete_barcode",
    "is_valid",
    "parse_barcode",
    "split_barcode",
]

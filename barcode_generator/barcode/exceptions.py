"""
Errors raised by the barcode engine.
"""


class BarcodeError(Exception):
    """Base class for barcode errors."""


class InvalidBarcodeFormat(BarcodeError, ValueError):
    """Input is not a plain non-negative decimal integer."""


class BarcodeOverflowError(BarcodeError, OverflowError):
    """Value does not fit in the configured barcode range."""

    def __init__(self, value: int, limit: int):
        super().__init__(f"Barcode value {value} exceeds the supported maximum {limit}")
        self.value = value
        self.limit = limit

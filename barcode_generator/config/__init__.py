"""
Configuration management for the barcode generator.
"""

from barcode_generator.config.logging import configure_logging
from barcode_generator.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings", "configure_logging"]

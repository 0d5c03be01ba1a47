"""
Data models for barcode generation.
"""

from barcode_generator.models.partition import Partition, PartitionOptions, plan_partitions

__all__ = [
    "Partition",
    "PartitionOptions",
    "plan_partitions",
]

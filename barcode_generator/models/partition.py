"""
Partition models for parallel barcode generation.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, PositiveInt

from barcode_generator.config import get_settings


@dataclass(frozen=True)
class Partition:
    """A contiguous, inclusive sub-range of bases handled by one worker."""

    start_base: int
    end_base: int

    @property
    def size(self) -> int:
        return self.end_base - self.start_base + 1


class PartitionOptions(BaseModel):
    """Options for partitioned generation."""

    model_config = ConfigDict(frozen=True)

    partition_size: PositiveInt = Field(1000, description="Bases per partition")
    max_workers: PositiveInt | None = Field(
        None, description="Worker pool size (None uses the executor default)"
    )
    backend: Literal["thread", "process"] = "thread"

    @classmethod
    def from_settings(
        cls,
        partition_size: int | None = None,
        max_workers: int | None = None,
        backend: str | None = None,
    ) -> "PartitionOptions":
        """Build options, filling unset values from settings."""
        settings = get_settings()
        return cls(
            partition_size=settings.partition_size if partition_size is None else partition_size,
            max_workers=settings.max_workers if max_workers is None else max_workers,
            backend=backend or settings.worker_backend,
        )


def plan_partitions(start_base: int, end_base: int, partition_size: int) -> Iterator[Partition]:
    """
    Split [start_base, end_base] into disjoint partitions.

    Args:
        start_base: First base of the range
        end_base: Last base of the range (inclusive)
        partition_size: Max bases per partition

    Returns:
        Partitions in ascending order; none for an inverted range
    """
    if partition_size < 1:
        raise ValueError(f"partition_size must be positive, got {partition_size}")

    for first in range(start_base, end_base + 1, partition_size):
        yield Partition(first, min(first + partition_size - 1, end_base))

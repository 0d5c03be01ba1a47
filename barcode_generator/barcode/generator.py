"""
Barcode range generation: eager, lazy and partitioned.

All generators take the first and last barcode of a range. Only their bases
bound the range; the check digits of the endpoints are ignored.
"""

import os
from collections.abc import Iterator
from concurrent.futures import (
    FIRST_COMPLETED,
    Executor,
    Future,
    ProcessPoolExecutor,
    ThreadPoolExecutor,
    wait,
)

import structlog

from barcode_generator.barcode.sequencer import BarcodeStream, BaseSequencer
from barcode_generator.barcode.validator import (
    complete_barcode,
    ensure_representable,
    parse_barcode,
)
from barcode_generator.models import Partition, PartitionOptions, plan_partitions

logger = structlog.get_logger(__name__)


def resolve_range(start_barcode: int | str, end_barcode: int | str) -> tuple[int, int]:
    """
    Turn range endpoints into (start_base, end_base).

    Raises:
        InvalidBarcodeFormat: malformed endpoint
        BarcodeOverflowError: an endpoint or the last barcode produced is too large
    """
    start_base = parse_barcode(start_barcode) // 10
    end_base = parse_barcode(end_barcode) // 10
    if start_base <= end_base:
        ensure_representable(complete_barcode(end_base))
    return start_base, end_base


def generate(start_barcode: int | str, end_barcode: int | str) -> list[int]:
    """
    Generate every valid barcode in a range.

    Materializes the whole range; use generate_lazy or generate_partitioned
    for very large ranges.

    Example:
        >>> generate(6_291_041_500_200, 6_291_041_500_229)
        [6291041500206, 6291041500213, 6291041500220]
    """
    start_base, end_base = resolve_range(start_barcode, end_barcode)
    sequencer = BaseSequencer(start_base, end_base)
    logger.debug("Generating barcodes", start_base=start_base, end_base=end_base, count=len(sequencer))
    return list(sequencer)


def generate_lazy(start_barcode: int | str, end_barcode: int | str) -> BarcodeStream:
    """Generate barcodes in a range one pull at a time."""
    start_base, end_base = resolve_range(start_barcode, end_barcode)
    logger.debug("Opening barcode stream", start_base=start_base, end_base=end_base)
    return BarcodeStream(start_base, end_base)


def generate_partition(partition: Partition) -> list[int]:
    """Worker entry point: generate one partition with a fresh sequencer."""
    return list(BaseSequencer(partition.start_base, partition.end_base))


def _make_executor(options: PartitionOptions) -> Executor:
    if options.backend == "process":
        return ProcessPoolExecutor(max_workers=options.max_workers)
    return ThreadPoolExecutor(max_workers=options.max_workers, thread_name_prefix="barcode")


def generate_partitioned(
    start_barcode: int | str,
    end_barcode: int | str,
    partition_size: int | None = None,
    max_workers: int | None = None,
    backend: str | None = None,
) -> Iterator[int]:
    """
    Generate barcodes in parallel over disjoint partitions.

    There is no ordering guarantee across partitions; barcodes within a
    partition come out ascending. Sort the output if order matters.

    Args:
        start_barcode: First barcode of the range
        end_barcode: Last barcode of the range
        partition_size: Bases per partition (default: settings.partition_size)
        max_workers: Pool size (default: settings.max_workers)
        backend: "thread" or "process" (default: settings.worker_backend)

    Returns:
        Iterator over the generated barcodes
    """
    options = PartitionOptions.from_settings(
        partition_size=partition_size,
        max_workers=max_workers,
        backend=backend,
    )
    start_base, end_base = resolve_range(start_barcode, end_barcode)
    return _run_partitions(start_base, end_base, options)


def _run_partitions(start_base: int, end_base: int, options: PartitionOptions) -> Iterator[int]:
    partitions = plan_partitions(start_base, end_base, options.partition_size)
    executor = _make_executor(options)
    # Bound in-flight work so huge ranges are not submitted all at once
    max_pending = 2 * (options.max_workers or os.cpu_count() or 1)
    pending: set[Future[list[int]]] = set()
    exhausted = False
    produced = 0

    logger.info(
        "Starting partitioned generation",
        start_base=start_base,
        end_base=end_base,
        partition_size=options.partition_size,
        backend=options.backend,
    )

    try:
        while True:
            while not exhausted and len(pending) < max_pending:
                partition = next(partitions, None)
                if partition is None:
                    exhausted = True
                else:
                    pending.add(executor.submit(generate_partition, partition))

            if not pending:
                break

            done, pending = wait(pending, return_when=FIRST_COMPLETED)
            for future in done:
                barcodes = future.result()
                logger.debug("Partition complete", count=len(barcodes))
                produced += len(barcodes)
                yield from barcodes
    finally:
        executor.shutdown(wait=True, cancel_futures=True)

    logger.info("Partitioned generation complete", count=produced)

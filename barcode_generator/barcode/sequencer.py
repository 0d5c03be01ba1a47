"""
Drives a digit-sum stack across a range of bases.
"""

from collections.abc import Iterator

from barcode_generator.barcode.stack import DigitSumStack


class BaseSequencer:
    """
    Produces one barcode per base in [start_base, end_base], ascending.

    The sequencer owns a single stack that is created at the first base and
    advanced for every following one. An inverted range produces nothing.
    """

    def __init__(self, start_base: int, end_base: int):
        if start_base < 0 or end_base < 0:
            raise ValueError("Bases must be non-negative")
        self.start_base = start_base
        self.end_base = end_base
        self._stack: DigitSumStack | None = None

    def __len__(self) -> int:
        return max(0, self.end_base - self.start_base + 1)

    def __iter__(self) -> Iterator[int]:
        for base in range(self.start_base, self.end_base + 1):
            yield self.barcode_for(base)

    def barcode_for(self, base: int) -> int:
        """Complete a base with its check digit using the cached stack."""
        if self._stack is None:
            self._stack = DigitSumStack(base)
        else:
            self._stack.advance(base)
        return self._stack.barcode

    def release(self) -> None:
        """Drop the cached stack."""
        self._stack = None


def for_each_base_in_range(start_base: int, end_base: int) -> Iterator[int]:
    """Yield the check-digit-completed barcode of every base in the range."""
    return iter(BaseSequencer(start_base, end_base))


class BarcodeStream:
    """
    Lazy, forward-only barcode producer.

    State is the next base plus a sequencer, or done. Each pull advances the
    stack by one base. Not safe for concurrent pulls.
    """

    def __init__(self, start_base: int, end_base: int):
        self.start_base = start_base
        self.end_base = end_base
        self._next_base = start_base
        self._sequencer: BaseSequencer | None = BaseSequencer(start_base, end_base)
        if start_base > end_base:
            self.close()

    def __iter__(self) -> "BarcodeStream":
        return self

    def __next__(self) -> int:
        if self._sequencer is None:
            raise StopIteration

        barcode = self._sequencer.barcode_for(self._next_base)
        self._next_base += 1
        if self._next_base > self.end_base:
            self.close()
        return barcode

    def __length_hint__(self) -> int:
        if self._sequencer is None:
            return 0
        return self.end_base - self._next_base + 1

    @property
    def done(self) -> bool:
        return self._sequencer is None

    def close(self) -> None:
        """Stop the stream and release its stack."""
        if self._sequencer is not None:
            self._sequencer.release()
            self._sequencer = None

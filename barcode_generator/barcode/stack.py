"""
Digit-sum stack: cached running weighted sums for a base.

Consecutive integers only differ in a trailing run of digits, so the
running sum over the leading digits can be reused when moving to the next
base. The stack keeps one entry per digit, most-significant first, each
holding the weighted sum of every digit up to and including itself.
"""

from typing import NamedTuple

from barcode_generator.barcode.validator import check_digit_for_sum, digit_weight


class StackEntry(NamedTuple):
    """One digit of the current base."""

    digit: int
    index: int  # counted from the least-significant digit
    total: int  # weighted sum from the most-significant digit through this one


def base_digits(base: int) -> list[int]:
    """Decimal digits of a base, most-significant first."""
    return [int(ch) for ch in str(base)]


def scan_digits(digits: list[int], first_index: int, seed: int = 0) -> list[StackEntry]:
    """
    Build entries for digits read most-significant first.

    Args:
        digits: Digits to scan
        first_index: Index of digits[0], counted from the least-significant end
        seed: Running sum accumulated before digits[0]

    Returns:
        One entry per digit
    """
    entries = []
    total = seed
    for offset, digit in enumerate(digits):
        index = first_index - offset
        total += digit * digit_weight(index)
        entries.append(StackEntry(digit, index, total))
    return entries


class DigitSumStack:
    """
    Incrementally updatable weighted digit sums for one base.

    Owned by a single sequencer; not shared between threads.
    """

    __slots__ = ("_entries", "base", "prefix")

    def __init__(self, base: int):
        if base < 0:
            raise ValueError(f"Base must be non-negative, got {base}")
        digits = base_digits(base)
        self._entries = scan_digits(digits, len(digits) - 1)
        self.base = base
        # Bases sharing this prefix differ only in the units digit
        self.prefix = base // 10

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"DigitSumStack(base={self.base}, total={self.total})"

    @property
    def entries(self) -> tuple[StackEntry, ...]:
        return tuple(self._entries)

    @property
    def digits(self) -> list[int]:
        return [entry.digit for entry in self._entries]

    @property
    def total(self) -> int:
        """Weighted digit sum of the whole base."""
        return self._entries[-1].total

    @property
    def prefix_total(self) -> int:
        """Weighted sum of every digit except the units digit."""
        if len(self._entries) < 2:
            return 0
        return self._entries[-2].total

    @property
    def check_digit(self) -> int:
        return check_digit_for_sum(self.total)

    @property
    def barcode(self) -> int:
        return self.base * 10 + self.check_digit

    def advance(self, new_base: int) -> "DigitSumStack":
        """
        Move the stack to another base, reusing the matching leading digits.

        Args:
            new_base: Base to represent next (usually self.base + 1)

        Returns:
            This stack, updated in place
        """
        if new_base < 0:
            raise ValueError(f"Base must be non-negative, got {new_base}")

        if new_base // 10 == self.prefix:
            units = new_base % 10
            self._entries[-1] = StackEntry(units, 0, self.prefix_total + units * digit_weight(0))
            self.base = new_base
            return self

        digits = base_digits(new_base)
        if len(digits) != len(self._entries):
            # Indices shift with the digit count, nothing is reusable
            self._entries = scan_digits(digits, len(digits) - 1)
        else:
            keep = 0
            for entry, digit in zip(self._entries, digits):
                if entry.digit != digit:
                    break
                keep += 1
            seed = self._entries[keep - 1].total if keep else 0
            del self._entries[keep:]
            self._entries.extend(scan_digits(digits[keep:], len(digits) - 1 - keep, seed))

        self.base = new_base
        self.prefix = new_base // 10
        return self

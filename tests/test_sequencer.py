"""
Tests for the base sequencer and lazy barcode stream.
"""

import pytest

from barcode_generator.barcode.sequencer import BarcodeStream, BaseSequencer, for_each_base_in_range
from barcode_generator.barcode.stack import DigitSumStack
from barcode_generator.barcode.validator import complete_barcode, is_valid


class TestBaseSequencer:
    """Tests for range sequencing."""

    def test_matches_full_scan(self):
        """Test every produced barcode matches a from-scratch calculation."""
        barcodes = list(BaseSequencer(61965916141, 61965916250))
        assert barcodes == [complete_barcode(base) for base in range(61965916141, 61965916251)]

    def test_inclusive_bounds(self):
        """Test both ends of the range are produced."""
        barcodes = list(for_each_base_in_range(629104150020, 629104150029))
        assert len(barcodes) == 10
        assert barcodes[0] == 6_291_041_500_206
        assert barcodes[-1] == 6_291_041_500_299

    def test_single_base(self):
        """Test a one-base range."""
        assert list(BaseSequencer(0, 0)) == [0]

    def test_inverted_range_is_empty(self):
        """Test start after end produces nothing."""
        sequencer = BaseSequencer(10, 9)
        assert len(sequencer) == 0
        assert list(sequencer) == []

    def test_len(self):
        """Test length reports the number of bases."""
        assert len(BaseSequencer(100, 199)) == 100

    def test_crosses_digit_count(self):
        """Test sequencing across 9999 -> 10000."""
        barcodes = list(BaseSequencer(9_990, 10_010))
        assert all(is_valid(barcode) for barcode in barcodes)
        assert barcodes == sorted(barcodes)

    def test_barcode_for_random_access(self):
        """Test barcode_for works for non-consecutive bases."""
        sequencer = BaseSequencer(0, 0)
        for base in [5, 629104150020, 12, 12, 99999]:
            assert sequencer.barcode_for(base) == complete_barcode(base)

    def test_barcode_matches_stack(self):
        """Test produced barcodes come from the stack's own check digit."""
        sequencer = BaseSequencer(0, 0)
        for base in range(9_995, 10_006):
            barcode = sequencer.barcode_for(base)
            assert barcode == DigitSumStack(base).barcode
            assert barcode == sequencer._stack.barcode

    def test_negative_bases(self):
        """Test negative bases are rejected."""
        with pytest.raises(ValueError):
            BaseSequencer(-1, 5)


class TestBarcodeStream:
    """Tests for the lazy stream state machine."""

    def test_yields_in_order(self):
        """Test the stream matches the sequencer."""
        stream = BarcodeStream(629104150020, 629104150029)
        assert list(stream) == list(BaseSequencer(629104150020, 629104150029))

    def test_one_pull_at_a_time(self):
        """Test pulling advances exactly one base."""
        stream = BarcodeStream(629104150020, 629104150022)
        assert stream.__length_hint__() == 3
        assert next(stream) == 6_291_041_500_206
        assert stream.__length_hint__() == 2
        assert next(stream) == 6_291_041_500_213
        assert next(stream) == 6_291_041_500_220
        assert stream.done
        with pytest.raises(StopIteration):
            next(stream)

    def test_forward_only(self):
        """Test a consumed stream stays exhausted."""
        stream = BarcodeStream(1, 5)
        assert len(list(stream)) == 5
        assert list(stream) == []

    def test_iter_returns_self(self):
        """Test the stream is its own iterator."""
        stream = BarcodeStream(1, 5)
        assert iter(stream) is stream

    def test_close_early(self):
        """Test closing stops the stream."""
        stream = BarcodeStream(1, 1000)
        next(stream)
        stream.close()
        assert stream.done
        assert stream.__length_hint__() == 0
        assert list(stream) == []

    def test_inverted_range(self):
        """Test an inverted range is done immediately."""
        stream = BarcodeStream(10, 9)
        assert stream.done
        assert list(stream) == []

"""
Tests for the word-backed bit array.
"""

import pytest

from task_selector.bitset import WordBitset


class TestWordBitset:

    def test_set_and_test(self):
        bits = WordBitset(130)
        bits.set(0)
        bits.set(64)
        bits.set(129)

        assert bits.test(0) and bits.test(64) and bits.test(129)
        assert not bits.test(1)
        assert bits.count() == 3
        assert list(bits.iter_set_bits()) == [0, 64, 129]

    def test_out_of_range(self):
        bits = WordBitset(10)

        with pytest.raises(IndexError):
            bits.set(10)
        with pytest.raises(IndexError):
            bits.test(-1)

    def test_invalid_shape(self):
        with pytest.raises(ValueError):
            WordBitset(0)
        with pytest.raises(ValueError):
            WordBitset(10, words=[0, 0])

    def test_shift_across_word_boundary(self):
        """Bits carry into the next word."""
        bits = WordBitset(200, word_bits=64)
        bits.set(60)
        bits.set(3)

        shifted = bits.shifted_left(10)

        assert list(shifted.iter_set_bits()) == [13, 70]

    def test_shift_by_whole_words(self):
        bits = WordBitset(40, word_bits=8)
        bits.set(1)

        assert list(bits.shifted_left(16).iter_set_bits()) == [17]

    def test_shift_truncates_at_size(self):
        """Bits pushed past the end are dropped."""
        bits = WordBitset(20, word_bits=8)
        bits.set(15)
        bits.set(2)

        shifted = bits.shifted_left(6)

        assert list(shifted.iter_set_bits()) == [8]
        assert shifted.words[-1] <= shifted.tail_mask

    def test_union_and_difference(self):
        a = WordBitset(16, word_bits=8)
        b = WordBitset(16, word_bits=8)
        for bit in (1, 9):
            a.set(bit)
        for bit in (9, 12):
            b.set(bit)

        assert list(a.union(b).iter_set_bits()) == [1, 9, 12]
        assert list(b.difference(a).iter_set_bits()) == [12]

    def test_shape_mismatch(self):
        with pytest.raises(ValueError):
            WordBitset(16).union(WordBitset(17))

    def test_equality(self):
        a = WordBitset(10)
        b = WordBitset(10)
        a.set(4)
        b.set(4)

        assert a == b
        b.set(5)
        assert a != b

"""
Fixed-width bit array backed by a list of machine words.
"""

from __future__ import annotations

from collections.abc import Iterator


class WordBitset:
    """Bits 0..size-1 stored in `word_bits`-wide integer words.

    Bits beyond `size` are always kept clear, so shifts never grow the array.
    """

    def __init__(self, size: int, word_bits: int = 64, words: list[int] | None = None):
        if size <= 0:
            raise ValueError("size must be positive")
        if word_bits <= 0:
            raise ValueError("word_bits must be positive")
        self.size = size
        self.word_bits = word_bits
        self.word_mask = (1 << word_bits) - 1
        self.n_words = (size + word_bits - 1) // word_bits
        tail_bits = size - (self.n_words - 1) * word_bits
        self.tail_mask = (1 << tail_bits) - 1
        if words is None:
            self.words = [0] * self.n_words
        else:
            if len(words) != self.n_words:
                raise ValueError("word count does not match size")
            self.words = list(words)
            self.words[-1] &= self.tail_mask

    def _locate(self, bit: int) -> tuple[int, int]:
        if not 0 <= bit < self.size:
            raise IndexError(f"bit {bit} out of range 0..{self.size - 1}")
        return divmod(bit, self.word_bits)

    def set(self, bit: int) -> None:
        word, offset = self._locate(bit)
        self.words[word] |= 1 << offset

    def test(self, bit: int) -> bool:
        word, offset = self._locate(bit)
        return bool(self.words[word] >> offset & 1)

    def shifted_left(self, shift: int) -> "WordBitset":
        """Copy of the bits moved up by `shift`, truncated to `size`."""
        if shift < 0:
            raise ValueError("shift must be non-negative")
        word_shift, bit_shift = divmod(shift, self.word_bits)
        out = [0] * self.n_words
        for i in range(word_shift, self.n_words):
            src = i - word_shift
            value = (self.words[src] << bit_shift) & self.word_mask
            if bit_shift and src > 0:
                value |= self.words[src - 1] >> (self.word_bits - bit_shift)
            out[i] = value
        return WordBitset(self.size, self.word_bits, out)

    def union(self, other: "WordBitset") -> "WordBitset":
        self._check_compatible(other)
        return WordBitset(
            self.size, self.word_bits, [a | b for a, b in zip(self.words, other.words)]
        )

    def difference(self, other: "WordBitset") -> "WordBitset":
        """Bits set here and clear in `other`."""
        self._check_compatible(other)
        return WordBitset(
            self.size,
            self.word_bits,
            [a & ~b & self.word_mask for a, b in zip(self.words, other.words)],
        )

    def iter_set_bits(self) -> Iterator[int]:
        """Set bit positions in ascending order."""
        for index, word in enumerate(self.words):
            base = index * self.word_bits
            while word:
                low = word & -word
                yield base + low.bit_length() - 1
                word ^= low

    def count(self) -> int:
        return sum(bin(word).count("1") for word in self.words)

    def _check_compatible(self, other: "WordBitset") -> None:
        if other.size != self.size or other.word_bits != self.word_bits:
            raise ValueError("bitsets have different shapes")

    def __eq__(self, other) -> bool:
        if not isinstance(other, WordBitset):
            return NotImplemented
        return (
            self.size == other.size
            and self.word_bits == other.word_bits
            and self.words == other.words
        )

    def __repr__(self) -> str:
        return f"WordBitset(size={self.size}, set_bits={self.count()})"

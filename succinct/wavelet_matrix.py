import logging
from collections import namedtuple

import numpy as np

from succinct.bitvector import BitVector
from succinct.heap import Heap
from utils.utils import ALPHABET_SIZE, build_offsets, to_symbols

logger = logging.getLogger(__name__)

SYMBOL_BITS = 8

# A node of the implicit partition tree visited by topk.
SubRange = namedtuple("SubRange", ["start", "end", "depth", "prefix"])


def _topk_order(lhs, rhs):
    # wider range first, then smaller prefix
    lhs_width = lhs.end - lhs.start
    rhs_width = rhs.end - rhs.start
    if lhs_width != rhs_width:
        return rhs_width - lhs_width
    return lhs.prefix - rhs.prefix


class WaveletMatrix:
    """
    Wavelet matrix over a sequence of 8-bit symbols.

    Layer d holds bit (7 - d) of every symbol, in the order left by stably
    partitioning the previous layer's order on its bit (zeros first). Equal
    symbols end up adjacent after the last partition, and `offsets[v]` is
    where the run of symbol v starts in that final order (`length` when v
    does not occur).

    The matrix is read-only once built. Changing a layer through
    BitVector.set leaves `offsets` stale.
    """

    def __init__(self, values, bitvector_cls=BitVector):
        symbols = to_symbols(values)
        self.length = len(symbols)
        self.layers = []

        current = symbols
        for depth in range(SYMBOL_BITS):
            shift = SYMBOL_BITS - 1 - depth
            bits = ((current >> shift) & 1).astype(bool)
            self.layers.append(bitvector_cls.from_bools(bits))
            current = np.concatenate([current[~bits], current[bits]])

        self.offsets = build_offsets(current).tolist()
        self._zeros = [layer.rank0(len(layer)) for layer in self.layers]
        logger.debug("Built wavelet matrix over %d symbols", self.length)

    def __len__(self):
        return self.length

    @staticmethod
    def _symbol(v):
        if isinstance(v, str):
            if len(v) != 1:
                raise ValueError(f"symbol must be a single character, got {v!r}")
            v = ord(v)
        if not 0 <= v < ALPHABET_SIZE:
            raise ValueError(f"symbol {v} out of range [0, {ALPHABET_SIZE})")
        return v

    @staticmethod
    def _bit(v, depth):
        return (v >> (SYMBOL_BITS - 1 - depth)) & 1

    def _check_range(self, s, e):
        if not 0 <= s <= e <= self.length:
            raise IndexError(f"range [{s}, {e}) out of bounds for length {self.length}")

    def access(self, i):
        if not 0 <= i < self.length:
            raise IndexError(f"index {i} out of range [0, {self.length})")
        result = 0
        for depth, layer in enumerate(self.layers):
            bit = layer.access(i)
            result = (result << 1) | bit
            if bit:
                i = self._zeros[depth] + layer.rank1(i)
            else:
                i = layer.rank0(i)
        return result

    def __getitem__(self, i):
        return self.access(i)

    def rank(self, v, i):
        """Number of occurrences of symbol v in [0, i). i is clamped to length."""
        v = self._symbol(v)
        if i < 0:
            raise IndexError(f"rank index {i} is negative")
        if self.offsets[v] == self.length:
            return 0
        i = min(i, self.length)
        for depth, layer in enumerate(self.layers):
            if self._bit(v, depth):
                i = self._zeros[depth] + layer.rank1(i)
            else:
                i = layer.rank0(i)
        return i - self.offsets[v]

    def count(self, v, s, e):
        """Number of occurrences of symbol v in [s, e)."""
        self._check_range(s, e)
        return self.rank(v, e) - self.rank(v, s)

    def select(self, v, i):
        """Position of the i-th (0-based) occurrence of v, or length if there is none."""
        v = self._symbol(v)
        if i < 0:
            raise IndexError(f"select index {i} is negative")
        if self.offsets[v] == self.length or i >= self.rank(v, self.length):
            return self.length

        pos = self.offsets[v] + i
        for depth in reversed(range(SYMBOL_BITS)):
            layer = self.layers[depth]
            if self._bit(v, depth):
                pos = layer.select1(pos - self._zeros[depth])
            else:
                pos = layer.select0(pos)
        return pos

    def quantile(self, s, e, r):
        """The r-th (0-based) smallest symbol in [s, e)."""
        self._check_range(s, e)
        if not 0 <= r < e - s:
            raise IndexError(f"order {r} out of range for a range of {e - s} symbols")

        result = 0
        for depth, layer in enumerate(self.layers):
            zs, ze = layer.rank0(s), layer.rank0(e)
            nzero = ze - zs
            if r < nzero:
                result = result << 1
                s, e = zs, ze
            else:
                result = (result << 1) | 1
                zeros = self._zeros[depth]
                s, e = zeros + layer.rank1(s), zeros + layer.rank1(e)
                r -= nzero
        return result

    def topk(self, s, e, k):
        """
        The k most frequent symbols in [s, e) as (symbol, count) pairs.

        Pairs are ordered by descending count, ties by ascending symbol. Fewer
        than k pairs come back when the range holds fewer distinct symbols.
        """
        self._check_range(s, e)
        if k < 0:
            raise ValueError(f"k must be non-negative, got {k}")

        result = []
        heap = Heap(_topk_order)
        heap.push(SubRange(s, e, 0, 0))
        while heap and len(result) < k:
            node = heap.pop()
            if node.depth == SYMBOL_BITS:
                result.append((node.prefix, node.end - node.start))
                continue

            layer = self.layers[node.depth]
            zs, ze = layer.rank0(node.start), layer.rank0(node.end)
            if zs < ze:
                heap.push(SubRange(zs, ze, node.depth + 1, node.prefix << 1))

            zeros = self._zeros[node.depth]
            o_start, o_end = zeros + layer.rank1(node.start), zeros + layer.rank1(node.end)
            if o_start < o_end:
                heap.push(SubRange(o_start, o_end, node.depth + 1, (node.prefix << 1) | 1))
        return result

    def tolist(self):
        return [self.access(i) for i in range(self.length)]

    def __iter__(self):
        return iter(self.tolist())

    def __repr__(self):
        return f"WaveletMatrix(length={self.length})"

import numpy as np

WORD_BITS = 64


def _popcount_offsets(blocks):
    """block_ones[k] = number of set bits in blocks[0:k]"""
    bits = np.unpackbits(blocks.astype("<u8").view(np.uint8))
    counts = bits.reshape(-1, WORD_BITS).sum(axis=1)
    offsets = np.zeros(len(blocks), dtype=np.int64)
    if len(blocks) > 1:
        offsets[1:] = np.cumsum(counts[:-1])
    return offsets


class BitVector:
    """
    Fixed length bit vector with rank/select support (a fully indexable dictionary).

    Bits are packed into 64-bit words. One prefix count per word gives rank in
    constant time; select is a binary search over rank. There is always one
    more word than needed to hold `length` bits so that rank1(length) can be
    answered from the same table.
    """

    def __init__(self, size):
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        self.length = size
        block_count = size // WORD_BITS + 1
        self.blocks = np.zeros(block_count, dtype=np.uint64)
        self.block_ones = np.zeros(block_count, dtype=np.int64)

    @classmethod
    def from_bools(cls, bits):
        bits = np.array(list(bits), dtype=bool)
        bv = cls(len(bits))
        block_count = len(bv.blocks)

        padded = np.zeros(block_count * WORD_BITS, dtype=bool)
        padded[:len(bits)] = bits
        packed = np.packbits(padded, bitorder="little")
        bv.blocks = packed.view("<u8").astype(np.uint64)

        bv.block_ones = _popcount_offsets(bv.blocks)
        return bv

    def _check_index(self, i):
        if not 0 <= i < self.length:
            raise IndexError(f"bit index {i} out of range [0, {self.length})")

    def get(self, i):
        self._check_index(i)
        block, offset = divmod(i, WORD_BITS)
        return (int(self.blocks[block]) >> offset) & 1 == 1

    def access(self, i):
        return self.get(i)

    def __getitem__(self, i):
        return self.get(i)

    def set(self, i, bit):
        self._check_index(i)
        block, offset = divmod(i, WORD_BITS)
        word = int(self.blocks[block])
        mask = 1 << offset
        if bool(word & mask) == bool(bit):
            return

        # Every later prefix count shifts by one.
        if bit:
            self.blocks[block] = np.uint64(word | mask)
            self.block_ones[block + 1:] += 1
        else:
            self.blocks[block] = np.uint64(word & ~mask)
            self.block_ones[block + 1:] -= 1

    def __len__(self):
        return self.length

    def rank1(self, i):
        """Number of 1 bits in [0, i), for i in [0, length]."""
        if not 0 <= i <= self.length:
            raise IndexError(f"rank index {i} out of range [0, {self.length}]")
        block, offset = divmod(i, WORD_BITS)
        low_bits = int(self.blocks[block]) & ((1 << offset) - 1)
        return int(self.block_ones[block]) + low_bits.bit_count()

    def rank0(self, i):
        return i - self.rank1(i)

    def count_ones(self):
        return self.rank1(self.length)

    def _select(self, rank, i):
        beg, end = 0, self.length
        if rank(end) <= i:
            return end
        while True:
            if end - beg <= 1:
                return beg
            mid = (beg + end) // 2
            if i < rank(mid):
                end = mid
            else:
                beg = mid

    def select0(self, i):
        """Position of the i-th (0-based) 0 bit, or length if there are not enough."""
        return self._select(self.rank0, i)

    def select1(self, i):
        """Position of the i-th (0-based) 1 bit, or length if there are not enough."""
        return self._select(self.rank1, i)

    def __invert__(self):
        result = type(self)(self.length)
        blocks = ~self.blocks
        # The last word is always partial, keep its unused bits clear.
        tail = self.length % WORD_BITS
        blocks[-1] = np.uint64(int(blocks[-1]) & ((1 << tail) - 1))
        result.blocks = blocks
        result.block_ones = _popcount_offsets(blocks)
        return result

    def __eq__(self, other):
        if not isinstance(other, BitVector):
            return NotImplemented
        return self.length == other.length and np.array_equal(self.blocks, other.blocks)

    __hash__ = None

    def tolist(self):
        packed = self.blocks.astype("<u8").view(np.uint8)
        bits = np.unpackbits(packed, bitorder="little")[:self.length]
        return [bool(b) for b in bits]

    def __iter__(self):
        return iter(self.tolist())

    def __repr__(self):
        bits = "".join("1" if b else "0" for b in self.tolist())
        return f"BitVector({self.length}, '{bits}')"

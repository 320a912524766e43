"""xorshift32 stream shared by board generation and seed derivation."""

from typing import Sequence, TypeVar

T = TypeVar("T")

UINT32_MASK = 0xFFFFFFFF


class XorShift32:
    """Seeded 32-bit xorshift generator.

    A zero seed is coerced to 1 so the stream never sits in the all-zero
    state. Two generators built from the same seed yield identical streams.
    """

    def __init__(self, seed: int) -> None:
        self.state = (seed & UINT32_MASK) or 1

    def next(self) -> int:
        x = self.state
        x ^= (x << 13) & UINT32_MASK
        x ^= x >> 17
        x ^= (x << 5) & UINT32_MASK
        self.state = x & UINT32_MASK
        return self.state

    def next_float(self) -> float:
        return self.next() / UINT32_MASK

    def next_int(self, bound: int) -> int:
        # next_float() reaches exactly 1.0 for a raw 0xFFFFFFFF
        return min(int(self.next_float() * bound), bound - 1)

    def pick(self, seq: Sequence[T]) -> T:
        return seq[self.next_int(len(seq))]

"""random_source.py — Seeded xorshift32 generator for reproducible mock data.

The dashboard demo needs the same roster on every restart, so the mock
layer never touches ``random``. Instead every draw goes through one
explicitly constructed ``XorShift32`` that is passed to the generation
functions in ``mock/factory.py``.

The shift/xor steps use JavaScript int32 semantics (left shifts wrap to a
signed 32-bit word, right shift is arithmetic) so a given seed yields the
same sequence the original front-end mocks produced.

Called by: mock/factory.py
Depends on: Nothing
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")

_MASK_32 = 0xFFFFFFFF


def _to_int32(value: int) -> int:
    """Wrap an arbitrary Python int to a signed 32-bit word."""
    value &= _MASK_32
    return value - 0x100000000 if value & 0x80000000 else value


class XorShift32:
    """Stateful xorshift32 source emitting floats in [0, 1).

    Not thread-safe. Each ``next()`` mutates the word in place, so the
    output depends on call order across every helper sharing the instance.
    """

    def __init__(self, seed: int) -> None:
        state = _to_int32(seed)
        if state == 0:
            # WHY: zero is a fixed point of xorshift — every draw would be 0.
            raise ValueError("XorShift32 seed must be non-zero modulo 2**32")
        self._state = state

    @property
    def state(self) -> int:
        return self._state

    def next(self) -> float:
        x = self._state
        x ^= _to_int32(x << 13)
        x ^= x >> 17
        x ^= _to_int32(x << 5)
        self._state = x
        return ((x & _MASK_32) % 1000) / 1000

    def random_digit(self) -> str:
        return str(math.floor(self.next() * 10) % 10)

    def pick(self, pool: Sequence[T]) -> T:
        """Return one element of ``pool`` chosen by the next draw.

        Raises:
            ValueError: If ``pool`` is empty.
        """
        if not pool:
            raise ValueError("Cannot pick from an empty pool")
        size = len(pool)
        return pool[math.floor(self.next() * size) % size]

    def build_phone(self) -> str:
        """Synthesize an 11-digit mobile number: ``1[3-8]`` + 4 + 5 digits."""
        prefix = "1" + str(3 + math.floor(self.next() * 6))
        mid = "".join(self.random_digit() for _ in range(4))
        tail = "".join(self.random_digit() for _ in range(5))
        return f"{prefix}{mid}{tail}"

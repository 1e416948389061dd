"""Tests for the seeded xorshift32 source (core/random_source.py).

Run with: pytest backend/tests/unit/test_random_source.py -v
"""

from __future__ import annotations

import pytest

from rollcall.core.random_source import XorShift32


class TestXorShift32:
    """Core generator behaviour."""

    def test_first_draw_for_seed_42(self):
        """42 → 344106 → 344104 → 11355432, and 11355432 % 1000 = 432."""
        rng = XorShift32(42)
        assert rng.next() == 0.432
        assert rng.state == 11355432

    def test_same_seed_same_sequence(self):
        a = XorShift32(42)
        b = XorShift32(42)
        assert [a.next() for _ in range(500)] == [b.next() for _ in range(500)]

    def test_different_seeds_diverge(self):
        a = XorShift32(42)
        b = XorShift32(43)
        assert [a.next() for _ in range(20)] != [b.next() for _ in range(20)]

    def test_draws_stay_in_unit_interval(self):
        rng = XorShift32(42)
        for _ in range(2000):
            value = rng.next()
            assert 0.0 <= value < 1.0

    def test_state_stays_signed_32_bit(self):
        """Left shifts wrap, so the word never leaves the int32 range."""
        rng = XorShift32(42)
        seen_negative = False
        for _ in range(2000):
            rng.next()
            assert -(2**31) <= rng.state < 2**31
            seen_negative = seen_negative or rng.state < 0
        assert seen_negative

    @pytest.mark.parametrize("seed", [0, 2**32, -(2**32)])
    def test_zero_seed_rejected(self, seed):
        """Zero is a fixed point of xorshift and must fail fast."""
        with pytest.raises(ValueError, match="non-zero"):
            XorShift32(seed)


class TestHelpers:
    """random_digit(), pick(), build_phone()."""

    def test_random_digit_is_single_digit(self):
        rng = XorShift32(42)
        for _ in range(200):
            digit = rng.random_digit()
            assert len(digit) == 1
            assert digit.isdigit()

    def test_pick_returns_pool_member(self):
        rng = XorShift32(7)
        pool = ("a", "b", "c")
        assert all(rng.pick(pool) in pool for _ in range(100))

    def test_pick_single_element_pool(self):
        rng = XorShift32(7)
        assert rng.pick(["only"]) == "only"

    def test_pick_empty_pool_raises(self):
        rng = XorShift32(7)
        with pytest.raises(ValueError, match="empty pool"):
            rng.pick([])

    def test_pick_empty_pool_does_not_consume_a_draw(self):
        a = XorShift32(7)
        b = XorShift32(7)
        with pytest.raises(ValueError):
            a.pick(())
        assert a.next() == b.next()

    def test_build_phone_format(self):
        rng = XorShift32(42)
        for _ in range(300):
            phone = rng.build_phone()
            assert len(phone) == 11
            assert phone.isdigit()
            assert phone[0] == "1"
            assert phone[1] in "345678"

    def test_build_phone_for_seed_42(self):
        """Draws .432 .436 .628 .833 .142 .026 .176 .324 .297 .471."""
        assert XorShift32(42).build_phone() == "15468101324"

    def test_build_phone_consumes_ten_draws(self):
        a = XorShift32(42)
        b = XorShift32(42)
        a.build_phone()
        for _ in range(10):
            b.next()
        assert a.state == b.state

"""Tests for token_counter.models.stats."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from token_counter.models.stats import TokenStats


class TestTokenStatsNew:
    """Construction and validation."""

    def test_defaults_are_zero(self) -> None:
        stats = TokenStats()
        assert stats.tokens == 0
        assert stats.lines == 0
        assert stats.bytes == 0

    def test_negative_count_rejected(self) -> None:
        with pytest.raises(ValidationError):
            TokenStats(tokens=-1)

    def test_negative_assignment_rejected(self) -> None:
        stats = TokenStats()
        with pytest.raises(ValidationError):
            stats.bytes = -5


class TestTokenStatsAdd:
    """In-place accumulation with ``add``."""

    def test_add_is_field_wise(self) -> None:
        stats1 = TokenStats(tokens=10, lines=2, bytes=50)
        stats2 = TokenStats(tokens=5, lines=1, bytes=25)
        stats1.add(stats2)
        assert stats1 == TokenStats(tokens=15, lines=3, bytes=75)

    def test_add_leaves_other_unchanged(self) -> None:
        total = TokenStats()
        other = TokenStats(tokens=3, lines=1, bytes=9)
        total.add(other)
        assert other == TokenStats(tokens=3, lines=1, bytes=9)

    def test_running_total(self) -> None:
        total = TokenStats()
        total.add(TokenStats(tokens=10, lines=2, bytes=50))
        assert (total.tokens, total.lines, total.bytes) == (10, 2, 50)
        total.add(TokenStats(tokens=15, lines=3, bytes=75))
        assert (total.tokens, total.lines, total.bytes) == (25, 5, 125)


class TestTokenStatsOperator:
    """The ``+`` operator returns a new instance."""

    def test_plus_returns_new_instance(self) -> None:
        a = TokenStats(tokens=1, lines=2, bytes=3)
        b = TokenStats(tokens=4, lines=5, bytes=6)
        c = a + b
        assert c == TokenStats(tokens=5, lines=7, bytes=9)
        assert a == TokenStats(tokens=1, lines=2, bytes=3)

    def test_associative_and_commutative(self) -> None:
        a = TokenStats(tokens=1, lines=0, bytes=7)
        b = TokenStats(tokens=20, lines=3, bytes=1)
        c = TokenStats(tokens=300, lines=9, bytes=0)
        assert (a + b) + c == a + (b + c)
        assert a + b == b + a
        assert sum([a, b, c], TokenStats()) == TokenStats(tokens=321, lines=12, bytes=8)

    def test_plus_with_non_stats_raises(self) -> None:
        with pytest.raises(TypeError):
            TokenStats() + 1  # type: ignore[operator]

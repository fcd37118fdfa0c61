"""Tests for the seeded GameRNG."""

import pytest

from combatgame.sim.core.rng import GameRNG


# ---------------------------------------------------------------------------
# Range sampling
# ---------------------------------------------------------------------------

class TestRandomInt:
    def test_stays_in_range(self, rng):
        for _ in range(2000):
            assert 3 <= rng.random_int(3, 8) <= 8

    def test_mean_near_midpoint(self, rng):
        samples = [rng.random_int(1, 6) for _ in range(20000)]
        assert sum(samples) / len(samples) == pytest.approx(3.5, abs=0.1)

    def test_degenerate_range(self, rng):
        assert rng.random_int(0, 0) == 0

    def test_same_seed_same_sequence(self):
        a, b = GameRNG(7), GameRNG(7)
        assert [a.random_int(0, 100) for _ in range(20)] == [b.random_int(0, 100) for _ in range(20)]


class TestChance:
    def test_zero_never(self, rng):
        assert not any(rng.chance(0.0) for _ in range(500))

    def test_one_always(self, rng):
        assert all(rng.chance(1.0) for _ in range(500))

    def test_frequency(self, rng):
        hits = sum(rng.chance(0.2) for _ in range(20000))
        assert hits / 20000 == pytest.approx(0.2, abs=0.02)


# ---------------------------------------------------------------------------
# Weighted selection
# ---------------------------------------------------------------------------

class TestWeightedPick:
    def test_single_positive_weight(self, rng):
        assert all(rng.weighted_pick([0.0, 1.0, 0.0]) == 1 for _ in range(100))

    def test_distribution(self, rng):
        counts = [0, 0, 0, 0]
        n = 20000
        for _ in range(n):
            counts[rng.weighted_pick([0.5, 0.3, 0.2, 0.0])] += 1
        assert counts[0] / n == pytest.approx(0.5, abs=0.02)
        assert counts[1] / n == pytest.approx(0.3, abs=0.02)
        assert counts[2] / n == pytest.approx(0.2, abs=0.02)
        assert counts[3] == 0

    def test_weights_are_normalised(self, make_rng):
        # 2/(2+6) = 0.25 covers r = 0.2
        assert make_rng(floats=[0.2]).weighted_pick([2, 6]) == 0
        assert make_rng(floats=[0.3]).weighted_pick([2, 6]) == 1

    def test_uncovered_draw_falls_to_last_positive_bucket(self, make_rng):
        assert make_rng(floats=[1.0]).weighted_pick([0.5, 0.5, 0.0]) == 1

    @pytest.mark.parametrize("weights", [[], [0.0, 0.0], [0.5, -0.1, 0.6]])
    def test_invalid_weights(self, rng, weights):
        with pytest.raises(ValueError):
            rng.weighted_pick(weights)


# ---------------------------------------------------------------------------
# Forking
# ---------------------------------------------------------------------------

class TestFork:
    def test_fork_is_deterministic(self):
        a = GameRNG(1).fork("agent")
        b = GameRNG(1).fork("agent")
        assert a.seed == b.seed
        assert [a.random_float() for _ in range(5)] == [b.random_float() for _ in range(5)]

    def test_forks_are_independent(self):
        root = GameRNG(1)
        assert root.fork("agent").seed != root.fork("combat").seed

    def test_repr(self):
        assert repr(GameRNG(3)) == "GameRNG(seed=3)"

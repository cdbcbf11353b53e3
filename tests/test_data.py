"""Seeded generator, rounding and synthetic datasets."""

import math

from src.data import (
    KNN_SEED,
    ParkMillerRandom,
    Point,
    make_knn_points,
    make_radius_points,
    round_half_up,
)


def has_two_decimals(value):
    return abs(value * 100 - round(value * 100)) < 1e-6


class TestParkMillerRandom:
    def test_first_draws_for_seed_73(self):
        rng = ParkMillerRandom(73)
        assert rng.random() == (1226911 - 1) / 2147483646
        assert rng.seed == 1226911
        rng.random()
        assert rng.seed == 1293340354

    def test_outputs_in_unit_interval(self):
        rng = ParkMillerRandom(99)
        for _ in range(500):
            value = rng.random()
            assert 0.0 <= value < 1.0

    def test_same_seed_same_sequence(self):
        a, b = ParkMillerRandom(5), ParkMillerRandom(5)
        assert [a.random() for _ in range(20)] == [b.random() for _ in range(20)]


class TestRoundHalfUp:
    def test_ties_go_up(self):
        assert round_half_up(0.125) == 0.13
        assert round_half_up(-0.125) == -0.12

    def test_three_digits(self):
        assert round_half_up(1.23456, 3) == 1.235

    def test_infinity_passes_through(self):
        assert round_half_up(math.inf, 3) == math.inf

    def test_point_rounds_on_creation(self):
        p = Point.rounded(1.23456, 7.891)
        assert p == Point(1.23, 7.89)


class TestKnnPoints:
    def test_shape_and_range(self):
        points = make_knn_points()
        assert len(points) == 30
        assert points[0].x == 0.3
        assert points[-1].x == 9.7

    def test_first_point(self):
        assert make_knn_points(KNN_SEED)[0] == Point(0.3, 2.68)

    def test_generation_order_kept(self):
        xs = [p.x for p in make_knn_points()]
        assert xs == sorted(xs)

    def test_deterministic(self):
        assert make_knn_points(73) == make_knn_points(73)
        assert make_knn_points(73) != make_knn_points(74)

    def test_two_decimals(self):
        for p in make_knn_points():
            assert has_two_decimals(p.x) and has_two_decimals(p.y)


class TestRadiusPoints:
    def test_dense_then_sparse(self):
        points = make_radius_points()
        assert len(points) == 35
        assert len([p for p in points if p.x <= 4.0]) == 20
        assert len([p for p in points if p.x >= 5.0]) == 15
        assert points[0].x == 0.5
        assert points[-1].x == 9.5

    def test_sorted_by_x(self):
        xs = [p.x for p in make_radius_points()]
        assert xs == sorted(xs)

    def test_deterministic(self):
        assert make_radius_points(99) == make_radius_points(99)

    def test_two_decimals(self):
        for p in make_radius_points():
            assert has_two_decimals(p.x) and has_two_decimals(p.y)

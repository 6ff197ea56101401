"""Tests for the real-root sweep."""

import logging

import pytest

from interval import Interval
from polynomial import Polynomial
from solver import InvalidStep, RootIsolator, real_root_brackets, real_roots


def P(*pairs):
    return Polynomial.from_pairs(pairs)


def assert_roots_near(found, expected, tol):
    """Every expected root is hit and every reported root is near an expected one."""
    # grid points k * dx carry rounding, allow for it on top of the step
    tol += 1e-9
    for r in expected:
        assert any(abs(f - r) <= tol for f in found), f"{r} not in {found}"
    for f in found:
        assert any(abs(f - r) <= tol for r in expected), f"spurious root {f}"


class TestDegenerateCases:
    def test_zero_polynomial(self):
        assert real_roots(Polynomial(), 0.001) == []
        assert real_roots(P((7, 0.0), (1, 0.0), (0, 0.0)), 0.001) == []

    def test_constant(self):
        assert real_roots(P((0, 1.0)), 0.001) == []
        assert real_roots(P((0, 7.167)), 0.001) == []

    def test_single_power_term(self):
        assert real_roots(P((1, 1.0)), 0.001) == [0.0]
        assert real_roots(P((100, 1.0)), 0.001) == [0.0]
        assert real_roots(P((3, -2.5)), 0.5) == [0.0]

    @pytest.mark.parametrize("dx", [0.0, -0.001, float("nan")])
    def test_invalid_step(self, dx):
        with pytest.raises(InvalidStep):
            real_roots(P((2, 1.0), (0, -1.0)), dx)
        with pytest.raises(ValueError):
            real_root_brackets(Polynomial(), dx)


class TestSweep:
    def test_no_real_roots(self):
        assert real_roots(P((2, 1.0), (0, 1.0)), 0.001) == []

    def test_quadratic(self):
        roots = real_roots(P((2, 1.0), (1, -5.0), (0, 6.0)), 0.001)
        assert_roots_near(roots, [2.0, 3.0], 0.001)

    def test_linear(self):
        assert_roots_near(real_roots(P((1, 1.0), (0, -1.0)), 0.001), [1.0], 0.001)
        assert_roots_near(real_roots(P((1, 1.0), (0, 1.0)), 0.001), [-1.0], 0.001)

    def test_zero_root_comes_first(self):
        roots = real_roots(P((3, 1.0), (1, -1.0)), 0.001)
        assert roots[0] == 0.0
        assert roots.count(0.0) == 1
        assert_roots_near(roots, [0.0, 1.0, -1.0], 0.001)

    def test_order_zero_positive_negative(self):
        roots = real_roots(P((3, 1.0), (1, -4.0)), 0.01)
        assert roots[0] == 0.0
        signs = [r > 0 for r in roots[1:]]
        assert signs == sorted(signs, reverse=True)
        assert True in signs and False in signs
        assert_roots_near(roots, [0.0, 2.0, -2.0], 0.01)

    def test_sample_on_root_reports_it_and_the_next_sample(self):
        # 0.5 is exact, so 2.0 and 3.0 are hit exactly and each is followed by
        # the next grid point, whose product with the zero sample is 0
        assert real_roots(P((2, 1.0), (1, -5.0), (0, 6.0)), 0.5) == [2.0, 2.5, 3.0, 3.5]

    def test_sample_on_root_with_zero_root(self):
        # x^3 - x on a 0.5 grid: exact hits at 0, 1 and -1
        assert real_roots(P((3, 1.0), (1, -1.0)), 0.5) == [0.0, 1.0, 1.5, -1.0, -1.5]

    def test_quartic_four_roots(self):
        p = P((4, 1.0), (3, -10.0), (2, 35.0), (1, -50.0), (0, 24.0))
        assert_roots_near(real_roots(p, 0.001), [1.0, 2.0, 3.0, 4.0], 0.001)

    def test_quartic_with_negative_roots(self):
        # (x + 21)(x + 3)(x - 2)(x - 16)
        p = P((4, 1.0), (3, 6.0), (2, -337.0), (1, -366.0), (0, 2016.0))
        assert_roots_near(real_roots(p, 0.001), [-21.0, -3.0, 2.0, 16.0], 0.001)

    def test_far_roots_with_coarse_step(self):
        p = P((2, 1.0), (1, -1100.0), (0, 100000.0))
        assert_roots_near(real_roots(p, 0.1), [100.0, 1000.0], 0.1)

    def test_roots_of_reflection_are_mirrored(self):
        p = P((3, 1.0), (2, -2.0), (1, -5.0), (0, 6.0))
        roots = sorted(real_roots(p, 0.001))
        mirrored = sorted(-r for r in real_roots(p.reflect_about_y_axis(), 0.001))
        assert roots == pytest.approx(mirrored, abs=1e-9)

    def test_sign_change_is_verified_at_each_root(self):
        p = P((3, 1.0), (2, -2.0), (1, -5.0), (0, 6.0))
        for r in real_roots(p, 0.001):
            assert abs(p.at(r)) < 0.05


class TestBrackets:
    def test_brackets_contain_roots(self):
        p = P((2, 1.0), (1, -5.0), (0, 6.0))
        brackets = real_root_brackets(p, 0.01)
        assert len(brackets) >= 2
        for b in brackets:
            assert b.right() - b.left() <= 0.01 + 1e-12
        assert any(b.contains(2.0) for b in brackets)
        assert any(b.contains(3.0) for b in brackets)

    def test_zero_root_is_point_bracket(self):
        brackets = real_root_brackets(P((2, 1.0), (1, -1.0)), 0.01)
        assert brackets[0] == Interval.point(0.0)

    def test_negative_brackets(self):
        brackets = real_root_brackets(P((1, 1.0), (0, 1.0)), 0.01)
        assert brackets
        assert any(b.contains(-1.0) for b in brackets)
        assert all(b.right() < 0 for b in brackets)

    def test_exact_hit_gives_adjacent_brackets(self):
        brackets = real_root_brackets(P((1, 1.0), (0, -1.0)), 0.5)
        assert brackets == [Interval.left_open(0.5, 1.0), Interval.left_open(1.0, 1.5)]

    def test_positive_brackets_skip_origin(self):
        isolator = RootIsolator()
        assert isolator.positive_brackets(P((2, 1.0), (1, -1.0)), 0.01)[0][0] > 0.5
        assert isolator.positive_brackets(P((0, 3.0)), 0.01) == []


class TestNumericalGuard:
    def test_non_finite_derivatives_stop_sweep(self, caplog):
        # the high derivatives of x^400 overflow to inf
        p = P((400, 1.0), (399, -1e300), (0, -1.0))
        with caplog.at_level(logging.WARNING, logger="solver"):
            real_roots(p, 0.5)
        assert any("stopping" in rec.message for rec in caplog.records)

import math

import pytest

from rcg.geom import CubicCurve, Line, Point, QuadraticCurve, RecordingSurface, flatten_line_intersection
from rcg.utils.errors import RcgValidationError

# x = 1 - t, y = 2t(1 - t)
ARCH = QuadraticCurve(Point(0, 0), Point(0.5, 1), Point(1, 0))

# P(t) = (t, t) with this control-point mapping
DIAGONAL = CubicCurve(Point(1, 1), Point(0, 0), Point(1 / 3, 1 / 3), Point(2 / 3, 2 / 3))


def test_quadratic_endpoints():
    q = QuadraticCurve(Point(0.1, 0.2), Point(0.5, 0.9), Point(0.8, 0.3))
    assert q.point_in_time(0) == q.cp2
    assert q.point_in_time(1) == q.cp0


def test_quadratic_midpoint_weights():
    q = QuadraticCurve(Point(0, 0), Point(1, 1), Point(2, 0))
    # 0.25*cp0 + 0.5*cp1 + 0.25*cp2
    assert q.point_in_time(0.5) == Point(1.0, 0.5)


def test_quadratic_accepts_t_outside_unit_interval():
    p = ARCH.point_in_time(-1.0)
    assert p.x == pytest.approx(2.0)
    assert p.y == pytest.approx(-4.0)


def test_cubic_endpoints():
    c = CubicCurve(Point(0.1, 0.2), Point(0.9, 0.8), Point(0.3, 0.7), Point(0.6, 0.1))
    assert c.point_in_time(0) == c.cp1
    assert c.point_in_time(1) == c.cp0


def test_cubic_control_point_mapping():
    c = CubicCurve(Point(8, 0), Point(0, 0), Point(0, 8), Point(8, 8))
    # (cp0 + 3*cp3 + 3*cp2 + cp1) / 8
    mid = c.point_in_time(0.5)
    assert mid.x == pytest.approx((8 + 24 + 0 + 0) / 8)
    assert mid.y == pytest.approx((0 + 24 + 24 + 0) / 8)


def test_quadratic_returns_crossing_with_largest_t():
    line = Line(Point(0, 0.25), Point(1, 0.25))
    hit = ARCH.line_intersection(line)
    assert hit is not None
    # y = 0.25 at t = (1 +- sqrt(0.5)) / 2; the sweep starts at t = 1
    t_first = (1 + math.sqrt(0.5)) / 2
    assert hit.x == pytest.approx(1 - t_first, abs=1e-3)
    assert hit.y == pytest.approx(0.25)


def test_crossing_outside_the_line_is_skipped():
    line = Line(Point(0.5, 0.25), Point(1, 0.25))
    hit = ARCH.line_intersection(line)
    t_second = (1 - math.sqrt(0.5)) / 2
    assert hit is not None
    assert hit.x == pytest.approx(1 - t_second, abs=1e-3)


def test_quadratic_sweep_reaches_negative_t():
    # only crossing is at t = (1 - sqrt(3)) / 2 < 0
    line = Line(Point(1, -1), Point(2, -1))
    hit = ARCH.line_intersection(line)
    assert hit is not None
    assert hit.x == pytest.approx(1 - (1 - math.sqrt(3)) / 2, abs=1e-3)
    assert hit.y == pytest.approx(-1.0)


def test_quadratic_no_intersection():
    assert ARCH.line_intersection(Line(Point(0, 2), Point(1, 2))) is None


def test_cubic_line_intersection():
    # crosses between the samples t = 0.51 and t = 0.50
    hit = DIAGONAL.line_intersection(Line(Point(0, 1.005), Point(1.005, 0)))
    assert hit is not None
    assert hit.x == pytest.approx(0.5025, abs=1e-9)
    assert hit.y == pytest.approx(0.5025, abs=1e-9)


def test_cubic_no_intersection():
    assert DIAGONAL.line_intersection(Line(Point(5, 0), Point(6, 1))) is None


def test_coarser_resolution_is_still_close():
    line = Line(Point(0, 0.25), Point(1, 0.25))
    hit = ARCH.line_intersection(line, resolution=0.1)
    assert hit is not None
    assert hit.x == pytest.approx(1 - (1 + math.sqrt(0.5)) / 2, abs=2e-2)


def test_sweep_samples_from_one_down_past_zero():
    seen = []

    def curve(t):
        seen.append(t)
        return Point(t, 0.0)

    # far away line: full sweep, no hit
    assert flatten_line_intersection(curve, Point(1, 0), Line(Point(5, 5), Point(6, 6)), resolution=0.5) is None
    assert seen == [1.0, 0.5, 0.0, -0.5]


def test_first_secant_starts_at_start_point():
    line = Line(Point(0.5, -1), Point(0.5, 1))

    def curve(t):
        return Point(0.0, 0.0)

    # only the first secant, from `start`, crosses x = 0.5
    hit = flatten_line_intersection(curve, Point(1.0, 0.0), line, resolution=0.5)
    assert hit == Point(0.5, 0.0)


@pytest.mark.parametrize("resolution", [0.0, -0.01, float("nan"), float("inf")])
def test_invalid_resolution_is_rejected(resolution):
    with pytest.raises(RcgValidationError):
        ARCH.line_intersection(Line(Point(0, 0.25), Point(1, 0.25)), resolution=resolution)


def test_negative_parallel_eps_is_rejected():
    with pytest.raises(RcgValidationError):
        ARCH.line_intersection(Line(Point(0, 0.25), Point(1, 0.25)), parallel_eps=-1.0)


def test_quadratic_render():
    s = RecordingSurface()
    ARCH.render(s, 200, 100)
    assert s.calls == [
        ("moveTo", (0.0, 0.0)),
        ("quadraticCurveTo", (100.0, 100.0, 200.0, 0.0)),
    ]


def test_cubic_render_passes_cp3_cp2_then_cp1():
    c = CubicCurve(Point(0, 0), Point(1, 1), Point(0.25, 0.5), Point(0.75, 0.5))
    s = RecordingSurface()
    c.render(s, 100, 100)
    assert s.calls == [
        ("moveTo", (0.0, 0.0)),
        ("bezierCurveTo", (75.0, 50.0, 25.0, 50.0, 100.0, 100.0)),
    ]


def test_curve_str():
    assert str(ARCH) == "((0,0),(0.5,1),(1,0))"
    c = CubicCurve(Point(0, 0), Point(1, 1), Point(0.5, 0), Point(0, 0.5))
    assert str(c) == "((0,0),(1,1),(0.5,0),(0,0.5))"

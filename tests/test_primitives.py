import dataclasses
import math

import pytest

from rcg.geom import Line, Point, Rectangle, RecordingSurface
from rcg.utils.errors import RcgError, RcgNotImplementedError, RcgValidationError


def test_point_defaults_to_origin():
    assert Point() == Point(0.0, 0.0)
    assert Line() == Line(Point(), Point())
    assert Rectangle().position == Point()


def test_point_is_immutable():
    p = Point(1.0, 2.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.x = 3.0  # type: ignore[misc]


@pytest.mark.parametrize(
    "p,q",
    [
        (Point(0, 0), Point(3, 4)),
        (Point(-1.5, 2.0), Point(0.25, -7.0)),
        (Point(0.1, 0.2), Point(0.3, 0.9)),
    ],
)
def test_distance_is_symmetric_and_zero_on_self(p, q):
    assert p.distance_to(q) == q.distance_to(p)
    assert p.distance_to(p) == 0.0
    assert p.distance_to(q) > 0.0


def test_distance_pythagoras():
    assert Point(0, 0).distance_to(Point(3, 4)) == 5.0


def test_mid_point_and_length():
    line = Line(Point(0, 0), Point(2, 4))
    assert line.mid_point() == Point(1.0, 2.0)
    assert line.length() == pytest.approx(math.sqrt(20.0))


def test_crossing_diagonals_meet_in_the_middle():
    a = Line(Point(0, 0), Point(1, 1))
    b = Line(Point(0, 1), Point(1, 0))
    assert a.line_intersection(b) == Point(0.5, 0.5)
    assert b.line_intersection(a) == Point(0.5, 0.5)


def test_parallel_lines_do_not_intersect():
    a = Line(Point(0, 0), Point(1, 0))
    b = Line(Point(0, 1), Point(1, 1))
    assert a.line_intersection(b) is None


def test_collinear_overlapping_lines_do_not_intersect():
    a = Line(Point(0, 0), Point(1, 1))
    b = Line(Point(0.5, 0.5), Point(2, 2))
    assert a.line_intersection(b) is None


def test_zero_length_segment_never_intersects():
    dot = Line(Point(0.5, 0.5), Point(0.5, 0.5))
    cross = Line(Point(0, 0), Point(1, 1))
    assert dot.line_intersection(cross) is None
    assert cross.line_intersection(dot) is None


def test_segments_too_short_to_meet():
    a = Line(Point(0, 0), Point(0.4, 0.4))
    b = Line(Point(0, 1), Point(1, 0))
    assert a.line_intersection(b) is None


def test_other_segment_starting_on_this_one_is_not_a_hit():
    base = Line(Point(0, 0), Point(1, 0))
    # ub == 0: `other` starts exactly on `base`
    assert base.line_intersection(Line(Point(0.5, 0), Point(0.5, 1))) is None
    # ub == 1: `other` ends exactly on `base`
    assert base.line_intersection(Line(Point(0.5, 1), Point(0.5, 0))) == Point(0.5, 0.0)


def test_this_segment_starting_on_other_is_a_hit():
    # ua == 0 is accepted
    this = Line(Point(0.5, 0), Point(0.5, 1))
    other = Line(Point(0, 0), Point(1, 0))
    assert this.line_intersection(other) == Point(0.5, 0.0)


def test_hit_lies_within_both_parameter_ranges():
    a = Line(Point(0.1, 0.2), Point(0.9, 0.7))
    b = Line(Point(0.2, 0.9), Point(0.8, 0.1))
    hit = a.line_intersection(b)
    assert hit is not None
    # on segment a
    assert a.a.distance_to(hit) + hit.distance_to(a.b) == pytest.approx(a.length())
    # on segment b
    assert b.a.distance_to(hit) + hit.distance_to(b.b) == pytest.approx(b.length())


def test_parallel_eps_rejects_nearly_parallel_lines():
    a = Line(Point(0, 0), Point(1, 0))
    b = Line(Point(0, -1e-10), Point(1, 1e-10))
    hit = a.line_intersection(b)
    assert hit is not None
    assert hit.x == pytest.approx(0.5)
    assert a.line_intersection(b, parallel_eps=1e-6) is None


@pytest.mark.parametrize("eps", [-1e-9, float("nan"), float("inf")])
def test_invalid_parallel_eps_is_rejected(eps):
    a = Line(Point(0, 0), Point(1, 0))
    b = Line(Point(0, 1), Point(1, 1))
    with pytest.raises(RcgValidationError):
        a.line_intersection(b, parallel_eps=eps)


def test_nan_input_yields_none():
    a = Line(Point(float("nan"), 0), Point(1, 1))
    b = Line(Point(0, 1), Point(1, 0))
    assert a.line_intersection(b) is None


def test_str_forms():
    assert str(Point(0.5, 1)) == "(0.5,1)"
    assert str(Line(Point(0, 0), Point(1, 1))) == "((0,0),(1,1))"
    assert str(Rectangle(Point(0.25, 0.5), 10, 20)) == "((0.25,0.5),10,20)"


def test_point_render_draws_full_circle_scaled():
    s = RecordingSurface()
    Point(0.5, 0.25).render(s, 200, 100)
    assert s.calls == [("arc", (100.0, 25.0, 3.0, 0.0, math.pi * 2.0, True))]

    s.clear()
    Point(0.5, 0.25).render(s, 200, 100, radius=7.5)
    assert s.calls[0][1][2] == 7.5


def test_line_render_moves_then_draws():
    s = RecordingSurface()
    Line(Point(0, 0.5), Point(1, 0.25)).render(s, 200, 100)
    assert s.calls == [("moveTo", (0.0, 50.0)), ("lineTo", (200.0, 25.0))]


def test_rectangle_render_scales_position_but_not_size():
    s = RecordingSurface()
    Rectangle(Point(0.25, 0.5), 10, 5).render(s, 200, 100)
    assert s.calls == [
        ("moveTo", (50.0, 50.0)),
        ("lineTo", (60.0, 50.0)),
        ("lineTo", (60.0, 55.0)),
        ("lineTo", (50.0, 55.0)),
        ("lineTo", (50.0, 50.0)),
    ]


def test_rectangle_point_containment_is_not_supported():
    rect = Rectangle(Point(0, 0), 1, 1)
    with pytest.raises(RcgNotImplementedError):
        rect.point_intersection(Point(0.5, 0.5))
    # also catchable as the builtin and the project base error
    with pytest.raises(NotImplementedError):
        rect.point_intersection(Point(0.5, 0.5))
    with pytest.raises(RcgError):
        rect.point_intersection(Point(0.5, 0.5))

"""좌표/사각형 기본형 테스트"""

import pytest

from adventure_deck.core.geometry import Point, Rect, Size, clamp


class TestPoint:
    def test_distance(self):
        assert Point(0, 0).distance_to(Point(3, 4)) == pytest.approx(5.0)

    def test_lerp_endpoints_and_midpoint(self):
        a, b = Point(0, 0), Point(10, 20)
        assert a.lerp(b, 0.0) == a
        assert a.lerp(b, 1.0) == b
        assert a.lerp(b, 0.5) == Point(5, 10)

    def test_dict_round_trip(self):
        p = Point(1.5, -2.0)
        assert Point.from_dict(p.to_dict()) == p


class TestRect:
    def test_contains_is_half_open(self):
        r = Rect(0, 0, 10, 10)
        assert r.contains(Point(0, 0))
        assert r.contains(Point(9.99, 9.99))
        assert not r.contains(Point(10, 5))
        assert not r.contains(Point(5, 10))

    def test_inset_never_negative(self):
        r = Rect(0, 0, 20, 10).inset(8)
        assert r.x == 8 and r.y == 8
        assert r.width == pytest.approx(4)
        assert r.height == 0

    def test_intersection_area(self):
        a = Rect(0, 0, 10, 10)
        assert a.intersection_area(Rect(5, 5, 10, 10)) == pytest.approx(25)
        assert a.intersection_area(Rect(10, 0, 10, 10)) == 0

    def test_center(self):
        assert Rect(10, 20, 100, 40).center == Point(60, 40)


def test_size_is_empty():
    assert Size().is_empty
    assert Size(100, 0).is_empty
    assert not Size(1, 1).is_empty


def test_clamp():
    assert clamp(5, 0, 10) == 5
    assert clamp(-1, 0, 10) == 0
    assert clamp(11, 0, 10) == 10

"""Tests for the Rectangle value."""

from cssbuilder import Rectangle


class TestRectangle:
    def test_fields(self):
        r = Rectangle(10, 20)
        assert r.width == 10
        assert r.height == 20

    def test_area(self):
        assert Rectangle(10, 20).area == 200

    def test_area_follows_fields(self):
        r = Rectangle(1, 1)
        r.width = 5
        assert r.area == 5

    def test_zero_area(self):
        assert Rectangle(0, 7).area == 0

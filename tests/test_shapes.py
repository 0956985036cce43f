"""Tests for the Rectangle value object."""

from csb.shapes import Rectangle


def test_fields():
    r = Rectangle(10, 20)
    assert r.width == 10
    assert r.height == 20


def test_area():
    assert Rectangle(10, 20).area() == 200
    assert Rectangle(2.5, 4).get_area() == 10.0


def test_area_follows_fields():
    r = Rectangle(1, 1)
    r.width = 7
    assert r.area() == 7

"""
Tests for geometry primitives
"""

import pytest

from core.geometry import (
    Circle,
    DisplayRect,
    clamp_center,
    edge_distance,
    is_circle_contained,
    max_radius,
    to_image_coords,
)


class TestCircle:
    """Test Circle helpers"""

    def test_diameter_and_empty(self):
        assert Circle(10, 10, 0).is_empty
        circle = Circle(10, 10, 4.5)
        assert not circle.is_empty
        assert circle.diameter == 9.0

    def test_contains_point_includes_boundary(self):
        circle = Circle(100, 100, 50)
        assert circle.contains_point(100, 100)
        assert circle.contains_point(150, 100)
        assert not circle.contains_point(151, 100)
        assert not circle.contains_point(140, 140)

    def test_bounding_box(self):
        assert Circle(150, 120, 50).bounding_box() == (100, 70, 100)


class TestCoordinateMapping:
    """Test device to image coordinate conversion"""

    def test_identity_without_display(self):
        assert to_image_coords(12, 34, 300, 300) == (12.0, 34.0)

    def test_scaled_display(self):
        # 600x400 image shown at half size, offset in the page
        display = DisplayRect(left=20, top=50, width=300, height=200)
        assert to_image_coords(170, 150, 600, 400, display) == (300.0, 200.0)

    def test_axes_scale_independently(self):
        display = DisplayRect(left=0, top=0, width=300, height=100)
        assert to_image_coords(150, 50, 600, 400, display) == (300.0, 200.0)

    def test_invalid_display_size(self):
        with pytest.raises(ValueError):
            to_image_coords(0, 0, 300, 300, DisplayRect(0, 0, 0, 100))


class TestBounds:
    """Test containment helpers"""

    def test_max_radius(self):
        assert max_radius(600, 400) == 200
        assert max_radius(300, 300) == 150

    def test_edge_distance(self):
        assert edge_distance(10, 50, 300, 300) == 10
        assert edge_distance(150, 150, 300, 300) == 150
        assert edge_distance(-5, 50, 300, 300) == 0

    def test_clamp_center(self):
        assert clamp_center(0, 0, 50, 300, 300) == (50, 50)
        assert clamp_center(400, 120, 50, 300, 300) == (250, 120)

    def test_is_circle_contained(self):
        assert is_circle_contained(Circle(150, 150, 150), 300, 300)
        assert is_circle_contained(Circle(0, 0, 0), 300, 300)
        assert not is_circle_contained(Circle(100, 150, 150), 300, 300)
        assert not is_circle_contained(Circle(200, 200, 201), 600, 400)

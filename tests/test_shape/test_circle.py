# -*- coding: Utf-8 -*-

from __future__ import annotations

from pyshapes import Circle, Coord, Ellipse, Line, Rect, environ

import pytest


class TestCircle:
    @pytest.fixture
    @staticmethod
    def circle() -> Circle:
        return Circle((100, 100), 50)

    def test____dunder_init____negative_radius(self) -> None:
        # Arrange

        # Act & Assert
        with pytest.raises(AssertionError):
            Circle((0, 0), -1)

    def test____points____center_and_top_point(self, circle: Circle) -> None:
        # Arrange

        # Act & Assert
        assert circle.points() == [(100, 100), (100, 50)]
        assert Circle.from_points(circle.points()) == circle

    def test____from_points____radius_is_the_distance(self) -> None:
        # Arrange

        # Act
        circle = Circle.from_points([(0, 0), (3, 4)])

        # Assert
        assert circle.center() == (0, 0)
        assert circle.radius() == 5

    @pytest.mark.parametrize(
        ["point", "expected"],
        [
            pytest.param((100, 100), True, id="center"),
            pytest.param((150, 100), True, id="on the edge"),
            pytest.param((100, 50), True, id="top of the edge"),
            pytest.param((135, 135), True, id="inside"),
            pytest.param((136, 136), False, id="just outside"),
            pytest.param((151, 100), False, id="outside"),
        ],
    )
    def test____contains(self, circle: Circle, point: tuple[int, int], expected: bool) -> None:
        # Arrange

        # Act & Assert
        assert circle.contains(point) is expected

    def test____bounds(self, circle: Circle) -> None:
        # Arrange

        # Act & Assert
        assert (circle.left(), circle.top(), circle.right(), circle.bottom()) == (50, 50, 150, 150)

    def test____transforms(self, circle: Circle) -> None:
        # Arrange

        # Act & Assert
        assert circle.translate_by((10, -10)) == Circle((110, 90), 50)
        assert circle.move_center_to((0, 0)) == Circle((0, 0), 50)
        assert circle.rotate(90) == circle
        assert circle.rotate_around(90, (0, 0)) == Circle((-100, 100), 50)
        assert circle.scale(1.5) == Circle((100, 100), 75)
        assert circle.scale_around(2.0, (0, 0)) == Circle((200, 200), 100)

    def test____derived_shapes(self, circle: Circle) -> None:
        # Arrange

        # Act & Assert
        assert circle.as_outer_rect() == Rect((50, 50), (150, 150))
        assert circle.as_inner_rect() == Rect((65, 65), (135, 135))
        assert circle.as_ellipse() == Ellipse((100, 100), (100, 50), (150, 100))
        assert circle.as_ellipse().as_circle() == circle
        assert circle.as_radius_line() == Line((100, 100), (100, 50))
        assert circle.as_horizontal_line() == Line((50, 100), (150, 100))
        assert circle.as_vertical_line() == Line((100, 50), (100, 150))

    def test____as_polygon____sampled_edge(self, circle: Circle) -> None:
        # Arrange

        # Act
        polygon = circle.as_polygon()

        # Assert
        points = polygon.points()
        assert len(points) == 36
        assert points[0] == (100, 50)
        assert points[9] == (150, 100)
        assert points[18] == (100, 150)
        assert points[27] == (50, 100)
        assert all(circle.contains(point) for point in points)
        assert len(circle.as_lines()) == 36

    def test____as_polygon____sampling_step_from_environment(
        self,
        circle: Circle,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        # Arrange
        monkeypatch.setattr(environ, "settings", environ.settings._replace(curve_sampling_step=90))

        # Act
        polygon = circle.as_polygon()

        # Assert
        assert polygon.points() == [(100, 50), (150, 100), (100, 150), (50, 100)]

    def test____outline_pixels____radius_one(self) -> None:
        # Arrange
        circle = Circle((0, 0), 1)

        # Act & Assert
        assert circle.outline_pixels() == {(0, 1), (1, 0), (0, -1), (-1, 0)}
        assert circle.filled_pixels() == {(0, 1), (1, 0), (0, -1), (-1, 0), (0, 0)}

    def test____pixels____radius_zero(self) -> None:
        # Arrange
        circle = Circle((4, 2), 0)

        # Act & Assert
        assert circle.outline_pixels() == {(4, 2)}
        assert circle.filled_pixels() == {(4, 2)}

    def test____outline_pixels____eight_way_symmetry(self) -> None:
        # Arrange
        circle = Circle((0, 0), 5)

        # Act
        outline = circle.outline_pixels()

        # Assert
        assert {(0, 5), (1, 5), (2, 5), (3, 4), (4, 3), (5, 0)} <= outline
        for x, y in outline:
            assert Coord(y, x) in outline
            assert Coord(-x, y) in outline
            assert Coord(x, -y) in outline

    def test____filled_pixels____rows(self) -> None:
        # Arrange
        circle = Circle((10, 10), 5)

        # Act
        filled = circle.filled_pixels()

        # Assert
        assert {x for x, y in filled if y == 10} == set(range(5, 16))
        assert {x for x, y in filled if y == 5} == {10}
        assert {x for x, y in filled if y == 7} == set(range(6, 15))

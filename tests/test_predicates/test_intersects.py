# -*- coding: Utf-8 -*-

from __future__ import annotations

import itertools
import logging
from typing import TYPE_CHECKING

from pyshapes import AbstractShape, Circle, Ellipse, Line, Polygon, Rect, Triangle, environ
from pyshapes.predicates import intersection

import pytest

if TYPE_CHECKING:
    from pytest_mock import MockerFixture

SAMPLE_SHAPES: list[AbstractShape] = [
    Line((0, 0), (30, 30)),
    Line((-20, 5), (40, 5)),
    Line((100, 100), (100, 100)),
    Rect((0, 0), (20, 10)),
    Rect((5, 5), (8, 8)),
    Circle((10, 10), 5),
    Circle((50, 50), 30),
    Ellipse.from_size((10, 0), 40, 20),
    Ellipse.from_size((60, 60), 40, 20).rotate(45),
    Ellipse.from_size((0, 0), 20, 0),
    Triangle((0, 0), (30, 0), (0, 30)),
    Triangle((200, 200), (210, 200), (200, 210)),
    Polygon([(0, 0), (10, 0), (10, 10), (5, 5), (0, 10)]),
    Polygon([(40, 40), (80, 40), (80, 80), (40, 80)]),
]


class TestIntersectionSymmetry:
    @pytest.mark.parametrize(
        ["lhs", "rhs"],
        [pytest.param(lhs, rhs, id=f"{lhs!r}-{rhs!r}") for lhs, rhs in itertools.combinations_with_replacement(SAMPLE_SHAPES, 2)],
    )
    def test____intersects____symmetric(self, lhs: AbstractShape, rhs: AbstractShape) -> None:
        # Arrange

        # Act
        lhs_result = lhs.intersects_shape(rhs)
        rhs_result = rhs.intersects_shape(lhs)

        # Assert
        assert isinstance(lhs_result, bool)
        assert lhs_result is rhs_result

    def test____dispatch_table____covers_every_pair_of_kinds(self) -> None:
        # Arrange
        kinds = sorted({shape.kind for shape in SAMPLE_SHAPES}, key=lambda kind: kind.order)

        # Act
        pairs = list(itertools.combinations_with_replacement(kinds, 2))

        # Assert
        assert len(pairs) == 21
        assert all(pair in intersection._INTERSECTIONS for pair in pairs)


class TestLineIntersection:
    @pytest.mark.parametrize(
        ["other", "expected"],
        [
            pytest.param(Line((0, 10), (10, 0)), True, id="crossing"),
            pytest.param(Line((10, 10), (20, 0)), True, id="touching end point"),
            pytest.param(Line((5, 5), (20, 20)), True, id="collinear overlap"),
            pytest.param(Line((11, 11), (20, 20)), False, id="collinear disjoint"),
            pytest.param(Line((1, 0), (11, 10)), False, id="parallel"),
            pytest.param(Line((4, 4), (4, 4)), True, id="point on the line"),
        ],
    )
    def test____line_line(self, other: Line, expected: bool) -> None:
        # Arrange
        line = Line((0, 0), (10, 10))

        # Act & Assert
        assert line.intersects_line(other) is expected
        assert other.intersects_line(line) is expected

    @pytest.mark.parametrize(
        ["line", "expected"],
        [
            pytest.param(Line((0, 40), (100, 40)), True, id="through the center"),
            pytest.param(Line((0, 20), (100, 20)), True, id="tangent"),
            pytest.param(Line((45, 40), (55, 40)), False, id="inside"),
            pytest.param(Line((0, 0), (100, 0)), False, id="outside"),
            pytest.param(Line((50, 40), (80, 40)), True, id="from center to outside"),
            pytest.param(Line((50, 20), (50, 20)), True, id="point on the edge"),
            pytest.param(Line((50, 40), (50, 40)), False, id="point on the center"),
        ],
    )
    def test____line_circle(self, line: Line, expected: bool) -> None:
        # Arrange
        circle = Circle((50, 40), 20)

        # Act & Assert
        assert circle.intersects_line(line) is expected
        assert line.intersects_circle(circle) is expected

    @pytest.mark.parametrize(
        ["line", "expected"],
        [
            pytest.param(Line((-30, 0), (30, 0)), True, id="through the center"),
            pytest.param(Line((-5, 0), (5, 0)), False, id="inside"),
            pytest.param(Line((-30, 10), (30, 10)), True, id="tangent"),
            pytest.param(Line((-30, 11), (30, 11)), False, id="outside"),
            pytest.param(Line((-30, 15), (30, 15)), False, id="outside the short axis"),
        ],
    )
    def test____line_ellipse(self, line: Line, expected: bool) -> None:
        # Arrange
        ellipse = Ellipse.from_size((0, 0), 40, 20)

        # Act & Assert
        assert ellipse.intersects_line(line) is expected
        assert line.intersects_ellipse(ellipse) is expected

    def test____line_ellipse____rotated(self) -> None:
        # Arrange
        ellipse = Ellipse.from_size((0, 0), 40, 20).rotate(90)
        line = Line((-30, 15), (30, 15))

        # Act & Assert
        assert ellipse.intersects_line(line)
        assert not ellipse.intersects_line(Line((-30, 0), (-11, 0)))

    def test____line_ellipse____flat_ellipse(self) -> None:
        # Arrange
        ellipse = Ellipse.from_size((0, 0), 20, 0)

        # Act & Assert
        assert ellipse.intersects_line(Line((0, -5), (0, 5)))
        assert not ellipse.intersects_line(Line((11, -5), (11, 5)))

    @pytest.mark.parametrize(
        ["shape", "expected"],
        [
            pytest.param(Rect((0, 0), (10, 10)), True, id="rect"),
            pytest.param(Rect((0, 0), (3, 3)), False, id="small rect"),
            pytest.param(Triangle((0, 0), (10, 0), (0, 10)), True, id="triangle"),
            pytest.param(Polygon([(0, 0), (10, 0), (10, 10), (5, 5), (0, 10)]), True, id="polygon"),
        ],
    )
    def test____line_boundary(self, shape: AbstractShape, expected: bool) -> None:
        # Arrange
        line = Line((5, -5), (5, 20))

        # Act & Assert
        assert shape.intersects_line(line) is expected


class TestRectIntersection:
    @pytest.mark.parametrize(
        ["other", "expected"],
        [
            pytest.param(Rect((0, 0), (10, 10)), True, id="identical"),
            pytest.param(Rect((5, 5), (15, 15)), True, id="overlapping"),
            pytest.param(Rect((10, 0), (20, 10)), True, id="sharing an edge"),
            pytest.param(Rect((10, 10), (20, 20)), True, id="sharing a corner"),
            pytest.param(Rect((2, 2), (8, 8)), False, id="nested"),
            pytest.param(Rect((11, 0), (20, 10)), False, id="disjoint"),
        ],
    )
    def test____rect_rect(self, other: Rect, expected: bool) -> None:
        # Arrange
        rect = Rect((0, 0), (10, 10))

        # Act & Assert
        assert rect.intersects_rect(other) is expected

    @pytest.mark.parametrize(
        ["circle", "expected"],
        [
            pytest.param(Circle((5, 5), 3), False, id="inside"),
            pytest.param(Circle((5, 5), 5), True, id="tangent to every edge"),
            pytest.param(Circle((15, 5), 5), True, id="tangent from outside"),
            pytest.param(Circle((5, 5), 20), False, id="around"),
            pytest.param(Circle((0, 0), 2), True, id="on a corner"),
        ],
    )
    def test____rect_circle(self, circle: Circle, expected: bool) -> None:
        # Arrange
        rect = Rect((0, 0), (10, 10))

        # Act & Assert
        assert rect.intersects_circle(circle) is expected
        assert circle.intersects_rect(rect) is expected

    def test____rect_ellipse(self) -> None:
        # Arrange
        ellipse = Ellipse.from_size((0, 0), 40, 20)

        # Act & Assert
        assert not ellipse.intersects_rect(Rect((-30, -30), (30, 30)))
        assert not ellipse.intersects_rect(Rect((-5, -5), (5, 5)))
        assert ellipse.intersects_rect(Rect((0, 0), (30, 30)))

    def test____rect_triangle_polygon(self) -> None:
        # Arrange
        rect = Rect((0, 0), (10, 10))

        # Act & Assert
        assert rect.intersects_triangle(Triangle((5, 5), (15, 5), (5, 15)))
        assert not rect.intersects_triangle(Triangle((2, 2), (6, 2), (2, 6)))
        assert rect.intersects_polygon(Polygon([(5, 5), (15, 5), (15, 15), (5, 15)]))
        assert not rect.intersects_polygon(Polygon([(20, 20), (30, 20), (30, 30)]))


class TestCircleIntersection:
    def test____circle_circle____center_within_reach(self) -> None:
        # Arrange
        circle = Circle((0, 0), 10)

        # Act & Assert
        assert circle.intersects_circle(Circle((0, 0), 10))
        assert circle.intersects_circle(Circle((10, 0), 3))
        assert circle.intersects_circle(Circle((30, 0), 30))
        assert not circle.intersects_circle(Circle((30, 0), 5))

    def test____circle_circle____known_behavior_with_overlapping_disks(self) -> None:
        # The predicate checks whether a center is within the other circle's reach.
        # Overlapping disks with both centers out of reach are not reported,
        # and a small circle nested inside a big one is reported.

        # Arrange
        circle = Circle((0, 0), 10)

        # Act & Assert
        assert not circle.intersects_circle(Circle((15, 0), 10))
        assert circle.intersects_circle(Circle((5, 0), 2))

    def test____circle_triangle_polygon(self) -> None:
        # Arrange
        triangle = Triangle((0, 0), (30, 0), (0, 30))
        polygon = Polygon([(0, 0), (30, 0), (30, 30), (0, 30)])

        # Act & Assert
        assert Circle((0, 0), 5).intersects_triangle(triangle)
        assert not Circle((8, 8), 3).intersects_triangle(triangle)
        assert Circle((15, 30), 1).intersects_polygon(polygon)
        assert not Circle((15, 15), 10).intersects_polygon(polygon)


class TestEllipseCircleIntersection:
    @pytest.fixture
    @staticmethod
    def ellipse() -> Ellipse:
        return Ellipse.from_size((0, 0), 40, 20)

    @pytest.mark.parametrize(
        ["circle", "expected"],
        [
            pytest.param(Circle((0, 0), 5), False, id="inside"),
            pytest.param(Circle((0, 0), 30), False, id="around"),
            pytest.param(Circle((100, 0), 5), False, id="far away"),
            pytest.param(Circle((5, 0), 15), True, id="crossing both axes"),
            pytest.param(Circle((20, 0), 5), True, id="centered on the edge"),
            pytest.param(Circle((0, 0), 15), True, id="radius between both axes"),
            pytest.param(Circle((0, 13), 2), False, id="near the short axis"),
            pytest.param(Circle((0, 13), 3), True, id="touching the short axis"),
        ],
    )
    def test____ellipse_circle(self, ellipse: Ellipse, circle: Circle, expected: bool) -> None:
        # Arrange

        # Act & Assert
        assert ellipse.intersects_circle(circle) is expected
        assert circle.intersects_ellipse(ellipse) is expected

    def test____ellipse_circle____flat_ellipse(self) -> None:
        # Arrange
        ellipse = Ellipse.from_size((0, 0), 20, 0)

        # Act & Assert
        assert ellipse.intersects_circle(Circle((0, 5), 5))
        assert not ellipse.intersects_circle(Circle((0, 5), 4))

    def test____ellipse_circle____refinement_uses_settings(
        self,
        ellipse: Ellipse,
        monkeypatch: pytest.MonkeyPatch,
        mocker: MockerFixture,
    ) -> None:
        # Arrange
        monkeypatch.setattr(environ, "settings", environ.settings._replace(curve_sampling_step=45, ellipse_circle_depth=3))
        iterate = mocker.spy(intersection, "_iterate")
        circle = Circle((0, 0), 15)

        # Act
        result = intersection.ellipse_circle(ellipse, circle)

        # Assert
        assert result is True
        iterate.assert_called_once_with(ellipse, circle, 45, 3)

    @pytest.mark.parametrize(
        "circle",
        [
            pytest.param(Circle((0, 0), 5), id="fast reject"),
            pytest.param(Circle((5, 0), 15), id="fast accept"),
        ],
    )
    def test____ellipse_circle____no_refinement_needed(
        self,
        ellipse: Ellipse,
        circle: Circle,
        mocker: MockerFixture,
    ) -> None:
        # Arrange
        iterate = mocker.spy(intersection, "_iterate")

        # Act
        intersection.ellipse_circle(ellipse, circle)

        # Assert
        iterate.assert_not_called()

    def test____ellipse_circle____refinement_is_logged(self, ellipse: Ellipse, caplog: pytest.LogCaptureFixture) -> None:
        # Arrange
        caplog.set_level(logging.DEBUG, intersection.__name__)

        # Act
        intersection.ellipse_circle(ellipse, Circle((0, 0), 15))

        # Assert
        assert len(caplog.records) == 1
        assert caplog.records[0].levelno == logging.DEBUG
        assert caplog.records[0].name == "pyshapes.predicates.intersection"


class TestEllipseIntersection:
    def test____ellipse_ellipse(self) -> None:
        # Arrange
        ellipse = Ellipse.from_size((0, 0), 40, 20)

        # Act & Assert
        assert ellipse.intersects_ellipse(ellipse)
        assert ellipse.intersects_ellipse(ellipse.rotate(90))
        assert ellipse.intersects_ellipse(ellipse.translate_by((30, 0)))
        assert not ellipse.intersects_ellipse(ellipse.translate_by((100, 0)))
        assert not ellipse.intersects_ellipse(Ellipse.from_size((0, 0), 10, 6))

    def test____ellipse_triangle_polygon(self) -> None:
        # Arrange
        ellipse = Ellipse.from_size((0, 0), 40, 20)

        # Act & Assert
        assert ellipse.intersects_triangle(Triangle((0, 0), (30, 0), (0, 30)))
        assert not ellipse.intersects_triangle(Triangle((-3, -3), (3, -3), (0, 3)))
        assert ellipse.intersects_polygon(Polygon([(-20, -10), (20, -10), (20, 10), (-20, 10)]))
        assert not ellipse.intersects_polygon(Polygon([(-30, -30), (30, -30), (30, 30), (-30, 30)]))


class TestTriangleAndPolygonIntersection:
    def test____triangle_triangle(self) -> None:
        # Arrange
        triangle = Triangle((0, 0), (10, 0), (0, 10))

        # Act & Assert
        assert triangle.intersects_triangle(Triangle((5, 5), (15, 5), (5, 15)))
        assert not triangle.intersects_triangle(Triangle((1, 1), (3, 1), (1, 3)))

    def test____polygon_polygon____concave(self) -> None:
        # Arrange
        concave = Polygon([(0, 0), (10, 0), (10, 10), (5, 5), (0, 10)])

        # Act & Assert
        assert not concave.intersects_polygon(Polygon([(4, 8), (6, 8), (5, 9)]))
        assert concave.intersects_polygon(Polygon([(4, 8), (6, 8), (5, 4)]))
        assert concave.intersects_triangle(Triangle((4, 8), (6, 8), (5, 4)))

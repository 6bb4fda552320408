"""core.validation の範囲検証テスト。"""

from __future__ import annotations

import pytest

from strala.core.layer import Layer
from strala.core.layer_geometry import PointA, PointB, SinglePointGeometry, TwoPointGeometry
from strala.core.layer_style import LayerStyle
from strala.core.validation import is_layer_valid, is_style_valid, is_valid


@pytest.mark.parametrize(
    ("start", "step", "expected"),
    [
        (0, 11, True),
        (11, 1, True),
        (0, 12, False),
        (12, 1, False),
        (-1, 1, False),
        (0, 0, False),
    ],
)
def test_single_point_boundaries(start: int, step: int, expected: bool) -> None:
    assert is_layer_valid(SinglePointGeometry(start, step), 12) is expected


@pytest.mark.parametrize(
    ("a", "b", "expected"),
    [
        (PointA(0, 1), PointB(-11, 11), True),
        (PointA(11, 11), PointB(11, 1), True),
        (PointA(12, 1), PointB(0, 1), False),
        (PointA(0, 1), PointB(-12, 1), False),
        (PointA(0, 1), PointB(12, 1), False),
        (PointA(0, 12), PointB(0, 1), False),
        (PointA(0, 1), PointB(0, 0), False),
    ],
)
def test_two_point_boundaries(a: PointA, b: PointB, expected: bool) -> None:
    assert is_layer_valid(TwoPointGeometry(a, b), 12) is expected


def test_two_point_max_iterations() -> None:
    a, b = PointA(0, 1), PointB(1, 2)
    assert is_layer_valid(TwoPointGeometry(a, b, max_iterations="complete"), 12)
    assert is_layer_valid(TwoPointGeometry(a, b, max_iterations=0), 12)
    assert not is_layer_valid(TwoPointGeometry(a, b, max_iterations=-1), 12)


def test_non_integer_values_are_invalid() -> None:
    assert not is_layer_valid(SinglePointGeometry(0, 2.5), 12)  # type: ignore[arg-type]
    assert not is_layer_valid(SinglePointGeometry(True, 1), 12)  # type: ignore[arg-type]


def test_unparseable_mapping_is_invalid_not_error() -> None:
    assert not is_layer_valid({"startPoint": "x", "stepSize": 1}, 12)
    assert not is_layer_valid({"connectionType": "two-point"}, 12)
    assert is_layer_valid({"startPoint": 0, "stepSize": 1}, 12)


@pytest.mark.parametrize(
    ("line_width", "alpha", "expected"),
    [
        (1.0, 1.0, True),
        (10.0, 0.0, True),
        (0.0, 0.5, False),
        (10.5, 0.5, False),
        (1.0, -0.1, False),
        (1.0, 1.1, False),
    ],
)
def test_style_boundaries(line_width: float, alpha: float, expected: bool) -> None:
    assert is_style_valid(LayerStyle(line_width=line_width, alpha=alpha)) is expected


@pytest.mark.parametrize(
    ("style", "expected"),
    [
        (LayerStyle(primary="#3b82f6"), True),
        (LayerStyle(primary="3B82F6"), True),
        (LayerStyle(color_type="gradient", primary="#f59e0b", secondary="#ef4444"), True),
        (LayerStyle(color_type="gradient", primary="#f59e0b", secondary=None), True),
        (LayerStyle(primary="not-a-color"), False),
        (LayerStyle(primary="#fff"), False),
        (LayerStyle(primary=None), False),  # type: ignore[arg-type]
        (LayerStyle(color_type="gradient", primary="#f59e0b", secondary="#zzzzzz"), False),
        (LayerStyle(color_type="radial"), False),  # type: ignore[arg-type]
    ],
)
def test_style_colors(style: LayerStyle, expected: bool) -> None:
    assert is_style_valid(style) is expected


def test_full_layer_requires_geometry_and_style() -> None:
    good = Layer(geometry=SinglePointGeometry(0, 5))
    assert is_valid(good, 12)
    assert not is_valid(Layer(geometry=SinglePointGeometry(0, 12)), 12)
    assert not is_valid(Layer(geometry=SinglePointGeometry(0, 5), style=LayerStyle(alpha=2.0)), 12)

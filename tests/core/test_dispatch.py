"""core.dispatch の connection type による振り分けテスト。"""

from __future__ import annotations

import pytest

from strala.core.dispatch import connections_for_layer, indices_for_layer
from strala.core.layer import Layer
from strala.core.layer_geometry import PointA, PointB, SinglePointGeometry, TwoPointGeometry
from strala.core.ring import generate_ring
from strala.core.single_point import single_point_connections
from strala.core.two_point import two_point_connections


def test_single_point_geometry_routes_to_single_point_generator() -> None:
    points = generate_ring(12, 400.0, 400.0)
    geometry = SinglePointGeometry(start_point=2, step_size=5)

    assert connections_for_layer(points, geometry) == single_point_connections(points, 2, 5)


def test_two_point_geometry_routes_to_two_point_generator() -> None:
    points = generate_ring(24, 400.0, 400.0)
    geometry = TwoPointGeometry(PointA(0, 1), PointB(3, 2), max_iterations=10)

    assert connections_for_layer(points, geometry) == two_point_connections(
        points, PointA(0, 1), PointB(3, 2), 10
    )


def test_layer_uses_its_geometry() -> None:
    points = generate_ring(12, 400.0, 400.0)
    layer = Layer(geometry=SinglePointGeometry(0, 5))
    assert len(connections_for_layer(points, layer)) == 12


def test_mapping_without_connection_type_is_single_point() -> None:
    """connectionType が無い旧データは single-point として扱う。"""
    legacy = {"startPoint": 0, "stepSize": 4}
    assert indices_for_layer(12, legacy) == [(0, 4), (4, 8), (8, 0)]


def test_mapping_with_two_point_type() -> None:
    data = {
        "connectionType": "two-point",
        "pointA": {"initialPosition": 0, "stepSize": 1},
        "pointB": {"relativeOffset": -5, "stepSize": 1},
        "maxIterations": 2,
    }
    assert indices_for_layer(10, data) == [(0, 5), (5, 1)]


def test_unsupported_source_raises_type_error() -> None:
    with pytest.raises(TypeError):
        connections_for_layer((), 42)  # type: ignore[arg-type]

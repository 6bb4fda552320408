# どこで: `src/strala/core/dispatch.py`。
# 何を: Layer の connection type に応じて single/two-point generator を選び、接続列を返す。
# なぜ: 描画側が接続規則の違いを意識せずに 1 つの入口から接続列を得られるようにするため。

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Sequence, Union

from strala.core.connection import Connection, IndexPair
from strala.core.layer_geometry import (
    CONNECTION_TWO_POINT,
    LayerGeometry,
    SinglePointGeometry,
    TwoPointGeometry,
    layer_geometry_from_mapping,
)
from strala.core.ring import Point
from strala.core.single_point import single_point_connections, single_point_indices
from strala.core.two_point import two_point_connections, two_point_indices

if TYPE_CHECKING:
    from strala.core.layer import Layer

GeometrySource = Union[LayerGeometry, "Layer", Mapping[str, Any]]


def resolve_geometry(source: GeometrySource) -> LayerGeometry:
    """LayerGeometry / Layer / mapping を LayerGeometry に正規化する。"""
    if isinstance(source, (SinglePointGeometry, TwoPointGeometry)):
        return source
    if isinstance(source, Mapping):
        return layer_geometry_from_mapping(source)
    geometry = getattr(source, "geometry", None)
    if isinstance(geometry, (SinglePointGeometry, TwoPointGeometry)):
        return geometry
    raise TypeError(f"LayerGeometry に変換できない値です: {type(source)!r}")


def indices_for_layer(point_count: int, source: GeometrySource) -> list[IndexPair]:
    """Layer の接続を index 対で返す。"""
    geometry = resolve_geometry(source)
    if geometry.connection_type == CONNECTION_TWO_POINT:
        assert isinstance(geometry, TwoPointGeometry)
        return two_point_indices(
            point_count, geometry.point_a, geometry.point_b, geometry.max_iterations
        )
    assert isinstance(geometry, SinglePointGeometry)
    return single_point_indices(point_count, geometry.start_point, geometry.step_size)


def connections_for_layer(points: Sequence[Point], source: GeometrySource) -> list[Connection]:
    """Layer の接続列を返す。

    `"two-point"` なら two-point generator、それ以外（旧データ含む）は single-point generator。
    """
    geometry = resolve_geometry(source)
    if geometry.connection_type == CONNECTION_TWO_POINT:
        assert isinstance(geometry, TwoPointGeometry)
        return two_point_connections(
            points, geometry.point_a, geometry.point_b, geometry.max_iterations
        )
    assert isinstance(geometry, SinglePointGeometry)
    return single_point_connections(points, geometry.start_point, geometry.step_size)


__all__ = ["connections_for_layer", "indices_for_layer", "resolve_geometry"]

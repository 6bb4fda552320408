# どこで: `src/strala/api/__init__.py`。
# 何を: 描画側/Layer 管理側から使う公開 API を 1 か所に集約する。
# なぜ: 呼び出し側が core の内部モジュール構成に依存しないようにするため。

from __future__ import annotations

from strala.core.connection import Connection
from strala.core.dispatch import connections_for_layer
from strala.core.layer import (
    Layer,
    apply_layer_update,
    default_layers,
    duplicate_layer,
    generate_layer_name,
    update_layer,
)
from strala.core.layer_geometry import (
    COMPLETE,
    PointA,
    PointB,
    SinglePointGeometry,
    TwoPointGeometry,
    layer_geometry_from_mapping,
)
from strala.core.layer_style import LayerStyle
from strala.core.numeric import calculate_pattern_period, max_iterations_bound
from strala.core.pipeline import RealizedLayer, realize_layers
from strala.core.ring import Point, generate_ring
from strala.core.validation import is_layer_valid, is_valid

__all__ = [
    "COMPLETE",
    "Connection",
    "Layer",
    "LayerStyle",
    "Point",
    "PointA",
    "PointB",
    "RealizedLayer",
    "SinglePointGeometry",
    "TwoPointGeometry",
    "apply_layer_update",
    "calculate_pattern_period",
    "connections_for_layer",
    "default_layers",
    "duplicate_layer",
    "generate_layer_name",
    "generate_ring",
    "is_layer_valid",
    "is_valid",
    "layer_geometry_from_mapping",
    "max_iterations_bound",
    "realize_layers",
    "update_layer",
]

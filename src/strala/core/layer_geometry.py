"""
どこで: `src/strala/core/layer_geometry.py`。
何を: Layer のうち接続生成に必要な部分（LayerGeometry）を不変レコードとして定義する。
なぜ: generator を `(points, geometry)` の純関数に保ち、Layer 管理側の状態から切り離すため。

概要
----
- `SinglePointGeometry`: 開始点 + ステップ幅で 1 点を進める規則。
- `TwoPointGeometry`: 独立に進む 2 点 A/B を交互に結ぶ規則。
- `layer_geometry_from_mapping()`: Layer 管理側の camelCase mapping からレコードを作る。
  `connectionType` が無い/未知の Layer は single-point として扱う（旧データ互換）。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Mapping, Union

CONNECTION_SINGLE_POINT = "single-point"
CONNECTION_TWO_POINT = "two-point"

ConnectionType = Literal["single-point", "two-point"]

# max_iterations にこの値（または None）を渡すと、自然周期の全体を生成する。
COMPLETE = "complete"

MaxIterations = Union[int, Literal["complete"], None]

# single → two-point 変換時の点 B 既定値。
DEFAULT_POINT_B_OFFSET = 1
DEFAULT_POINT_B_STEP = 2

# Layer 編集で single → two-point に切り替えたときの点 A ステップ幅。
DEFAULT_POINT_A_STEP = 1


@dataclass(frozen=True, slots=True)
class SinglePointGeometry:
    """`start_point` から `step_size` ずつ進める接続規則。"""

    start_point: int
    step_size: int

    @property
    def connection_type(self) -> ConnectionType:
        return CONNECTION_SINGLE_POINT


@dataclass(frozen=True, slots=True)
class PointA:
    """two-point の点 A（絶対位置で指定）。"""

    initial_position: int
    step_size: int


@dataclass(frozen=True, slots=True)
class PointB:
    """two-point の点 B（点 A からの相対オフセットで指定）。"""

    relative_offset: int
    step_size: int


@dataclass(frozen=True, slots=True)
class TwoPointGeometry:
    """2 点 A/B を交互に結ぶ接続規則。

    Attributes
    ----------
    point_a : PointA
        初期位置とステップ幅。
    point_b : PointB
        A からの相対オフセットとステップ幅。
    max_iterations : int | "complete" | None
        生成する接続数の上限。None/"complete" は自然周期の全体。
    """

    point_a: PointA
    point_b: PointB
    max_iterations: MaxIterations = None

    @property
    def connection_type(self) -> ConnectionType:
        return CONNECTION_TWO_POINT


LayerGeometry = Union[SinglePointGeometry, TwoPointGeometry]


def point_b_position(initial_position: int, relative_offset: int, point_count: int) -> int:
    """点 A の位置と相対オフセットから点 B の絶対 index を返す。

    `(initial + offset + N) mod N`。N <= 0 の場合は 0。
    """
    n = int(point_count)
    if n <= 0:
        return 0
    return (int(initial_position) + int(relative_offset) + n) % n


def convert_single_to_two_point(
    geometry: SinglePointGeometry, *, max_iterations: MaxIterations = None
) -> TwoPointGeometry:
    """single-point の規則を two-point へ変換する。

    点 A は開始点/ステップ幅を引き継ぎ、点 B は既定値（A+1, step 2）で作る。
    """
    return TwoPointGeometry(
        point_a=PointA(
            initial_position=int(geometry.start_point),
            step_size=int(geometry.step_size),
        ),
        point_b=PointB(
            relative_offset=DEFAULT_POINT_B_OFFSET,
            step_size=DEFAULT_POINT_B_STEP,
        ),
        max_iterations=max_iterations,
    )


def convert_two_to_single_point(geometry: TwoPointGeometry) -> SinglePointGeometry:
    """two-point の規則を single-point へ変換する（点 A の値を引き継ぐ）。"""
    return SinglePointGeometry(
        start_point=int(geometry.point_a.initial_position),
        step_size=int(geometry.point_a.step_size),
    )


def _as_int(value: Any, *, key: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{key} は整数である必要がある: got={value!r}")
    try:
        as_float = float(value)
    except Exception as exc:
        raise ValueError(f"{key} は整数である必要がある: got={value!r}") from exc
    if not as_float.is_integer():
        raise ValueError(f"{key} は整数である必要がある: got={value!r}")
    return int(as_float)


def _as_max_iterations(value: Any) -> MaxIterations:
    if value is None:
        return None
    if value == COMPLETE:
        return COMPLETE
    return _as_int(value, key="maxIterations")


def _as_mapping(value: Any, *, key: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ValueError(f"{key} は mapping である必要がある: got={type(value)!r}")
    return value


def layer_geometry_from_mapping(data: Mapping[str, Any]) -> LayerGeometry:
    """Layer 管理側の mapping から LayerGeometry を構築する。

    Parameters
    ----------
    data : Mapping[str, Any]
        `connectionType`, `startPoint`, `stepSize`,
        `pointA.initialPosition`, `pointA.stepSize`,
        `pointB.relativeOffset`, `pointB.stepSize`, `maxIterations` を持つ mapping。

    Returns
    -------
    LayerGeometry
        `connectionType == "two-point"` なら TwoPointGeometry、それ以外は SinglePointGeometry。

    Raises
    ------
    ValueError
        必須キーの欠落、または整数でない値を含む場合。
    """
    connection_type = data.get("connectionType")
    try:
        if connection_type == CONNECTION_TWO_POINT:
            a = _as_mapping(data["pointA"], key="pointA")
            b = _as_mapping(data["pointB"], key="pointB")
            return TwoPointGeometry(
                point_a=PointA(
                    initial_position=_as_int(a["initialPosition"], key="pointA.initialPosition"),
                    step_size=_as_int(a["stepSize"], key="pointA.stepSize"),
                ),
                point_b=PointB(
                    relative_offset=_as_int(b["relativeOffset"], key="pointB.relativeOffset"),
                    step_size=_as_int(b["stepSize"], key="pointB.stepSize"),
                ),
                max_iterations=_as_max_iterations(data.get("maxIterations")),
            )

        return SinglePointGeometry(
            start_point=_as_int(data["startPoint"], key="startPoint"),
            step_size=_as_int(data["stepSize"], key="stepSize"),
        )
    except KeyError as exc:
        raise ValueError(f"LayerGeometry に必要なキーがありません: {exc.args[0]!r}") from exc


__all__ = [
    "COMPLETE",
    "CONNECTION_SINGLE_POINT",
    "CONNECTION_TWO_POINT",
    "ConnectionType",
    "DEFAULT_POINT_A_STEP",
    "DEFAULT_POINT_B_OFFSET",
    "DEFAULT_POINT_B_STEP",
    "LayerGeometry",
    "MaxIterations",
    "PointA",
    "PointB",
    "SinglePointGeometry",
    "TwoPointGeometry",
    "convert_single_to_two_point",
    "convert_two_to_single_point",
    "layer_geometry_from_mapping",
    "point_b_position",
]

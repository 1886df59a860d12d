"""좌표/거리 기본형 (맵 생성·시뮬레이션 공용)"""

import math
from dataclasses import dataclass
from typing import Any


def clamp(value: float, low: float, high: float) -> float:
    """value를 [low, high] 범위로 제한"""
    return min(max(value, low), high)


@dataclass(frozen=True)
class Point:
    """캔버스 좌표 (단위: point)"""

    x: float = 0.0
    y: float = 0.0

    def distance_to(self, other: "Point") -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def lerp(self, other: "Point", t: float) -> "Point":
        """self → other 선형 보간 (t=0이면 self, t=1이면 other)"""
        return Point(
            self.x + (other.x - self.x) * t,
            self.y + (other.y - self.y) * t,
        )

    def to_dict(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        return cls(x=float(data["x"]), y=float(data["y"]))


@dataclass(frozen=True)
class Size:
    """캔버스 크기"""

    width: float = 0.0
    height: float = 0.0

    @property
    def is_empty(self) -> bool:
        """면적이 0 이하면 생성 불가"""
        return self.width <= 0 or self.height <= 0

    def to_dict(self) -> dict[str, float]:
        return {"width": self.width, "height": self.height}


@dataclass(frozen=True)
class Rect:
    """축 정렬 사각형. contains()는 반열린 구간 [min, max)."""

    x: float
    y: float
    width: float
    height: float

    @property
    def min_x(self) -> float:
        return self.x

    @property
    def min_y(self) -> float:
        return self.y

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Point:
        return Point(self.x + self.width / 2, self.y + self.height / 2)

    @property
    def area(self) -> float:
        return self.width * self.height

    def contains(self, point: Point) -> bool:
        return (
            self.min_x <= point.x < self.max_x and self.min_y <= point.y < self.max_y
        )

    def inset(self, padding: float) -> "Rect":
        """사방으로 padding만큼 줄인 사각형 (음수 크기는 0으로)"""
        return Rect(
            self.x + padding,
            self.y + padding,
            max(0.0, self.width - 2 * padding),
            max(0.0, self.height - 2 * padding),
        )

    def intersection_area(self, other: "Rect") -> float:
        overlap_w = min(self.max_x, other.max_x) - max(self.min_x, other.min_x)
        overlap_h = min(self.max_y, other.max_y) - max(self.min_y, other.min_y)
        if overlap_w <= 0 or overlap_h <= 0:
            return 0.0
        return overlap_w * overlap_h

    def to_dict(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}

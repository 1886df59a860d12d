"""
Adventure Deck Core - Map Model
===============================
노드 / 경로 / 지형 존 / 장식으로 구성된 어드벤처 맵

맵은 "새 맵" 요청마다 한 번 생성되며, 이후에는
노드의 방문 플래그(is_visited)만 시뮬레이션이 변경합니다.
"""

import uuid
from dataclasses import dataclass, field
from typing import Any, Optional

from adventure_deck.core.geometry import Point, Rect
from adventure_deck.core.themes import TerrainType, Theme


def new_id() -> str:
    return uuid.uuid4().hex


@dataclass
class MapNode:
    """맵 노드 (웨이포인트)"""

    position: Point
    icon: str
    id: str = field(default_factory=new_id)
    is_visited: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "position": self.position.to_dict(),
            "icon": self.icon,
            "is_visited": self.is_visited,
        }


@dataclass(frozen=True)
class MapPath:
    """무방향 간선. 자기 루프 없음."""

    start_node_id: str
    end_node_id: str
    id: str = field(default_factory=new_id)

    def connects(self, node_id: str) -> bool:
        return node_id in (self.start_node_id, self.end_node_id)

    def other_end(self, node_id: str) -> str:
        return self.end_node_id if node_id == self.start_node_id else self.start_node_id

    def to_dict(self) -> dict[str, str]:
        return {
            "id": self.id,
            "start_node_id": self.start_node_id,
            "end_node_id": self.end_node_id,
        }


@dataclass(frozen=True)
class TerrainDecoration:
    """존 내부 장식 (순수 시각 요소, 생성 후 읽기 전용)"""

    icon: str
    position: Point
    size: float
    opacity: float
    rotation: float
    id: str = field(default_factory=new_id)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "icon": self.icon,
            "position": self.position.to_dict(),
            "size": self.size,
            "opacity": self.opacity,
            "rotation": self.rotation,
        }


@dataclass(frozen=True)
class TerrainZone:
    """지형 존 (캔버스 격자 한 칸)"""

    terrain_type: TerrainType
    bounds: Rect
    decorations: tuple[TerrainDecoration, ...] = ()
    id: str = field(default_factory=new_id)

    @property
    def name(self) -> str:
        return self.terrain_type.name

    @property
    def center(self) -> Point:
        return self.bounds.center

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "terrain_type": self.terrain_type.to_dict(),
            "bounds": self.bounds.to_dict(),
            "decorations": [d.to_dict() for d in self.decorations],
        }


@dataclass
class AdventureMap:
    """
    어드벤처 맵

    불변식:
    - traversal_path의 모든 ID는 nodes에 존재
    - traversal_path의 연속된 두 노드는 paths 중 하나로 연결
    - traversal_path에 중복 ID 없음 (단순 경로)
    """

    theme: Theme
    nodes: list[MapNode] = field(default_factory=list)
    paths: list[MapPath] = field(default_factory=list)
    traversal_path: list[str] = field(default_factory=list)
    terrain_zones: list[TerrainZone] = field(default_factory=list)

    def node(self, node_id: str) -> Optional[MapNode]:
        for node in self.nodes:
            if node.id == node_id:
                return node
        return None

    def node_index(self, node_id: str) -> Optional[int]:
        for index, node in enumerate(self.nodes):
            if node.id == node_id:
                return index
        return None

    def mark_node_visited(self, node_id: str) -> None:
        node = self.node(node_id)
        if node is not None:
            node.is_visited = True

    def reset_visited(self) -> None:
        for node in self.nodes:
            node.is_visited = False

    def paths_connected_to(self, node_id: str) -> list[MapPath]:
        return [p for p in self.paths if p.connects(node_id)]

    def traversal_positions(self) -> list[Point]:
        """경로 순서대로 노드 좌표"""
        positions = []
        for node_id in self.traversal_path:
            node = self.node(node_id)
            if node is not None:
                positions.append(node.position)
        return positions

    def zone_at(self, point: Point) -> Optional[TerrainZone]:
        """point를 포함하는 첫 번째 존"""
        for zone in self.terrain_zones:
            if zone.bounds.contains(point):
                return zone
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "theme": self.theme.value,
            "nodes": [n.to_dict() for n in self.nodes],
            "paths": [p.to_dict() for p in self.paths],
            "traversal_path": list(self.traversal_path),
            "terrain_zones": [z.to_dict() for z in self.terrain_zones],
        }

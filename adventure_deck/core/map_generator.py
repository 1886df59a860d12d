"""
Adventure Deck Core - Map Generation
====================================
테마와 캔버스 크기로부터 어드벤처 맵을 절차적으로 생성

생성 순서:
1. 지형 존 (R×C 격자, 최근 사용 지형 회피)
2. 노드 (별도 R×C 격자, 칸마다 1~2개)
3. 경로 (거리 임계값 이하 쌍 연결 + 연결성 복구)
4. 탐험 경로 (최좌측 → 최우측 최장 단순 경로)

난수는 주입된 random.Random 하나만 사용하므로
같은 시드면 같은 맵 구조가 나옵니다.
"""

import random
from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional

from adventure_deck.core.adventure_map import (
    AdventureMap,
    MapNode,
    MapPath,
    TerrainDecoration,
    TerrainZone,
)
from adventure_deck.core.geometry import Point, Rect, Size, clamp
from adventure_deck.core.logging import get_logger
from adventure_deck.core.themes import TerrainType, Theme
from adventure_deck.core.traversal import (
    DEFAULT_STEP_BUDGET,
    build_adjacency,
    find_longest_path,
)

logger = get_logger(__name__)

FALLBACK_ICON = "circle.fill"


@dataclass
class GenerationConfig:
    """맵 생성 파라미터"""

    # 노드 격자
    grid_columns: int = 4
    grid_rows: int = 3
    nodes_per_cell: tuple[int, int] = (1, 2)
    connection_distance: float = 0.35  # 캔버스 폭 대비 비율
    padding: float = 0.08  # 캔버스 가장자리 여백 비율
    node_internal_padding: float = 20.0

    # 지형 존 격자
    zone_columns: int = 3
    zone_rows: int = 2
    decorations_per_zone: tuple[int, int] = (4, 8)
    decoration_padding: float = 15.0
    decoration_size: tuple[float, float] = (12.0, 28.0)
    decoration_opacity: tuple[float, float] = (0.15, 0.4)
    decoration_rotation: tuple[float, float] = (0.0, 360.0)
    recent_terrain_window: int = 2

    # 최장 경로 탐색
    search_step_budget: int = DEFAULT_STEP_BUDGET


class MapGenerator:
    """
    어드벤처 맵 생성기

    생성은 실패하지 않습니다. 빈 캔버스나 빈 팔레트는
    빈/최소 맵으로 귀결됩니다.
    """

    def __init__(
        self,
        config: Optional[GenerationConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        self.config = config or GenerationConfig()
        self.rng = rng or random.Random()

    def generate(self, theme: Theme, canvas_size: Size) -> AdventureMap:
        """테마 + 캔버스 크기 → 맵"""
        if canvas_size.is_empty:
            logger.debug("빈 캔버스 (%s) → 빈 맵", canvas_size)
            return AdventureMap(theme=theme)

        profile = theme.profile
        zones = self.generate_terrain_zones(profile.terrain_types, canvas_size)
        nodes = self.generate_nodes(profile.node_icons, canvas_size)
        paths = self.generate_paths(nodes, canvas_size)
        route = self.find_traversal_path(nodes, paths)

        logger.info(
            "맵 생성: theme=%s zones=%d nodes=%d paths=%d route=%d",
            theme.value,
            len(zones),
            len(nodes),
            len(paths),
            len(route),
        )
        return AdventureMap(
            theme=theme,
            nodes=nodes,
            paths=paths,
            traversal_path=route,
            terrain_zones=zones,
        )

    # === 지형 존 ===

    def generate_terrain_zones(
        self, terrain_types: Sequence[TerrainType], canvas_size: Size
    ) -> list[TerrainZone]:
        """캔버스를 zone_rows × zone_columns로 분할"""
        cfg = self.config
        if not terrain_types or canvas_size.is_empty:
            return []

        zone_width = canvas_size.width / cfg.zone_columns
        zone_height = canvas_size.height / cfg.zone_rows

        # 인접 격자가 아니라 "최근 N개 선택"만 회피
        recent: deque[int] = deque(maxlen=cfg.recent_terrain_window)
        zones: list[TerrainZone] = []

        for row in range(cfg.zone_rows):
            for col in range(cfg.zone_columns):
                index = self._pick_terrain_index(len(terrain_types), recent)
                recent.append(index)
                terrain_type = terrain_types[index]

                bounds = Rect(col * zone_width, row * zone_height, zone_width, zone_height)
                zones.append(
                    TerrainZone(
                        terrain_type=terrain_type,
                        bounds=bounds,
                        decorations=tuple(
                            self.generate_decorations(terrain_type, bounds)
                        ),
                    )
                )

        return zones

    def _pick_terrain_index(self, count: int, recent: Sequence[int]) -> int:
        available = [i for i in range(count) if i not in recent]
        if not available:
            return self.rng.randrange(count)
        return self.rng.choice(available)

    def generate_decorations(
        self, terrain_type: TerrainType, bounds: Rect
    ) -> list[TerrainDecoration]:
        """존 장식 생성. 개수 = floor(랜덤 기본 개수 × 밀도)"""
        cfg = self.config
        low, high = cfg.decorations_per_zone
        count = int(self.rng.randint(low, high) * terrain_type.decoration_density)
        if count <= 0:
            return []

        area = bounds.inset(cfg.decoration_padding)
        decorations = []
        for _ in range(count):
            icon = (
                self.rng.choice(terrain_type.decoration_icons)
                if terrain_type.decoration_icons
                else FALLBACK_ICON
            )
            position = Point(
                self.rng.uniform(area.min_x, area.max_x),
                self.rng.uniform(area.min_y, area.max_y),
            )
            decorations.append(
                TerrainDecoration(
                    icon=icon,
                    position=position,
                    size=self.rng.uniform(*cfg.decoration_size),
                    opacity=self.rng.uniform(*cfg.decoration_opacity),
                    rotation=self.rng.uniform(*cfg.decoration_rotation),
                )
            )
        return decorations

    # === 노드 ===

    def generate_nodes(
        self, node_icons: Sequence[str], canvas_size: Size
    ) -> list[MapNode]:
        """grid_rows × grid_columns 칸마다 nodes_per_cell 범위의 노드 배치"""
        cfg = self.config
        if canvas_size.is_empty:
            return []

        cell_width = canvas_size.width / cfg.grid_columns
        cell_height = canvas_size.height / cfg.grid_rows
        padding_x = canvas_size.width * cfg.padding
        padding_y = canvas_size.height * cfg.padding
        inner = cfg.node_internal_padding

        nodes = []
        for row in range(cfg.grid_rows):
            for col in range(cfg.grid_columns):
                for _ in range(self.rng.randint(*cfg.nodes_per_cell)):
                    cell_x = col * cell_width + padding_x
                    cell_y = row * cell_height + padding_y
                    x = cell_x + self.rng.uniform(inner, cell_width - inner)
                    y = cell_y + self.rng.uniform(inner, cell_height - inner)

                    position = Point(
                        clamp(x, padding_x, canvas_size.width - padding_x),
                        clamp(y, padding_y, canvas_size.height - padding_y),
                    )
                    icon = self.rng.choice(node_icons) if node_icons else FALLBACK_ICON
                    nodes.append(MapNode(position=position, icon=icon))

        return nodes

    # === 경로 ===

    def generate_paths(
        self, nodes: Sequence[MapNode], canvas_size: Size
    ) -> list[MapPath]:
        """거리 임계값 이하 모든 쌍 연결 후 연결성 복구"""
        max_distance = canvas_size.width * self.config.connection_distance
        paths = []
        for i, a in enumerate(nodes):
            for b in nodes[i + 1 :]:
                if a.position.distance_to(b.position) <= max_distance:
                    paths.append(MapPath(start_node_id=a.id, end_node_id=b.id))

        return self.ensure_connectivity(nodes, paths)

    def ensure_connectivity(
        self, nodes: Sequence[MapNode], paths: list[MapPath]
    ) -> list[MapPath]:
        """첫 노드에서 BFS → 미도달 노드를 가장 가까운 도달 노드에 연결"""
        if not nodes:
            return list(paths)

        repaired = list(paths)
        adjacency = build_adjacency((n.id for n in nodes), repaired)

        reached = {nodes[0].id}
        queue = deque([nodes[0].id])
        while queue:
            current = queue.popleft()
            for neighbor in adjacency[current]:
                if neighbor not in reached:
                    reached.add(neighbor)
                    queue.append(neighbor)

        for node in nodes:
            if node.id in reached:
                continue
            nearest = min(
                (n for n in nodes if n.id in reached),
                key=lambda n: node.position.distance_to(n.position),
            )
            repaired.append(MapPath(start_node_id=node.id, end_node_id=nearest.id))
            reached.add(node.id)
            logger.debug("연결성 복구: %s ↔ %s", node.id, nearest.id)

        return repaired

    # === 탐험 경로 ===

    def find_traversal_path(
        self, nodes: Sequence[MapNode], paths: Sequence[MapPath]
    ) -> list[str]:
        """최좌측 노드 → 최우측 노드 최장 단순 경로.

        도달 불가 시 최좌측에서 시작하는 (목표 없는) 최장 경로.
        """
        if not nodes:
            return []

        by_x = sorted(nodes, key=lambda n: n.position.x)
        start, end = by_x[0], by_x[-1]

        adjacency = build_adjacency((n.id for n in nodes), paths)
        positions = {n.id: n.position for n in nodes}
        budget = self.config.search_step_budget

        route = find_longest_path(adjacency, start.id, end.id, budget, positions)
        if not route:
            logger.debug("최우측 노드 도달 불가 → 목표 없는 최장 경로")
            route = find_longest_path(adjacency, start.id, None, budget, positions)
        return route

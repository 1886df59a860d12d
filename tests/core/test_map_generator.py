"""맵 생성 테스트 — 노드 수, 연결성, 탐험 경로, 존 분할"""

import random
from collections import deque

import pytest

from adventure_deck.core.adventure_map import AdventureMap
from adventure_deck.core.geometry import Size
from adventure_deck.core.map_generator import FALLBACK_ICON, GenerationConfig, MapGenerator
from adventure_deck.core.themes import Theme
from adventure_deck.core.traversal import build_adjacency

CANVAS = Size(1200, 800)
SEEDS = [0, 1, 2, 3, 4]


def _generate(seed: int, theme: Theme = Theme.SPACE, canvas: Size = CANVAS) -> AdventureMap:
    return MapGenerator(rng=random.Random(seed)).generate(theme, canvas)


def _reachable(adventure_map: AdventureMap) -> set[str]:
    adjacency = build_adjacency((n.id for n in adventure_map.nodes), adventure_map.paths)
    start = adventure_map.nodes[0].id
    seen = {start}
    queue = deque([start])
    while queue:
        for neighbor in adjacency[queue.popleft()]:
            if neighbor not in seen:
                seen.add(neighbor)
                queue.append(neighbor)
    return seen


class TestNodes:
    @pytest.mark.parametrize("seed", SEEDS)
    def test_node_count_in_grid_range(self, seed):
        """3×4 격자, 칸당 1~2개 → 12~24"""
        adventure_map = _generate(seed)
        assert 12 <= len(adventure_map.nodes) <= 24

    def test_nodes_inside_canvas_padding(self):
        adventure_map = _generate(7)
        pad_x, pad_y = CANVAS.width * 0.08, CANVAS.height * 0.08
        for node in adventure_map.nodes:
            assert pad_x <= node.position.x <= CANVAS.width - pad_x
            assert pad_y <= node.position.y <= CANVAS.height - pad_y

    def test_node_icons_from_theme(self):
        adventure_map = _generate(3, Theme.OCEAN)
        icons = set(Theme.OCEAN.profile.node_icons)
        assert all(node.icon in icons for node in adventure_map.nodes)
        assert not any(node.is_visited for node in adventure_map.nodes)

    def test_empty_icon_set_uses_fallback(self):
        nodes = MapGenerator(rng=random.Random(1)).generate_nodes([], CANVAS)
        assert nodes
        assert all(node.icon == FALLBACK_ICON for node in nodes)


class TestConnectivity:
    @pytest.mark.parametrize("seed", SEEDS)
    def test_single_component(self, seed):
        adventure_map = _generate(seed)
        assert _reachable(adventure_map) == {n.id for n in adventure_map.nodes}

    def test_repair_connects_isolated_nodes(self):
        """연결 거리 0이면 모든 간선은 복구 단계에서만 생긴다"""
        config = GenerationConfig(connection_distance=0.0)
        adventure_map = MapGenerator(config, rng=random.Random(5)).generate(
            Theme.CITY, CANVAS
        )
        assert len(adventure_map.paths) == len(adventure_map.nodes) - 1
        assert _reachable(adventure_map) == {n.id for n in adventure_map.nodes}

    def test_no_self_loops(self):
        adventure_map = _generate(2)
        assert all(p.start_node_id != p.end_node_id for p in adventure_map.paths)


class TestTraversalRoute:
    @pytest.mark.parametrize("seed", SEEDS)
    def test_route_is_valid_simple_path(self, seed):
        adventure_map = _generate(seed)
        route = adventure_map.traversal_path
        node_ids = {n.id for n in adventure_map.nodes}
        edges = {frozenset((p.start_node_id, p.end_node_id)) for p in adventure_map.paths}

        assert route
        assert set(route) <= node_ids
        assert len(route) == len(set(route))
        for a, b in zip(route, route[1:]):
            assert frozenset((a, b)) in edges

    def test_route_starts_at_leftmost_node(self):
        adventure_map = _generate(11)
        leftmost = min(adventure_map.nodes, key=lambda n: n.position.x)
        assert adventure_map.traversal_path[0] == leftmost.id

    def test_same_seed_same_structure(self):
        a, b = _generate(21), _generate(21)
        assert [n.position for n in a.nodes] == [n.position for n in b.nodes]
        assert a.traversal_positions() == b.traversal_positions()


class TestTerrainZones:
    def test_zones_tile_canvas(self):
        adventure_map = _generate(4)
        zones = adventure_map.terrain_zones
        assert len(zones) == 6

        total = sum(z.bounds.area for z in zones)
        assert total == pytest.approx(CANVAS.width * CANVAS.height)
        for i, a in enumerate(zones):
            assert a.bounds.min_x >= 0 and a.bounds.max_x <= CANVAS.width + 1e-6
            assert a.bounds.min_y >= 0 and a.bounds.max_y <= CANVAS.height + 1e-6
            for b in zones[i + 1 :]:
                assert a.bounds.intersection_area(b.bounds) == pytest.approx(0.0)

    @pytest.mark.parametrize("seed", SEEDS)
    def test_recent_terrain_not_repeated(self, seed):
        """최근 2개 선택과 겹치지 않음 (팔레트 4종이면 항상 대안 존재)"""
        names = [z.name for z in _generate(seed).terrain_zones]
        for i, name in enumerate(names):
            assert name not in names[max(0, i - 2) : i]

    def test_decorations_inside_padded_zone(self):
        adventure_map = _generate(8)
        for zone in adventure_map.terrain_zones:
            area = zone.bounds.inset(15)
            max_count = int(8 * zone.terrain_type.decoration_density)
            assert len(zone.decorations) <= max_count
            icons = set(zone.terrain_type.decoration_icons)
            for decoration in zone.decorations:
                assert area.min_x <= decoration.position.x <= area.max_x
                assert area.min_y <= decoration.position.y <= area.max_y
                assert 12 <= decoration.size <= 28
                assert 0.15 <= decoration.opacity <= 0.4
                assert decoration.icon in icons

    def test_empty_palette_yields_no_zones(self):
        generator = MapGenerator(rng=random.Random(0))
        assert generator.generate_terrain_zones([], CANVAS) == []


class TestDegenerateInputs:
    @pytest.mark.parametrize("canvas", [Size(0, 0), Size(1200, 0), Size(0, 800)])
    def test_empty_canvas_gives_empty_map(self, canvas):
        adventure_map = _generate(0, canvas=canvas)
        assert adventure_map.nodes == []
        assert adventure_map.paths == []
        assert adventure_map.traversal_path == []
        assert adventure_map.terrain_zones == []

    def test_traversal_of_no_nodes(self):
        assert MapGenerator().find_traversal_path([], []) == []

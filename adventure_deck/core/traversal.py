"""
Adventure Deck Core - Traversal Search
======================================
무방향 그래프 위 최장 단순 경로 탐색

기본은 백트래킹 DFS 전수 탐색입니다 (노드 수십 개 규모 전제).
명시적 스택 프레임으로 구현해 재귀 깊이 제한을 피하고,
확장 예산(step_budget)을 넘으면 지금까지의 최선 경로와
greedy 최근접 이웃 경로 중 긴 쪽을 반환합니다.
"""

from collections.abc import Iterable, Iterator
from typing import Optional

from adventure_deck.core.adventure_map import MapPath
from adventure_deck.core.geometry import Point
from adventure_deck.core.logging import get_logger

logger = get_logger(__name__)

# node_id → 이웃 node_id 목록 (맵의 노드 순서 유지)
Adjacency = dict[str, list[str]]

DEFAULT_STEP_BUDGET = 100_000


def build_adjacency(node_ids: Iterable[str], paths: Iterable[MapPath]) -> Adjacency:
    """간선 목록 → 인접 리스트

    이웃 순서는 node_ids 순서를 따른다 (set 순회 순서에 의존하지 않음).
    자기 루프, 중복 간선, 알 수 없는 노드는 무시.
    """
    order = {node_id: i for i, node_id in enumerate(node_ids)}
    neighbors: dict[str, set[str]] = {node_id: set() for node_id in order}

    for path in paths:
        a, b = path.start_node_id, path.end_node_id
        if a == b or a not in order or b not in order:
            continue
        neighbors[a].add(b)
        neighbors[b].add(a)

    return {
        node_id: sorted(linked, key=order.__getitem__)
        for node_id, linked in neighbors.items()
    }


def find_longest_path(
    adjacency: Adjacency,
    start: str,
    target: Optional[str] = None,
    step_budget: int = DEFAULT_STEP_BUDGET,
    positions: Optional[dict[str, Point]] = None,
) -> list[str]:
    """start에서 시작하는 최장 단순 경로.

    target이 주어지면 target에서 끝나는 경로만 비교하고,
    없으면 탐색 트리의 모든 접두 경로가 후보가 된다.
    동일 길이는 먼저 발견된 경로가 이긴다.
    경로가 없으면 빈 리스트.
    """
    if start not in adjacency:
        return []
    if target is not None and target not in adjacency:
        return []
    if target == start:
        return [start]

    best: list[str] = [] if target is not None else [start]
    path: list[str] = [start]
    on_path: set[str] = {start}
    frames: list[Iterator[str]] = [iter(adjacency[start])]
    total_nodes = len(adjacency)
    steps = 0

    while frames:
        if steps >= step_budget:
            logger.debug(
                "최장 경로 탐색 예산 소진 (%d steps, best=%d)", steps, len(best)
            )
            return _prefer_greedy(best, adjacency, start, target, positions)

        pushed = False
        for neighbor in frames[-1]:
            if neighbor in on_path:
                continue
            steps += 1
            path.append(neighbor)

            if target is not None and neighbor == target:
                if len(path) > len(best):
                    best = list(path)
                path.pop()
                continue

            if target is None and len(path) > len(best):
                best = list(path)

            on_path.add(neighbor)
            frames.append(iter(adjacency[neighbor]))
            pushed = True
            break

        if len(best) == total_nodes:
            # 모든 노드를 지나는 경로보다 긴 경로는 없음
            break

        if not pushed:
            frames.pop()
            on_path.discard(path.pop())

    return best


def greedy_walk(
    adjacency: Adjacency,
    start: str,
    target: Optional[str] = None,
    positions: Optional[dict[str, Point]] = None,
) -> list[str]:
    """최근접 미방문 이웃을 따라가는 기준선 경로.

    positions가 없으면 인접 리스트의 첫 미방문 이웃을 따른다.
    target이 주어지면 target에 도달한 지점에서 자르고,
    도달하지 못하면 빈 리스트.
    """
    if start not in adjacency:
        return []

    walk = [start]
    visited = {start}
    current = start

    while current != target:
        candidates = [n for n in adjacency[current] if n not in visited]
        if not candidates:
            break
        if positions:
            origin = positions[current]
            current = min(candidates, key=lambda n: origin.distance_to(positions[n]))
        else:
            current = candidates[0]
        walk.append(current)
        visited.add(current)

    if target is not None and walk[-1] != target:
        return []
    return walk


def _prefer_greedy(
    best: list[str],
    adjacency: Adjacency,
    start: str,
    target: Optional[str],
    positions: Optional[dict[str, Point]],
) -> list[str]:
    baseline = greedy_walk(adjacency, start, target, positions)
    if len(baseline) > len(best):
        return baseline
    return best

"""
Adventure Deck Core - Travel Simulation
=======================================
이동 틱 한 번의 순수 전이 함수

step_travel(state, map, step_distance) → TravelStep
입력 상태를 변경하지 않으며, 노드 도달 시 방문 표시 같은
부수 효과는 호출자(엔진)가 TravelStep.reached를 보고 처리합니다.
"""

from dataclasses import dataclass, replace
from typing import Optional

from adventure_deck.core.adventure_map import AdventureMap
from adventure_deck.core.geometry import Point

MIN_SEGMENT_DISTANCE = 1.0  # 이보다 가까운 두 노드는 즉시 도달 처리


@dataclass(frozen=True)
class TravelState:
    """경로 위 에이전트 위치

    route_index: 마지막으로 도달한 경로 노드 인덱스
    progress: route_index → route_index+1 구간 진행률 (0.0 ~ 1.0)
    """

    route_index: int = 0
    progress: float = 0.0
    position: Point = Point()

    @classmethod
    def start_of(cls, adventure_map: AdventureMap) -> "TravelState":
        """경로 첫 노드에서 출발하는 상태"""
        positions = adventure_map.traversal_positions()
        return cls(position=positions[0] if positions else Point())


@dataclass(frozen=True)
class NodeReached:
    """이번 틱에 도달한 경로 노드"""

    route_index: int
    node_id: str
    position: Point
    zone_name: Optional[str] = None


@dataclass(frozen=True)
class TravelStep:
    state: TravelState
    reached: Optional[NodeReached] = None
    arrived: bool = False


def is_route_finished(state: TravelState, adventure_map: AdventureMap) -> bool:
    return state.route_index >= len(adventure_map.traversal_path) - 1


def step_travel(
    state: TravelState,
    adventure_map: AdventureMap,
    step_distance: float,
    min_segment_distance: float = MIN_SEGMENT_DISTANCE,
) -> TravelStep:
    """step_distance만큼 다음 경로 노드를 향해 전진.

    - 구간 길이 < min_segment_distance: 즉시 다음 노드로
    - progress += step_distance / 구간 길이, 1 이상이면 다음 노드로
    - 그 외에는 두 노드 사이 선형 보간
    경로 마지막 노드에 도달하면 arrived=True.
    """
    route = adventure_map.traversal_path
    if is_route_finished(state, adventure_map):
        return TravelStep(state=state, arrived=True)

    current = adventure_map.node(route[state.route_index])
    target = adventure_map.node(route[state.route_index + 1])
    if current is None or target is None:
        # 경로가 맵과 어긋난 경우 더 진행하지 않는다
        return TravelStep(state=state, arrived=True)

    distance = current.position.distance_to(target.position)
    progress = state.progress
    if distance >= min_segment_distance:
        progress += step_distance / distance

    if distance < min_segment_distance or progress >= 1.0:
        next_index = state.route_index + 1
        zone = adventure_map.zone_at(target.position)
        new_state = TravelState(
            route_index=next_index, progress=0.0, position=target.position
        )
        reached = NodeReached(
            route_index=next_index,
            node_id=target.id,
            position=target.position,
            zone_name=zone.name if zone else None,
        )
        return TravelStep(
            state=new_state,
            reached=reached,
            arrived=is_route_finished(new_state, adventure_map),
        )

    position = current.position.lerp(target.position, progress)
    return TravelStep(state=replace(state, progress=progress, position=position))

"""미션 생성 — 현재 맵/진행 위치 기반 무작위 목표"""

import random
from datetime import datetime
from typing import Callable, Optional

from adventure_deck.core.adventure_map import AdventureMap
from adventure_deck.core.logging import get_logger
from adventure_deck.core.themes import Theme

from .models import Mission, MissionObjective

logger = get_logger(__name__)

SCAN_COUNT_RANGE = (1, 3)
TRAVEL_COUNT_RANGE = (2, 4)
REACH_OFFSET_RANGE = (2, 4)  # 현재 위치 기준 +2 ~ +4 앞
UNKNOWN_ZONE_NAME = "unknown area"


def generate_mission(
    theme: Theme,
    adventure_map: AdventureMap,
    current_route_index: int,
    rng: Optional[random.Random] = None,
    now: Optional[datetime] = None,
) -> Mission:
    """네 가지 목표 유형 중 하나를 균등 확률로 선택해 미션 생성"""
    rng = rng or random.Random()

    def visit_zone() -> MissionObjective:
        zones = adventure_map.terrain_zones
        name = rng.choice(zones).name if zones else UNKNOWN_ZONE_NAME
        return MissionObjective.visit_zone(name)

    def scan_items() -> MissionObjective:
        return MissionObjective.scan_items(rng.randint(*SCAN_COUNT_RANGE))

    def reach_node() -> MissionObjective:
        remaining = len(adventure_map.traversal_path) - current_route_index - 1
        if remaining > 2:
            low, high = REACH_OFFSET_RANGE
            offset = rng.randint(low, min(high, remaining))
            return MissionObjective.reach_node(current_route_index + offset)
        # 남은 노드가 부족하면 스캔 1개로 대체
        return MissionObjective.scan_items(1)

    def travel_distance() -> MissionObjective:
        return MissionObjective.travel_distance(rng.randint(*TRAVEL_COUNT_RANGE))

    builders: list[Callable[[], MissionObjective]] = [
        visit_zone,
        scan_items,
        reach_node,
        travel_distance,
    ]
    objective = rng.choice(builders)()

    logger.debug(
        "미션 생성: theme=%s index=%d → %s",
        theme.value,
        current_route_index,
        objective.description,
    )
    return Mission.create(objective, created_at=now)

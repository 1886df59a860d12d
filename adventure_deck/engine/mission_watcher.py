"""MissionWatcher — 이동/스캔 사건을 미션 진행 이벤트로 변환

engine 내부 컴포넌트.
node_reached / zone_entered / scan_completed 를 구독하고,
MissionSystem.apply()로 활성 미션 진행도를 갱신한다.

노드 도달 한 번에 적용되는 순서:
1. 이동 거리 +1
2. 노드 도달 판정 (새 경로 인덱스)
3. 존 방문 판정 (zone_entered, 노드가 존 안에 있을 때만 발행됨)
"""

import logging

from adventure_deck.core.event_bus import DomainEvent, EventBus
from adventure_deck.core.event_types import EventTypes
from adventure_deck.core.mission import (
    ReachNodeAction,
    ScanAction,
    TravelAction,
    VisitZoneAction,
)
from adventure_deck.engine.mission_system import MissionSystem

logger = logging.getLogger(__name__)


class MissionWatcher:
    """사건 이벤트 구독 + 미션 진행 적용"""

    def __init__(self, event_bus: EventBus, mission_system: MissionSystem) -> None:
        self._bus = event_bus
        self._missions = mission_system
        self._register_watchers()

    def _register_watchers(self) -> None:
        bus = self._bus
        bus.subscribe(EventTypes.NODE_REACHED, self._on_node_reached)
        bus.subscribe(EventTypes.ZONE_ENTERED, self._on_zone_entered)
        bus.subscribe(EventTypes.SCAN_COMPLETED, self._on_scan_completed)

    def _on_node_reached(self, event: DomainEvent) -> None:
        """event.data: {route_index, node_id, zone_name}"""
        route_index = event.data.get("route_index")
        self._missions.apply(TravelAction())
        if route_index is not None:
            self._missions.apply(ReachNodeAction(route_index=route_index))

    def _on_zone_entered(self, event: DomainEvent) -> None:
        """event.data: {zone_name, route_index}"""
        zone_name = event.data.get("zone_name")
        if not zone_name:
            return
        self._missions.apply(VisitZoneAction(zone_name=zone_name))

    def _on_scan_completed(self, event: DomainEvent) -> None:
        outcome = self._missions.apply(ScanAction())
        if outcome.progressed:
            logger.debug("스캔으로 미션 진행: %s", event.data.get("discovery_id"))

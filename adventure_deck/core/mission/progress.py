"""미션 진행 판정 — 순수 함수

apply_mission_action(state, action) → ProgressOutcome
상태 객체를 변경하지 않고 새 MissionState를 돌려준다.
"""

from dataclasses import dataclass
from typing import Optional, Union

from .enums import MissionKind
from .models import (
    Mission,
    MissionActive,
    MissionCelebrating,
    MissionState,
)


@dataclass(frozen=True)
class ScanAction:
    """스캔 완료"""


@dataclass(frozen=True)
class TravelAction:
    """경로 노드 하나 전진"""


@dataclass(frozen=True)
class VisitZoneAction:
    zone_name: str


@dataclass(frozen=True)
class ReachNodeAction:
    route_index: int


MissionAction = Union[ScanAction, TravelAction, VisitZoneAction, ReachNodeAction]


@dataclass(frozen=True)
class ProgressOutcome:
    state: MissionState
    progressed: bool = False
    completed: Optional[Mission] = None


def _next_progress(mission: Mission, action: MissionAction) -> Optional[int]:
    """action이 mission에 해당하면 새 progress, 아니면 None"""
    objective = mission.objective

    if objective.kind == MissionKind.SCAN_ITEMS and isinstance(action, ScanAction):
        return mission.progress + 1

    if objective.kind == MissionKind.TRAVEL_DISTANCE and isinstance(
        action, TravelAction
    ):
        return mission.progress + 1

    if (
        objective.kind == MissionKind.VISIT_ZONE
        and isinstance(action, VisitZoneAction)
        and action.zone_name == objective.zone_name
    ):
        return mission.target

    if (
        objective.kind == MissionKind.REACH_NODE
        and isinstance(action, ReachNodeAction)
        and objective.node_index is not None
        and objective.node_index <= action.route_index
    ):
        return mission.target

    return None


def apply_mission_action(state: MissionState, action: MissionAction) -> ProgressOutcome:
    """활성 미션에 진행 이벤트 적용.

    활성(active) 상태가 아니거나 매칭되지 않으면 상태 그대로.
    progress >= target이 되면 celebrating으로 전이.
    """
    if not isinstance(state, MissionActive):
        return ProgressOutcome(state=state)

    mission = state.mission
    progress = _next_progress(mission, action)
    if progress is None:
        return ProgressOutcome(state=state)

    updated = mission.with_progress(progress)
    if updated.is_complete:
        return ProgressOutcome(
            state=MissionCelebrating(mission=updated),
            progressed=True,
            completed=updated,
        )
    return ProgressOutcome(state=MissionActive(mission=updated), progressed=True)

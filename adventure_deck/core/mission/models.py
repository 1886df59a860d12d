"""미션 도메인 모델 (DB 무관, 불변)"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Optional, Union

from .enums import MissionKind, MissionStatus

_ICONS: dict[MissionKind, str] = {
    MissionKind.VISIT_ZONE: "map.fill",
    MissionKind.SCAN_ITEMS: "viewfinder",
    MissionKind.REACH_NODE: "star.fill",
    MissionKind.TRAVEL_DISTANCE: "point.topleft.down.to.point.bottomright.curvepath.fill",
}


@dataclass(frozen=True)
class MissionObjective:
    """미션 목표. kind에 따라 zone_name / count / node_index 중 하나 사용."""

    kind: MissionKind
    zone_name: Optional[str] = None
    count: int = 0
    node_index: Optional[int] = None

    @classmethod
    def visit_zone(cls, zone_name: str) -> MissionObjective:
        return cls(kind=MissionKind.VISIT_ZONE, zone_name=zone_name)

    @classmethod
    def scan_items(cls, count: int) -> MissionObjective:
        return cls(kind=MissionKind.SCAN_ITEMS, count=count)

    @classmethod
    def reach_node(cls, node_index: int) -> MissionObjective:
        return cls(kind=MissionKind.REACH_NODE, node_index=node_index)

    @classmethod
    def travel_distance(cls, nodes: int) -> MissionObjective:
        return cls(kind=MissionKind.TRAVEL_DISTANCE, count=nodes)

    @property
    def target(self) -> int:
        """목표치: 존 방문/노드 도달은 1, 나머지는 개수 그대로"""
        if self.kind in (MissionKind.VISIT_ZONE, MissionKind.REACH_NODE):
            return 1
        return self.count

    @property
    def description(self) -> str:
        if self.kind == MissionKind.VISIT_ZONE:
            return f"Explore the {self.zone_name}"
        if self.kind == MissionKind.SCAN_ITEMS:
            noun = "discovery" if self.count == 1 else "discoveries"
            return f"Scan {self.count} {noun}"
        if self.kind == MissionKind.REACH_NODE:
            return f"Reach waypoint {(self.node_index or 0) + 1}"
        return f"Travel through {self.count} waypoints"

    @property
    def icon(self) -> str:
        return _ICONS[self.kind]

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "zone_name": self.zone_name,
            "count": self.count,
            "node_index": self.node_index,
            "description": self.description,
            "icon": self.icon,
        }


@dataclass(frozen=True)
class Mission:
    """미션 본체

    progress는 진행 중 감소하지 않고 target에서 멈춘다.
    완료 = progress >= target (target <= 0이면 즉시 완료로 취급).
    """

    objective: MissionObjective
    target: int
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    created_at: datetime = field(default_factory=datetime.utcnow)
    is_accepted: bool = False
    progress: int = 0

    @classmethod
    def create(
        cls, objective: MissionObjective, created_at: Optional[datetime] = None
    ) -> Mission:
        if created_at is None:
            return cls(objective=objective, target=objective.target)
        return cls(objective=objective, target=objective.target, created_at=created_at)

    @property
    def kind(self) -> MissionKind:
        return self.objective.kind

    @property
    def is_complete(self) -> bool:
        return self.progress >= self.target

    @property
    def progress_text(self) -> str:
        return f"{self.progress}/{self.target}"

    @property
    def progress_percent(self) -> float:
        if self.target <= 0:
            return 0.0
        return min(1.0, self.progress / self.target)

    def accepted(self) -> Mission:
        return replace(self, is_accepted=True)

    def with_progress(self, progress: int) -> Mission:
        """단조 증가 + target 상한 적용"""
        clamped = min(max(progress, self.progress), max(self.target, 0))
        return replace(self, progress=clamped)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "objective": self.objective.to_dict(),
            "created_at": self.created_at.isoformat(),
            "is_accepted": self.is_accepted,
            "progress": self.progress,
            "target": self.target,
            "progress_text": self.progress_text,
            "progress_percent": self.progress_percent,
            "is_complete": self.is_complete,
        }


# === MissionState: 태그드 유니온 ===


@dataclass(frozen=True)
class NoMission:
    status = MissionStatus.NONE


@dataclass(frozen=True)
class MissionAvailable:
    """떠다니는 중, 아직 수락 전"""

    mission: Mission
    status = MissionStatus.AVAILABLE


@dataclass(frozen=True)
class MissionActive:
    """수락됨, 진행도 추적 중"""

    mission: Mission
    status = MissionStatus.ACTIVE


@dataclass(frozen=True)
class MissionCelebrating:
    """방금 완료, 축하 표시 중"""

    mission: Mission
    status = MissionStatus.CELEBRATING


MissionState = Union[NoMission, MissionAvailable, MissionActive, MissionCelebrating]

NO_MISSION = NoMission()


def current_mission(state: MissionState) -> Optional[Mission]:
    if isinstance(state, (MissionAvailable, MissionActive, MissionCelebrating)):
        return state.mission
    return None


def mission_state_to_dict(state: MissionState) -> dict[str, Any]:
    mission = current_mission(state)
    return {
        "status": state.status.value,
        "mission": mission.to_dict() if mission else None,
    }

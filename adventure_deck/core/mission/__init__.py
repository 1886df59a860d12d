"""Mission 코어 모듈 — 도메인 모델, 진행 판정, 생성 (DB 무관)"""

from .enums import MissionKind, MissionStatus
from .generator import generate_mission
from .models import (
    NO_MISSION,
    Mission,
    MissionActive,
    MissionAvailable,
    MissionCelebrating,
    MissionObjective,
    MissionState,
    NoMission,
    current_mission,
    mission_state_to_dict,
)
from .progress import (
    MissionAction,
    ProgressOutcome,
    ReachNodeAction,
    ScanAction,
    TravelAction,
    VisitZoneAction,
    apply_mission_action,
)

__all__ = [
    # enums
    "MissionKind",
    "MissionStatus",
    # models
    "Mission",
    "MissionObjective",
    "MissionState",
    "NoMission",
    "MissionAvailable",
    "MissionActive",
    "MissionCelebrating",
    "NO_MISSION",
    "current_mission",
    "mission_state_to_dict",
    # progress
    "MissionAction",
    "ScanAction",
    "TravelAction",
    "VisitZoneAction",
    "ReachNodeAction",
    "ProgressOutcome",
    "apply_mission_action",
    # generator
    "generate_mission",
]

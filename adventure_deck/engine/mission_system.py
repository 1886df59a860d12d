"""MissionSystem — 타이머 기반 미션 등장/소멸 주기 + 진행 상태 보관

미션은 한 번에 하나만 존재한다 (none / available / active / celebrating).

주기:
    start() ──15~30s──▶ 등장(available) ──30s──▶ 소멸(none) ──30~60s──▶ 등장 ...
                           │ accept()
                           ▼
                        active ──진행 완료──▶ celebrating ──dismiss──20~40s──▶ 등장

등장 시점에 다른 미션이 남아 있으면 생성하지 않고 20~40s 뒤 다시 시도한다.
"""

import random
from dataclasses import dataclass
from typing import Any, Callable, Optional

from adventure_deck.core.adventure_map import AdventureMap
from adventure_deck.core.event_bus import DomainEvent, EventBus
from adventure_deck.core.event_types import EventTypes
from adventure_deck.core.logging import get_logger
from adventure_deck.core.mission import (
    NO_MISSION,
    Mission,
    MissionAction,
    MissionActive,
    MissionAvailable,
    MissionCelebrating,
    MissionState,
    NoMission,
    ProgressOutcome,
    apply_mission_action,
    generate_mission,
    mission_state_to_dict,
)
from adventure_deck.core.scheduler import ScheduledTask, Scheduler
from adventure_deck.core.themes import Theme

logger = get_logger(__name__)

SOURCE = "mission_system"


@dataclass(frozen=True)
class MissionTiming:
    first_delay: tuple[float, float] = (15.0, 30.0)
    after_fade_delay: tuple[float, float] = (30.0, 60.0)
    after_dismiss_delay: tuple[float, float] = (20.0, 40.0)
    busy_retry_delay: tuple[float, float] = (20.0, 40.0)
    display_seconds: float = 30.0


@dataclass(frozen=True)
class MissionContext:
    """미션 생성에 필요한 현재 어드벤처 정보"""

    theme: Theme
    adventure_map: AdventureMap
    route_index: int


ContextProvider = Callable[[], Optional[MissionContext]]


class MissionSystem:
    """미션 상태 머신 + 등장/소멸 타이머"""

    def __init__(
        self,
        scheduler: Scheduler,
        event_bus: EventBus,
        context_provider: ContextProvider,
        rng: Optional[random.Random] = None,
        timing: Optional[MissionTiming] = None,
    ) -> None:
        self._scheduler = scheduler
        self._bus = event_bus
        self._context_provider = context_provider
        self._rng = rng or random.Random()
        self.timing = timing or MissionTiming()

        self.state: MissionState = NO_MISSION
        self.completed_missions: list[Mission] = []
        self._appearance_task: Optional[ScheduledTask] = None
        self._fade_task: Optional[ScheduledTask] = None

    # === 수명 주기 ===

    def start(self) -> None:
        """첫 등장 예약 (기존 등장 예약은 대체)"""
        self.schedule_appearance(self._rng.uniform(*self.timing.first_delay))

    def stop(self) -> None:
        """모든 타이머 취소 + 미션 폐기. 완료 기록은 유지."""
        self._scheduler.cancel(self._appearance_task)
        self._scheduler.cancel(self._fade_task)
        self._appearance_task = None
        self._fade_task = None
        self.state = NO_MISSION

    def schedule_appearance(self, delay: float) -> None:
        self._scheduler.cancel(self._appearance_task)
        self._appearance_task = self._scheduler.call_later(
            delay, self._on_appearance_due, name="mission_appearance"
        )
        logger.debug("다음 미션 등장 예약: %.1fs 후", delay)

    @property
    def next_appearance_at(self) -> Optional[float]:
        task = self._appearance_task
        if task is None or not task.is_pending:
            return None
        return task.fire_at

    # === 타이머 콜백 ===

    def _on_appearance_due(self) -> None:
        context = self._context_provider()
        if context is None:
            logger.debug("미션 등장 생략: 테마/맵 없음")
            return

        if not isinstance(self.state, NoMission):
            self.schedule_appearance(self._rng.uniform(*self.timing.busy_retry_delay))
            return

        mission = generate_mission(
            context.theme,
            context.adventure_map,
            context.route_index,
            rng=self._rng,
        )
        self.state = MissionAvailable(mission=mission)
        self._scheduler.cancel(self._fade_task)
        self._fade_task = self._scheduler.call_later(
            self.timing.display_seconds, self._on_fade_due, name="mission_fade"
        )

        logger.info("미션 등장: %s", mission.objective.description)
        self._emit(EventTypes.MISSION_AVAILABLE, mission)

    def _on_fade_due(self) -> None:
        if not isinstance(self.state, MissionAvailable):
            return

        mission = self.state.mission
        self.state = NO_MISSION
        self._fade_task = None
        logger.info("미션 소멸 (미수락): %s", mission.objective.description)
        self._emit(EventTypes.MISSION_FADED, mission)

        self.schedule_appearance(self._rng.uniform(*self.timing.after_fade_delay))

    # === 입력 ===

    def accept(self) -> bool:
        if not isinstance(self.state, MissionAvailable):
            logger.debug("수락할 미션 없음 (state=%s)", self.state.status.value)
            return False

        self._scheduler.cancel(self._fade_task)
        self._fade_task = None
        mission = self.state.mission.accepted()
        self.state = MissionActive(mission=mission)

        logger.info("미션 수락: %s", mission.objective.description)
        self._emit(EventTypes.MISSION_ACCEPTED, mission)
        return True

    def dismiss_celebration(self) -> bool:
        if not isinstance(self.state, MissionCelebrating):
            return False

        mission = self.state.mission
        self.state = NO_MISSION
        self._emit(EventTypes.MISSION_DISMISSED, mission)
        self.schedule_appearance(self._rng.uniform(*self.timing.after_dismiss_delay))
        return True

    def apply(self, action: MissionAction) -> ProgressOutcome:
        """진행 이벤트 적용. 완료 시 완료 기록에 추가."""
        outcome = apply_mission_action(self.state, action)
        if not outcome.progressed:
            return outcome

        self.state = outcome.state
        if outcome.completed is not None:
            self.completed_missions.append(outcome.completed)
            logger.info(
                "미션 완료: %s (total=%d)",
                outcome.completed.objective.description,
                len(self.completed_missions),
            )
            self._emit(EventTypes.MISSION_COMPLETED, outcome.completed)
        elif isinstance(outcome.state, MissionActive):
            self._emit(EventTypes.MISSION_PROGRESSED, outcome.state.mission)
        return outcome

    # === 조회 ===

    def to_dict(self) -> dict[str, Any]:
        data = mission_state_to_dict(self.state)
        data["completed_count"] = len(self.completed_missions)
        return data

    def _emit(self, event_type: str, mission: Mission) -> None:
        self._bus.emit(
            DomainEvent(
                event_type=event_type,
                data={
                    "mission_id": mission.id,
                    "kind": mission.kind.value,
                    "progress": mission.progress,
                    "target": mission.target,
                },
                source=SOURCE,
            )
        )

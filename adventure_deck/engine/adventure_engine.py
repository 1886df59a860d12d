"""
Adventure Deck Engine - Simulation Coordinator
==============================================
엔진 상태 / 이동 / 스캐너 / 미션 / 주변 이벤트를 한 곳에서 관리

모든 상태 변경은 하나의 RLock 아래에서 직렬로 일어납니다.
- 외부 입력: 공개 액션 메서드 (select_theme, start, scan_at, ...)
- 시간 경과: run_pending() → Scheduler가 도래한 타이머 콜백 실행

액션 메서드는 현재 상태에서 허용되지 않는 입력이면 예외 없이
False를 반환합니다.
"""

import functools
import random
import threading
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from adventure_deck.core.adventure_map import AdventureMap
from adventure_deck.core.ambient import AmbientEvent, spawn_ambient_event
from adventure_deck.core.discovery import (
    Discovery,
    Rarity,
    ScannableType,
    generate_discovery,
)
from adventure_deck.core.event_bus import DomainEvent, EventBus
from adventure_deck.core.event_types import EventTypes
from adventure_deck.core.geometry import Point, Size
from adventure_deck.core.logging import get_logger
from adventure_deck.core.map_generator import MapGenerator
from adventure_deck.core.scheduler import ScheduledTask, Scheduler
from adventure_deck.core.simulation import (
    MIN_SEGMENT_DISTANCE,
    NodeReached,
    TravelState,
    step_travel,
)
from adventure_deck.core.states import (
    SCANNER_IDLE,
    EngineCommand,
    EngineState,
    ScannerIdle,
    ScannerScanning,
    ScannerShowingResult,
    ScannerState,
    next_engine_state,
    scanner_state_to_dict,
)
from adventure_deck.core.themes import Theme
from adventure_deck.engine.mission_system import (
    MissionContext,
    MissionSystem,
    MissionTiming,
)
from adventure_deck.engine.mission_watcher import MissionWatcher
from adventure_deck.services.audio import AudioPlayer, NullAudioPlayer
from adventure_deck.services.discovery_service import DiscoveryService

logger = get_logger(__name__)

SOURCE = "engine"
FALLBACK_ACTION_SOUND = "beep"


@dataclass
class EngineConfig:
    """엔진 타이밍 파라미터 (초 / canvas point 단위)"""

    tick_rate: float = 60.0
    base_speed: float = 30.0
    fast_multiplier: float = 2.0
    min_segment_distance: float = MIN_SEGMENT_DISTANCE
    scan_delay: float = 1.5
    ambient_spawn_interval: tuple[float, float] = (3.0, 8.0)
    ambient_lifetime: float = 5.0
    mission_timing: MissionTiming = field(default_factory=MissionTiming)

    @classmethod
    def from_settings(cls, settings: Any) -> "EngineConfig":
        return cls(
            tick_rate=settings.TICK_RATE,
            base_speed=settings.BASE_SPEED,
            scan_delay=settings.SCAN_DELAY_SECONDS,
            mission_timing=MissionTiming(
                display_seconds=settings.MISSION_DISPLAY_SECONDS
            ),
        )


def serialized(method):
    """엔진 락 아래에서 실행. 가장 바깥 호출이 끝나면 이벤트 체인 초기화."""

    @functools.wraps(method)
    def wrapper(self: "AdventureEngine", *args, **kwargs):
        with self._lock:
            self._call_depth += 1
            try:
                return method(self, *args, **kwargs)
            finally:
                self._call_depth -= 1
                if self._call_depth == 0:
                    self.event_bus.reset_chain()

    return wrapper


class AdventureEngine:
    """어드벤처 시뮬레이션 엔진"""

    def __init__(
        self,
        discovery_service: DiscoveryService,
        audio: Optional[AudioPlayer] = None,
        scheduler: Optional[Scheduler] = None,
        event_bus: Optional[EventBus] = None,
        map_generator: Optional[MapGenerator] = None,
        rng: Optional[random.Random] = None,
        config: Optional[EngineConfig] = None,
    ):
        self._lock = threading.RLock()
        self._call_depth = 0

        self.config = config or EngineConfig()
        self.rng = rng or random.Random()
        self.discoveries = discovery_service
        self.audio = audio or NullAudioPlayer()
        self.event_bus = event_bus or EventBus()
        self.scheduler = scheduler or Scheduler()
        self.scheduler.after_task = self.event_bus.reset_chain
        self.map_generator = map_generator or MapGenerator(rng=self.rng)

        # 상태
        self.state = EngineState.SELECTING_THEME
        self.theme: Optional[Theme] = None
        self.adventure_map: Optional[AdventureMap] = None
        self.canvas_size = Size()
        self.travel = TravelState()
        self.is_fast = False
        self.active_events: list[AmbientEvent] = []
        self.scanner: ScannerState = SCANNER_IDLE

        self._travel_task: Optional[ScheduledTask] = None
        self._ambient_task: Optional[ScheduledTask] = None

        self.missions = MissionSystem(
            scheduler=self.scheduler,
            event_bus=self.event_bus,
            context_provider=self._mission_context,
            rng=self.rng,
            timing=self.config.mission_timing,
        )
        self.mission_watcher = MissionWatcher(self.event_bus, self.missions)

    # === 조회 ===

    @property
    def current_speed(self) -> float:
        """초당 이동 거리"""
        if self.is_fast:
            return self.config.base_speed * self.config.fast_multiplier
        return self.config.base_speed

    @property
    def position(self) -> Point:
        return self.travel.position

    @property
    def route_index(self) -> int:
        return self.travel.route_index

    @property
    def is_playing(self) -> bool:
        return self.state == EngineState.TRAVELING

    @property
    def mission_state(self):
        return self.missions.state

    # === 테마 / 맵 ===

    @serialized
    def select_theme(self, theme: Theme) -> bool:
        """테마 선택 → ready. 캔버스 크기가 있으면 맵 생성."""
        self._stop_travel_timers()
        self.theme = theme
        self._transition(EngineCommand.SELECT_THEME)
        self.audio.play_theme_audio(theme)

        logger.info("테마 선택: %s", theme.value)
        self._emit(EventTypes.THEME_SELECTED, {"theme": theme.value})
        self.generate_new_map()
        return True

    @serialized
    def generate_new_map(self) -> bool:
        if self.theme is None or self.canvas_size.is_empty:
            logger.debug(
                "맵 생성 생략: theme=%s canvas=%s", self.theme, self.canvas_size
            )
            return False

        self.adventure_map = self.map_generator.generate(self.theme, self.canvas_size)
        self._reset_adventure()
        self._emit(
            EventTypes.MAP_GENERATED,
            {
                "theme": self.theme.value,
                "nodes": len(self.adventure_map.nodes),
                "paths": len(self.adventure_map.paths),
                "route_length": len(self.adventure_map.traversal_path),
            },
        )
        return True

    @serialized
    def set_canvas_size(self, size: Size) -> bool:
        """크기가 바뀌었을 때만 반영. 테마가 있으면 맵 재생성."""
        if size == self.canvas_size:
            return False
        self.canvas_size = size
        logger.debug("캔버스 크기: %.0f×%.0f", size.width, size.height)
        if self.theme is not None:
            self.generate_new_map()
        return True

    # === 이동 제어 ===

    @serialized
    def start(self) -> bool:
        """ready / paused / arrived → traveling. arrived에서는 처음부터 다시."""
        if not self.state.can_start:
            logger.debug("start 무시: state=%s", self.state.value)
            return False
        if self.adventure_map is None or not self.adventure_map.traversal_path:
            logger.debug("start 무시: 경로 없음")
            return False

        if self.state == EngineState.ARRIVED:
            self._reset_adventure()

        self._transition(EngineCommand.START)
        self._start_travel_timers()
        self.missions.start()

        logger.info(
            "이동 시작: route=%d index=%d",
            len(self.adventure_map.traversal_path),
            self.route_index,
        )
        self._emit(EventTypes.TRAVEL_STARTED, {"route_index": self.route_index})
        return True

    @serialized
    def pause(self) -> bool:
        """이동/주변 이벤트만 멈춘다. 미션 타이머와 스캔은 계속."""
        if self._transition(EngineCommand.PAUSE) is None:
            return False
        self._stop_travel_timers()
        logger.info("이동 일시정지: index=%d", self.route_index)
        self._emit(EventTypes.TRAVEL_PAUSED, {"route_index": self.route_index})
        return True

    @serialized
    def toggle_adventure(self) -> bool:
        if self.state == EngineState.TRAVELING:
            return self.pause()
        return self.start()

    @serialized
    def stop_adventure(self) -> bool:
        """→ ready. 이동 타이머, 미션 시스템 정지 + 진행 초기화."""
        if self.state == EngineState.SELECTING_THEME:
            return False
        self._transition(EngineCommand.STOP)
        self._stop_travel_timers()
        self.missions.stop()
        self._reset_adventure()
        logger.info("어드벤처 정지")
        return True

    @serialized
    def return_to_theme_selection(self) -> bool:
        self._stop_travel_timers()
        self.missions.stop()
        self._reset_adventure()
        self.audio.stop_all()
        self.theme = None
        self.adventure_map = None
        self.travel = TravelState()
        self._transition(EngineCommand.RETURN)
        logger.info("테마 선택 화면으로 복귀")
        return True

    @serialized
    def toggle_speed(self) -> bool:
        """진행 중인 구간 보간은 그대로, 다음 틱부터 속도 변경"""
        self.is_fast = not self.is_fast
        logger.debug("속도 전환: fast=%s", self.is_fast)
        return True

    # === 스캐너 ===

    @serialized
    def scan_at(
        self,
        position: Point,
        scannable_type: ScannableType,
        icon: str,
        zone_name: Optional[str] = None,
    ) -> bool:
        """idle일 때만 스캔 시작. scan_delay 후 발견물 공개."""
        theme = self.theme
        if theme is None:
            return False
        if not isinstance(self.scanner, ScannerIdle):
            logger.debug("스캔 무시: scanner=%s", self.scanner.status)
            return False

        self.scanner = ScannerScanning(position=position)
        self.scheduler.call_later(
            self.config.scan_delay,
            lambda: self._reveal_scan(theme, scannable_type, icon, zone_name),
            name="scan_reveal",
        )
        self._emit(
            EventTypes.SCAN_STARTED,
            {"position": position.to_dict(), "scannable_type": scannable_type.value},
        )
        return True

    @serialized
    def dismiss_discovery_result(self) -> bool:
        if not isinstance(self.scanner, ScannerShowingResult):
            return False
        self.scanner = SCANNER_IDLE
        return True

    @serialized
    def clear_discoveries(self) -> bool:
        self.discoveries.clear()
        self._emit(EventTypes.DISCOVERIES_CLEARED, {})
        return True

    @serialized
    def list_discoveries(
        self, theme: Optional[Theme] = None, rarity: Optional[Rarity] = None
    ) -> list[Discovery]:
        """컬렉션 조회 (추가된 순서)"""
        return [
            d
            for d in self.discoveries.collection
            if (theme is None or d.theme == theme.value)
            and (rarity is None or d.rarity == rarity)
        ]

    # === 미션 ===

    @serialized
    def accept_mission(self) -> bool:
        return self.missions.accept()

    @serialized
    def dismiss_mission_celebration(self) -> bool:
        return self.missions.dismiss_celebration()

    # === 오디오 ===

    @serialized
    def play_action_sound(self, index: int) -> bool:
        if self.theme is None:
            return False
        sounds = self.theme.profile.action_sounds
        if not 0 <= index < len(sounds):
            return False
        self.audio.play_effect(sounds[index])
        return True

    # === 시간 경과 ===

    @serialized
    def run_pending(self, now: Optional[float] = None) -> int:
        """도래한 타이머 콜백 실행"""
        return self.scheduler.run_due(now)

    @serialized
    def snapshot(self) -> dict[str, Any]:
        """렌더링 레이어용 현재 상태"""
        return {
            "state": self.state.value,
            "theme": self.theme.value if self.theme else None,
            "canvas_size": self.canvas_size.to_dict(),
            "map": self.adventure_map.to_dict() if self.adventure_map else None,
            "agent": {
                "position": self.position.to_dict(),
                "route_index": self.route_index,
                "progress": self.travel.progress,
            },
            "is_fast": self.is_fast,
            "speed": self.current_speed,
            "active_events": [e.to_dict() for e in self.active_events],
            "scanner": scanner_state_to_dict(self.scanner),
            "mission": self.missions.to_dict(),
            "completed_missions": [
                m.to_dict() for m in self.missions.completed_missions
            ],
            "discovery_count": self.discoveries.collection.count,
        }

    # === 내부: 이동 ===

    def _start_travel_timers(self) -> None:
        self._stop_travel_timers()
        self._travel_task = self.scheduler.call_every(
            1.0 / self.config.tick_rate, self._on_travel_tick, name="travel_tick"
        )
        self._schedule_ambient_event()

    def _stop_travel_timers(self) -> None:
        self.scheduler.cancel(self._travel_task)
        self.scheduler.cancel(self._ambient_task)
        self._travel_task = None
        self._ambient_task = None

    def _on_travel_tick(self) -> None:
        if self.state != EngineState.TRAVELING or self.adventure_map is None:
            return

        step = step_travel(
            self.travel,
            self.adventure_map,
            self.current_speed / self.config.tick_rate,
            self.config.min_segment_distance,
        )
        self.travel = step.state
        if step.reached is not None:
            self._on_node_reached(step.reached)
        if step.arrived:
            self._arrive()

    def _on_node_reached(self, reached: NodeReached) -> None:
        self.adventure_map.mark_node_visited(reached.node_id)

        self._emit(
            EventTypes.NODE_REACHED,
            {
                "route_index": reached.route_index,
                "node_id": reached.node_id,
                "zone_name": reached.zone_name,
            },
        )
        if reached.zone_name is not None:
            self._emit(
                EventTypes.ZONE_ENTERED,
                {"zone_name": reached.zone_name, "route_index": reached.route_index},
            )

        if self.theme is not None:
            sounds = self.theme.profile.action_sounds
            self.audio.play_effect(
                self.rng.choice(sounds) if sounds else FALLBACK_ACTION_SOUND
            )

    def _arrive(self) -> None:
        self._transition(EngineCommand.ARRIVE)
        self._stop_travel_timers()
        logger.info("도착: index=%d", self.route_index)
        self._emit(EventTypes.TRAVEL_ARRIVED, {"route_index": self.route_index})

    def _reset_adventure(self) -> None:
        self.active_events.clear()
        if self.adventure_map is None:
            self.travel = TravelState()
            return
        self.adventure_map.reset_visited()
        self.travel = TravelState.start_of(self.adventure_map)

    # === 내부: 주변 이벤트 ===

    def _schedule_ambient_event(self) -> None:
        delay = self.rng.uniform(*self.config.ambient_spawn_interval)
        self._ambient_task = self.scheduler.call_later(
            delay, self._on_ambient_due, name="ambient_spawn"
        )

    def _on_ambient_due(self) -> None:
        if self.state != EngineState.TRAVELING or self.theme is None:
            return

        event = spawn_ambient_event(
            self.theme,
            self.position,
            self.canvas_size,
            now=self.scheduler.now(),
            rng=self.rng,
        )
        self.active_events.append(event)
        self.scheduler.call_later(
            self.config.ambient_lifetime,
            lambda: self._expire_ambient_event(event.id),
            name="ambient_expire",
        )
        self._emit(EventTypes.AMBIENT_EVENT_SPAWNED, {"event_id": event.id})
        self._schedule_ambient_event()

    def _expire_ambient_event(self, event_id: str) -> None:
        before = len(self.active_events)
        self.active_events = [e for e in self.active_events if e.id != event_id]
        if len(self.active_events) != before:
            self._emit(EventTypes.AMBIENT_EVENT_EXPIRED, {"event_id": event_id})

    # === 내부: 스캐너 ===

    def _reveal_scan(
        self,
        theme: Theme,
        scannable_type: ScannableType,
        icon: str,
        zone_name: Optional[str],
    ) -> None:
        discovery = generate_discovery(
            theme,
            scannable_type,
            icon,
            zone_name=zone_name,
            rng=self.rng,
            now=datetime.utcnow(),
        )
        self.discoveries.add(discovery)
        self.scanner = ScannerShowingResult(discovery=discovery)
        self._emit(
            EventTypes.SCAN_COMPLETED,
            {"discovery_id": discovery.id, "rarity": discovery.rarity.value},
        )

    # === 내부: 공용 ===

    def _mission_context(self) -> Optional[MissionContext]:
        if self.theme is None or self.adventure_map is None:
            return None
        return MissionContext(
            theme=self.theme,
            adventure_map=self.adventure_map,
            route_index=self.route_index,
        )

    def _transition(self, command: EngineCommand) -> Optional[EngineState]:
        next_state = next_engine_state(self.state, command)
        if next_state is None:
            logger.debug(
                "허용되지 않는 전이: %s --%s-->", self.state.value, command.value
            )
            return None
        self.state = next_state
        return next_state

    def _emit(self, event_type: str, data: dict[str, Any]) -> None:
        self.event_bus.emit(DomainEvent(event_type=event_type, data=data, source=SOURCE))

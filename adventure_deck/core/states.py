"""엔진 / 스캐너 상태 정의와 엔진 상태 전이표"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

from adventure_deck.core.discovery import Discovery
from adventure_deck.core.geometry import Point


class EngineState(str, Enum):
    """어드벤처 엔진 상태"""

    SELECTING_THEME = "selecting_theme"
    READY = "ready"
    TRAVELING = "traveling"
    PAUSED = "paused"
    ARRIVED = "arrived"

    @property
    def can_start(self) -> bool:
        return self in (EngineState.READY, EngineState.PAUSED, EngineState.ARRIVED)


class EngineCommand(str, Enum):
    SELECT_THEME = "select_theme"
    START = "start"
    PAUSE = "pause"
    ARRIVE = "arrive"
    STOP = "stop"
    RETURN = "return"


# (현재 상태, 명령) → 다음 상태. 표에 없으면 허용되지 않는 명령.
_TRANSITIONS: dict[tuple[EngineState, EngineCommand], EngineState] = {
    (EngineState.SELECTING_THEME, EngineCommand.SELECT_THEME): EngineState.READY,
    (EngineState.READY, EngineCommand.START): EngineState.TRAVELING,
    (EngineState.PAUSED, EngineCommand.START): EngineState.TRAVELING,
    (EngineState.ARRIVED, EngineCommand.START): EngineState.TRAVELING,
    (EngineState.TRAVELING, EngineCommand.PAUSE): EngineState.PAUSED,
    (EngineState.TRAVELING, EngineCommand.ARRIVE): EngineState.ARRIVED,
}

# 테마 재선택 / 정지 / 복귀는 어느 상태에서나 허용
_ANY_STATE: dict[EngineCommand, EngineState] = {
    EngineCommand.STOP: EngineState.READY,
    EngineCommand.RETURN: EngineState.SELECTING_THEME,
}


def next_engine_state(
    state: EngineState, command: EngineCommand
) -> Optional[EngineState]:
    """허용된 전이면 다음 상태, 아니면 None"""
    if command == EngineCommand.SELECT_THEME:
        return EngineState.READY
    if command in _ANY_STATE:
        return _ANY_STATE[command]
    return _TRANSITIONS.get((state, command))


# === ScannerState: 태그드 유니온 ===


@dataclass(frozen=True)
class ScannerIdle:
    status = "idle"


@dataclass(frozen=True)
class ScannerScanning:
    position: Point
    status = "scanning"


@dataclass(frozen=True)
class ScannerShowingResult:
    discovery: Discovery
    status = "showing_result"


ScannerState = Union[ScannerIdle, ScannerScanning, ScannerShowingResult]

SCANNER_IDLE = ScannerIdle()


def scanner_state_to_dict(state: ScannerState) -> dict[str, Any]:
    data: dict[str, Any] = {"status": state.status}
    if isinstance(state, ScannerScanning):
        data["position"] = state.position.to_dict()
    elif isinstance(state, ScannerShowingResult):
        data["discovery"] = state.discovery.to_dict()
    return data

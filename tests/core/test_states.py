"""엔진 상태 전이표 / 스캐너 상태 테스트"""

import pytest

from adventure_deck.core.geometry import Point
from adventure_deck.core.states import (
    SCANNER_IDLE,
    EngineCommand,
    EngineState,
    ScannerScanning,
    next_engine_state,
    scanner_state_to_dict,
)


@pytest.mark.parametrize(
    "state, command, expected",
    [
        (EngineState.SELECTING_THEME, EngineCommand.SELECT_THEME, EngineState.READY),
        (EngineState.TRAVELING, EngineCommand.SELECT_THEME, EngineState.READY),
        (EngineState.READY, EngineCommand.START, EngineState.TRAVELING),
        (EngineState.PAUSED, EngineCommand.START, EngineState.TRAVELING),
        (EngineState.ARRIVED, EngineCommand.START, EngineState.TRAVELING),
        (EngineState.TRAVELING, EngineCommand.PAUSE, EngineState.PAUSED),
        (EngineState.TRAVELING, EngineCommand.ARRIVE, EngineState.ARRIVED),
        (EngineState.PAUSED, EngineCommand.STOP, EngineState.READY),
        (EngineState.ARRIVED, EngineCommand.RETURN, EngineState.SELECTING_THEME),
    ],
)
def test_allowed_transitions(state, command, expected):
    assert next_engine_state(state, command) == expected


@pytest.mark.parametrize(
    "state, command",
    [
        (EngineState.SELECTING_THEME, EngineCommand.START),
        (EngineState.TRAVELING, EngineCommand.START),
        (EngineState.READY, EngineCommand.PAUSE),
        (EngineState.PAUSED, EngineCommand.PAUSE),
        (EngineState.PAUSED, EngineCommand.ARRIVE),
    ],
)
def test_rejected_transitions(state, command):
    assert next_engine_state(state, command) is None


def test_can_start():
    assert {s for s in EngineState if s.can_start} == {
        EngineState.READY,
        EngineState.PAUSED,
        EngineState.ARRIVED,
    }


def test_scanner_state_dict():
    assert scanner_state_to_dict(SCANNER_IDLE) == {"status": "idle"}
    data = scanner_state_to_dict(ScannerScanning(position=Point(3, 4)))
    assert data == {"status": "scanning", "position": {"x": 3, "y": 4}}

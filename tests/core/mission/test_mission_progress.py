"""미션 진행 판정 (순수 함수) 테스트"""

import pytest

from adventure_deck.core.mission import (
    Mission,
    MissionActive,
    MissionAvailable,
    MissionCelebrating,
    MissionObjective,
    ReachNodeAction,
    ScanAction,
    TravelAction,
    VisitZoneAction,
    apply_mission_action,
)


def _active(objective: MissionObjective) -> MissionActive:
    return MissionActive(mission=Mission.create(objective).accepted())


class TestTravelDistance:
    def test_three_advances_complete_target_three(self):
        """경로 [A,B,C,D], 이동 미션 target=3 → 세 번 전진으로 완료"""
        state = _active(MissionObjective.travel_distance(3))

        for expected in (1, 2):
            outcome = apply_mission_action(state, TravelAction())
            state = outcome.state
            assert isinstance(state, MissionActive)
            assert state.mission.progress == expected
            assert outcome.completed is None

        outcome = apply_mission_action(state, TravelAction())
        assert isinstance(outcome.state, MissionCelebrating)
        assert outcome.state.mission.progress == 3
        assert outcome.completed == outcome.state.mission

    def test_scan_does_not_count(self):
        state = _active(MissionObjective.travel_distance(2))
        outcome = apply_mission_action(state, ScanAction())
        assert outcome.state is state
        assert not outcome.progressed


class TestScanItems:
    def test_each_scan_counts(self):
        state = _active(MissionObjective.scan_items(2))
        state = apply_mission_action(state, ScanAction()).state
        assert state.mission.progress == 1
        assert isinstance(apply_mission_action(state, ScanAction()).state, MissionCelebrating)


class TestVisitZone:
    def test_matching_zone_jumps_to_target(self):
        state = _active(MissionObjective.visit_zone("Nebula"))
        outcome = apply_mission_action(state, VisitZoneAction("Nebula"))
        assert isinstance(outcome.state, MissionCelebrating)
        assert outcome.state.mission.progress == 1

    def test_other_zone_ignored(self):
        state = _active(MissionObjective.visit_zone("Nebula"))
        assert apply_mission_action(state, VisitZoneAction("Star Field")).state is state


class TestReachNode:
    def test_reaching_or_passing_target_completes(self):
        state = _active(MissionObjective.reach_node(5))
        assert apply_mission_action(state, ReachNodeAction(4)).state is state
        assert isinstance(
            apply_mission_action(state, ReachNodeAction(5)).state, MissionCelebrating
        )
        assert isinstance(
            apply_mission_action(state, ReachNodeAction(7)).state, MissionCelebrating
        )


def test_only_active_missions_progress():
    mission = Mission.create(MissionObjective.scan_items(1))
    state = MissionAvailable(mission=mission)
    outcome = apply_mission_action(state, ScanAction())
    assert outcome.state is state
    assert not outcome.progressed


@pytest.mark.parametrize(
    "objective",
    [
        MissionObjective.scan_items(3),
        MissionObjective.travel_distance(4),
        MissionObjective.visit_zone("Coral Reef"),
        MissionObjective.reach_node(3),
    ],
)
def test_progress_monotonic_and_bounded(objective):
    actions = [
        TravelAction(),
        ScanAction(),
        VisitZoneAction("Kelp Forest"),
        ReachNodeAction(1),
        TravelAction(),
        ScanAction(),
        VisitZoneAction("Coral Reef"),
        ReachNodeAction(4),
        TravelAction(),
        ScanAction(),
        TravelAction(),
    ]
    state = _active(objective)
    last = 0
    for action in actions:
        state = apply_mission_action(state, action).state
        progress = state.mission.progress
        assert last <= progress <= state.mission.target
        last = progress
    assert isinstance(state, MissionCelebrating)

"""이동 틱 순수 전이 테스트"""

import pytest

from adventure_deck.core.adventure_map import AdventureMap, MapNode, MapPath, TerrainZone
from adventure_deck.core.geometry import Point, Rect
from adventure_deck.core.simulation import TravelState, step_travel
from adventure_deck.core.themes import Theme


def _line_map(*xs: float, zone: TerrainZone | None = None) -> AdventureMap:
    nodes = [MapNode(position=Point(x, 0), icon="star.fill") for x in xs]
    paths = [MapPath(a.id, b.id) for a, b in zip(nodes, nodes[1:])]
    return AdventureMap(
        theme=Theme.SPACE,
        nodes=nodes,
        paths=paths,
        traversal_path=[n.id for n in nodes],
        terrain_zones=[zone] if zone else [],
    )


def test_start_of_route():
    adventure_map = _line_map(10, 110)
    state = TravelState.start_of(adventure_map)
    assert state.position == Point(10, 0)
    assert state.route_index == 0
    assert state.progress == 0.0


def test_start_of_empty_map():
    assert TravelState.start_of(AdventureMap(theme=Theme.CITY)).position == Point()


def test_interpolates_between_nodes():
    adventure_map = _line_map(0, 100, 200)
    step = step_travel(TravelState.start_of(adventure_map), adventure_map, 25)
    assert step.reached is None
    assert not step.arrived
    assert step.state.progress == pytest.approx(0.25)
    assert step.state.position == Point(25, 0)


def test_snaps_to_next_node_on_overshoot():
    adventure_map = _line_map(0, 100, 200)
    state = TravelState(route_index=0, progress=0.9, position=Point(90, 0))
    step = step_travel(state, adventure_map, 20)

    assert step.reached is not None
    assert step.reached.route_index == 1
    assert step.reached.node_id == adventure_map.traversal_path[1]
    assert step.state == TravelState(route_index=1, progress=0.0, position=Point(100, 0))
    assert not step.arrived


def test_arrives_at_last_node():
    adventure_map = _line_map(0, 10)
    step = step_travel(TravelState.start_of(adventure_map), adventure_map, 50)
    assert step.reached is not None
    assert step.arrived
    assert step.state.route_index == 1


def test_coincident_nodes_snap_immediately():
    adventure_map = _line_map(0, 0.5, 100)
    step = step_travel(TravelState.start_of(adventure_map), adventure_map, 0.01)
    assert step.reached is not None
    assert step.state.route_index == 1
    assert step.state.position == Point(0.5, 0)


def test_finished_route_reports_arrived_without_moving():
    adventure_map = _line_map(0, 100)
    state = TravelState(route_index=1, position=Point(100, 0))
    step = step_travel(state, adventure_map, 10)
    assert step.arrived
    assert step.reached is None
    assert step.state is state


def test_single_node_route_is_already_arrived():
    adventure_map = _line_map(50)
    step = step_travel(TravelState.start_of(adventure_map), adventure_map, 10)
    assert step.arrived


def test_reached_node_reports_containing_zone():
    zone_type = Theme.SPACE.profile.terrain_types[0]
    zone = TerrainZone(terrain_type=zone_type, bounds=Rect(50, -10, 100, 20))
    adventure_map = _line_map(0, 100, zone=zone)
    step = step_travel(TravelState.start_of(adventure_map), adventure_map, 150)
    assert step.reached.zone_name == zone_type.name


def test_input_state_unchanged():
    adventure_map = _line_map(0, 100)
    state = TravelState.start_of(adventure_map)
    step_travel(state, adventure_map, 30)
    assert state.progress == 0.0

"""Adventure API 테스트"""

from fastapi.testclient import TestClient

from adventure_deck.core.themes import Theme


def _setup(client: TestClient, theme: str = "Space") -> None:
    assert client.post("/adventure/canvas", json={"width": 1200, "height": 800}).status_code == 200
    assert client.post("/adventure/theme", json={"theme": theme}).json()["accepted"] is True


def test_list_themes(client: TestClient) -> None:
    response = client.get("/adventure/themes")
    assert response.status_code == 200
    themes = response.json()["themes"]
    assert [t["theme"] for t in themes] == ["Space", "Ocean", "City", "Western"]
    assert all(len(t["terrain_types"]) == 4 for t in themes)


def test_initial_state(client: TestClient) -> None:
    data = client.get("/adventure/state").json()
    assert data["state"] == "selecting_theme"
    assert data["theme"] is None
    assert data["map"] is None
    assert data["scanner"] == {"status": "idle"}


def test_select_theme_case_insensitive(client: TestClient) -> None:
    _setup(client, theme="ocean")
    data = client.get("/adventure/state").json()
    assert data["state"] == "ready"
    assert data["theme"] == "Ocean"
    assert len(data["map"]["traversal_path"]) >= 2
    assert data["agent"]["route_index"] == 0


def test_unknown_theme_rejected(client: TestClient) -> None:
    response = client.post("/adventure/theme", json={"theme": "jungle"})
    assert response.status_code == 400
    assert "jungle" in response.json()["detail"]


def test_negative_canvas_rejected(client: TestClient) -> None:
    response = client.post("/adventure/canvas", json={"width": -1, "height": 800})
    assert response.status_code == 422


def test_start_requires_map(client: TestClient) -> None:
    data = client.post("/adventure/start").json()
    assert data == {"accepted": False, "state": "selecting_theme"}


def test_travel_controls(client: TestClient, advance) -> None:
    _setup(client)
    assert client.post("/adventure/start").json() == {"accepted": True, "state": "traveling"}

    advance(3)
    data = client.get("/adventure/state").json()
    assert data["agent"]["progress"] > 0 or data["agent"]["route_index"] > 0

    assert client.post("/adventure/pause").json()["state"] == "paused"
    assert client.post("/adventure/toggle").json()["state"] == "traveling"
    assert client.post("/adventure/stop").json() == {"accepted": True, "state": "ready"}
    assert client.post("/adventure/return").json()["state"] == "selecting_theme"


def test_toggle_speed(client: TestClient) -> None:
    data = client.post("/adventure/speed").json()
    assert data["is_fast"] is True
    assert client.get("/adventure/state").json()["speed"] == 60.0


def test_new_map(client: TestClient) -> None:
    assert client.post("/adventure/map").json()["accepted"] is False
    _setup(client)
    first = client.get("/adventure/state").json()["map"]
    assert client.post("/adventure/map").json()["accepted"] is True
    second = client.get("/adventure/state").json()["map"]
    assert first["traversal_path"] != second["traversal_path"]


def test_scan_flow(client: TestClient, advance) -> None:
    _setup(client)
    body = {"x": 300, "y": 200, "scannable_type": "zone", "icon": "sparkle", "zone_name": "Nebula"}

    assert client.post("/adventure/scan", json=body).json()["accepted"] is True
    assert client.post("/adventure/scan", json=body).json()["accepted"] is False
    scanner = client.get("/adventure/state").json()["scanner"]
    assert scanner == {"status": "scanning", "position": {"x": 300, "y": 200}}

    advance(2)
    scanner = client.get("/adventure/state").json()["scanner"]
    assert scanner["status"] == "showing_result"
    assert scanner["discovery"]["scannable_type"] == "zone"

    assert client.post("/adventure/scan/dismiss").json()["accepted"] is True
    assert client.post("/adventure/scan/dismiss").json()["accepted"] is False


def test_scan_bad_type_rejected(client: TestClient) -> None:
    _setup(client)
    body = {"x": 1, "y": 1, "scannable_type": "planet", "icon": "star"}
    assert client.post("/adventure/scan", json=body).status_code == 422


def test_mission_endpoints_without_mission(client: TestClient) -> None:
    _setup(client)
    assert client.post("/adventure/mission/accept").json()["accepted"] is False
    assert client.post("/adventure/mission/dismiss").json()["accepted"] is False
    assert client.get("/adventure/state").json()["mission"]["status"] == "none"


def test_mission_accept_via_api(client: TestClient, advance) -> None:
    _setup(client)
    client.post("/adventure/start")
    advance(30)
    assert client.get("/adventure/state").json()["mission"]["status"] == "available"
    assert client.post("/adventure/mission/accept").json()["accepted"] is True
    assert client.get("/adventure/state").json()["mission"]["status"] == "active"


def test_sound_board(client: TestClient, audio) -> None:
    _setup(client, theme="Western")
    assert client.post("/adventure/sound", json={"index": 1}).json()["accepted"] is True
    assert audio.effects()[-1] == Theme.WESTERN.profile.action_sounds[1]
    assert client.post("/adventure/sound", json={"index": 9}).json()["accepted"] is False
    assert client.post("/adventure/sound", json={"index": -1}).status_code == 422

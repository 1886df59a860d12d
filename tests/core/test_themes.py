"""테마 카탈로그 / 주변 이벤트 생성 테스트"""

import random

import pytest

from adventure_deck.core.ambient import EDGE_MARGIN, spawn_ambient_event
from adventure_deck.core.geometry import Point, Size
from adventure_deck.core.themes import THEME_PROFILES, Theme, parse_theme


@pytest.mark.parametrize("theme", list(Theme))
def test_every_theme_has_full_profile(theme):
    profile = theme.profile
    assert profile is THEME_PROFILES[theme]
    assert len(profile.terrain_types) == 4
    assert len(profile.action_sounds) == 4
    assert profile.node_icons and profile.event_icons
    assert profile.music_sound == f"{theme.value.lower()}_music"
    assert all(0.0 <= t.decoration_density <= 1.0 for t in profile.terrain_types)


@pytest.mark.parametrize(
    "value, expected",
    [("Space", Theme.SPACE), ("ocean", Theme.OCEAN), (" CITY ", Theme.CITY), ("moon", None)],
)
def test_parse_theme(value, expected):
    assert parse_theme(value) == expected


class TestAmbientSpawn:
    def test_spawn_near_agent_within_canvas(self):
        rng = random.Random(4)
        canvas = Size(1200, 800)
        near = Point(600, 400)
        for _ in range(100):
            event = spawn_ambient_event(Theme.OCEAN, near, canvas, now=12.0, rng=rng)
            assert abs(event.position.x - near.x) <= 100
            assert abs(event.position.y - near.y) <= 80
            assert event.icon in Theme.OCEAN.profile.event_icons
            assert event.color == Theme.OCEAN.profile.accent_color
            assert event.age(17.0) == 5.0

    def test_spawn_clamped_at_canvas_edge(self):
        rng = random.Random(8)
        canvas = Size(1200, 800)
        for _ in range(50):
            event = spawn_ambient_event(Theme.CITY, Point(0, 800), canvas, now=0.0, rng=rng)
            assert EDGE_MARGIN <= event.position.x <= canvas.width - EDGE_MARGIN
            assert EDGE_MARGIN <= event.position.y <= canvas.height - EDGE_MARGIN

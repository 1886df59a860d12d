"""
Adventure Deck Core - Themes
============================
테마별 팔레트 / 아이콘 / 사운드 이름 / 지형 유형 정의

렌더링 레이어는 색상·아이콘 문자열을 그대로 사용하고,
코어는 지형 이름과 decoration 밀도만 해석합니다.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional


class Theme(str, Enum):
    """탐험 테마"""

    SPACE = "Space"
    OCEAN = "Ocean"
    CITY = "City"
    WESTERN = "Western"

    @property
    def profile(self) -> "ThemeProfile":
        return THEME_PROFILES[self]


@dataclass(frozen=True)
class TerrainType:
    """지형 유형 (존 배경)"""

    name: str
    primary_color: str
    secondary_color: str
    decoration_icons: tuple[str, ...] = ()
    decoration_density: float = 0.0  # 0.0 ~ 1.0

    @property
    def icon(self) -> str:
        """대표 아이콘 (첫 decoration 아이콘)"""
        return self.decoration_icons[0] if self.decoration_icons else "circle.fill"

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "primary_color": self.primary_color,
            "secondary_color": self.secondary_color,
            "decoration_icons": list(self.decoration_icons),
            "decoration_density": self.decoration_density,
        }


@dataclass(frozen=True)
class ThemeProfile:
    """테마 한 개의 전체 프로필"""

    theme: Theme
    icon: str
    sprite_icon: str
    primary_color: str
    accent_color: str
    background_color: str
    node_icons: tuple[str, ...]
    event_icons: tuple[str, ...]
    music_sound: str
    ambient_sound: str
    action_sounds: tuple[str, ...]
    terrain_types: tuple[TerrainType, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {
            "theme": self.theme.value,
            "icon": self.icon,
            "sprite_icon": self.sprite_icon,
            "primary_color": self.primary_color,
            "accent_color": self.accent_color,
            "background_color": self.background_color,
            "node_icons": list(self.node_icons),
            "event_icons": list(self.event_icons),
            "action_sounds": list(self.action_sounds),
            "terrain_types": [t.to_dict() for t in self.terrain_types],
        }


THEME_PROFILES: dict[Theme, ThemeProfile] = {
    Theme.SPACE: ThemeProfile(
        theme=Theme.SPACE,
        icon="moon.stars.fill",
        sprite_icon="airplane",
        primary_color="#1a1a2e",
        accent_color="#e94560",
        background_color="#0f0f23",
        node_icons=("star.fill", "sparkle", "moon.fill", "sun.max.fill", "circle.fill"),
        event_icons=("sparkles", "star.fill", "moon.stars", "bolt.fill", "wand.and.stars"),
        music_sound="space_music",
        ambient_sound="space_ambient",
        action_sounds=("laser", "whoosh", "beep", "powerup"),
        terrain_types=(
            TerrainType("Nebula", "#4c1d95", "#7c3aed", ("sparkle", "staroflife.fill"), 0.4),
            TerrainType("Asteroid Field", "#1f2937", "#374151", ("circle.fill", "oval.fill"), 0.6),
            TerrainType("Star Cluster", "#1e1b4b", "#312e81", ("star.fill", "sparkles"), 0.5),
            TerrainType("Deep Space", "#030712", "#111827", ("circle.fill",), 0.1),
        ),
    ),
    Theme.OCEAN: ThemeProfile(
        theme=Theme.OCEAN,
        icon="water.waves",
        sprite_icon="ferry.fill",
        primary_color="#0077b6",
        accent_color="#90e0ef",
        background_color="#023e8a",
        node_icons=("fish.fill", "tortoise.fill", "leaf.fill", "drop.fill", "circle.fill"),
        event_icons=("bubbles.and.sparkles.fill", "fish.fill", "hare.fill", "drop.fill", "wind"),
        music_sound="ocean_music",
        ambient_sound="ocean_ambient",
        action_sounds=("splash", "bubble", "whale", "sonar"),
        terrain_types=(
            TerrainType("Coral Reef", "#0891b2", "#06b6d4", ("leaf.fill", "circle.hexagongrid.fill"), 0.5),
            TerrainType("Deep Sea", "#0c4a6e", "#075985", ("drop.fill", "water.waves"), 0.2),
            TerrainType("Kelp Forest", "#065f46", "#047857", ("leaf.fill", "arrow.up"), 0.6),
            TerrainType("Sandy Shallows", "#0ea5e9", "#38bdf8", ("circle.fill", "oval.fill"), 0.3),
        ),
    ),
    Theme.CITY: ThemeProfile(
        theme=Theme.CITY,
        icon="building.2.fill",
        sprite_icon="car.fill",
        primary_color="#2d3436",
        accent_color="#fdcb6e",
        background_color="#1e272e",
        node_icons=("house.fill", "building.fill", "storefront.fill", "tree.fill", "circle.fill"),
        event_icons=("lightbulb.fill", "bird.fill", "heart.fill", "bell.fill", "party.popper.fill"),
        music_sound="city_music",
        ambient_sound="city_ambient",
        action_sounds=("horn", "siren", "bell", "chime"),
        terrain_types=(
            TerrainType("Downtown", "#1f2937", "#374151", ("building.2.fill", "building.fill"), 0.4),
            TerrainType("Park", "#166534", "#15803d", ("tree.fill", "leaf.fill"), 0.5),
            TerrainType("Industrial", "#44403c", "#57534e", ("gearshape.fill", "wrench.fill"), 0.3),
            TerrainType("Residential", "#78716c", "#a8a29e", ("house.fill", "tree.fill"), 0.4),
        ),
    ),
    Theme.WESTERN: ThemeProfile(
        theme=Theme.WESTERN,
        icon="sun.dust.fill",
        sprite_icon="figure.equestrian.sports",
        primary_color="#d4a373",
        accent_color="#e76f51",
        background_color="#faedcd",
        node_icons=("mountain.2.fill", "leaf.fill", "sun.max.fill", "flame.fill", "circle.fill"),
        event_icons=("wind", "flame.fill", "leaf.fill", "hare.fill", "bird.fill"),
        music_sound="western_music",
        ambient_sound="western_ambient",
        action_sounds=("gallop", "whistle", "bang", "wind"),
        terrain_types=(
            TerrainType("Desert", "#d97706", "#f59e0b", ("sun.max.fill", "circle.fill"), 0.2),
            TerrainType("Canyon", "#9a3412", "#c2410c", ("triangle.fill", "mountain.2.fill"), 0.3),
            TerrainType("Prairie", "#a16207", "#ca8a04", ("leaf.fill", "wind"), 0.4),
            TerrainType("Mountains", "#78350f", "#92400e", ("mountain.2.fill", "triangle.fill"), 0.3),
        ),
    ),
}


def parse_theme(value: str) -> Optional[Theme]:
    """테마 이름/값 파싱 (대소문자 무시). 알 수 없으면 None."""
    normalized = value.strip().lower()
    for theme in Theme:
        if normalized in (theme.value.lower(), theme.name.lower()):
            return theme
    return None

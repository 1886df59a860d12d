"""Adventure Deck Core - 순수 도메인 계층 (I/O 없음)"""

__version__ = "0.1.0"

from adventure_deck.core.adventure_map import (
    AdventureMap,
    MapNode,
    MapPath,
    TerrainDecoration,
    TerrainZone,
)
from adventure_deck.core.event_bus import DomainEvent, EventBus
from adventure_deck.core.event_types import EventTypes
from adventure_deck.core.geometry import Point, Rect, Size
from adventure_deck.core.map_generator import GenerationConfig, MapGenerator
from adventure_deck.core.scheduler import ManualClock, MonotonicClock, Scheduler
from adventure_deck.core.themes import THEME_PROFILES, Theme, parse_theme
from adventure_deck.core.traversal import find_longest_path, greedy_walk

__all__ = [
    "__version__",
    # map
    "AdventureMap",
    "MapNode",
    "MapPath",
    "TerrainZone",
    "TerrainDecoration",
    "GenerationConfig",
    "MapGenerator",
    "find_longest_path",
    "greedy_walk",
    # geometry
    "Point",
    "Rect",
    "Size",
    # themes
    "Theme",
    "THEME_PROFILES",
    "parse_theme",
    # events / timing
    "DomainEvent",
    "EventBus",
    "EventTypes",
    "Scheduler",
    "ManualClock",
    "MonotonicClock",
]

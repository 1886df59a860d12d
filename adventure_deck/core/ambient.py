"""주변 이벤트 — 이동 중 에이전트 근처에 잠깐 떠오르는 장식 아이콘"""

import random
import uuid
from dataclasses import dataclass, field
from typing import Any, Optional

from adventure_deck.core.geometry import Point, Size, clamp
from adventure_deck.core.themes import Theme

SPAWN_OFFSET_X = 100.0
SPAWN_OFFSET_Y = 80.0
EDGE_MARGIN = 50.0
FALLBACK_EVENT_ICON = "sparkle"


@dataclass(frozen=True)
class AmbientEvent:
    icon: str
    position: Point
    color: str
    created_at: float  # 스케줄러 시계 기준
    id: str = field(default_factory=lambda: uuid.uuid4().hex)

    def age(self, now: float) -> float:
        return now - self.created_at

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "icon": self.icon,
            "position": self.position.to_dict(),
            "color": self.color,
            "created_at": self.created_at,
        }


def spawn_ambient_event(
    theme: Theme,
    near: Point,
    canvas_size: Size,
    now: float,
    rng: Optional[random.Random] = None,
) -> AmbientEvent:
    """near 주변 ±100/±80 위치, 캔버스 가장자리 50pt 안쪽으로 제한"""
    rng = rng or random.Random()
    profile = theme.profile

    x = near.x + rng.uniform(-SPAWN_OFFSET_X, SPAWN_OFFSET_X)
    y = near.y + rng.uniform(-SPAWN_OFFSET_Y, SPAWN_OFFSET_Y)
    position = Point(
        clamp(x, EDGE_MARGIN, canvas_size.width - EDGE_MARGIN),
        clamp(y, EDGE_MARGIN, canvas_size.height - EDGE_MARGIN),
    )
    icon = rng.choice(profile.event_icons) if profile.event_icons else FALLBACK_EVENT_ICON
    return AmbientEvent(
        icon=icon, position=position, color=profile.accent_color, created_at=now
    )

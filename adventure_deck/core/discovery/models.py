"""Discovery 도메인 모델 (스캔 결과 기록)"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterator
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

MIN_ENERGY = 1
MAX_ENERGY = 100


class ScannableType(str, Enum):
    """스캔 대상 종류"""

    NODE = "node"
    ZONE = "zone"
    DECORATION = "decoration"


class Rarity(str, Enum):
    """희귀도 4단계"""

    COMMON = "common"  # 60%
    UNCOMMON = "uncommon"  # 25%
    RARE = "rare"  # 12%
    LEGENDARY = "legendary"  # 3%

    @property
    def stars(self) -> int:
        return _STARS[self]


_STARS = {
    Rarity.COMMON: 1,
    Rarity.UNCOMMON: 2,
    Rarity.RARE: 3,
    Rarity.LEGENDARY: 4,
}


@dataclass(frozen=True)
class Discovery:
    """스캔으로 얻은 발견물. 생성 후 불변."""

    id: str
    name: str
    species: str
    description: str
    fun_fact: str
    icon: str
    rarity: Rarity
    theme: str  # Theme 값 (영속화용 문자열)
    scannable_type: ScannableType
    energy_level: int  # 1 ~ 100
    discovered_at: datetime

    def __post_init__(self):
        if not MIN_ENERGY <= self.energy_level <= MAX_ENERGY:
            raise ValueError(f"energy_level out of range: {self.energy_level}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "species": self.species,
            "description": self.description,
            "fun_fact": self.fun_fact,
            "icon": self.icon,
            "rarity": self.rarity.value,
            "stars": self.rarity.stars,
            "theme": self.theme,
            "scannable_type": self.scannable_type.value,
            "energy_level": self.energy_level,
            "discovered_at": self.discovered_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Discovery:
        return cls(
            id=data["id"],
            name=data["name"],
            species=data["species"],
            description=data["description"],
            fun_fact=data["fun_fact"],
            icon=data["icon"],
            rarity=Rarity(data["rarity"]),
            theme=data["theme"],
            scannable_type=ScannableType(data["scannable_type"]),
            energy_level=int(data["energy_level"]),
            discovered_at=datetime.fromisoformat(data["discovered_at"]),
        )


@dataclass
class DiscoveryCollection:
    """발견물 컬렉션 (추가 전용, 일괄 삭제만 허용)"""

    discoveries: list[Discovery] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.discoveries)

    def __iter__(self) -> Iterator[Discovery]:
        return iter(self.discoveries)

    @property
    def count(self) -> int:
        return len(self.discoveries)

    def add(self, discovery: Discovery) -> None:
        self.discoveries.append(discovery)

    def clear(self) -> None:
        self.discoveries.clear()

    def by_theme(self) -> dict[str, list[Discovery]]:
        grouped: dict[str, list[Discovery]] = defaultdict(list)
        for discovery in self.discoveries:
            grouped[discovery.theme].append(discovery)
        return dict(grouped)

    def by_rarity(self) -> dict[Rarity, list[Discovery]]:
        grouped: dict[Rarity, list[Discovery]] = defaultdict(list)
        for discovery in self.discoveries:
            grouped[discovery.rarity].append(discovery)
        return dict(grouped)

    def contains(self, name: str, theme: str) -> bool:
        return any(d.name == name and d.theme == theme for d in self.discoveries)

"""Discovery 생성 — 테마 어휘 무작위 선택 + 가중 희귀도 굴림"""

import random
import uuid
from collections.abc import Sequence
from datetime import datetime
from typing import Optional

from adventure_deck.core.logging import get_logger
from adventure_deck.core.themes import Theme

from .models import Discovery, Rarity, ScannableType
from .vocabulary import DiscoveryVocabulary, vocabulary_for

logger = get_logger(__name__)

# 1~100 굴림의 누적 상한
RARITY_THRESHOLDS: list[tuple[int, Rarity]] = [
    (60, Rarity.COMMON),
    (85, Rarity.UNCOMMON),
    (97, Rarity.RARE),
    (100, Rarity.LEGENDARY),
]

ENERGY_RANGE = (15, 100)

FALLBACK_NAME = "Unknown"
FALLBACK_SPECIES = "Unknown Species"
FALLBACK_DESCRIPTION = "A mysterious discovery."
FALLBACK_FUN_FACT = "Scientists are still studying this!"


def rarity_for_roll(roll: int) -> Rarity:
    """1~100 굴림 → 희귀도"""
    for upper, rarity in RARITY_THRESHOLDS:
        if roll <= upper:
            return rarity
    return Rarity.LEGENDARY


def roll_rarity(rng: Optional[random.Random] = None) -> Rarity:
    rng = rng or random.Random()
    return rarity_for_roll(rng.randint(1, 100))


def _pick(rng: random.Random, options: Sequence[str], fallback: str) -> str:
    return rng.choice(options) if options else fallback


def generate_discovery(
    theme: Theme,
    scannable_type: ScannableType,
    icon: str,
    zone_name: Optional[str] = None,
    rng: Optional[random.Random] = None,
    now: Optional[datetime] = None,
    vocabulary: Optional[DiscoveryVocabulary] = None,
) -> Discovery:
    """스캔 대상 종류 + 테마에 맞는 발견물 생성.

    이전 발견물과 중복을 검사하지 않는다.
    """
    rng = rng or random.Random()
    words = vocabulary or vocabulary_for(theme)

    discovery = Discovery(
        id=uuid.uuid4().hex,
        name=_pick(rng, words.names, FALLBACK_NAME),
        species=_pick(rng, words.species, FALLBACK_SPECIES),
        description=_pick(rng, words.descriptions, FALLBACK_DESCRIPTION),
        fun_fact=_pick(rng, words.fun_facts, FALLBACK_FUN_FACT),
        icon=icon,
        rarity=roll_rarity(rng),
        theme=theme.value,
        scannable_type=scannable_type,
        energy_level=rng.randint(*ENERGY_RANGE),
        discovered_at=now or datetime.utcnow(),
    )
    logger.debug(
        "Discovery 생성: %s (%s, %s, zone=%s)",
        discovery.name,
        discovery.rarity.value,
        scannable_type.value,
        zone_name,
    )
    return discovery

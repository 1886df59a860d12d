"""Discovery 코어 모듈 — 도메인 모델, 어휘, 생성"""

from .generator import generate_discovery, rarity_for_roll, roll_rarity
from .models import Discovery, DiscoveryCollection, Rarity, ScannableType
from .vocabulary import THEME_VOCABULARY, DiscoveryVocabulary, vocabulary_for

__all__ = [
    "Discovery",
    "DiscoveryCollection",
    "Rarity",
    "ScannableType",
    "DiscoveryVocabulary",
    "THEME_VOCABULARY",
    "vocabulary_for",
    "generate_discovery",
    "rarity_for_roll",
    "roll_rarity",
]

"""Factory for creating audio player instances."""

from typing import Optional

from adventure_deck.config import settings
from adventure_deck.core.logging import get_logger
from adventure_deck.services.audio.base import AudioPlayer
from adventure_deck.services.audio.logging_player import LoggingAudioPlayer
from adventure_deck.services.audio.null import NullAudioPlayer

logger = get_logger(__name__)


def get_audio_player(backend: Optional[str] = None) -> AudioPlayer:
    """Get an audio player instance.

    Args:
        backend: Optional backend name. If not specified,
                 uses AUDIO_BACKEND from config.

    Returns:
        An AudioPlayer instance.
    """
    name = (backend or settings.AUDIO_BACKEND).lower()

    if name == "null":
        logger.debug("Using NullAudioPlayer")
        return NullAudioPlayer()

    if name == "log":
        logger.debug("Using LoggingAudioPlayer")
        return LoggingAudioPlayer()

    logger.warning("Unknown audio backend '%s', falling back to LoggingAudioPlayer", name)
    return LoggingAudioPlayer()

"""Audio boundary module."""

from adventure_deck.services.audio.base import AudioPlayer
from adventure_deck.services.audio.factory import get_audio_player
from adventure_deck.services.audio.logging_player import AudioRequest, LoggingAudioPlayer
from adventure_deck.services.audio.null import NullAudioPlayer

__all__ = [
    "AudioPlayer",
    "AudioRequest",
    "LoggingAudioPlayer",
    "NullAudioPlayer",
    "get_audio_player",
]

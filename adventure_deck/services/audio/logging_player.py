"""Audio player that logs requests and keeps a short history."""

from collections import deque
from dataclasses import dataclass

from adventure_deck.core.logging import get_logger
from adventure_deck.services.audio.base import AudioPlayer

logger = get_logger(__name__)

HISTORY_SIZE = 100


@dataclass(frozen=True)
class AudioRequest:
    kind: str  # "music" | "ambient" | "effect" | "stop_all"
    name: str = ""


class LoggingAudioPlayer(AudioPlayer):
    """Audio backend for headless servers and tests.

    Every request is logged at DEBUG and recorded in ``history``
    (most recent last, bounded).
    """

    def __init__(self, history_size: int = HISTORY_SIZE):
        self.history: deque[AudioRequest] = deque(maxlen=history_size)
        self.current_music: str | None = None
        self.current_ambient: str | None = None

    @property
    def name(self) -> str:
        return "log"

    def play_music(self, name: str) -> None:
        self.current_music = name
        self._record(AudioRequest("music", name))

    def play_ambient(self, name: str) -> None:
        self.current_ambient = name
        self._record(AudioRequest("ambient", name))

    def play_effect(self, name: str) -> None:
        self._record(AudioRequest("effect", name))

    def stop_all(self) -> None:
        self.current_music = None
        self.current_ambient = None
        self._record(AudioRequest("stop_all"))

    def effects(self) -> list[str]:
        """Names of effects played, oldest first."""
        return [r.name for r in self.history if r.kind == "effect"]

    def _record(self, request: AudioRequest) -> None:
        self.history.append(request)
        logger.debug("Audio request: %s %s", request.kind, request.name)

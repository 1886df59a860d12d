"""Audio player that ignores every request."""

from adventure_deck.services.audio.base import AudioPlayer


class NullAudioPlayer(AudioPlayer):
    """Silent backend. Used when audio is disabled."""

    @property
    def name(self) -> str:
        return "null"

    def play_music(self, name: str) -> None:
        pass

    def play_ambient(self, name: str) -> None:
        pass

    def play_effect(self, name: str) -> None:
        pass

    def stop_all(self) -> None:
        pass

"""Abstract base class for audio players."""

from abc import ABC, abstractmethod

from adventure_deck.core.themes import Theme


class AudioPlayer(ABC):
    """Abstract base class for the audio boundary.

    Requests are fire-and-forget: the engine never waits for playback
    and never reacts to playback completion.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the backend name."""
        ...

    @abstractmethod
    def play_music(self, name: str) -> None:
        """Start a looping music track, replacing the current one."""
        ...

    @abstractmethod
    def play_ambient(self, name: str) -> None:
        """Start a looping ambient track, replacing the current one."""
        ...

    @abstractmethod
    def play_effect(self, name: str) -> None:
        """Play a one-shot effect."""
        ...

    @abstractmethod
    def stop_all(self) -> None:
        """Stop music, ambient and effects."""
        ...

    def play_theme_audio(self, theme: Theme) -> None:
        """Start the theme's music and ambient loops."""
        profile = theme.profile
        self.play_music(profile.music_sound)
        self.play_ambient(profile.ambient_sound)

"""Interface for audio-only players (Interface Segregation).

Audio players are never forced to implement video methods
such as playing video or displaying subtitles.
"""
from abc import ABC, abstractmethod


class IAudioPlayer(ABC):
    """Interface exposing only audio playback capabilities."""

    @abstractmethod
    def play_audio(self) -> None:
        """Play the currently loaded audio file."""
        pass

    @abstractmethod
    def load_media(self, file_path: str) -> None:
        """
        Load an audio file.

        Args:
            file_path: Path of the audio file to load
        """
        pass

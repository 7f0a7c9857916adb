"""Interface for video players (Interface Segregation)."""
from abc import ABC, abstractmethod


class IVideoPlayer(ABC):
    """Interface exposing only video playback capabilities."""

    @abstractmethod
    def play_video(self) -> None:
        """Play the currently loaded video file."""
        pass

    @abstractmethod
    def display_subtitles(self) -> None:
        """Display subtitles for the currently loaded video."""
        pass

    @abstractmethod
    def load_media(self, file_path: str) -> None:
        """
        Load a video file.

        Args:
            file_path: Path of the video file to load
        """
        pass

"""Video player implementation (Interface Segregation)."""
import logging
from typing import Optional

from solid_exercises.domain.interfaces.video_player import IVideoPlayer


class VideoPlayer(IVideoPlayer):
    """
    Video player.

    Implements IVideoPlayer only: it has no audio-only methods
    to stub out.
    """

    def __init__(self):
        """Initialize player with no media loaded."""
        self._current_media: Optional[str] = None
        self._logger = logging.getLogger(__name__)

    @property
    def current_media(self) -> Optional[str]:
        """Path of the loaded video file, if any."""
        return self._current_media

    def load_media(self, file_path: str) -> None:
        """Load a video file."""
        self._current_media = file_path
        self._logger.info(f"Loaded video file: {file_path}")

    def play_video(self) -> None:
        """Play the loaded video file."""
        if self._current_media is None:
            self._logger.warning("No video file loaded - nothing to play")
            return
        self._logger.info(f"Playing video: {self._current_media}")

    def display_subtitles(self) -> None:
        """Display subtitles for the loaded video file."""
        if self._current_media is None:
            self._logger.warning("No video file loaded - no subtitles to display")
            return
        self._logger.info(f"Displaying subtitles for: {self._current_media}")

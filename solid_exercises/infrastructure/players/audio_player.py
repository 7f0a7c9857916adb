"""Audio player implementation (Interface Segregation)."""
import logging
from typing import Optional

from solid_exercises.domain.interfaces.audio_player import IAudioPlayer


class AudioPlayer(IAudioPlayer):
    """
    Audio-only player.

    Implements IAudioPlayer and nothing else: it has no video
    or subtitle methods to stub out.
    """

    def __init__(self):
        """Initialize player with no media loaded."""
        self._current_media: Optional[str] = None
        self._logger = logging.getLogger(__name__)

    @property
    def current_media(self) -> Optional[str]:
        """Path of the loaded audio file, if any."""
        return self._current_media

    def load_media(self, file_path: str) -> None:
        """Load an audio file."""
        self._current_media = file_path
        self._logger.info(f"Loaded audio file: {file_path}")

    def play_audio(self) -> None:
        """Play the loaded audio file."""
        if self._current_media is None:
            self._logger.warning("No audio file loaded - nothing to play")
            return
        self._logger.info(f"Playing audio: {self._current_media}")

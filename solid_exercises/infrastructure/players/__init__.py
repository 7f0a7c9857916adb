"""Media players - concrete capability providers."""

from solid_exercises.infrastructure.players.audio_player import AudioPlayer
from solid_exercises.infrastructure.players.video_player import VideoPlayer

__all__ = [
    "AudioPlayer",
    "VideoPlayer",
]

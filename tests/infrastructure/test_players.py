import logging

import pytest
from solid_exercises.domain.interfaces import IAudioPlayer, IVideoPlayer
from solid_exercises.infrastructure.players import AudioPlayer, VideoPlayer


def test_audio_player_only_has_audio_capability():
    player = AudioPlayer()

    assert isinstance(player, IAudioPlayer)
    assert not isinstance(player, IVideoPlayer)
    assert not hasattr(player, "play_video")
    assert not hasattr(player, "display_subtitles")


def test_video_player_only_has_video_capability():
    player = VideoPlayer()

    assert isinstance(player, IVideoPlayer)
    assert not isinstance(player, IAudioPlayer)
    assert not hasattr(player, "play_audio")


def test_capability_contracts_are_disjoint_apart_from_load_media():
    audio = set(IAudioPlayer.__abstractmethods__)
    video = set(IVideoPlayer.__abstractmethods__)

    assert audio == {"play_audio", "load_media"}
    assert video == {"play_video", "display_subtitles", "load_media"}
    assert audio & video == {"load_media"}


def test_audio_player_plays_loaded_media(caplog):
    player = AudioPlayer()
    assert player.current_media is None

    with caplog.at_level(logging.INFO):
        player.load_media("song.mp3")
        player.play_audio()

    assert player.current_media == "song.mp3"
    assert "Playing audio: song.mp3" in caplog.text


def test_audio_player_without_media_warns(caplog):
    with caplog.at_level(logging.WARNING):
        AudioPlayer().play_audio()

    assert "No audio file loaded" in caplog.text


def test_video_player_plays_and_shows_subtitles(caplog):
    player = VideoPlayer()

    with caplog.at_level(logging.INFO):
        player.load_media("movie.mp4")
        player.play_video()
        player.display_subtitles()

    assert player.current_media == "movie.mp4"
    assert "Playing video: movie.mp4" in caplog.text
    assert "Displaying subtitles for: movie.mp4" in caplog.text


def test_video_player_without_media_does_not_raise(caplog):
    player = VideoPlayer()

    with caplog.at_level(logging.WARNING):
        player.play_video()
        player.display_subtitles()

    assert caplog.text.count("No video file loaded") == 2


@pytest.mark.parametrize("player_class", [AudioPlayer, VideoPlayer])
def test_player_methods_are_documented(player_class):
    for name in ("__init__", "load_media", "current_media", "play_audio", "play_video", "display_subtitles"):
        member = player_class.__dict__.get(name)
        if member is not None:
            assert member.__doc__, f"{player_class.__name__}.{name}"

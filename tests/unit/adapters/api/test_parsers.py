"""
Tests unitaires pour la conversion des reponses Brightcove.
"""

from datetime import datetime, timedelta, timezone

import pytest

from bcmirror.adapters.api.parsers import (
    parse_player,
    parse_playlist,
    parse_timestamp,
    parse_video,
)
from bcmirror.core.errors import RemoteError
from bcmirror.core.value_objects import StudioPlayerConfig
from tests.fixtures.brightcove_responses import (
    PLAYER_RESPONSE,
    PLAYER_WITHOUT_STUDIO_RESPONSE,
    PLAYLIST_RESPONSE,
    VIDEO_MINIMAL_RESPONSE,
    VIDEO_RESPONSE,
)


class TestParseTimestamp:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("2024-01-01T12:00:00.000Z", datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)),
            ("2024-01-01T14:30:00+02:00", datetime(2024, 1, 1, 12, 30, 0, tzinfo=timezone.utc)),
            ("2024-01-01T12:00:00", datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)),
        ],
    )
    def test_normalised_to_utc(self, value, expected):
        result = parse_timestamp(value)
        assert result == expected
        assert result.utcoffset() == timedelta(0)

    @pytest.mark.parametrize("value", [None, ""])
    def test_empty(self, value):
        assert parse_timestamp(value) is None


class TestParsePlayer:
    def test_full_player(self):
        player = parse_player(PLAYER_RESPONSE)

        assert player.id == "BkLm8fT"
        assert player.name == "Main player"
        assert player.updated_at == datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
        assert player.created_at == datetime(2023, 12, 2, 9, 0, 0, tzinfo=timezone.utc)
        assert player.playlist is True
        assert player.version == "6.62.1"
        assert player.studio == StudioPlayerConfig(
            adjusted=True, height=360.0, width=640.0, units="px", responsive=False
        )

    def test_player_without_studio_configuration(self):
        player = parse_player(PLAYER_WITHOUT_STUDIO_RESPONSE)

        assert player.studio is None
        assert player.playlist is False
        assert player.updated_at == datetime(2024, 1, 1, 12, 30, 0, tzinfo=timezone.utc)

    def test_missing_updated_at_is_rejected(self):
        with pytest.raises(RemoteError):
            parse_player({"id": "x", "name": "No date"})


class TestParseVideo:
    def test_full_video(self):
        video = parse_video(VIDEO_RESPONSE)

        assert video.id == "6301234567001"
        assert video.tags == ("music", "live")
        assert video.related_link_url == "https://example.com/more"
        assert video.related_link_title == "Read more"
        assert video.poster_url == "https://cf.example.com/poster.jpg"
        assert video.thumbnail_url == "https://cf.example.com/thumb.jpg"
        assert video.custom_fields == {"genre": "rock", "year": "1967"}
        assert video.schedule.starts_at == datetime(2024, 2, 1, tzinfo=timezone.utc)
        assert video.schedule.ends_at is None

    def test_minimal_video(self):
        video = parse_video(VIDEO_MINIMAL_RESPONSE)

        assert video.state == "INACTIVE"
        assert video.related_link_url is None
        assert video.poster_url is None
        assert video.tags == ()
        assert video.custom_fields == {}
        assert video.schedule is None


class TestParsePlaylist:
    def test_playlist(self):
        playlist = parse_playlist(PLAYLIST_RESPONSE)

        assert playlist.id == "1712345678001"
        assert playlist.playlist_type == "EXPLICIT"
        assert playlist.favorite is True
        assert playlist.video_ids == ("6301234567001", "6301234567002")

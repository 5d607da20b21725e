"""
Tests unitaires pour SyncService.

Tests couvrant:
- sync_all: parcours du listing et statistiques
- sync_one: ressource introuvable ignoree
- sync_ids: echecs de transport comptes sans interrompre la boucle
"""

from typing import AsyncIterator
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from bcmirror.core.errors import NotFoundError, TransportError
from bcmirror.core.value_objects import ReconcileOutcome
from bcmirror.services.reconciler import Reconciler
from bcmirror.services.resource_kinds import PLAYER_KIND, PLAYLIST_KIND, VIDEO_KIND
from bcmirror.services.sync import SyncIssue, SyncService, SyncStats
from tests.fixtures.remote_resources import (
    T1,
    MemoryRepository,
    make_player,
    make_playlist,
    make_video,
)


async def _aiter(items) -> AsyncIterator:
    for item in items:
        yield item


@pytest.fixture
def repositories() -> dict[str, MemoryRepository]:
    return {
        "player": MemoryRepository("player_id"),
        "video": MemoryRepository("video_id"),
        "playlist": MemoryRepository("playlist_id"),
    }


@pytest.fixture
def mock_reader() -> MagicMock:
    reader = MagicMock()
    reader.fetch_player = AsyncMock(return_value=make_player())
    reader.fetch_video = AsyncMock(return_value=make_video())
    reader.fetch_playlist = AsyncMock(return_value=make_playlist())
    reader.iter_players = MagicMock(
        side_effect=lambda: _aiter([make_player(id="a"), make_player(id="b")])
    )
    reader.iter_videos = MagicMock(
        side_effect=lambda: _aiter([make_video(id="v-1"), make_video(id="v-2")])
    )
    reader.iter_playlists = MagicMock(side_effect=lambda: _aiter([make_playlist()]))
    return reader


@pytest.fixture
def service(mock_reader, repositories) -> SyncService:
    return SyncService(
        reader=mock_reader,
        reconcilers={
            "player": Reconciler(PLAYER_KIND, repositories["player"]),
            "video": Reconciler(VIDEO_KIND, repositories["video"]),
            "playlist": Reconciler(PLAYLIST_KIND, repositories["playlist"]),
        },
    )


class TestSyncStats:
    def test_record(self):
        stats = SyncStats()
        stats.record(ReconcileOutcome.CREATED)
        stats.record(ReconcileOutcome.UPDATED)
        stats.record(ReconcileOutcome.UNCHANGED)
        stats.record(ReconcileOutcome.UNCHANGED)

        assert (stats.created, stats.updated, stats.unchanged) == (1, 1, 2)


class TestSyncAll:
    @pytest.mark.asyncio
    async def test_creates_every_listed_resource(self, service, repositories):
        stats = await service.sync_all("player", "client-a")

        assert stats.total == 2
        assert stats.created == 2
        assert {p.player_id for p in repositories["player"].all()} == {"a", "b"}

    @pytest.mark.asyncio
    async def test_second_run_is_unchanged(self, service):
        await service.sync_all("video", "client-a")

        stats = await service.sync_all("video", "client-a")

        assert stats.unchanged == 2
        assert stats.created == 0

    @pytest.mark.asyncio
    async def test_progress_callback(self, service):
        calls = []

        await service.sync_all(
            "playlist", "client-a", on_progress=lambda rid, out: calls.append((rid, out))
        )

        assert calls == [("pl-1", ReconcileOutcome.CREATED)]

    @pytest.mark.asyncio
    async def test_listing_transport_error_propagates(self, service, mock_reader):
        mock_reader.iter_videos = MagicMock(side_effect=TransportError("HTTP 503"))

        with pytest.raises(TransportError):
            await service.sync_all("video", "client-a")

    @pytest.mark.asyncio
    async def test_unknown_kind(self, service):
        with pytest.raises(ValueError):
            await service.sync_all("text_track", "client-a")

    def test_kinds(self, service):
        assert service.kinds == ["player", "video", "playlist"]


class TestSyncOne:
    @pytest.mark.asyncio
    async def test_fetches_and_reconciles(self, service, mock_reader):
        outcome = await service.sync_one("video", "v-1", "client-a")

        assert outcome is ReconcileOutcome.CREATED
        mock_reader.fetch_video.assert_awaited_once_with("v-1")

    @pytest.mark.asyncio
    async def test_not_found_is_skipped(self, service, mock_reader, repositories):
        mock_reader.fetch_player.side_effect = NotFoundError("players/gone")

        outcome = await service.sync_one("player", "gone", "client-a")

        assert outcome is None
        assert repositories["player"].all() == []

    @pytest.mark.asyncio
    async def test_transport_error_propagates(self, service, mock_reader):
        mock_reader.fetch_playlist.side_effect = TransportError("timeout")

        with pytest.raises(TransportError):
            await service.sync_one("playlist", "pl-1", "client-a")


class TestSyncIds:
    @pytest.mark.asyncio
    async def test_counts_every_outcome(self, service, mock_reader):
        mock_reader.fetch_video.side_effect = [
            make_video(id="v-1"),
            NotFoundError("videos/v-2"),
            TransportError("HTTP 502", status_code=502),
            make_video(id="v-1", updated_at=T1, name="Renamed"),
        ]
        progress = []

        stats = await service.sync_ids(
            "video",
            ["v-1", "v-2", "v-3", "v-1"],
            "client-a",
            on_progress=lambda rid, out: progress.append((rid, out)),
        )

        assert stats.total == 4
        assert stats.created == 1
        assert stats.skipped == 1
        assert stats.failed == 1
        assert stats.updated == 1
        assert progress[1] == ("v-2", SyncIssue.SKIPPED)
        assert progress[2] == ("v-3", SyncIssue.FAILED)
        assert progress[3] == ("v-1", ReconcileOutcome.UPDATED)

    @pytest.mark.asyncio
    async def test_rate_limit_sleeps_between_calls(self, service):
        with patch("bcmirror.services.sync.asyncio.sleep", new=AsyncMock()) as mock_sleep:
            await service.sync_ids("player", ["a", "b", "c"], "client-a", rate_limit_seconds=0.5)

        assert mock_sleep.await_count == 2
        mock_sleep.assert_awaited_with(0.5)

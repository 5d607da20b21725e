"""
Implementation SQLModel du repository Playlist.
"""

import json

from bcmirror.core.entities.video import BrightcovePlaylist
from bcmirror.core.ports.repositories import IPlaylistRepository
from bcmirror.infrastructure.persistence.models import PlaylistModel
from bcmirror.infrastructure.persistence.repositories.base import (
    SQLModelRecordRepository,
    as_utc,
)


class SQLModelPlaylistRepository(
    SQLModelRecordRepository[BrightcovePlaylist], IPlaylistRepository
):
    """Repository SQLModel pour les playlists."""

    model_class = PlaylistModel
    remote_id_column = "playlist_id"

    def _to_entity(self, model: PlaylistModel) -> BrightcovePlaylist:
        video_ids = json.loads(model.video_ids_json) if model.video_ids_json else []
        return BrightcovePlaylist(
            id=model.id,
            playlist_id=model.playlist_id,
            api_client=model.api_client,
            player=model.player,
            name=model.name,
            description=model.description,
            reference_id=model.reference_id,
            playlist_type=model.playlist_type,
            favorite=model.favorite,
            search=model.search,
            video_ids=tuple(video_ids),
            created_at=as_utc(model.created_at),
            changed_at=as_utc(model.changed_at),
        )

    def _apply(self, entity: BrightcovePlaylist, model: PlaylistModel) -> None:
        model.playlist_id = entity.playlist_id
        model.player = entity.player
        model.name = entity.name
        model.description = entity.description
        model.reference_id = entity.reference_id
        model.playlist_type = entity.playlist_type
        model.favorite = entity.favorite
        model.search = entity.search
        model.video_ids_json = (
            json.dumps(list(entity.video_ids)) if entity.video_ids else None
        )
        model.created_at = entity.created_at
        model.changed_at = entity.changed_at

"""
Definitions des types de ressources reconciliees.

Chaque ResourceKind decrit comment lire une ressource distante (ID, dates,
champs primaires, sous-objet optionnel) et comment construire l'entite
locale correspondante.
"""

from dataclasses import asdict
from typing import Any, Optional

from bcmirror.core.entities import (
    BrightcovePlayer,
    BrightcovePlaylist,
    BrightcoveVideo,
    VideoStatus,
)
from bcmirror.core.value_objects import RemotePlayer, RemotePlaylist, RemoteVideo
from bcmirror.services.reconciler import ResourceKind

PLAYER_SECONDARY_FIELDS = ("adjusted", "height", "width", "units", "responsive")
VIDEO_SECONDARY_FIELDS = ("schedule_starts_at", "schedule_ends_at")


def _player_primary(player: RemotePlayer) -> dict[str, Any]:
    return {
        "name": player.name,
        "playlist": player.playlist,
        "version": player.version,
    }


def _player_studio(player: RemotePlayer) -> Optional[dict[str, Any]]:
    if player.studio is None:
        return None
    return asdict(player.studio)


def _video_primary(video: RemoteVideo) -> dict[str, Any]:
    return {
        "name": video.name,
        "description": video.description,
        "long_description": video.long_description,
        "reference_id": video.reference_id,
        "state": video.state,
        "status": VideoStatus.from_state(video.state),
        "duration": video.duration,
        "economics": video.economics,
        "tags": tuple(video.tags),
        "related_link_url": video.related_link_url,
        "related_link_title": video.related_link_title,
        "poster_url": video.poster_url,
        "thumbnail_url": video.thumbnail_url,
        "custom_fields": dict(video.custom_fields),
    }


def _video_schedule(video: RemoteVideo) -> Optional[dict[str, Any]]:
    if video.schedule is None:
        return None
    return {
        "schedule_starts_at": video.schedule.starts_at,
        "schedule_ends_at": video.schedule.ends_at,
    }


def _playlist_primary(playlist: RemotePlaylist) -> dict[str, Any]:
    return {
        "name": playlist.name,
        "description": playlist.description,
        "reference_id": playlist.reference_id,
        "playlist_type": playlist.playlist_type,
        "favorite": playlist.favorite,
        "search": playlist.search,
        "video_ids": tuple(playlist.video_ids),
    }


PLAYER_KIND: ResourceKind[RemotePlayer, BrightcovePlayer] = ResourceKind(
    name="player",
    remote_id_field="player_id",
    entity_factory=BrightcovePlayer,
    remote_id=lambda player: player.id,
    updated_at=lambda player: player.updated_at,
    created_at=lambda player: player.created_at,
    primary_values=_player_primary,
    secondary_fields=PLAYER_SECONDARY_FIELDS,
    nested_values=_player_studio,
)

VIDEO_KIND: ResourceKind[RemoteVideo, BrightcoveVideo] = ResourceKind(
    name="video",
    remote_id_field="video_id",
    entity_factory=BrightcoveVideo,
    remote_id=lambda video: video.id,
    updated_at=lambda video: video.updated_at,
    created_at=lambda video: video.created_at,
    primary_values=_video_primary,
    secondary_fields=VIDEO_SECONDARY_FIELDS,
    nested_values=_video_schedule,
)

PLAYLIST_KIND: ResourceKind[RemotePlaylist, BrightcovePlaylist] = ResourceKind(
    name="playlist",
    remote_id_field="playlist_id",
    entity_factory=BrightcovePlaylist,
    remote_id=lambda playlist: playlist.id,
    updated_at=lambda playlist: playlist.updated_at,
    created_at=lambda playlist: playlist.created_at,
    primary_values=_playlist_primary,
)

RESOURCE_KINDS = {
    kind.name: kind for kind in (PLAYER_KIND, VIDEO_KIND, PLAYLIST_KIND)
}

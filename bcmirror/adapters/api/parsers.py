"""
Conversion des reponses JSON Brightcove en objets valeur.

Les horodatages ISO-8601 de l'API (ex: "2024-03-01T10:15:30.123Z") sont
normalises en datetime UTC avec fuseau (timezone.utc).
"""

from datetime import datetime, timezone
from typing import Any, Optional

from bcmirror.core.errors import RemoteError
from bcmirror.core.value_objects.remote import (
    RemotePlayer,
    RemotePlaylist,
    RemoteVideo,
    StudioPlayerConfig,
    VideoSchedule,
)


def parse_timestamp(value: Optional[str]) -> Optional[datetime]:
    """
    Convertit un horodatage ISO-8601 en datetime UTC.

    Args:
        value: Horodatage texte, ou None

    Returns:
        datetime en UTC (avec tzinfo), ou None si la valeur est vide
    """
    if not value:
        return None
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        # Sans decalage, l'horodatage est deja en UTC
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def _require_timestamp(value: Optional[str], resource: str) -> datetime:
    parsed = parse_timestamp(value)
    if parsed is None:
        raise RemoteError(f"{resource}: missing updated_at")
    return parsed


def _to_float(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    return float(value)


def _nested(data: dict, *keys: str) -> Any:
    """Descend dans des dictionnaires imbriques, None si un niveau manque."""
    current: Any = data
    for key in keys:
        if not isinstance(current, dict):
            return None
        current = current.get(key)
    return current


def parse_player(data: dict) -> RemotePlayer:
    """
    Construit un RemotePlayer depuis une reponse de la Player Management API.

    La date de mise a jour et la configuration sont lues sur la branche master.
    """
    master = _nested(data, "branches", "master") or {}
    configuration = master.get("configuration") or {}
    player_id = str(data["id"])

    studio = None
    studio_player = _nested(configuration, "studio_configuration", "player")
    if isinstance(studio_player, dict) and studio_player:
        studio = StudioPlayerConfig(
            adjusted=studio_player.get("adjusted"),
            height=_to_float(studio_player.get("height")),
            width=_to_float(studio_player.get("width")),
            units=studio_player.get("units"),
            responsive=studio_player.get("responsive"),
        )

    return RemotePlayer(
        id=player_id,
        name=data.get("name") or "",
        updated_at=_require_timestamp(
            master.get("updated_at") or data.get("updated_at"),
            f"player {player_id}",
        ),
        created_at=parse_timestamp(data.get("created_at")),
        playlist=bool(configuration.get("playlist", False)),
        version=_nested(configuration, "player", "template", "version"),
        studio=studio,
    )


def parse_video(data: dict) -> RemoteVideo:
    """Construit un RemoteVideo depuis une reponse de la CMS API."""
    video_id = str(data["id"])
    link = data.get("link") or {}
    images = data.get("images") or {}

    schedule = None
    raw_schedule = data.get("schedule")
    if isinstance(raw_schedule, dict):
        starts_at = parse_timestamp(raw_schedule.get("starts_at"))
        ends_at = parse_timestamp(raw_schedule.get("ends_at"))
        if starts_at is not None or ends_at is not None:
            schedule = VideoSchedule(starts_at=starts_at, ends_at=ends_at)

    custom_fields = {
        str(key): str(value)
        for key, value in (data.get("custom_fields") or {}).items()
        if value is not None
    }

    return RemoteVideo(
        id=video_id,
        name=data.get("name") or "",
        updated_at=_require_timestamp(data.get("updated_at"), f"video {video_id}"),
        created_at=parse_timestamp(data.get("created_at")),
        description=data.get("description"),
        long_description=data.get("long_description"),
        reference_id=data.get("reference_id"),
        state=data.get("state"),
        duration=data.get("duration"),
        economics=data.get("economics"),
        tags=tuple(data.get("tags") or ()),
        related_link_url=link.get("url"),
        related_link_title=link.get("text"),
        poster_url=_nested(images, "poster", "src"),
        thumbnail_url=_nested(images, "thumbnail", "src"),
        custom_fields=custom_fields,
        schedule=schedule,
    )


def parse_playlist(data: dict) -> RemotePlaylist:
    """Construit un RemotePlaylist depuis une reponse de la CMS API."""
    playlist_id = str(data["id"])
    return RemotePlaylist(
        id=playlist_id,
        name=data.get("name") or "",
        updated_at=_require_timestamp(
            data.get("updated_at"), f"playlist {playlist_id}"
        ),
        created_at=parse_timestamp(data.get("created_at")),
        description=data.get("description"),
        reference_id=data.get("reference_id"),
        playlist_type=data.get("type"),
        favorite=bool(data.get("favorite", False)),
        search=data.get("search"),
        video_ids=tuple(str(video_id) for video_id in data.get("video_ids") or ()),
    )

"""
Objets valeur immutables.

Exports:
- ReconcileOutcome: Resultat d'une reconciliation (CREATED, UPDATED, UNCHANGED)
- RemotePlayer, StudioPlayerConfig: Player distant et sa configuration studio
- RemoteVideo, VideoSchedule: Video distante et sa fenetre de diffusion
- RemotePlaylist: Playlist distante
"""

from bcmirror.core.value_objects.outcome import ReconcileOutcome
from bcmirror.core.value_objects.remote import (
    RemotePlayer,
    RemotePlaylist,
    RemoteVideo,
    StudioPlayerConfig,
    VideoSchedule,
)

__all__ = [
    "ReconcileOutcome",
    "RemotePlayer",
    "RemotePlaylist",
    "RemoteVideo",
    "StudioPlayerConfig",
    "VideoSchedule",
]

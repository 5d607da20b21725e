"""
Business entities mirroring Brightcove resources.

Entities are mutable records with identity, owned by the local store.

Exports:
- BrightcovePlayer: Local mirror of a Brightcove player
- BrightcoveVideo: Local mirror of a Brightcove video
- BrightcovePlaylist: Local mirror of a Brightcove playlist
- VideoStatus: Publication status derived from the video state
"""

from bcmirror.core.entities.player import DEFAULT_PLAYER, BrightcovePlayer
from bcmirror.core.entities.video import (
    BrightcovePlaylist,
    BrightcoveVideo,
    VideoStatus,
)

__all__ = [
    "DEFAULT_PLAYER",
    "BrightcovePlayer",
    "BrightcoveVideo",
    "BrightcovePlaylist",
    "VideoStatus",
]

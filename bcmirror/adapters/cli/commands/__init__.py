"""Sous-package CLI commands - re-exporte les commandes publiques."""

from bcmirror.adapters.cli.commands.catalog_commands import (
    metadata,
    players,
    search,
)
from bcmirror.adapters.cli.commands.sync_commands import (
    sync_app,
    sync_players,
    sync_playlists,
    sync_videos,
)

__all__ = [
    # sync
    "sync_app",
    "sync_players",
    "sync_videos",
    "sync_playlists",
    # catalog
    "players",
    "search",
    "metadata",
]

"""
Interface port pour la lecture des ressources Brightcove.

Le lecteur distant est un collaborateur externe : il retourne des ressources
entierement recuperees, et distingue les ressources introuvables
(NotFoundError) des erreurs transitoires (TransportError).
"""

from abc import ABC, abstractmethod
from typing import AsyncIterator

from bcmirror.core.value_objects.remote import RemotePlayer, RemotePlaylist, RemoteVideo


class IBrightcoveReader(ABC):
    """
    Interface de lecture des players, videos et playlists d'un compte.

    Les methodes fetch_* levent NotFoundError ou TransportError.
    Les methodes iter_* parcourent les listings pagines.
    """

    @abstractmethod
    async def fetch_player(self, player_id: str) -> RemotePlayer:
        """Recupere un player par son ID Brightcove."""
        ...

    @abstractmethod
    def iter_players(self) -> AsyncIterator[RemotePlayer]:
        """Parcourt tous les players du compte."""
        ...

    @abstractmethod
    async def fetch_video(self, video_id: str) -> RemoteVideo:
        """Recupere une video par son ID Brightcove."""
        ...

    @abstractmethod
    def iter_videos(self) -> AsyncIterator[RemoteVideo]:
        """Parcourt toutes les videos du compte."""
        ...

    @abstractmethod
    async def fetch_playlist(self, playlist_id: str) -> RemotePlaylist:
        """Recupere une playlist par son ID Brightcove."""
        ...

    @abstractmethod
    def iter_playlists(self) -> AsyncIterator[RemotePlaylist]:
        """Parcourt toutes les playlists du compte."""
        ...

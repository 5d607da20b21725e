"""
Interfaces ports pour les repositories.

Interfaces abstraites (ports) définissant les contrats pour la persistance des
enregistrements locaux. Les implémentations (adaptateurs) fournissent le
stockage concret (SQLite via SQLModel, mocks pour les tests, etc.).
"""

from abc import ABC, abstractmethod
from typing import Generic, Optional, Sequence, TypeVar

from bcmirror.core.entities.player import BrightcovePlayer
from bcmirror.core.entities.video import BrightcovePlaylist, BrightcoveVideo

T = TypeVar("T")


class IRecordRepository(ABC, Generic[T]):
    """
    Interface commune de stockage des enregistrements miroirs.

    Chaque enregistrement est joint a sa ressource distante par un ID
    Brightcove. Le stockage ne garantit pas l'unicite de cet ID : c'est la
    reconciliation qui la maintient (recherche avant creation).
    """

    @abstractmethod
    def get_by_id(self, record_id: int) -> Optional[T]:
        """Récupère un enregistrement par son ID interne."""
        ...

    @abstractmethod
    def find_by_remote_id(self, remote_id: str) -> list[T]:
        """
        Récupère tous les enregistrements joints à un ID Brightcove.

        Retourne :
            Liste vide, un seul élément, ou plusieurs si les données sont corrompues
        """
        ...

    @abstractmethod
    def get_by_remote_id(self, remote_id: str) -> Optional[T]:
        """Récupère le premier enregistrement joint à un ID Brightcove."""
        ...

    @abstractmethod
    def list_by_api_client(self, api_client: str) -> list[T]:
        """Liste les enregistrements d'un client API, triés par nom."""
        ...

    @abstractmethod
    def save(self, record: T) -> T:
        """
        Sauvegarde un enregistrement (insertion si id est None, sinon mise à jour).

        Lève :
            PersistenceError : si l'écriture échoue (transaction annulée)
        """
        ...


class IPlayerRepository(IRecordRepository[BrightcovePlayer]):
    """Interface de stockage des players."""


class IVideoRepository(IRecordRepository[BrightcoveVideo]):
    """Interface de stockage des vidéos."""

    @abstractmethod
    def search(
        self,
        like_pattern: str,
        statuses: Sequence[int],
        limit: int = 15,
    ) -> list[BrightcoveVideo]:
        """
        Recherche des vidéos par motif LIKE sur les champs textuels.

        Args :
            like_pattern : Motif LIKE déjà échappé (échappement '\\')
            statuses : Statuts de publication autorisés
            limit : Nombre maximum de résultats

        Retourne :
            Vidéos correspondantes, les plus récentes d'abord
        """
        ...


class IPlaylistRepository(IRecordRepository[BrightcovePlaylist]):
    """Interface de stockage des playlists."""

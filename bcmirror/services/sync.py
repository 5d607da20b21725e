"""
Service de synchronisation des ressources Brightcove.

Enumere les ressources distantes (listings pagines ou IDs explicites) et
appelle le reconciliateur une fois par ressource, sequentiellement.

Les ressources introuvables sont ignorees, les erreurs de transport
(deja relancees par la couche HTTP) sont comptees comme des echecs.
"""

import asyncio
from dataclasses import dataclass
from enum import Enum
from typing import Any, AsyncIterator, Awaitable, Callable, Iterable, Optional, Union

from loguru import logger

from bcmirror.core.errors import NotFoundError, TransportError
from bcmirror.core.ports.api_clients import IBrightcoveReader
from bcmirror.core.value_objects import ReconcileOutcome
from bcmirror.services.reconciler import Reconciler


class SyncIssue(Enum):
    """Ressource d'une liste d'IDs qui n'a pas ete reconciliee."""

    SKIPPED = "skipped"  # introuvable chez Brightcove
    FAILED = "failed"  # erreur de transport


ProgressCallback = Callable[[str, Union[ReconcileOutcome, SyncIssue]], None]


@dataclass
class SyncStats:
    """Statistiques d'une synchronisation."""

    total: int = 0
    created: int = 0
    updated: int = 0
    unchanged: int = 0
    skipped: int = 0
    failed: int = 0

    def record(self, outcome: ReconcileOutcome) -> None:
        """Comptabilise le resultat d'une reconciliation."""
        if outcome is ReconcileOutcome.CREATED:
            self.created += 1
        elif outcome is ReconcileOutcome.UPDATED:
            self.updated += 1
        else:
            self.unchanged += 1


class SyncService:
    """
    Pilote de synchronisation pour les players, videos et playlists.

    Chaque type de ressource est reconcilie par son propre Reconciler.
    Les ressources sont traitees une par une : deux reconciliations d'un
    meme ID distant ne sont jamais concurrentes.
    """

    def __init__(
        self,
        reader: IBrightcoveReader,
        reconcilers: dict[str, Reconciler],
    ) -> None:
        """
        Initialise le service de synchronisation.

        Args:
            reader: Lecteur des ressources Brightcove
            reconcilers: Reconciliateurs indexes par type (player, video, playlist)
        """
        self._reader = reader
        self._reconcilers = reconcilers

    @property
    def kinds(self) -> list[str]:
        """Types de ressources synchronisables."""
        return list(self._reconcilers)

    def _reconciler(self, kind: str) -> Reconciler:
        try:
            return self._reconcilers[kind]
        except KeyError:
            raise ValueError(f"Type de ressource inconnu: {kind}") from None

    def _fetcher(self, kind: str) -> Callable[[str], Awaitable[Any]]:
        return {
            "player": self._reader.fetch_player,
            "video": self._reader.fetch_video,
            "playlist": self._reader.fetch_playlist,
        }[kind]

    def _iterator(self, kind: str) -> AsyncIterator[Any]:
        return {
            "player": self._reader.iter_players,
            "video": self._reader.iter_videos,
            "playlist": self._reader.iter_playlists,
        }[kind]()

    async def sync_all(
        self,
        kind: str,
        api_client: Optional[str],
        on_progress: Optional[ProgressCallback] = None,
    ) -> SyncStats:
        """
        Synchronise toutes les ressources d'un type depuis le listing pagine.

        Args:
            kind: Type de ressource
            api_client: Client API affecte aux nouveaux enregistrements
            on_progress: Callback appele apres chaque ressource

        Returns:
            Statistiques de synchronisation

        Raises:
            TransportError: Si une page du listing ne peut pas etre recuperee
        """
        reconciler = self._reconciler(kind)
        stats = SyncStats()

        async for remote in self._iterator(kind):
            stats.total += 1
            outcome = reconciler.reconcile(remote, api_client)
            stats.record(outcome)
            if on_progress:
                on_progress(reconciler.kind.remote_id(remote), outcome)

        logger.info(f"Synchronisation {kind} terminee", **vars(stats))
        return stats

    async def sync_one(
        self,
        kind: str,
        remote_id: str,
        api_client: Optional[str],
    ) -> Optional[ReconcileOutcome]:
        """
        Recupere une ressource par son ID puis la reconcilie.

        Returns:
            Le resultat de la reconciliation, ou None si la ressource n'existe pas

        Raises:
            TransportError: Si la ressource ne peut pas etre recuperee
        """
        reconciler = self._reconciler(kind)
        try:
            remote = await self._fetcher(kind)(remote_id)
        except NotFoundError:
            logger.warning(f"{kind} {remote_id} introuvable chez Brightcove")
            return None
        return reconciler.reconcile(remote, api_client)

    async def sync_ids(
        self,
        kind: str,
        remote_ids: Iterable[str],
        api_client: Optional[str],
        rate_limit_seconds: float = 0.0,
        on_progress: Optional[ProgressCallback] = None,
    ) -> SyncStats:
        """
        Synchronise une liste d'IDs, en continuant apres les echecs de transport.

        Args:
            kind: Type de ressource
            remote_ids: IDs Brightcove a synchroniser
            api_client: Client API affecte aux nouveaux enregistrements
            rate_limit_seconds: Delai entre les appels API
            on_progress: Callback appele apres chaque ressource

        Returns:
            Statistiques de synchronisation
        """
        stats = SyncStats()

        for i, remote_id in enumerate(remote_ids):
            if i > 0 and rate_limit_seconds > 0:
                await asyncio.sleep(rate_limit_seconds)

            stats.total += 1
            try:
                outcome = await self.sync_one(kind, remote_id, api_client)
            except TransportError as e:
                logger.error(f"Echec de recuperation de {kind} {remote_id}: {e}")
                stats.failed += 1
                result: Union[ReconcileOutcome, SyncIssue] = SyncIssue.FAILED
            else:
                if outcome is None:
                    stats.skipped += 1
                    result = SyncIssue.SKIPPED
                else:
                    stats.record(outcome)
                    result = outcome

            if on_progress:
                on_progress(remote_id, result)

        return stats

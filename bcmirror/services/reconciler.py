"""
Service de reconciliation distant -> local.

Aligne un enregistrement local sur une ressource Brightcove deja recuperee :
- creation a la premiere synchronisation (client API obligatoire)
- aucune ecriture si la ressource distante n'est pas plus recente
- sinon diff champ par champ, et sauvegarde uniquement si un champ change

La routine est generique : le comportement propre a chaque type de
ressource est fourni par un ResourceKind (voir resource_kinds.py).
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Generic, Optional, TypeVar

from loguru import logger

from bcmirror.core.errors import IntegrityError, MissingOwnerError
from bcmirror.core.ports.repositories import IRecordRepository
from bcmirror.core.value_objects import ReconcileOutcome

R = TypeVar("R")
E = TypeVar("E")


def _no_nested(remote: Any) -> Optional[dict[str, Any]]:
    return None


@dataclass(frozen=True)
class ResourceKind(Generic[R, E]):
    """
    Capacites d'un type de ressource pour la reconciliation.

    Attributs:
        name: Nom du type (player, video, playlist)
        remote_id_field: Champ de l'entite locale contenant l'ID Brightcove
        entity_factory: Constructeur de l'entite locale (kwargs)
        remote_id: Extrait l'ID Brightcove de la ressource distante
        updated_at: Extrait la date de mise a jour distante
        created_at: Extrait la date de creation distante
        primary_values: Valeurs des champs primaires, par nom de champ local
        secondary_fields: Champs locaux issus du sous-objet optionnel
        nested_values: Valeurs du sous-objet, ou None s'il est absent
    """

    name: str
    remote_id_field: str
    entity_factory: Callable[..., E]
    remote_id: Callable[[R], str]
    updated_at: Callable[[R], datetime]
    created_at: Callable[[R], Optional[datetime]]
    primary_values: Callable[[R], dict[str, Any]]
    secondary_fields: tuple[str, ...] = ()
    nested_values: Callable[[R], Optional[dict[str, Any]]] = _no_nested


class Reconciler(Generic[R, E]):
    """
    Reconciliateur d'un type de ressource.

    Effectue au plus une lecture et une ecriture dans le repository par
    appel, et aucun appel reseau. Les appels concurrents pour un meme ID
    distant doivent etre serialises par l'appelant.
    """

    def __init__(
        self,
        kind: ResourceKind[R, E],
        repository: IRecordRepository[E],
    ) -> None:
        """
        Initialise le reconciliateur.

        Args:
            kind: Capacites du type de ressource
            repository: Stockage des enregistrements locaux
        """
        self._kind = kind
        self._repository = repository

    @property
    def kind(self) -> ResourceKind[R, E]:
        """Type de ressource reconcilie."""
        return self._kind

    def reconcile(
        self,
        remote: R,
        owner_reference: Optional[str] = None,
    ) -> ReconcileOutcome:
        """
        Cree ou met a jour l'enregistrement local d'une ressource distante.

        Args:
            remote: Ressource distante entierement recuperee
            owner_reference: Client API proprietaire, requis seulement a la creation

        Returns:
            CREATED, UPDATED ou UNCHANGED

        Raises:
            MissingOwnerError: Creation sans client API
            IntegrityError: Plusieurs enregistrements locaux pour cet ID
            PersistenceError: Echec de la sauvegarde (propagee telle quelle)
        """
        remote_id = self._kind.remote_id(remote)
        matches = self._repository.find_by_remote_id(remote_id)

        if len(matches) > 1:
            raise IntegrityError(self._kind.name, remote_id, len(matches))

        if not matches:
            return self._create(remote, remote_id, owner_reference)
        return self._update(matches[0], remote, remote_id)

    def _create(
        self,
        remote: R,
        remote_id: str,
        owner_reference: Optional[str],
    ) -> ReconcileOutcome:
        """Construit l'enregistrement complet puis l'ecrit en une fois."""
        if owner_reference is None:
            raise MissingOwnerError(self._kind.name, remote_id)

        values = self._kind.primary_values(remote)
        values.update(self._secondary_values(remote))
        values[self._kind.remote_id_field] = remote_id
        values["api_client"] = owner_reference
        values["created_at"] = self._kind.created_at(remote)
        values["changed_at"] = self._kind.updated_at(remote)

        self._repository.save(self._kind.entity_factory(**values))
        logger.info(f"{self._kind.name} {remote_id} cree", api_client=owner_reference)
        return ReconcileOutcome.CREATED

    def _update(self, record: E, remote: R, remote_id: str) -> ReconcileOutcome:
        """Diff champ par champ, uniquement si la ressource distante est plus recente."""
        updated_at = self._kind.updated_at(remote)
        changed_at = getattr(record, "changed_at")

        if changed_at is not None and changed_at >= updated_at:
            logger.debug(f"{self._kind.name} {remote_id} a jour")
            return ReconcileOutcome.UNCHANGED

        values = self._kind.primary_values(remote)
        values.update(self._secondary_values(remote))

        changes = {
            name: value
            for name, value in values.items()
            if getattr(record, name) != value
        }
        if not changes:
            logger.debug(f"{self._kind.name} {remote_id} sans difference")
            return ReconcileOutcome.UNCHANGED

        for name, value in changes.items():
            setattr(record, name, value)
        setattr(record, "changed_at", updated_at)

        self._repository.save(record)
        logger.info(
            f"{self._kind.name} {remote_id} mis a jour",
            fields=sorted(changes),
        )
        return ReconcileOutcome.UPDATED

    def _secondary_values(self, remote: R) -> dict[str, Any]:
        """
        Valeurs des champs secondaires, toutes a None sans sous-objet.

        Un sous-objet dont toutes les valeurs sont None est traite comme absent.
        """
        nested = self._kind.nested_values(remote)
        if not nested or all(value is None for value in nested.values()):
            return dict.fromkeys(self._kind.secondary_fields)
        return {name: nested.get(name) for name in self._kind.secondary_fields}

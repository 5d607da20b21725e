"""
Base commune des repositories SQLModel.

Factorise les requetes partagees par les trois types d'enregistrements
(recherche par ID Brightcove, listing par client API, sauvegarde).
Chaque sous-classe fournit la conversion modele <-> entite.
"""

from abc import abstractmethod
from datetime import datetime, timezone
from typing import Any, Optional, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from bcmirror.core.errors import PersistenceError
from bcmirror.core.ports.repositories import IRecordRepository

E = TypeVar("E")


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Rattache UTC a un horodatage relu sans fuseau (cas de SQLite)."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class SQLModelRecordRepository(IRecordRepository[E]):
    """
    Repository SQLModel generique.

    Attributes:
        model_class: Classe du modele SQLModel
        remote_id_column: Nom de la colonne portant l'ID Brightcove
    """

    model_class: Any
    remote_id_column: str

    def __init__(self, session: Session) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session

    @abstractmethod
    def _to_entity(self, model: Any) -> E:
        """Convertit un modele DB en entite domaine."""
        ...

    @abstractmethod
    def _apply(self, entity: E, model: Any) -> None:
        """Copie les champs de l'entite sur le modele (sauf id et api_client)."""
        ...

    def get_by_id(self, record_id: int) -> Optional[E]:
        """Recupere un enregistrement par son ID interne."""
        model = self._session.get(self.model_class, record_id)
        if model:
            return self._to_entity(model)
        return None

    def find_by_remote_id(self, remote_id: str) -> list[E]:
        """Recupere tous les enregistrements joints a un ID Brightcove."""
        column = getattr(self.model_class, self.remote_id_column)
        statement = (
            select(self.model_class)
            .where(column == remote_id)
            .order_by(self.model_class.id)
        )
        models = self._session.exec(statement).all()
        return [self._to_entity(model) for model in models]

    def get_by_remote_id(self, remote_id: str) -> Optional[E]:
        """Recupere le premier enregistrement joint a un ID Brightcove."""
        matches = self.find_by_remote_id(remote_id)
        return matches[0] if matches else None

    def list_by_api_client(self, api_client: str) -> list[E]:
        """Liste les enregistrements d'un client API, tries par nom."""
        statement = (
            select(self.model_class)
            .where(self.model_class.api_client == api_client)
            .order_by(self.model_class.name, self.model_class.id)
        )
        models = self._session.exec(statement).all()
        return [self._to_entity(model) for model in models]

    def save(self, record: E) -> E:
        """
        Sauvegarde un enregistrement (insertion ou mise a jour).

        Le client API n'est ecrit qu'a l'insertion.

        Raises:
            PersistenceError: Si la transaction echoue (elle est annulee)
        """
        record_id = getattr(record, "id")
        try:
            existing = None
            if record_id is not None:
                existing = self._session.get(self.model_class, record_id)

            model = existing if existing is not None else self.model_class()
            if existing is None:
                model.api_client = getattr(record, "api_client")
            self._apply(record, model)

            self._session.add(model)
            self._session.commit()
            self._session.refresh(model)
        except SQLAlchemyError as e:
            self._session.rollback()
            raise PersistenceError(
                f"Echec de sauvegarde dans {self.model_class.__tablename__}: {e}"
            ) from e
        return self._to_entity(model)

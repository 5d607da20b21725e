"""
Implementation SQLModel du repository Player.

Implemente l'interface IPlayerRepository pour la persistance des players
dans la base de donnees via SQLModel.
"""

from bcmirror.core.entities.player import BrightcovePlayer
from bcmirror.core.ports.repositories import IPlayerRepository
from bcmirror.infrastructure.persistence.models import PlayerModel
from bcmirror.infrastructure.persistence.repositories.base import (
    SQLModelRecordRepository,
    as_utc,
)


class SQLModelPlayerRepository(
    SQLModelRecordRepository[BrightcovePlayer], IPlayerRepository
):
    """
    Repository SQLModel pour les players.

    Conversion bidirectionnelle entre l'entite BrightcovePlayer (domaine)
    et PlayerModel (persistance).
    """

    model_class = PlayerModel
    remote_id_column = "player_id"

    def _to_entity(self, model: PlayerModel) -> BrightcovePlayer:
        return BrightcovePlayer(
            id=model.id,
            player_id=model.player_id,
            api_client=model.api_client,
            name=model.name,
            playlist=model.playlist,
            version=model.version,
            adjusted=model.adjusted,
            height=model.height,
            width=model.width,
            units=model.units,
            responsive=model.responsive,
            created_at=as_utc(model.created_at),
            changed_at=as_utc(model.changed_at),
        )

    def _apply(self, entity: BrightcovePlayer, model: PlayerModel) -> None:
        model.player_id = entity.player_id
        model.name = entity.name
        model.playlist = entity.playlist
        model.version = entity.version
        model.adjusted = entity.adjusted
        model.height = entity.height
        model.width = entity.width
        model.units = entity.units
        model.responsive = entity.responsive
        model.created_at = entity.created_at
        model.changed_at = entity.changed_at

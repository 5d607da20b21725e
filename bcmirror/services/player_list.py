"""
Service de listage des players pour les listes de selection.

Projette les players d'un client API en un dictionnaire ordonne
cle -> nom, utilisable pour alimenter un choix de player.
"""

from typing import Optional, Union

from bcmirror.core.entities import DEFAULT_PLAYER
from bcmirror.core.ports.repositories import IPlayerRepository

DEFAULT_PLAYER_LABEL = "Brightcove Default Player"
NO_PLAYER_KEY = "_none"
NO_PLAYER_LABEL = "Use API Client's default player"


class PlayerListService:
    """
    Liste les players d'un client API.

    Les cles sont soit les IDs Brightcove (avec l'entree du player par defaut
    en tete), soit les IDs internes (sans entree par defaut, car elle ne
    correspond a aucun enregistrement local).
    """

    def __init__(self, player_repo: IPlayerRepository) -> None:
        """
        Initialise le service.

        Args:
            player_repo: Repository des players
        """
        self._player_repo = player_repo

    def list(
        self,
        api_client: Optional[str],
        use_entity_id: bool = False,
    ) -> dict[Union[int, str], str]:
        """
        Retourne les noms des players d'un client API.

        Sans client API, le repository n'est pas interroge : seule l'entree
        par defaut est retournee (ou rien si use_entity_id).

        Args:
            api_client: Client API dont on veut les players
            use_entity_id: Cles = IDs internes plutot qu'IDs Brightcove

        Returns:
            Dictionnaire ordonne cle -> nom du player
        """
        players: dict[Union[int, str], str] = {}
        if not use_entity_id:
            players[DEFAULT_PLAYER] = DEFAULT_PLAYER_LABEL

        if not api_client:
            return players

        for player in self._player_repo.list_by_api_client(api_client):
            key = player.id if use_entity_id else player.player_id
            players[key] = player.name
        return players

    def options(self, api_client: Optional[str]) -> dict[Union[int, str], str]:
        """
        Options de choix du player d'une video ou d'une playlist.

        L'option "_none" delegue au player par defaut du client API.
        """
        return {NO_PLAYER_KEY: NO_PLAYER_LABEL, **self.list(api_client, use_entity_id=True)}

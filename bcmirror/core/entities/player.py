"""
Entite player Brightcove.

Miroir local d'un player de la Player Management API.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

# Cle du player par defaut d'un client API (non stocke localement)
DEFAULT_PLAYER = "default"


@dataclass
class BrightcovePlayer:
    """
    Miroir local d'un player Brightcove.

    Les champs de configuration studio (adjusted, height, width, units,
    responsive) sont soit tous renseignes, soit tous a None quand le player
    distant n'a pas de configuration studio.

    Attributs :
        id : Identifiant interne (base de donnees)
        player_id : ID Brightcove du player (cle de jointure)
        api_client : Client API proprietaire, fixe a la creation
        name : Nom du player
        playlist : Player de playlist ou de video unique
        version : Version du template
        adjusted : Dimensions ajustees pour la playlist
        height : Hauteur du player
        width : Largeur du player
        units : Unite des dimensions
        responsive : Player responsive
        created_at : Date de creation chez Brightcove
        changed_at : Date de la derniere ecriture locale
    """

    id: Optional[int] = None
    player_id: str = ""
    api_client: Optional[str] = None
    name: str = ""
    playlist: bool = False
    version: Optional[str] = None
    adjusted: Optional[bool] = None
    height: Optional[float] = None
    width: Optional[float] = None
    units: Optional[str] = None
    responsive: Optional[bool] = None
    created_at: Optional[datetime] = None
    changed_at: Optional[datetime] = None

"""
Entites video et playlist Brightcove.

Miroirs locaux des ressources de la CMS API. Les videos portent en plus
un etat local (player choisi) que la synchronisation ne modifie jamais.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import IntEnum
from typing import Optional

STATE_ACTIVE = "ACTIVE"
STATE_INACTIVE = "INACTIVE"

ECONOMICS_TYPE_FREE = "FREE"
ECONOMICS_TYPE_AD_SUPPORTED = "AD_SUPPORTED"


class VideoStatus(IntEnum):
    """Statut de publication locale d'une video."""

    NOT_PUBLISHED = 0
    PUBLISHED = 1

    @classmethod
    def from_state(cls, state: Optional[str]) -> "VideoStatus":
        """Une video ACTIVE est publiee, toute autre est depubliee."""
        return cls.PUBLISHED if state == STATE_ACTIVE else cls.NOT_PUBLISHED


@dataclass
class BrightcoveVideo:
    """
    Miroir local d'une video Brightcove.

    Attributs :
        id : Identifiant interne
        video_id : ID Brightcove de la video (cle de jointure)
        api_client : Client API proprietaire, fixe a la creation
        player : ID interne du player choisi localement (jamais synchronise)
        name : Titre
        description : Description courte
        long_description : Description longue
        reference_id : ID de reference
        state : Etat Brightcove (ACTIVE/INACTIVE)
        status : Statut de publication derive de l'etat
        duration : Duree en millisecondes
        economics : Type economique
        tags : Tags
        related_link_url : URL du lien associe
        related_link_title : Titre du lien associe
        poster_url : URL du poster
        thumbnail_url : URL de la vignette
        custom_fields : Champs personnalises
        schedule_starts_at : Debut de diffusion
        schedule_ends_at : Fin de diffusion
        created_at : Date de creation chez Brightcove
        changed_at : Date de la derniere ecriture locale
    """

    id: Optional[int] = None
    video_id: str = ""
    api_client: Optional[str] = None
    player: Optional[int] = None
    name: str = ""
    description: Optional[str] = None
    long_description: Optional[str] = None
    reference_id: Optional[str] = None
    state: Optional[str] = None
    status: VideoStatus = VideoStatus.NOT_PUBLISHED
    duration: Optional[int] = None
    economics: Optional[str] = None
    tags: tuple[str, ...] = ()
    related_link_url: Optional[str] = None
    related_link_title: Optional[str] = None
    poster_url: Optional[str] = None
    thumbnail_url: Optional[str] = None
    custom_fields: dict[str, str] = field(default_factory=dict)
    schedule_starts_at: Optional[datetime] = None
    schedule_ends_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    changed_at: Optional[datetime] = None


@dataclass
class BrightcovePlaylist:
    """
    Miroir local d'une playlist Brightcove.

    Attributs :
        id : Identifiant interne
        playlist_id : ID Brightcove de la playlist (cle de jointure)
        api_client : Client API proprietaire, fixe a la creation
        player : ID interne du player choisi localement (jamais synchronise)
        name : Nom
        description : Description
        reference_id : ID de reference
        playlist_type : Type (EXPLICIT ou smart)
        favorite : Playlist favorite
        search : Requete des playlists smart
        video_ids : IDs Brightcove des videos (playlists manuelles)
        created_at : Date de creation chez Brightcove
        changed_at : Date de la derniere ecriture locale
    """

    id: Optional[int] = None
    playlist_id: str = ""
    api_client: Optional[str] = None
    player: Optional[int] = None
    name: str = ""
    description: Optional[str] = None
    reference_id: Optional[str] = None
    playlist_type: Optional[str] = None
    favorite: bool = False
    search: Optional[str] = None
    video_ids: tuple[str, ...] = ()
    created_at: Optional[datetime] = None
    changed_at: Optional[datetime] = None

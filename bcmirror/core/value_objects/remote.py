"""
Objets valeur pour les ressources distantes Brightcove.

Objets valeur immutables representant une ressource telle que retournee par
l'API Brightcove, deja entierement recuperee. Ils sont construits par
l'adaptateur HTTP et consommes par le reconciliateur.

Les horodatages sont des datetime UTC avec fuseau.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class StudioPlayerConfig:
    """
    Configuration "studio" d'un player (sous-objet optionnel).

    Attributs:
        adjusted: Dimensions ajustees pour une playlist
        height: Hauteur du player
        width: Largeur du player
        units: Unite de hauteur/largeur (ex: "px")
        responsive: Player responsive ou fixe
    """

    adjusted: Optional[bool] = None
    height: Optional[float] = None
    width: Optional[float] = None
    units: Optional[str] = None
    responsive: Optional[bool] = None


@dataclass(frozen=True)
class RemotePlayer:
    """
    Player Brightcove (Player Management API).

    Attributs:
        id: ID Brightcove du player
        name: Nom du player
        updated_at: Date de mise a jour de la branche master
        created_at: Date de creation
        playlist: Player de playlist (True) ou de video unique (False)
        version: Version du template du player
        studio: Configuration studio, absente si non definie
    """

    id: str
    name: str
    updated_at: datetime
    created_at: Optional[datetime] = None
    playlist: bool = False
    version: Optional[str] = None
    studio: Optional[StudioPlayerConfig] = None


@dataclass(frozen=True)
class VideoSchedule:
    """Fenetre de diffusion d'une video (sous-objet optionnel)."""

    starts_at: Optional[datetime] = None
    ends_at: Optional[datetime] = None


@dataclass(frozen=True)
class RemoteVideo:
    """
    Video Brightcove (CMS API).

    Attributs:
        id: ID Brightcove de la video
        name: Titre de la video
        updated_at: Date de derniere modification
        created_at: Date de creation
        description: Description courte
        long_description: Description longue
        reference_id: ID de reference libre
        state: Etat ("ACTIVE" ou "INACTIVE")
        duration: Duree en millisecondes
        economics: Type economique ("FREE" ou "AD_SUPPORTED")
        tags: Tags de la video
        related_link_url: URL du lien associe
        related_link_title: Texte du lien associe
        poster_url: URL de l'image poster
        thumbnail_url: URL de la vignette
        custom_fields: Champs personnalises indexes par ID de champ
        schedule: Fenetre de diffusion, absente si non planifiee
    """

    id: str
    name: str
    updated_at: datetime
    created_at: Optional[datetime] = None
    description: Optional[str] = None
    long_description: Optional[str] = None
    reference_id: Optional[str] = None
    state: Optional[str] = None
    duration: Optional[int] = None
    economics: Optional[str] = None
    tags: tuple[str, ...] = ()
    related_link_url: Optional[str] = None
    related_link_title: Optional[str] = None
    poster_url: Optional[str] = None
    thumbnail_url: Optional[str] = None
    custom_fields: dict[str, str] = field(default_factory=dict, hash=False)
    schedule: Optional[VideoSchedule] = None


@dataclass(frozen=True)
class RemotePlaylist:
    """
    Playlist Brightcove (CMS API).

    Les playlists "smart" portent une requete de recherche, les playlists
    manuelles (EXPLICIT) une liste ordonnee d'IDs de videos.
    """

    id: str
    name: str
    updated_at: datetime
    created_at: Optional[datetime] = None
    description: Optional[str] = None
    reference_id: Optional[str] = None
    playlist_type: Optional[str] = None
    favorite: bool = False
    search: Optional[str] = None
    video_ids: tuple[str, ...] = ()

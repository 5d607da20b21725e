"""
Source media "Brightcove Video".

Expose les metadonnees d'une video miroir pour un media reutilisable et
valide le champ source qui la reference.
"""

from typing import Any, Optional

from bcmirror.core.entities import BrightcoveVideo

SOURCE_TARGET_TYPE = "brightcove_video"
DEFAULT_THUMBNAIL_FILENAME = "no-thumbnail.png"
CONSTRAINT_MESSAGE = "Inappropriate field settings."

METADATA_ATTRIBUTES: dict[str, str] = {
    "name": "Name",
    "api_client": "API Client",
    "player": "Player",
    "video_id": "Video ID",
    "duration": "Video Duration",
    "description": "Short description",
    "long_description": "Long description",
    "poster": "Video Still",
    "thumbnail": "Thumbnail",
    "reference_id": "Reference ID",
    "state": "State",
    "tags": "Tags",
    "custom_fields": "Custom fields",
    "starts_at": "Starts at",
    "ends_at": "Ends at",
    "economics": "Economics",
}

# Attributs dont le nom differe du champ de l'entite
_FIELD_ALIASES = {
    "poster": "poster_url",
    "thumbnail": "thumbnail_url",
    "starts_at": "schedule_starts_at",
    "ends_at": "schedule_ends_at",
}


class VideoMediaSource:
    """Source media adossee aux videos Brightcove miroirs."""

    def __init__(self, icon_base_uri: str = "public://media-icons/generic") -> None:
        """
        Args:
            icon_base_uri: Base des icones, pour la vignette par defaut
        """
        self._icon_base_uri = icon_base_uri.rstrip("/")

    @property
    def default_thumbnail_uri(self) -> str:
        """URI de la vignette utilisee quand la video n'en a pas."""
        return f"{self._icon_base_uri}/{DEFAULT_THUMBNAIL_FILENAME}"

    def get_metadata(self, video: Optional[BrightcoveVideo], attribute: str) -> Any:
        """
        Retourne une metadonnee de la video.

        Args:
            video: Video referencee par le media (None si le champ est vide)
            attribute: Nom de l'attribut ("thumbnail_uri" ou un de METADATA_ATTRIBUTES)

        Returns:
            La valeur, ou None si l'attribut est inconnu ou la video absente
        """
        if attribute == "thumbnail_uri":
            if video is not None and video.thumbnail_url:
                return video.thumbnail_url
            return self.default_thumbnail_uri

        if video is None or attribute not in METADATA_ATTRIBUTES:
            return None
        return getattr(video, _FIELD_ALIASES.get(attribute, attribute))

    @staticmethod
    def validate_source_field(target_type: Optional[str]) -> list[str]:
        """Le champ source doit referencer des videos Brightcove."""
        if target_type != SOURCE_TARGET_TYPE:
            return [CONSTRAINT_MESSAGE]
        return []

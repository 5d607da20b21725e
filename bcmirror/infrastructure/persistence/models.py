"""
Modeles SQLModel pour la base de donnees bcmirror.

Ces modeles representent les tables de la base de donnees. Ils sont
distincts des entites de domaine (dataclass dans core/entities/) selon
l'architecture hexagonale.

Tables:
- brightcove_player: Players miroirs
- brightcove_video: Videos miroirs
- brightcove_playlist: Playlists miroirs

Les colonnes d'ID Brightcove sont indexees mais pas uniques : l'unicite est
maintenue par la reconciliation, et un doublon doit rester detectable.

Les champs JSON (*_json) stockent des listes ou dictionnaires serialises.
Les horodatages sont ecrits en UTC. SQLite ne conserve pas le fuseau : les
repositories le restaurent a la lecture.
"""

from __future__ import annotations

import json
from datetime import datetime

from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel


def utc_field(index: bool = False):
    """Colonne horodatage avec fuseau, toujours ecrite en UTC."""
    return Field(default=None, index=index, sa_type=DateTime(timezone=True))


class PlayerModel(SQLModel, table=True):
    """Modele representant un player Brightcove."""

    __tablename__ = "brightcove_player"

    id: int | None = Field(default=None, primary_key=True)
    player_id: str = Field(index=True)
    api_client: str = Field(index=True)
    name: str = Field(default="", index=True)
    playlist: bool = Field(default=False)
    version: str | None = None
    adjusted: bool | None = None
    height: float | None = None
    width: float | None = None
    units: str | None = None  # ex: "px"
    responsive: bool | None = None
    created_at: datetime | None = utc_field()
    changed_at: datetime | None = utc_field()


class VideoModel(SQLModel, table=True):
    """
    Modele representant une video Brightcove.

    status : 1 = publiee, 0 = depubliee (derive de state).
    """

    __tablename__ = "brightcove_video"

    id: int | None = Field(default=None, primary_key=True)
    video_id: str = Field(index=True)
    api_client: str = Field(index=True)
    player: int | None = Field(default=None, foreign_key="brightcove_player.id")
    name: str = Field(default="", index=True)
    description: str | None = None
    long_description: str | None = None
    reference_id: str | None = Field(default=None, index=True)
    state: str | None = None
    status: int = Field(default=0, index=True)
    duration: int | None = None  # millisecondes
    economics: str | None = None
    tags_json: str | None = None  # JSON: ["sport", "live"]
    related_link_url: str | None = None
    related_link_title: str | None = None
    poster_url: str | None = None
    thumbnail_url: str | None = None
    custom_fields_json: str | None = None  # JSON: {"field_id": "value"}
    schedule_starts_at: datetime | None = utc_field()
    schedule_ends_at: datetime | None = utc_field()
    created_at: datetime | None = utc_field(index=True)
    changed_at: datetime | None = utc_field()

    @property
    def tags(self) -> list[str]:
        """Retourne les tags deserialises."""
        if self.tags_json:
            return json.loads(self.tags_json)
        return []

    @tags.setter
    def tags(self, value: list[str]) -> None:
        """Serialise les tags en JSON."""
        self.tags_json = json.dumps(value) if value else None

    @property
    def custom_fields(self) -> dict[str, str]:
        """Retourne les champs personnalises deserialises."""
        if self.custom_fields_json:
            return json.loads(self.custom_fields_json)
        return {}

    @custom_fields.setter
    def custom_fields(self, value: dict[str, str]) -> None:
        """Serialise les champs personnalises en JSON."""
        self.custom_fields_json = json.dumps(value, sort_keys=True) if value else None


class PlaylistModel(SQLModel, table=True):
    """Modele representant une playlist Brightcove."""

    __tablename__ = "brightcove_playlist"

    id: int | None = Field(default=None, primary_key=True)
    playlist_id: str = Field(index=True)
    api_client: str = Field(index=True)
    player: int | None = Field(default=None, foreign_key="brightcove_player.id")
    name: str = Field(default="", index=True)
    description: str | None = None
    reference_id: str | None = Field(default=None, index=True)
    playlist_type: str | None = None  # EXPLICIT, ACTIVATED_NEWEST_TO_OLDEST...
    favorite: bool = Field(default=False)
    search: str | None = None
    video_ids_json: str | None = None  # JSON: ["123", "456"]
    created_at: datetime | None = utc_field()
    changed_at: datetime | None = utc_field()

    @property
    def video_ids(self) -> list[str]:
        """Retourne les IDs de videos deserialises."""
        if self.video_ids_json:
            return json.loads(self.video_ids_json)
        return []

    @video_ids.setter
    def video_ids(self, value: list[str]) -> None:
        """Serialise les IDs de videos en JSON."""
        self.video_ids_json = json.dumps(value) if value else None

"""
Module de persistance SQL pour bcmirror.

Ce module fournit l'infrastructure de stockage utilisant SQLModel (SQLAlchemy).
Il contient :

- database.py : Configuration de l'engine, session factory, initialisation
- models.py : Modeles SQLModel representant les tables de la base de donnees
- repositories/ : Implementations des ports repository

Les modeles ici sont des adapters de persistance, distincts des entites de
domaine (dataclass dans core/entities/). La conversion entre les deux se fait
dans les repositories.

Usage:
    from bcmirror.infrastructure.persistence import init_db, get_session

    init_db()  # Cree les tables si necessaire
    session = next(get_session())
"""

from bcmirror.infrastructure.persistence.database import (
    create_db_engine,
    get_engine,
    get_session,
    init_db,
)
from bcmirror.infrastructure.persistence.models import (
    PlayerModel,
    PlaylistModel,
    VideoModel,
)

__all__ = [
    "create_db_engine",
    "get_engine",
    "get_session",
    "init_db",
    "PlayerModel",
    "VideoModel",
    "PlaylistModel",
]

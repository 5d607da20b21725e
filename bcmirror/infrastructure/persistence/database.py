"""
Acces a la base de donnees du miroir.

L'engine est cree une seule fois a partir de BCMIRROR_DATABASE_URL
(defaut: sqlite:///bcmirror.db) puis partage par toutes les sessions.
Une URL SQLite en memoire utilise un StaticPool pour que toutes les
sessions voient les memes tables.
"""

from collections.abc import Generator
from pathlib import Path
from typing import Optional

from loguru import logger
from sqlalchemy import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

SQLITE_FILE_PREFIX = "sqlite:///"

_engine: Optional[Engine] = None


def _is_memory_url(db_url: str) -> bool:
    return db_url in ("sqlite://", f"{SQLITE_FILE_PREFIX}:memory:")


def create_db_engine(db_url: str) -> Engine:
    """
    Construit un engine pour l'URL donnee.

    Pour un fichier SQLite, le repertoire parent est cree au besoin.
    """
    if not db_url.startswith("sqlite"):
        return create_engine(db_url, echo=False)

    kwargs: dict = {"connect_args": {"check_same_thread": False}}
    if _is_memory_url(db_url):
        kwargs["poolclass"] = StaticPool
    elif db_url.startswith(SQLITE_FILE_PREFIX):
        Path(db_url[len(SQLITE_FILE_PREFIX):]).parent.mkdir(parents=True, exist_ok=True)

    return create_engine(db_url, echo=False, **kwargs)


def get_engine(database_url: Optional[str] = None) -> Engine:
    """Retourne l'engine partage, cree au premier appel."""
    global _engine
    if _engine is None:
        if database_url is None:
            from bcmirror.config import Settings
            database_url = Settings().database_url
        _engine = create_db_engine(database_url)
    return _engine


def get_session() -> Generator[Session, None, None]:
    """
    Generateur de session SQLModel.

    Utilisation : session = next(get_session())
    """
    with Session(get_engine()) as session:
        yield session


def init_db(database_url: Optional[str] = None) -> Engine:
    """
    Cree les tables manquantes et retourne l'engine.

    Doit etre appelee une fois au demarrage de l'application.
    """
    # Import local pour enregistrer les tables dans SQLModel.metadata
    from bcmirror.infrastructure.persistence import models  # noqa: F401

    engine = get_engine(database_url)
    SQLModel.metadata.create_all(engine)
    logger.debug("Tables du miroir initialisees", url=str(engine.url))
    return engine

"""
Fixtures pytest partagees pour les tests bcmirror.

Ce module contient les fixtures communes utilisees dans les tests:
- Engine et session SQLModel en memoire
- Repositories SQLModel branches sur la session de test
- Settings de test avec chemins temporaires
"""

from pathlib import Path
from typing import Iterator

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from bcmirror.config import Settings
from bcmirror.infrastructure.persistence import models  # noqa: F401
from bcmirror.infrastructure.persistence.repositories import (
    SQLModelPlayerRepository,
    SQLModelPlaylistRepository,
    SQLModelVideoRepository,
)


@pytest.fixture
def engine():
    """Engine SQLite en memoire partage par toutes les connexions du test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine) -> Iterator[Session]:
    """Session SQLModel sur la base en memoire."""
    with Session(engine) as session:
        yield session


@pytest.fixture
def player_repo(session: Session) -> SQLModelPlayerRepository:
    return SQLModelPlayerRepository(session)


@pytest.fixture
def video_repo(session: Session) -> SQLModelVideoRepository:
    return SQLModelVideoRepository(session)


@pytest.fixture
def playlist_repo(session: Session) -> SQLModelPlaylistRepository:
    return SQLModelPlaylistRepository(session)


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec des chemins temporaires.

    Le fichier .env est ignore pour isoler les tests de l'environnement.
    """
    return Settings(
        _env_file=None,
        database_url=f"sqlite:///{tmp_path / 'test.db'}",
        account_id="1234567890",
        client_id="client-id",
        client_secret="client-secret",
        api_client="test-client",
        cache_dir=tmp_path / "cache",
        log_file=tmp_path / "logs" / "test.log",
    )

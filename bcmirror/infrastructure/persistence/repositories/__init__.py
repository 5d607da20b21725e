"""
Implementations SQLModel des repositories.

Ce module contient les implementations concretes des interfaces repository
definies dans bcmirror/core/ports/repositories.py.

Chaque repository :
- Herite de SQLModelRecordRepository et de l'interface ABC du domaine
- Recoit une session SQLModel via injection de dependances
- Convertit entre entites de domaine (dataclass) et modeles DB (SQLModel)
"""

from bcmirror.infrastructure.persistence.repositories.player_repository import (
    SQLModelPlayerRepository,
)
from bcmirror.infrastructure.persistence.repositories.playlist_repository import (
    SQLModelPlaylistRepository,
)
from bcmirror.infrastructure.persistence.repositories.video_repository import (
    SQLModelVideoRepository,
)

__all__ = [
    "SQLModelPlayerRepository",
    "SQLModelVideoRepository",
    "SQLModelPlaylistRepository",
]

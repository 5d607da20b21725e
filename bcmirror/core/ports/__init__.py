"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Ports repository : Contrats de persistance des enregistrements miroirs
- IRecordRepository : Contrat commun (recherche par ID distant, sauvegarde)
- IPlayerRepository, IVideoRepository, IPlaylistRepository

Port client API : Contrat de lecture des ressources distantes
- IBrightcoveReader : Lecture unitaire et listings paginés
"""

from bcmirror.core.ports.api_clients import IBrightcoveReader
from bcmirror.core.ports.repositories import (
    IPlayerRepository,
    IPlaylistRepository,
    IRecordRepository,
    IVideoRepository,
)

__all__ = [
    # Repositories
    "IRecordRepository",
    "IPlayerRepository",
    "IVideoRepository",
    "IPlaylistRepository",
    # Client API
    "IBrightcoveReader",
]

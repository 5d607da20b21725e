"""
Service de recherche de videos par mots-cles.

Recherche les mots (ou portions de mots) dans le nom, les descriptions et
le titre du lien associe des videos. Le caractere '*' sert de joker.
"""

import re
from dataclasses import dataclass
from typing import Optional

from loguru import logger

from bcmirror.core.entities import VideoStatus
from bcmirror.core.ports.repositories import IVideoRepository

RESULT_LIMIT = 15

HELP_LINES = (
    "Video search looks for videos using words and partial words from the name "
    "and description fields. Example: straw would match videos straw, strawmar, "
    "and strawberry.",
    "You can use * as a wildcard within your keyword. Example: s*m would match "
    "videos that contains strawman, seem, and blossoming.",
)

_WILDCARDS = re.compile(r"\*+")


@dataclass
class VideoSearchResult:
    """Resultat de recherche : ID interne, ID Brightcove et titre."""

    id: int
    video_id: str
    title: str


def build_like_pattern(keywords: str) -> str:
    """
    Convertit des mots-cles en motif LIKE.

    Echappe les caracteres speciaux LIKE ('%', '_', '\\'), remplace chaque
    suite de '*' par '%' et encadre le tout par '%'.

    Args:
        keywords: Mots-cles saisis par l'utilisateur

    Returns:
        Motif LIKE a utiliser avec le caractere d'echappement '\\'
    """
    escaped = (
        keywords.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    )
    return f"%{_WILDCARDS.sub('%', escaped)}%"


class VideoSearchService:
    """
    Recherche de videos restreinte selon les droits de consultation.

    Un lecteur pouvant voir les videos publiees obtient les videos PUBLISHED,
    un lecteur pouvant voir les depubliees obtient les NOT_PUBLISHED.
    """

    def __init__(self, video_repo: IVideoRepository, limit: int = RESULT_LIMIT) -> None:
        """
        Initialise le service.

        Args:
            video_repo: Repository des videos
            limit: Nombre maximum de resultats
        """
        self._video_repo = video_repo
        self._limit = limit

    @staticmethod
    def is_executable(keywords: Optional[str]) -> bool:
        """Une recherche n'est executable qu'avec des mots-cles non vides."""
        return bool(keywords and keywords.strip())

    @staticmethod
    def help_text() -> tuple[str, ...]:
        """Lignes d'aide de la recherche."""
        return HELP_LINES

    def search(
        self,
        keywords: Optional[str],
        can_view_published: bool = True,
        can_view_unpublished: bool = False,
    ) -> list[VideoSearchResult]:
        """
        Execute la recherche.

        Args:
            keywords: Mots-cles (avec jokers '*')
            can_view_published: Le lecteur peut voir les videos publiees
            can_view_unpublished: Le lecteur peut voir les videos depubliees

        Returns:
            Resultats tries du plus recent au plus ancien
        """
        if not self.is_executable(keywords):
            return []

        statuses: list[int] = []
        if can_view_published:
            statuses.append(VideoStatus.PUBLISHED)
        if can_view_unpublished:
            statuses.append(VideoStatus.NOT_PUBLISHED)

        pattern = build_like_pattern(keywords.strip())
        logger.debug(f"Recherche de videos: {pattern}", statuses=statuses)

        videos = self._video_repo.search(pattern, statuses, limit=self._limit)
        return [
            VideoSearchResult(id=video.id, video_id=video.video_id, title=video.name)
            for video in videos
        ]

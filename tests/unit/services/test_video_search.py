"""
Tests unitaires pour la recherche de videos par mots-cles.
"""

from datetime import timedelta
from unittest.mock import MagicMock

import pytest

from bcmirror.core.entities import BrightcoveVideo, VideoStatus
from bcmirror.services.video_search import (
    HELP_LINES,
    VideoSearchResult,
    VideoSearchService,
    build_like_pattern,
)
from tests.fixtures.remote_resources import T0


class TestBuildLikePattern:
    @pytest.mark.parametrize(
        "keywords,expected",
        [
            ("straw", "%straw%"),
            ("s*m", "%s%m%"),
            ("s***m", "%s%m%"),
            ("100%", "%100\\%%"),
            ("snake_case", "%snake\\_case%"),
            ("back\\slash", "%back\\\\slash%"),
        ],
    )
    def test_pattern(self, keywords, expected):
        assert build_like_pattern(keywords) == expected


class TestSearchService:
    @pytest.fixture
    def mock_video_repo(self) -> MagicMock:
        repo = MagicMock()
        repo.search.return_value = [
            BrightcoveVideo(id=4, video_id="v-4", name="Strawberry"),
        ]
        return repo

    def test_empty_keywords_not_executed(self, mock_video_repo):
        service = VideoSearchService(mock_video_repo)

        assert service.search("   ") == []
        assert service.search(None) == []
        mock_video_repo.search.assert_not_called()

    def test_published_only_by_default(self, mock_video_repo):
        service = VideoSearchService(mock_video_repo)

        results = service.search("straw")

        assert results == [VideoSearchResult(id=4, video_id="v-4", title="Strawberry")]
        mock_video_repo.search.assert_called_once_with(
            "%straw%", [VideoStatus.PUBLISHED], limit=15
        )

    def test_both_statuses(self, mock_video_repo):
        service = VideoSearchService(mock_video_repo, limit=5)

        service.search("straw", can_view_published=True, can_view_unpublished=True)

        mock_video_repo.search.assert_called_once_with(
            "%straw%", [VideoStatus.PUBLISHED, VideoStatus.NOT_PUBLISHED], limit=5
        )

    def test_help_text(self):
        assert VideoSearchService.help_text() == HELP_LINES
        assert len(HELP_LINES) == 2


class TestSearchWithRepository:
    """Recherche de bout en bout sur SQLite en memoire."""

    @pytest.fixture
    def populated(self, video_repo):
        rows = [
            ("a", "Strawberry fields", None, VideoStatus.PUBLISHED, 0),
            ("b", "Seem", "a strawman argument", VideoStatus.PUBLISHED, 1),
            ("c", "Hidden straw", None, VideoStatus.NOT_PUBLISHED, 2),
            ("d", "Blossoming", None, VideoStatus.PUBLISHED, 3),
            ("e", "100% pure", None, VideoStatus.PUBLISHED, 4),
        ]
        for video_id, name, description, status, day in rows:
            video_repo.save(
                BrightcoveVideo(
                    video_id=video_id,
                    api_client="client-a",
                    name=name,
                    description=description,
                    status=status,
                    created_at=T0 + timedelta(days=day),
                )
            )
        return video_repo

    def test_matches_name_and_description(self, populated):
        results = VideoSearchService(populated).search("straw")

        assert [r.video_id for r in results] == ["b", "a"]

    def test_unpublished_visible_with_permission(self, populated):
        results = VideoSearchService(populated).search(
            "straw", can_view_published=False, can_view_unpublished=True
        )

        assert [r.video_id for r in results] == ["c"]

    def test_no_permission_returns_nothing(self, populated):
        results = VideoSearchService(populated).search(
            "straw", can_view_published=False, can_view_unpublished=False
        )

        assert results == []

    def test_wildcard(self, populated):
        results = VideoSearchService(populated).search("s*m")

        assert [r.video_id for r in results] == ["d", "b"]

    def test_percent_is_literal(self, populated):
        results = VideoSearchService(populated).search("0%")

        assert [r.video_id for r in results] == ["e"]

    def test_limit(self, populated):
        results = VideoSearchService(populated, limit=1).search("s")

        assert len(results) == 1
        assert results[0].video_id == "d"

    def test_related_link_title_is_searched(self, video_repo):
        video_repo.save(
            BrightcoveVideo(
                video_id="z",
                api_client="client-a",
                name="Clip",
                related_link_title="Buy the album",
                status=VideoStatus.PUBLISHED,
                created_at=T0,
            )
        )

        results = VideoSearchService(video_repo).search("album")

        assert [r.video_id for r in results] == ["z"]

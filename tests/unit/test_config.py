"""
Tests de la configuration pydantic-settings et du container DI.
"""

from pathlib import Path

import pytest
from dependency_injector import providers
from pydantic import ValidationError

from bcmirror.config import Settings
from bcmirror.container import Container
from bcmirror.logging_config import level_from_verbosity


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("ACCOUNT_ID", "CLIENT_ID", "CLIENT_SECRET", "API_CLIENT", "PAGE_SIZE"):
            monkeypatch.delenv(f"BCMIRROR_{name}", raising=False)

        settings = Settings(_env_file=None)

        assert settings.database_url == "sqlite:///bcmirror.db"
        assert settings.api_client == "default"
        assert settings.page_size == 100
        assert settings.search_result_limit == 15
        assert settings.brightcove_enabled is False

    def test_environment_prefix(self, monkeypatch):
        monkeypatch.setenv("BCMIRROR_ACCOUNT_ID", "42")
        monkeypatch.setenv("BCMIRROR_CLIENT_ID", "id")
        monkeypatch.setenv("BCMIRROR_CLIENT_SECRET", "secret")
        monkeypatch.setenv("BCMIRROR_PAGE_SIZE", "25")

        settings = Settings(_env_file=None)

        assert settings.account_id == "42"
        assert settings.page_size == 25
        assert settings.brightcove_enabled is True

    @pytest.mark.parametrize("page_size", [0, 101])
    def test_page_size_bounds(self, page_size):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, page_size=page_size)

    def test_paths_expanded(self):
        settings = Settings(_env_file=None, cache_dir="~/bc-cache")

        assert settings.cache_dir == Path("~/bc-cache").expanduser()


class TestLevelFromVerbosity:
    @pytest.mark.parametrize(
        "verbose,quiet,expected",
        [(0, False, "INFO"), (1, False, "DEBUG"), (2, False, "TRACE"), (3, True, "ERROR")],
    )
    def test_levels(self, verbose, quiet, expected):
        assert level_from_verbosity("info", verbose=verbose, quiet=quiet) == expected


class TestContainer:
    def test_wires_services(self, test_settings, session):
        container = Container()
        container.config.override(providers.Object(test_settings))
        container.session.override(providers.Object(session))

        sync_service = container.sync_service()
        search_service = container.video_search_service()

        assert sync_service.kinds == ["player", "video", "playlist"]
        assert search_service._limit == 15
        assert container.player_list_service().list("test-client") == {
            "default": "Brightcove Default Player"
        }
        container.token_cache().close()

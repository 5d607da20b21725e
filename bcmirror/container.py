"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour la CLI.
Inclut les repositories SQLModel, le client Brightcove et les services.
"""

from dependency_injector import containers, providers

from .adapters.api.brightcove_client import BrightcoveClient
from .adapters.api.token_cache import TokenCache
from .config import Settings
from .infrastructure.persistence.database import get_session, init_db
from .infrastructure.persistence.repositories import (
    SQLModelPlayerRepository,
    SQLModelPlaylistRepository,
    SQLModelVideoRepository,
)
from .services.media_source import VideoMediaSource
from .services.player_list import PlayerListService
from .services.reconciler import Reconciler
from .services.resource_kinds import PLAYER_KIND, PLAYLIST_KIND, VIDEO_KIND
from .services.sync import SyncService
from .services.video_search import VideoSearchService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.database.init()  # Initialise la DB une fois
        sync = container.sync_service()
        players = container.player_list_service().list("default")
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Database - Resource pour initialisation unique
    database = providers.Resource(
        init_db,
        database_url=config.provided.database_url,
    )

    # Session factory - nouvelle session a chaque appel
    session = providers.Factory(lambda: next(get_session()))

    # Repositories - Factory pour nouvelle instance avec session fraiche
    player_repository = providers.Factory(
        SQLModelPlayerRepository,
        session=session,
    )
    video_repository = providers.Factory(
        SQLModelVideoRepository,
        session=session,
    )
    playlist_repository = providers.Factory(
        SQLModelPlaylistRepository,
        session=session,
    )

    # Cache des jetons OAuth - Singleton partage
    token_cache = providers.Singleton(
        TokenCache,
        cache_dir=config.provided.cache_dir,
    )

    # Client Brightcove - Singleton, les identifiants sont verifies par la CLI
    # via config.brightcove_enabled avant utilisation
    brightcove_client = providers.Singleton(
        BrightcoveClient,
        account_id=config.provided.account_id,
        client_id=config.provided.client_id,
        client_secret=config.provided.client_secret,
        cache=token_cache,
        page_size=config.provided.page_size,
    )

    # Reconciliateurs - un par type de ressource
    player_reconciler = providers.Factory(
        Reconciler,
        kind=PLAYER_KIND,
        repository=player_repository,
    )
    video_reconciler = providers.Factory(
        Reconciler,
        kind=VIDEO_KIND,
        repository=video_repository,
    )
    playlist_reconciler = providers.Factory(
        Reconciler,
        kind=PLAYLIST_KIND,
        repository=playlist_repository,
    )

    # Service de synchronisation - Factory car depend de repositories
    sync_service = providers.Factory(
        SyncService,
        reader=brightcove_client,
        reconcilers=providers.Dict(
            player=player_reconciler,
            video=video_reconciler,
            playlist=playlist_reconciler,
        ),
    )

    # Services de lecture du miroir local
    player_list_service = providers.Factory(
        PlayerListService,
        player_repo=player_repository,
    )
    video_search_service = providers.Factory(
        VideoSearchService,
        video_repo=video_repository,
        limit=config.provided.search_result_limit,
    )

    # Source media (stateless - Singleton)
    video_media_source = providers.Singleton(VideoMediaSource)

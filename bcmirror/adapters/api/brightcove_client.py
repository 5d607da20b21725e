"""
Client Brightcove pour la lecture des players, videos et playlists.

Implemente l'interface IBrightcoveReader sur la Player Management API
et la CMS API. L'authentification utilise le flux OAuth "client
credentials" ; les jetons sont conserves dans un TokenCache.

Usage:
    cache = TokenCache()
    client = BrightcoveClient("123", "client-id", "secret", cache=cache)
    player = await client.fetch_player("default")
    async for video in client.iter_videos():
        ...
    await client.close()
"""

from typing import Any, AsyncIterator, Optional

import httpx
from loguru import logger

from bcmirror import __version__
from bcmirror.adapters.api.parsers import parse_player, parse_playlist, parse_video
from bcmirror.adapters.api.retry import request_with_retry
from bcmirror.adapters.api.token_cache import TokenCache
from bcmirror.core.errors import AuthenticationError
from bcmirror.core.ports.api_clients import IBrightcoveReader
from bcmirror.core.value_objects.remote import RemotePlayer, RemotePlaylist, RemoteVideo

USER_AGENT = f"bcmirror/{__version__}"


class BrightcoveClient(IBrightcoveReader):
    """
    Client API Brightcove pour un compte video.

    Implemente IBrightcoveReader avec:
    - Jeton OAuth mis en cache (duree de vie moins 30s)
    - Listings CMS pagines par limit/offset, tries par updated_at
    - Retry automatique sur 429, 5xx et erreurs reseau
    - Jeton renouvele une fois en cas de 401

    Attributes:
        OAUTH_URL: Point d'acces du serveur OAuth
        CMS_BASE_URL: URL de base de la CMS API v1
        PLAYERS_BASE_URL: URL de base de la Player Management API v2
        MAX_PAGE_SIZE: Taille de page maximale acceptee par la CMS API
    """

    OAUTH_URL = "https://oauth.brightcove.com/v4/access_token"
    CMS_BASE_URL = "https://cms.api.brightcove.com/v1"
    PLAYERS_BASE_URL = "https://players.api.brightcove.com/v2"
    MAX_PAGE_SIZE = 100

    def __init__(
        self,
        account_id: str,
        client_id: str,
        client_secret: str,
        cache: TokenCache,
        page_size: int = 100,
        max_attempts: int = 5,
        max_wait: float = 60,
    ) -> None:
        """
        Initialise le client Brightcove.

        Args:
            account_id: ID du compte video Brightcove
            client_id: ID du client OAuth
            client_secret: Secret du client OAuth
            cache: Cache des jetons d'acces
            page_size: Nombre d'elements par page de listing (1 a 100)
            max_attempts: Nombre de tentatives par requete
            max_wait: Delai maximum entre deux tentatives en secondes
        """
        self._account_id = account_id
        self._client_id = client_id
        self._client_secret = client_secret
        self._cache = cache
        self._page_size = max(1, min(page_size, self.MAX_PAGE_SIZE))
        self._max_attempts = max_attempts
        self._max_wait = max_wait
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """
        Retourne le client HTTP, le cree si necessaire (lazy init).

        Returns:
            httpx.AsyncClient avec le User-Agent du consommateur
        """
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                headers={"Accept": "application/json", "User-Agent": USER_AGENT},
                timeout=30.0,
            )
        return self._client

    @property
    def _token_key(self) -> str:
        return f"brightcove:token:{self._client_id}"

    async def _ensure_token(self) -> str:
        """
        S'assure qu'un jeton d'acces valide est disponible.

        Returns:
            Le jeton en cache, ou un nouveau jeton obtenu du serveur OAuth
        """
        cached = await self._cache.get(self._token_key)
        if cached:
            return cached

        logger.debug("Demande d'un jeton OAuth Brightcove")
        response = await request_with_retry(
            self._get_client(),
            "POST",
            self.OAUTH_URL,
            max_attempts=self._max_attempts,
            max_wait=self._max_wait,
            auth=(self._client_id, self._client_secret),
            data={"grant_type": "client_credentials"},
        )
        data = response.json()
        token = data["access_token"]
        await self._cache.set(self._token_key, token, int(data.get("expires_in", 0)))
        return token

    async def _authorized_get(self, url: str, params: Optional[dict]) -> httpx.Response:
        token = await self._ensure_token()
        return await request_with_retry(
            self._get_client(),
            "GET",
            url,
            max_attempts=self._max_attempts,
            max_wait=self._max_wait,
            headers={"Authorization": f"Bearer {token}"},
            params=params,
        )

    async def _get_json(self, url: str, params: Optional[dict] = None) -> Any:
        """
        GET authentifie, renouvelle une fois le jeton s'il est refuse.

        Un jeton en cache peut etre revoque avant son expiration.
        """
        try:
            response = await self._authorized_get(url, params)
        except AuthenticationError:
            logger.warning("Jeton OAuth refuse, renouvellement")
            await self._cache.delete(self._token_key)
            response = await self._authorized_get(url, params)
        return response.json()

    def _players_url(self, player_id: Optional[str] = None) -> str:
        url = f"{self.PLAYERS_BASE_URL}/accounts/{self._account_id}/players"
        return f"{url}/{player_id}" if player_id else url

    def _cms_url(self, resource: str, item_id: Optional[str] = None) -> str:
        url = f"{self.CMS_BASE_URL}/accounts/{self._account_id}/{resource}"
        return f"{url}/{item_id}" if item_id else url

    async def _iter_cms(self, resource: str) -> AsyncIterator[dict]:
        """Parcourt un listing CMS page par page."""
        offset = 0
        while True:
            items = await self._get_json(
                self._cms_url(resource),
                params={
                    "limit": self._page_size,
                    "offset": offset,
                    "sort": "updated_at",
                },
            )
            if not items:
                return
            for item in items:
                yield item
            if len(items) < self._page_size:
                return
            offset += self._page_size

    async def fetch_player(self, player_id: str) -> RemotePlayer:
        """Recupere un player par son ID Brightcove."""
        return parse_player(await self._get_json(self._players_url(player_id)))

    async def iter_players(self) -> AsyncIterator[RemotePlayer]:
        """Parcourt tous les players du compte (listing non pagine)."""
        data = await self._get_json(self._players_url())
        for item in data.get("items", []):
            yield parse_player(item)

    async def fetch_video(self, video_id: str) -> RemoteVideo:
        """Recupere une video par son ID Brightcove."""
        return parse_video(await self._get_json(self._cms_url("videos", video_id)))

    async def iter_videos(self) -> AsyncIterator[RemoteVideo]:
        """Parcourt toutes les videos du compte."""
        async for item in self._iter_cms("videos"):
            yield parse_video(item)

    async def fetch_playlist(self, playlist_id: str) -> RemotePlaylist:
        """Recupere une playlist par son ID Brightcove."""
        return parse_playlist(
            await self._get_json(self._cms_url("playlists", playlist_id))
        )

    async def iter_playlists(self) -> AsyncIterator[RemotePlaylist]:
        """Parcourt toutes les playlists du compte."""
        async for item in self._iter_cms("playlists"):
            yield parse_playlist(item)

    async def close(self) -> None:
        """Ferme le client HTTP."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

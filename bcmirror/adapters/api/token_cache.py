"""
Cache persistant des jetons OAuth Brightcove.

Le cache utilise diskcache pour la persistence sur disque, ce qui permet
de reutiliser un jeton entre deux executions de la CLI tant qu'il est
valide. Le TTL est la duree de vie annoncee par le serveur OAuth,
diminuee d'une marge de securite.
"""

import asyncio
from functools import partial
from pathlib import Path
from typing import Optional, Union

from diskcache import Cache


class TokenCache:
    """
    Cache asynchrone avec TTL pour les jetons d'acces.

    Utilise diskcache pour la persistence et run_in_executor pour
    les operations asynchrones non-bloquantes.

    Attributes:
        EXPIRY_MARGIN: Secondes retirees a la duree de vie du jeton

    Example:
        cache = TokenCache(cache_dir=".cache/brightcove")
        await cache.set("brightcove:token:abc", "eyJ...", expires_in=300)
        token = await cache.get("brightcove:token:abc")
    """

    EXPIRY_MARGIN = 30

    def __init__(self, cache_dir: Union[str, Path] = ".cache/brightcove") -> None:
        """
        Initialise le cache avec un repertoire de stockage.

        Args:
            cache_dir: Chemin vers le repertoire du cache (cree si inexistant)
        """
        self._cache = Cache(cache_dir)

    async def get(self, key: str) -> Optional[str]:
        """
        Recupere un jeton du cache.

        Returns:
            Le jeton ou None si absent ou expire
        """
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._cache.get, key)

    async def set(self, key: str, token: str, expires_in: int) -> None:
        """
        Stocke un jeton pour sa duree de vie moins la marge.

        Un jeton dont la duree de vie est inferieure a la marge n'est pas stocke.

        Args:
            key: Cle unique (ex: "brightcove:token:<client_id>")
            token: Jeton d'acces
            expires_in: Duree de vie annoncee en secondes
        """
        ttl = expires_in - self.EXPIRY_MARGIN
        if ttl <= 0:
            return
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(
            None, partial(self._cache.set, key, token, expire=ttl)
        )

    async def delete(self, key: str) -> None:
        """Invalide un jeton."""
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, self._cache.delete, key)

    async def clear(self) -> None:
        """Supprime toutes les entrees du cache."""
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(None, self._cache.clear)

    def close(self) -> None:
        """Ferme la connexion au cache (a appeler a la fin)."""
        self._cache.close()

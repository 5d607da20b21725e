"""
Mecanisme de retry avec backoff exponentiel pour les API Brightcove.

Relance automatiquement les requetes sur les erreurs transitoires
(429, 5xx, erreurs reseau) avec un delai croissant et du jitter aleatoire,
puis traduit le resultat final en erreurs du domaine :

- 401 -> AuthenticationError (jeton refuse)
- 404 -> NotFoundError (la ressource n'existe pas, a ignorer)
- 429 / 5xx / reseau apres epuisement -> TransportError
- autres 4xx -> RemoteError

Usage:
    response = await request_with_retry(client, "GET", url)
"""

from typing import Optional

import httpx
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_random_exponential,
)

from bcmirror.core.errors import (
    AuthenticationError,
    NotFoundError,
    RemoteError,
    TransportError,
)


class RateLimitError(Exception):
    """
    Exception levee quand l'API retourne 429 Too Many Requests.

    Attributes:
        retry_after: Nombre de secondes a attendre (depuis le header Retry-After),
                     ou None si non specifie.
    """

    def __init__(self, retry_after: Optional[int] = None) -> None:
        self.retry_after = retry_after
        super().__init__(f"Rate limited. Retry after: {retry_after}s")


class ServerError(Exception):
    """Reponse 5xx de l'API, consideree comme transitoire."""

    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(f"Server error: HTTP {status_code}")


RETRYABLE_ERRORS = (RateLimitError, ServerError, httpx.TransportError)


def with_retry(max_attempts: int = 5, max_wait: float = 60):
    """
    Decorateur pour relancer sur les erreurs transitoires avec backoff exponentiel.

    Utilise wait_random_exponential pour ajouter du jitter et eviter
    le "thundering herd" quand plusieurs clients relancent en meme temps.

    Args:
        max_attempts: Nombre maximum de tentatives (defaut: 5)
        max_wait: Delai maximum entre les tentatives en secondes (defaut: 60)

    Returns:
        Decorateur a appliquer sur une fonction async
    """
    return retry(
        retry=retry_if_exception_type(RETRYABLE_ERRORS),
        wait=wait_random_exponential(multiplier=1, min=min(1, max_wait), max=max_wait),
        stop=stop_after_attempt(max_attempts),
        reraise=True,
    )


async def request_with_retry(
    client: httpx.AsyncClient,
    method: str,
    url: str,
    max_attempts: int = 5,
    max_wait: float = 60,
    **kwargs,
) -> httpx.Response:
    """
    Execute une requete HTTP avec retry automatique sur les erreurs transitoires.

    Args:
        client: Client httpx async a utiliser
        method: Methode HTTP (GET, POST, etc.)
        url: URL a appeler
        max_attempts: Nombre maximum de tentatives (defaut: 5)
        max_wait: Delai maximum entre les tentatives en secondes
        **kwargs: Arguments supplementaires passes a client.request()

    Returns:
        httpx.Response en cas de succes (2xx/3xx)

    Raises:
        AuthenticationError: Sur une reponse 401
        NotFoundError: Sur une reponse 404
        TransportError: Si l'erreur transitoire persiste apres les tentatives
        RemoteError: Pour les autres erreurs 4xx
    """

    @with_retry(max_attempts=max_attempts, max_wait=max_wait)
    async def _do_request() -> httpx.Response:
        response = await client.request(method, url, **kwargs)
        if response.status_code == 429:
            retry_after_header = response.headers.get("Retry-After")
            retry_after = (
                int(retry_after_header)
                if retry_after_header and retry_after_header.isdigit()
                else None
            )
            raise RateLimitError(retry_after)
        if response.status_code >= 500:
            raise ServerError(response.status_code)
        return response

    try:
        response = await _do_request()
    except RateLimitError as e:
        raise TransportError(f"{method} {url}: {e}", status_code=429) from e
    except ServerError as e:
        raise TransportError(f"{method} {url}: {e}", status_code=e.status_code) from e
    except httpx.TransportError as e:
        raise TransportError(f"{method} {url}: {e!r}") from e

    if response.status_code == 401:
        raise AuthenticationError(f"{method} {url}: HTTP 401")
    if response.status_code == 404:
        raise NotFoundError(url)
    if response.is_error:
        raise RemoteError(f"{method} {url}: HTTP {response.status_code}")
    return response

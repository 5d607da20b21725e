"""
Client API Brightcove.

Ce module fournit l'adaptateur de lecture des ressources Brightcove
(Player Management API et CMS API).

Infrastructure partagee:
- TokenCache: Cache persistant des jetons OAuth
- request_with_retry: Requete avec backoff exponentiel et traduction des erreurs

Le client implemente IBrightcoveReader defini dans core/ports/api_clients.py.
"""

from bcmirror.adapters.api.brightcove_client import BrightcoveClient
from bcmirror.adapters.api.retry import RateLimitError, request_with_retry, with_retry
from bcmirror.adapters.api.token_cache import TokenCache

__all__ = [
    "BrightcoveClient",
    "TokenCache",
    "RateLimitError",
    "with_retry",
    "request_with_retry",
]

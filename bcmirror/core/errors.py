"""
Exceptions métier de bcmirror.

Hiérarchie :
- BrightcoveMirrorError : base de toutes les erreurs du package
  - MissingOwnerError : création d'un enregistrement sans client API
  - IntegrityError : plusieurs enregistrements locaux pour un même ID distant
  - PersistenceError : échec d'écriture dans le stockage local
  - RemoteError : erreurs de la couche de lecture distante
    - NotFoundError : ressource absente chez Brightcove (à ignorer)
    - TransportError : erreur réseau ou serveur (à relancer)
    - AuthenticationError : jeton OAuth refuse (HTTP 401)
"""

from typing import Optional


class BrightcoveMirrorError(Exception):
    """Base des exceptions bcmirror."""


class MissingOwnerError(BrightcoveMirrorError):
    """
    Levee quand un enregistrement doit etre cree sans client API proprietaire.

    Attributes:
        kind: Type de ressource (player, video, playlist)
        remote_id: ID Brightcove de la ressource
    """

    def __init__(self, kind: str, remote_id: str) -> None:
        self.kind = kind
        self.remote_id = remote_id
        super().__init__(
            f"To create a new {kind} record, the api_client must be given "
            f"(remote id: {remote_id})"
        )


class IntegrityError(BrightcoveMirrorError):
    """
    Levee quand plusieurs enregistrements locaux partagent un ID distant.

    Attributes:
        kind: Type de ressource
        remote_id: ID Brightcove partage
        count: Nombre d'enregistrements trouves
    """

    def __init__(self, kind: str, remote_id: str, count: int) -> None:
        self.kind = kind
        self.remote_id = remote_id
        self.count = count
        super().__init__(
            f"{count} local {kind} records share the remote id {remote_id}"
        )


class PersistenceError(BrightcoveMirrorError):
    """Echec d'ecriture dans le stockage local."""


class RemoteError(BrightcoveMirrorError):
    """Base des erreurs de lecture des ressources distantes."""


class NotFoundError(RemoteError):
    """
    Ressource inexistante cote Brightcove (HTTP 404).

    Attributes:
        resource: Chemin ou identifiant de la ressource demandee
    """

    def __init__(self, resource: str) -> None:
        self.resource = resource
        super().__init__(f"Brightcove resource not found: {resource}")


class TransportError(RemoteError):
    """
    Erreur transitoire de transport (reseau, 5xx, 429 apres epuisement).

    Attributes:
        status_code: Code HTTP si une reponse a ete recue, None sinon
    """

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class AuthenticationError(RemoteError):
    """Jeton ou identifiants refuses par Brightcove (HTTP 401)."""

"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe BCMIRROR_,
et peut optionnellement être fournie via un fichier .env.

Les identifiants Brightcove sont optionnels - la synchronisation est désactivée si non fournis.
"""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent de bcmirror/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe BCMIRROR_.
    Exemple : BCMIRROR_LOG_LEVEL=DEBUG

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="BCMIRROR_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Base de données
    database_url: str = Field(default="sqlite:///bcmirror.db")

    # Compte Brightcove (OPTIONNEL - synchronisation désactivée si non défini)
    account_id: Optional[str] = Field(default=None)
    client_id: Optional[str] = Field(default=None)
    client_secret: Optional[str] = Field(default=None)

    # Client API propriétaire des nouveaux enregistrements
    api_client: str = Field(default="default", min_length=1)

    # Traitement
    page_size: int = Field(default=100, ge=1, le=100)
    search_result_limit: int = Field(default=15, ge=1)
    cache_dir: Path = Field(default=Path(".cache/brightcove"))

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/bcmirror.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("cache_dir", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @property
    def brightcove_enabled(self) -> bool:
        """Vérifie si le compte Brightcove est configuré."""
        return all((self.account_id, self.client_id, self.client_secret))

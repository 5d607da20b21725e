"""
Configuration du logging de l'application via loguru.

Fournit un logging structuré avec :
- Sortie console : lisible par l'humain, colorée, pour la surveillance en temps réel
- Sortie fichier : sérialisée en JSON, avec rotation, pour l'analyse historique
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> | "
    "<level>{message}</level>"
)

# Handler console courant, remplace par set_console_level()
_console_handler_id: Optional[int] = None


def level_from_verbosity(base_level: str, verbose: int = 0, quiet: bool = False) -> str:
    """Calcule le niveau console depuis les options -v/-q de la CLI.

    Args :
        base_level : Niveau configuré (BCMIRROR_LOG_LEVEL)
        verbose : Nombre d'options -v (1 = DEBUG, 2+ = TRACE)
        quiet : Mode silencieux (erreurs uniquement)
    """
    if quiet:
        return "ERROR"
    if verbose >= 2:
        return "TRACE"
    if verbose == 1:
        return "DEBUG"
    return base_level.upper()


def configure_logging(
    log_level: str = "INFO",
    log_file: Path = Path("logs/bcmirror.log"),
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """Configure le logging de l'application.

    Args :
        log_level : Niveau de log minimum pour la sortie console (DEBUG, INFO, WARNING, ERROR)
        log_file : Chemin vers le fichier de log
        rotation_size : Taille maximale du fichier avant rotation (ex: "10 MB", "1 GB")
        retention_count : Nombre de fichiers rotatifs à conserver

    Le handler console produit des logs colorés lisibles pour la surveillance temps réel.
    Le handler fichier produit des logs sérialisés JSON avec rotation pour l'analyse historique.
    """
    global _console_handler_id

    # Supprime le handler par défaut
    logger.remove()

    _console_handler_id = logger.add(
        sys.stderr,
        level=log_level.upper(),
        format=CONSOLE_FORMAT,
        colorize=True,
    )

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",  # Capture les échanges API
        format="{message}",
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,
    )

    logger.debug("Logging configuré", log_file=str(log_file), rotation=rotation_size)


def set_console_level(log_level: str) -> None:
    """Remplace le handler console en conservant le handler fichier."""
    global _console_handler_id
    if _console_handler_id is not None:
        logger.remove(_console_handler_id)
    _console_handler_id = logger.add(
        sys.stderr, level=log_level, format=CONSOLE_FORMAT, colorize=True
    )

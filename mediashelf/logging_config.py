"""
Configuration loguru de MediaShelf.

La console affiche les messages au niveau demande par -v/-q.
Le fichier de log, optionnel, ne recoit que les messages du package
mediashelf, serialises en JSON avec rotation.
"""

import sys
from pathlib import Path

from loguru import logger

PACKAGE_NAME = "mediashelf"

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan> | "
    "<level>{message}</level>"
)


def _from_package(record: dict) -> bool:
    """Filtre loguru : garde les messages emis depuis le package mediashelf."""
    name = record["name"] or ""
    return name == PACKAGE_NAME or name.startswith(PACKAGE_NAME + ".")


def configure_logging(
    log_level: str = "INFO",
    log_file: Path | None = None,
    rotation_size: str = "10 MB",
    retention_count: int = 5,
) -> None:
    """
    Remplace les handlers loguru par ceux de l'application.

    Args:
        log_level: Niveau minimum de la console (DEBUG, INFO, WARNING, ERROR)
        log_file: Fichier JSON des messages mediashelf, None pour la console seule
        rotation_size: Taille declenchant la rotation (ex: "10 MB")
        retention_count: Nombre d'archives conservees
    """
    logger.remove()
    logger.add(sys.stderr, level=log_level, format=CONSOLE_FORMAT, colorize=True)

    if log_file is None:
        return

    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        filter=_from_package,
        serialize=True,
        rotation=rotation_size,
        retention=retention_count,
        compression="zip",
        enqueue=True,
    )
    logger.debug("Fichier de log actif", log_file=str(log_file), rotation=rotation_size)

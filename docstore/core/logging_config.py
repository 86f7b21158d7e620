import logging
from typing import Optional

from docstore.core.config import settings


def configure_logging(level: Optional[str] = None) -> None:
    """Настройка логирования приложения, встраивающего хранилище"""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format=settings.log_format,
    )

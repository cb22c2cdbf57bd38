# -*- coding: utf-8 -*-
"""Настройка логирования: файл рядом с программой и stderr."""
import logging

from app_dir import LOG_FILE
from settings import Settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(settings: Settings):
    """Если папка программы недоступна для записи, логи идут только в stderr."""
    handlers = [logging.StreamHandler()]
    file_error = None
    try:
        handlers.append(logging.FileHandler(LOG_FILE, encoding="utf-8"))
    except OSError as e:
        file_error = e
    logging.basicConfig(format=LOG_FORMAT, level=logging.INFO, handlers=handlers, force=True)
    logging.getLogger().setLevel(settings.log_level)
    if file_error is not None:
        logging.getLogger(__name__).warning("Could not open log file %s: %s", LOG_FILE, file_error)

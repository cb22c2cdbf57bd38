# -*- coding: utf-8 -*-
"""
Настройки приложения из settings.json рядом с программой.
Файла может не быть: тогда используются значения по умолчанию.
"""
import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path

from app_dir import SETTINGS_FILE

logger = logging.getLogger(__name__)

APPEARANCE_MODES = ("light", "dark", "system")
COLOR_THEMES = ("blue", "green", "dark-blue")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Settings:
    conversion_delay_ms: int = 300
    copy_feedback_ms: int = 2000
    appearance_mode: str = "light"
    color_theme: str = "blue"
    log_level: str = "INFO"
    animate_background: bool = True


def _valid(name: str, value) -> bool:
    if name in ("conversion_delay_ms", "copy_feedback_ms"):
        return isinstance(value, int) and not isinstance(value, bool) and value >= 0
    if name == "animate_background":
        return isinstance(value, bool)
    if name == "appearance_mode":
        return value in APPEARANCE_MODES
    if name == "log_level":
        return isinstance(value, str) and value.upper() in LOG_LEVELS
    if name == "color_theme":
        # встроенная тема customtkinter или путь к своему .json
        return isinstance(value, str) and (
            value in COLOR_THEMES or (value.endswith(".json") and Path(value).is_file())
        )
    return False


def settings_from_dict(data: dict) -> Settings:
    """Собрать Settings; неизвестные ключи пропускаются, неверные значения заменяются умолчаниями."""
    settings = Settings()
    for f in fields(Settings):
        if f.name not in data:
            continue
        value = data[f.name]
        if not _valid(f.name, value):
            logger.warning("Ignoring invalid setting %s=%r", f.name, value)
            continue
        if f.name == "log_level":
            value = value.upper()
        setattr(settings, f.name, value)
    return settings


def load_settings(path: Path = SETTINGS_FILE) -> Settings:
    if not path.exists():
        return Settings()
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Could not read %s: %s", path, e)
        return Settings()
    if not isinstance(data, dict):
        logger.warning("Settings file %s must contain a JSON object", path)
        return Settings()
    return settings_from_dict(data)

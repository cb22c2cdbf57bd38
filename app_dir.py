# -*- coding: utf-8 -*-
"""Папка приложения (рядом с exe или со скриптом) и файлы, которые в ней лежат."""
import sys
from pathlib import Path

if getattr(sys, "frozen", False):
    BASE_DIR = Path(sys.executable).resolve().parent
else:
    BASE_DIR = Path(__file__).resolve().parent

SETTINGS_FILE = BASE_DIR / "settings.json"
LOG_FILE = BASE_DIR / "shadowliner.log"

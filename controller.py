# -*- coding: utf-8 -*-
"""
Связывает состояние формы, конвертер, буфер обмена и таймеры.
Планировщик — любой объект с after(ms, func), например окно Tk.
"""
import logging
from collections.abc import Callable
from typing import Protocol

from key_converter import ERROR_PREFIX, convert
from settings import Settings
from state_machine import ShellStateMachine

logger = logging.getLogger(__name__)


class Clipboard(Protocol):
    def read_text(self) -> str: ...

    def write_text(self, text: str) -> None: ...


class Scheduler(Protocol):
    def after(self, ms: int, func: Callable[[], None]): ...


class ConverterController:
    def __init__(
        self,
        scheduler: Scheduler,
        clipboard: Clipboard,
        converter: Callable[[str], str] = convert,
        settings: Settings | None = None,
    ):
        self.scheduler = scheduler
        self.clipboard = clipboard
        self.converter = converter
        self.settings = settings or Settings()
        self.state = ShellStateMachine()
        self._listeners: list[Callable[[ShellStateMachine], None]] = []
        self._copy_generation = 0
        self._last_key = ""

    def subscribe(self, listener: Callable[[ShellStateMachine], None]):
        self._listeners.append(listener)

    def _notify(self):
        for listener in self._listeners:
            listener(self.state)

    def submit(self, key: str) -> bool:
        """Запланировать конвертацию. False, если форма сейчас не принимает ключ."""
        self._last_key = key
        if not self.state.submit(key):
            return False
        self._notify()
        self.scheduler.after(self.settings.conversion_delay_ms, self._run_conversion)
        return True

    def _run_conversion(self):
        try:
            result = self.converter(self.state.pending_key)
        except Exception as e:
            logger.exception("Converter raised")
            result = f"{ERROR_PREFIX}{e}"
        self.state.finish(result)
        if self.state.error is not None:
            logger.info("Conversion failed: %s", self.state.error)
        else:
            logger.info("Conversion succeeded")
        self._notify()

    def copy(self) -> bool:
        """Скопировать JSON в буфер обмена и включить подсказку «скопировано»."""
        if not self.state.can_copy:
            return False
        try:
            self.clipboard.write_text(self.state.output)
        except Exception:
            logger.exception("Clipboard write failed")
            return False
        self.state.copied()
        self._copy_generation += 1
        generation = self._copy_generation
        self._notify()
        self.scheduler.after(self.settings.copy_feedback_ms, lambda: self._copy_expired(generation))
        return True

    def _copy_expired(self, generation: int):
        # более поздний copy() перезапустил таймер
        if generation != self._copy_generation:
            return
        if self.state.copy_expired():
            self._notify()

    def paste(self) -> str:
        try:
            text = self.clipboard.read_text()
        except Exception:
            logger.exception("Clipboard read failed")
            return ""
        return (text or "").strip()

    def edit(self, key: str) -> bool:
        """Текст ключа изменился. Повтор того же текста ничего не сбрасывает."""
        if key == self._last_key:
            return False
        self._last_key = key
        was_failed = self.state.error is not None
        self.state.edit()
        if was_failed:
            self._notify()
        return True

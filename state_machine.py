# -*- coding: utf-8 -*-
"""
Состояние формы конвертера:
IDLE -> CONVERTING -> SUCCESS | FAILED, SUCCESS -> COPIED -> SUCCESS.
"""
import enum
import logging

from key_converter import error_reason, is_error

logger = logging.getLogger(__name__)


class Phase(enum.Enum):
    IDLE = "idle"
    CONVERTING = "converting"
    SUCCESS = "success"
    FAILED = "failed"
    COPIED = "copied"


class InvalidTransition(RuntimeError):
    def __init__(self, phase: Phase, action: str):
        super().__init__(f"Cannot {action} while {phase.value}")
        self.phase = phase
        self.action = action


class ShellStateMachine:
    def __init__(self):
        self._phase = Phase.IDLE
        self._output = ""
        self._pending_key = ""

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def output(self) -> str:
        """Последний результат конвертации (JSON или строка ошибки)."""
        return self._output

    @property
    def pending_key(self) -> str:
        return self._pending_key

    @property
    def error(self) -> str | None:
        """Текст ошибки без префикса "Error: " или None."""
        if self._phase is Phase.FAILED:
            return error_reason(self._output)
        return None

    @property
    def is_loading(self) -> bool:
        return self._phase is Phase.CONVERTING

    @property
    def is_copied(self) -> bool:
        return self._phase is Phase.COPIED

    @property
    def can_copy(self) -> bool:
        return self._phase in (Phase.SUCCESS, Phase.COPIED)

    def can_submit(self, key: str) -> bool:
        return not self.is_loading and bool(key.strip())

    def _move(self, phase: Phase):
        logger.debug("State %s -> %s", self._phase.value, phase.value)
        self._phase = phase

    def submit(self, key: str) -> bool:
        """Начать конвертацию. False, если ключ пустой или конвертация уже идёт."""
        if not self.can_submit(key):
            return False
        self._pending_key = key.strip()
        self._move(Phase.CONVERTING)
        return True

    def finish(self, result: str):
        if self._phase is not Phase.CONVERTING:
            raise InvalidTransition(self._phase, "finish conversion")
        self._output = result
        self._pending_key = ""
        self._move(Phase.FAILED if is_error(result) else Phase.SUCCESS)

    def copied(self):
        if not self.can_copy:
            raise InvalidTransition(self._phase, "copy")
        self._move(Phase.COPIED)

    def copy_expired(self) -> bool:
        """Таймер «скопировано» истёк. Поздний таймер (после новой конвертации) игнорируется."""
        if self._phase is not Phase.COPIED:
            return False
        self._move(Phase.SUCCESS)
        return True

    def edit(self):
        """Пользователь изменил ключ: ошибка сбрасывается."""
        if self._phase is Phase.FAILED:
            self._output = ""
            self._move(Phase.IDLE)

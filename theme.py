# -*- coding: utf-8 -*-
"""Цвета, размеры, надписи и длительности анимаций интерфейса."""
import math

# Палитра «вода»: пары цветов, между которыми переливается фон
CYAN_LIGHT = "#4FACFE"
CYAN_DARK = "#00F2FE"
TEAL_LIGHT = "#43E97B"
TEAL_DARK = "#38F9D7"
PURPLE_LIGHT = "#667EEA"
PURPLE_DARK = "#764BA2"

PRIMARY = "#14B8A6"
PRIMARY_HOVER = "#0D9488"
SUCCESS = "#10B981"
SUCCESS_DARK = "#059669"
ERROR = "#EF4444"
ERROR_DARK = "#DC2626"

TEXT_PRIMARY = "#0F172A"
TEXT_SECONDARY = "#475569"
TEXT_TERTIARY = "#64748B"
TEXT_LABEL = "#334155"
TEXT_PLACEHOLDER = "#94A3B8"

BORDER_FOCUSED = "#06B6D4"
BORDER_UNFOCUSED = "#94A3B8"
BACKGROUND = "#F8FAFC"
BACKGROUND_INPUT = "#FFFFFF"
ERROR_BACKGROUND = "#FDECEC"

PADDING_LARGE = 48
PADDING_MEDIUM = 32
PADDING_NORMAL = 24
PADDING_SMALL = 16
PADDING_TINY = 8
PADDING_MICRO = 4

CORNER_RADIUS_LARGE = 12
CORNER_RADIUS_MEDIUM = 8
BUTTON_HEIGHT = 52
BANNER_HEIGHT = 140

APP_TITLE = "ShadowLiner"
APP_SUBTITLE = "Outline VPN Key to Shadowsocks JSON Config Converter"
INPUT_LABEL = "Paste your Outline VPN key here"
INPUT_PLACEHOLDER = "ss://..."
BUTTON_CONVERT = "Convert to JSON"
BUTTON_CONVERTING = "Converting..."
BUTTON_PASTE = "Paste"
BUTTON_COPY = "Copy"
BUTTON_COPIED = "Copied!"
SUCCESS_MESSAGE = "JSON Configuration Generated"
COPIED_MESSAGE = "Copied to clipboard!"
COPY_FAILED_MESSAGE = "Could not access the clipboard"

# мс
GRADIENT_SHORT = 8000
GRADIENT_MEDIUM = 9000
GRADIENT_LONG = 10000
ANIMATION_FRAME = 50

# (начальный цвет, конечный цвет, период) для каждой полосы градиента
GRADIENT_TRACKS = [
    (CYAN_LIGHT, CYAN_DARK, GRADIENT_SHORT),
    (TEAL_LIGHT, TEAL_DARK, GRADIENT_LONG),
    (PURPLE_LIGHT, PURPLE_DARK, GRADIENT_MEDIUM),
]


def hex_to_rgb(color: str) -> tuple[int, int, int]:
    value = color.lstrip("#")
    if len(value) != 6:
        raise ValueError(f"Expected #RRGGBB colour, got {color!r}")
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)


def rgb_to_hex(rgb: tuple[int, int, int]) -> str:
    return "#{:02X}{:02X}{:02X}".format(*(max(0, min(255, round(c))) for c in rgb))


def blend(start: str, end: str, t: float) -> str:
    """Линейная смесь двух цветов, t в [0, 1]."""
    t = max(0.0, min(1.0, t))
    a = hex_to_rgb(start)
    b = hex_to_rgb(end)
    return rgb_to_hex(tuple(x + (y - x) * t for x, y in zip(a, b)))


def ease_in_out_cubic(t: float) -> float:
    if t < 0.5:
        return 4 * t * t * t
    return 1 - math.pow(-2 * t + 2, 3) / 2


def ping_pong(elapsed_ms: float, period_ms: float) -> float:
    """Прогресс 0 -> 1 -> 0 с периодом в одну сторону period_ms (RepeatMode.Reverse)."""
    if period_ms <= 0:
        return 0.0
    phase = (elapsed_ms / period_ms) % 2
    return phase if phase <= 1 else 2 - phase


def gradient_colors(elapsed_ms: float) -> list[str]:
    """Текущие цвета всех полос градиента."""
    return [
        blend(start, end, ease_in_out_cubic(ping_pong(elapsed_ms, period)))
        for start, end, period in GRADIENT_TRACKS
    ]

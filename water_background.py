# -*- coding: utf-8 -*-
"""Шапка окна с переливающимся градиентом «вода» и заголовком поверх."""
import time

import customtkinter as ctk

import theme

# количество вертикальных полос, из которых рисуется градиент
STRIPES = 64


class WaterBackground(ctk.CTkCanvas):
    def __init__(self, master, title: str, subtitle: str, animate: bool = True, **kwargs):
        super().__init__(master, height=theme.BANNER_HEIGHT, highlightthickness=0, bd=0, **kwargs)
        self.title = title
        self.subtitle = subtitle
        self.animate = animate
        self._started = time.monotonic()
        self._job = None
        self.bind("<Configure>", lambda event: self._draw())

    def start(self):
        self._draw()
        if self.animate:
            self._job = self.after(theme.ANIMATION_FRAME, self._tick)

    def stop(self):
        if self._job is not None:
            self.after_cancel(self._job)
            self._job = None

    def _tick(self):
        self._draw()
        self._job = self.after(theme.ANIMATION_FRAME, self._tick)

    def _stripe_color(self, colors: list[str], x: float) -> str:
        # x в [0, 1]: первая половина — цвет 1 -> 2, вторая — 2 -> 3
        if x <= 0.5:
            return theme.blend(colors[0], colors[1], x * 2)
        return theme.blend(colors[1], colors[2], (x - 0.5) * 2)

    def _draw(self):
        width = max(self.winfo_width(), 1)
        height = max(self.winfo_height(), theme.BANNER_HEIGHT)
        elapsed_ms = (time.monotonic() - self._started) * 1000
        colors = theme.gradient_colors(elapsed_ms)

        self.delete("all")
        stripe = width / STRIPES
        for i in range(STRIPES):
            self.create_rectangle(
                i * stripe,
                0,
                (i + 1) * stripe + 1,
                height,
                fill=self._stripe_color(colors, i / (STRIPES - 1)),
                width=0,
            )
        self.create_text(
            width / 2,
            height / 2 - 16,
            text=self.title,
            fill=theme.TEXT_PRIMARY,
            font=("Segoe UI", 36, "bold"),
        )
        self.create_text(
            width / 2,
            height / 2 + 28,
            text=self.subtitle,
            fill=theme.TEXT_SECONDARY,
            font=("Segoe UI", 14),
        )

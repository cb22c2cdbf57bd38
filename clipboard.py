# -*- coding: utf-8 -*-
"""Буфер обмена через окно Tk. В тестах вместо него подставляется подделка."""
import tkinter as tk


class TkClipboard:
    """Буфер обмена через любой виджет Tk (clipboard_get / clipboard_append)."""

    def __init__(self, widget):
        self._widget = widget

    def read_text(self) -> str:
        try:
            return self._widget.clipboard_get()
        except tk.TclError:
            # пустой буфер или в нём не текст
            return ""

    def write_text(self, text: str) -> None:
        self._widget.clipboard_clear()
        self._widget.clipboard_append(text)
        self._widget.update()

# -*- coding: utf-8 -*-
"""
ShadowLiner — конвертер ключа Outline VPN (ss://) в JSON-конфиг Shadowsocks.
"""
import logging
import tkinter as tk

import customtkinter as ctk

import theme
from clipboard import TkClipboard
from controller import ConverterController
from log_setup import setup_logging
from settings import Settings, load_settings
from state_machine import Phase, ShellStateMachine
from water_background import WaterBackground

logger = logging.getLogger(__name__)


class ShadowLinerApp(ctk.CTk):
    def __init__(self, settings: Settings):
        super().__init__()
        self.title(theme.APP_TITLE)
        self.geometry("760x720")
        self.minsize(560, 600)
        self.configure(fg_color=theme.BACKGROUND)

        self.settings = settings
        self.controller = ConverterController(
            scheduler=self,
            clipboard=TkClipboard(self),
            settings=settings,
        )
        self.controller.subscribe(self._render)

        self._build_ui()
        self._render(self.controller.state)
        self.after(100, self._focus_key_entry)

    def _build_ui(self):
        self.banner = WaterBackground(
            self,
            title=theme.APP_TITLE,
            subtitle=theme.APP_SUBTITLE,
            animate=self.settings.animate_background,
        )
        self.banner.pack(fill="x")
        self.banner.start()

        body = ctk.CTkFrame(self, fg_color="transparent")
        body.pack(fill="both", expand=True, padx=theme.PADDING_LARGE, pady=theme.PADDING_NORMAL)

        # --- Ключ ---
        ctk.CTkLabel(
            body,
            text=theme.INPUT_LABEL,
            text_color=theme.TEXT_LABEL,
            font=ctk.CTkFont(size=14, weight="bold"),
        ).pack(anchor="w", pady=(0, theme.PADDING_TINY))
        key_row = ctk.CTkFrame(body, fg_color="transparent")
        key_row.pack(fill="x", pady=(0, theme.PADDING_NORMAL))
        self.key_entry = ctk.CTkEntry(
            key_row,
            placeholder_text=theme.INPUT_PLACEHOLDER,
            placeholder_text_color=theme.TEXT_PLACEHOLDER,
            text_color=theme.TEXT_PRIMARY,
            fg_color=theme.BACKGROUND_INPUT,
            border_color=theme.BORDER_UNFOCUSED,
            corner_radius=theme.CORNER_RADIUS_LARGE,
            height=40,
        )
        self.key_entry.pack(side="left", fill="x", expand=True, padx=(0, theme.PADDING_TINY))
        ctk.CTkButton(
            key_row,
            text=theme.BUTTON_PASTE,
            width=90,
            height=40,
            fg_color=theme.TEXT_TERTIARY,
            corner_radius=theme.CORNER_RADIUS_LARGE,
            command=self._paste_into_key_entry,
        ).pack(side="right")
        self.key_entry.bind("<KeyRelease>", self._on_key_edited)
        self.key_entry.bind("<Return>", lambda event: self._convert())
        self.key_entry.bind("<Control-v>", self._paste_into_key_entry)
        self.key_entry.bind("<Button-3>", self._show_paste_menu)

        self.convert_btn = ctk.CTkButton(
            body,
            text=theme.BUTTON_CONVERT,
            height=theme.BUTTON_HEIGHT,
            fg_color=theme.PRIMARY,
            hover_color=theme.PRIMARY_HOVER,
            corner_radius=theme.CORNER_RADIUS_LARGE,
            font=ctk.CTkFont(size=16, weight="bold"),
            command=self._convert,
        )
        self.convert_btn.pack(fill="x")

        # --- Ошибка ---
        self.error_label = ctk.CTkLabel(
            body,
            text="",
            text_color=theme.ERROR_DARK,
            fg_color=theme.ERROR_BACKGROUND,
            corner_radius=theme.CORNER_RADIUS_MEDIUM,
            font=ctk.CTkFont(size=14, weight="bold"),
            wraplength=560,
        )

        # --- Результат ---
        self.success_frame = ctk.CTkFrame(body, fg_color="transparent")
        header = ctk.CTkFrame(self.success_frame, fg_color="transparent")
        header.pack(fill="x", pady=(0, theme.PADDING_SMALL))
        ctk.CTkLabel(
            header,
            text="✓ " + theme.SUCCESS_MESSAGE,
            text_color=theme.SUCCESS_DARK,
            font=ctk.CTkFont(size=14, weight="bold"),
        ).pack(side="left")
        self.copy_btn = ctk.CTkButton(
            header,
            text=theme.BUTTON_COPY,
            width=90,
            fg_color=theme.TEXT_TERTIARY,
            corner_radius=theme.CORNER_RADIUS_MEDIUM,
            command=self._copy_output,
        )
        self.copy_btn.pack(side="right")
        self.output_box = ctk.CTkTextbox(
            self.success_frame,
            height=240,
            border_width=1,
            border_color=theme.SUCCESS,
            corner_radius=theme.CORNER_RADIUS_LARGE,
            text_color=theme.TEXT_PRIMARY,
            font=ctk.CTkFont(family="Consolas", size=13),
        )
        self.output_box.pack(fill="both", expand=True)
        self.copied_label = ctk.CTkLabel(
            self.success_frame,
            text="",
            text_color=theme.SUCCESS_DARK,
            font=ctk.CTkFont(size=12),
        )
        self.copied_label.pack(anchor="w", pady=(theme.PADDING_TINY, 0))

    def _render(self, state: ShellStateMachine):
        key = self.key_entry.get()
        self.convert_btn.configure(
            text=theme.BUTTON_CONVERTING if state.is_loading else theme.BUTTON_CONVERT,
            state="normal" if state.can_submit(key) else "disabled",
        )
        self.key_entry.configure(
            border_color=theme.ERROR if state.error is not None else theme.BORDER_UNFOCUSED
        )

        if state.error is not None:
            self.error_label.configure(text=state.error)
            self.error_label.pack(pady=(theme.PADDING_NORMAL, 0), ipadx=theme.PADDING_SMALL, ipady=theme.PADDING_TINY)
        else:
            self.error_label.pack_forget()

        if state.can_copy:
            self._show_output(state.output)
            self.copy_btn.configure(text=theme.BUTTON_COPIED if state.is_copied else theme.BUTTON_COPY)
            self.copied_label.configure(text=theme.COPIED_MESSAGE if state.is_copied else "")
            if not self.success_frame.winfo_ismapped():
                self.success_frame.pack(fill="both", expand=True, pady=(theme.PADDING_MEDIUM, 0))
        elif state.phase is not Phase.CONVERTING:
            self.success_frame.pack_forget()

    def _show_output(self, text: str):
        self.output_box.configure(state="normal")
        self.output_box.delete("1.0", tk.END)
        self.output_box.insert("1.0", text)
        self.output_box.configure(state="disabled")

    def _focus_key_entry(self):
        self.update_idletasks()
        self.focus_force()
        self.key_entry.focus_set()

    def _on_key_edited(self, event=None):
        # стрелки, Shift и Ctrl тоже дают KeyRelease; controller сравнивает текст сам
        self.controller.edit(self.key_entry.get())
        self._render(self.controller.state)

    def _paste_into_key_entry(self, event=None):
        text = self.controller.paste()
        if text and self.key_entry.get() != text:
            self.key_entry.delete(0, tk.END)
            self.key_entry.insert(0, text)
            self._on_key_edited()
        return "break"

    def _show_paste_menu(self, event):
        menu = tk.Menu(self, tearoff=0)
        menu.add_command(label=theme.BUTTON_PASTE, command=lambda: self._paste_into_key_entry())
        try:
            menu.tk_popup(event.x_root, event.y_root)
        finally:
            menu.grab_release()

    def _convert(self):
        self.controller.submit(self.key_entry.get())

    def _copy_output(self):
        if not self.controller.copy():
            self.copied_label.configure(text=theme.COPY_FAILED_MESSAGE, text_color=theme.ERROR_DARK)
            return
        self.copied_label.configure(text_color=theme.SUCCESS_DARK)

    def on_closing(self):
        self.banner.stop()
        self.destroy()


def main():
    settings = load_settings()
    setup_logging(settings)
    ctk.set_appearance_mode(settings.appearance_mode)
    ctk.set_default_color_theme(settings.color_theme)
    logger.info("Starting %s", theme.APP_TITLE)

    app = ShadowLinerApp(settings)
    app.protocol("WM_DELETE_WINDOW", app.on_closing)
    app.mainloop()


if __name__ == "__main__":
    main()

import tkinter as tk
import customtkinter as ctk
from typing import Callable

from studio_quote.ui.styles import theme


class ConfirmationDialog(ctk.CTkToplevel):
    """Modal confirm/cancel prompt shown before a request is sent."""

    def __init__(
        self,
        master: tk.Misc,
        title: str,
        message: str,
        on_confirm: Callable[[], None],
        confirm_text: str = "送信する",
        cancel_text: str = "キャンセル",
    ):
        super().__init__(master)
        self.title(title)
        self.transient(master)
        self.grab_set()
        self.resizable(False, False)
        self._on_confirm = on_confirm

        main = ctk.CTkFrame(self, fg_color="transparent")
        main.pack(fill="both", expand=True, padx=16, pady=16)
        ctk.CTkLabel(main, text=title, font=(theme.FONT, 14, "bold")).pack(pady=(0, 8))
        ctk.CTkLabel(main, text=message, wraplength=320, justify="center").pack(pady=(0, 16))

        buttons = ctk.CTkFrame(main, fg_color="transparent")
        buttons.pack()
        ctk.CTkButton(buttons, text=cancel_text, command=self.destroy, fg_color=theme.PALETTE["panel"]).pack(
            side="left", padx=(0, 8)
        )
        theme.accent_button(buttons, confirm_text, self._confirm).pack(side="left")

    def _confirm(self) -> None:
        self.destroy()
        self._on_confirm()

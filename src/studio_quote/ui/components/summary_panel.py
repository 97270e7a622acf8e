import tkinter as tk
import customtkinter as ctk

from studio_quote.core.calculations.pricing_engine import PricingEngine
from studio_quote.ui.styles import theme


class SummaryPanel(ctk.CTkFrame):
    """Read-only order summary with the running price and a copy button."""

    def __init__(self, master: tk.Misc, title: str = "ご依頼内容", price_label: str = "合計金額"):
        super().__init__(master, fg_color=theme.PALETTE["panel"], corner_radius=8)
        self._price_label = price_label
        self._total_var = tk.StringVar(value=f"{price_label}: {PricingEngine.format_currency(0)}")
        self._hint_var = tk.StringVar(value="")

        ctk.CTkLabel(self, text=title, font=(theme.FONT, 12, "bold")).grid(row=0, column=0, sticky="w", padx=8, pady=(8, 2))
        self._copy_btn = ctk.CTkButton(self, text="コピー", width=80, command=self._copy)
        self._copy_btn.grid(row=0, column=1, sticky="e", padx=8, pady=(8, 2))

        self._text = ctk.CTkTextbox(self, height=220, wrap="word")
        self._text.grid(row=1, column=0, columnspan=2, sticky="nsew", padx=8)
        self._text.configure(state="disabled")

        ctk.CTkLabel(self, textvariable=self._total_var, font=(theme.FONT, 13, "bold")).grid(
            row=2, column=0, columnspan=2, sticky="e", padx=8, pady=(6, 0)
        )
        ctk.CTkLabel(self, textvariable=self._hint_var, text_color=theme.PALETTE["muted"]).grid(
            row=3, column=0, columnspan=2, sticky="w", padx=8, pady=(0, 8)
        )

        self.columnconfigure(0, weight=1)
        self.rowconfigure(1, weight=1)

    def update_values(self, summary: str, total: int, detail: str = "") -> None:
        self._text.configure(state="normal")
        self._text.delete("1.0", tk.END)
        self._text.insert("1.0", summary)
        self._text.configure(state="disabled")
        self._total_var.set(f"{self._price_label}: {PricingEngine.format_currency(total)}")
        if summary:
            self._hint_var.set(detail)
        else:
            self._hint_var.set("必須項目を入力すると内容が表示されます")
        self._copy_btn.configure(state="normal" if summary else "disabled")

    def _copy(self) -> None:
        text = self._text.get("1.0", "end-1c")
        if not text:
            return
        self.clipboard_clear()
        self.clipboard_append(text)
        self._hint_var.set("クリップボードにコピーしました")

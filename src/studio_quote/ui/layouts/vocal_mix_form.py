import tkinter as tk
import customtkinter as ctk
from typing import Callable

from studio_quote.core.calculations.pricing_engine import PricingEngine
from studio_quote.core.services.session import VocalMixSession
from studio_quote.ui.components.summary_panel import SummaryPanel
from studio_quote.ui.styles import theme

OPTION_TITLES = {
    "vocal_addition": "ボーカル追加",
    "encoding": "エンコード",
    "urgent_three_day": "お急ぎ納品 (3日以内)",
    "urgent_seven_day": "お急ぎ納品 (7日以内)",
}

FIELD_TITLES = (
    ("name", "お名前"),
    ("email", "メールアドレス"),
    ("video_url", "動画URL"),
)


class VocalMixFormFrame(ctk.CTkFrame):
    """Option picker and request form for the vocal mix service."""

    def __init__(self, master: tk.Misc, session: VocalMixSession, on_submit: Callable[[], None]):
        super().__init__(master, fg_color="transparent")
        self.session = session
        self._on_submit = on_submit
        self._updating = False
        fmt = PricingEngine.format_currency

        options_frame = ctk.CTkFrame(self, fg_color=theme.PALETTE["panel"], corner_radius=8)
        options_frame.grid(row=0, column=0, sticky="nsew", padx=(0, 8))
        ctk.CTkLabel(
            options_frame,
            text=f"基本プラン {fmt(session.config.base_price)}",
            font=(theme.FONT, 12, "bold"),
        ).grid(row=0, column=0, columnspan=2, sticky="w", padx=8, pady=(8, 4))

        self._selected_vars: dict[str, tk.BooleanVar] = {}
        for row, (key, selection) in enumerate(session.options.items(), start=1):
            var = tk.BooleanVar(value=selection.selected)
            self._selected_vars[key] = var
            ctk.CTkCheckBox(
                options_frame,
                text=f"{OPTION_TITLES[key]}  + {fmt(selection.unit_price)}",
                variable=var,
                command=lambda k=key: self._toggle_option(k),
            ).grid(row=row, column=0, sticky="w", padx=8, pady=2)

        self._qty_var = tk.StringVar(value=str(session.options.vocal_addition.quantity))
        self._qty_combo = ctk.CTkComboBox(
            options_frame,
            values=[str(q) for q in session.config.quantity_choices],
            variable=self._qty_var,
            width=80,
            state="readonly",
            command=lambda _val: self._change_quantity(),
        )
        self._qty_combo.grid(row=1, column=1, sticky="e", padx=8)
        theme.style_combo_box(self._qty_combo, theme.PALETTE)

        fields_frame = ctk.CTkFrame(self, fg_color=theme.PALETTE["panel"], corner_radius=8)
        fields_frame.grid(row=1, column=0, sticky="nsew", padx=(0, 8), pady=(8, 0))
        fields_frame.columnconfigure(1, weight=1)
        self._field_vars: dict[str, tk.StringVar] = {}
        for row, (field, title) in enumerate(FIELD_TITLES):
            var = tk.StringVar()
            self._field_vars[field] = var
            ctk.CTkLabel(fields_frame, text=title).grid(row=row, column=0, sticky="w", padx=8, pady=2)
            ctk.CTkEntry(fields_frame, textvariable=var).grid(row=row, column=1, sticky="ew", padx=8, pady=2)
            var.trace_add("write", lambda *_, f=field: self._change_field(f))

        self._url_warning = ctk.CTkLabel(
            fields_frame, text="URLの形式が正しくない可能性があります", text_color=theme.PALETTE["warning"]
        )
        self._url_warning.grid(row=len(FIELD_TITLES), column=1, sticky="w", padx=8)
        self._url_warning.grid_remove()

        ctk.CTkLabel(fields_frame, text="その他のご要望").grid(row=len(FIELD_TITLES) + 1, column=0, sticky="nw", padx=8)
        self._notes = ctk.CTkTextbox(fields_frame, height=90)
        self._notes.grid(row=len(FIELD_TITLES) + 1, column=1, sticky="ew", padx=8, pady=(2, 8))
        self._notes.bind("<<Modified>>", self._notes_modified, add="+")

        self.summary = SummaryPanel(self, price_label="合計金額")
        self.summary.grid(row=0, column=1, rowspan=2, sticky="nsew")

        self.submit_btn = theme.accent_button(self, "依頼を送信", self._on_submit)
        self.submit_btn.grid(row=2, column=0, columnspan=2, sticky="e", pady=(8, 0))

        self.columnconfigure(0, weight=1)
        self.columnconfigure(1, weight=1)
        self.rowconfigure(1, weight=1)
        self.refresh()

    def _toggle_option(self, key: str) -> None:
        if self._updating:
            return
        self.session.update_option(key, "selected", bool(self._selected_vars[key].get()))
        self.refresh()

    def _change_quantity(self) -> None:
        try:
            qty = int(self._qty_var.get())
        except ValueError:
            return
        self.session.update_option("vocal_addition", "quantity", qty)
        self.refresh()

    def _change_field(self, field: str) -> None:
        if self._updating:
            return
        self.session.set_field(field, self._field_vars[field].get())
        self.refresh()

    def _notes_modified(self, _event=None) -> None:
        # <<Modified>> fires once per flag change, so the flag is cleared after each edit.
        if not self._notes.edit_modified():
            return
        self._notes.edit_modified(False)
        if not self._updating:
            self._change_notes()

    def _change_notes(self) -> None:
        self.session.set_field("other_requests", self._notes.get("1.0", "end-1c"))
        self.refresh()

    def refresh(self) -> None:
        """Pull the current session state into the widgets."""
        self._updating = True
        try:
            for key, selection in self.session.options.items():
                self._selected_vars[key].set(selection.selected)
            self._qty_var.set(str(self.session.options.vocal_addition.quantity))
            for field, var in self._field_vars.items():
                value = getattr(self.session.form, field)
                if var.get() != value:
                    var.set(value)
            if self._notes.get("1.0", "end-1c") != self.session.form.other_requests:
                self._notes.delete("1.0", tk.END)
                self._notes.insert("1.0", self.session.form.other_requests)
        finally:
            self._updating = False

        if self.session.url_warning:
            self._url_warning.grid()
        else:
            self._url_warning.grid_remove()
        breakdown = self.session.breakdown
        fmt = PricingEngine.format_currency
        detail = f"基本プラン {fmt(breakdown.base)} + オプション {fmt(breakdown.extras)}"
        self.summary.update_values(self.session.summary, breakdown.total, detail)
        self.sync_submit_button()

    def sync_submit_button(self) -> None:
        self.submit_btn.configure(
            text="送信中..." if self.session.submitting else "依頼を送信",
            state="normal" if self.session.can_send else "disabled",
        )

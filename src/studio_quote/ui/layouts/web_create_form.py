import tkinter as tk
import customtkinter as ctk
from typing import Callable

from studio_quote.core.calculations.pricing_engine import PricingEngine
from studio_quote.core.services.session import WebCreateSession
from studio_quote.ui.components.summary_panel import SummaryPanel
from studio_quote.ui.styles import theme

FIELD_TITLES = (
    ("name", "お名前"),
    ("email", "メールアドレス"),
    ("contact_info", "その他の連絡先"),
    ("site_overview", "サイトの概要"),
    ("deadline", "希望納期"),
    ("budget", "ご予算"),
)


class WebCreateFormFrame(ctk.CTkFrame):
    """Request form for website creation with a dynamic list of pages."""

    def __init__(self, master: tk.Misc, session: WebCreateSession, on_submit: Callable[[], None]):
        super().__init__(master, fg_color="transparent")
        self.session = session
        self._on_submit = on_submit
        self._updating = False

        fields_frame = ctk.CTkFrame(self, fg_color=theme.PALETTE["panel"], corner_radius=8)
        fields_frame.grid(row=0, column=0, sticky="nsew", padx=(0, 8))
        fields_frame.columnconfigure(1, weight=1)
        self._field_vars: dict[str, tk.StringVar] = {}
        for row, (field, title) in enumerate(FIELD_TITLES):
            var = tk.StringVar()
            self._field_vars[field] = var
            ctk.CTkLabel(fields_frame, text=title).grid(row=row, column=0, sticky="w", padx=8, pady=2)
            ctk.CTkEntry(fields_frame, textvariable=var).grid(row=row, column=1, sticky="ew", padx=8, pady=2)
            var.trace_add("write", lambda *_, f=field: self._change_field(f))

        pages_header = ctk.CTkFrame(self, fg_color="transparent")
        pages_header.grid(row=1, column=0, sticky="ew", padx=(0, 8), pady=(8, 0))
        ctk.CTkLabel(pages_header, text="ページ構成", font=(theme.FONT, 12, "bold")).pack(side="left")
        ctk.CTkButton(pages_header, text="+ ページを追加", width=120, command=self._add_page).pack(side="right")

        self._pages_frame = ctk.CTkScrollableFrame(self, fg_color=theme.PALETTE["panel"], height=200)
        self._pages_frame.grid(row=2, column=0, sticky="nsew", padx=(0, 8))
        self._pages_frame.columnconfigure(1, weight=1)
        self._page_rows: list[tuple[tk.StringVar, tk.StringVar, list[tk.Misc]]] = []

        self.summary = SummaryPanel(self, price_label="概算見積もり")
        self.summary.grid(row=0, column=1, rowspan=3, sticky="nsew")

        self.submit_btn = theme.accent_button(self, "依頼を送信", self._on_submit)
        self.submit_btn.grid(row=3, column=0, columnspan=2, sticky="e", pady=(8, 0))

        self.columnconfigure(0, weight=1)
        self.columnconfigure(1, weight=1)
        self.rowconfigure(2, weight=1)
        self.refresh()

    def _change_field(self, field: str) -> None:
        if self._updating:
            return
        self.session.set_field(field, self._field_vars[field].get())
        self._refresh_summary()

    def _add_page(self) -> None:
        self.session.add_page()
        self.refresh()

    def _remove_page(self, index: int) -> None:
        self.session.remove_page(index)
        self.refresh()

    def _change_page(self, index: int, field: str, var: tk.StringVar) -> None:
        if self._updating:
            return
        self.session.update_page(index, field, var.get())
        self._refresh_summary()

    def _rebuild_pages(self) -> None:
        for _name, _content, widgets in self._page_rows:
            for widget in widgets:
                widget.destroy()
        self._page_rows = []

        pages = self.session.form.pages
        for index, page in enumerate(pages):
            name_var = tk.StringVar(value=page.name)
            content_var = tk.StringVar(value=page.content)
            row = index * 2
            name_label = ctk.CTkLabel(self._pages_frame, text=f"{index + 1}. ページ名")
            name_label.grid(row=row, column=0, sticky="w", padx=(8, 4), pady=(6, 0))
            name_entry = ctk.CTkEntry(self._pages_frame, textvariable=name_var)
            name_entry.grid(row=row, column=1, sticky="ew", pady=(6, 0))
            content_label = ctk.CTkLabel(self._pages_frame, text="内容")
            content_label.grid(row=row + 1, column=0, sticky="e", padx=(8, 4), pady=(2, 0))
            content_entry = ctk.CTkEntry(self._pages_frame, textvariable=content_var)
            content_entry.grid(row=row + 1, column=1, sticky="ew", pady=(2, 0))
            widgets: list[tk.Misc] = [name_label, name_entry, content_label, content_entry]
            if len(pages) > 1:
                remove_btn = ctk.CTkButton(
                    self._pages_frame, text="削除", width=60, command=lambda i=index: self._remove_page(i)
                )
                remove_btn.grid(row=row, column=2, padx=8, pady=(6, 0))
                widgets.append(remove_btn)
            name_var.trace_add("write", lambda *_, i=index, v=name_var: self._change_page(i, "name", v))
            content_var.trace_add("write", lambda *_, i=index, v=content_var: self._change_page(i, "content", v))
            self._page_rows.append((name_var, content_var, widgets))

    def _refresh_summary(self) -> None:
        pages = len(self.session.form.pages)
        fmt = PricingEngine.format_currency
        detail = f"{pages}ページ × {fmt(self.session.config.price_per_page)} = {fmt(self.session.estimated_price)}"
        self.summary.update_values(self.session.summary, self.session.estimated_price, detail)
        self.sync_submit_button()

    def refresh(self) -> None:
        self._updating = True
        try:
            for field, var in self._field_vars.items():
                value = getattr(self.session.form, field)
                if var.get() != value:
                    var.set(value)
            self._rebuild_pages()
        finally:
            self._updating = False
        self._refresh_summary()

    def sync_submit_button(self) -> None:
        self.submit_btn.configure(
            text="送信中..." if self.session.submitting else "依頼を送信",
            state="normal" if self.session.can_send else "disabled",
        )

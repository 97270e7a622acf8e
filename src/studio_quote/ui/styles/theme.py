import tkinter as tk
from typing import Dict

import customtkinter as ctk

THEMES: Dict[str, dict] = {
    "light": {
        "bg": "#f8f9fc",
        "surface": "#ffffff",
        "panel": "#f2f5f9",
        "muted": "#475467",
        "text": "#0f172a",
        "accent": "#2563eb",
        "accent_dim": "#1d4ed8",
        "border": "#d7dde7",
        "warning": "#dc2626",
    },
    "studio_dark": {
        "bg": "#0e1117",
        "surface": "#161b24",
        "panel": "#1d2430",
        "muted": "#9aa3b2",
        "text": "#f2f5f9",
        "accent": "#8b5cf6",
        "accent_dim": "#7c3aed",
        "border": "#2a3342",
        "warning": "#f87171",
    },
}

ACTIVE_THEME = "studio_dark"
PALETTE = THEMES[ACTIVE_THEME]

FONT = "Yu Gothic UI"


def apply_theme(root: tk.Misc, name: str = "studio_dark") -> dict:
    global ACTIVE_THEME, PALETTE
    if name not in THEMES:
        name = "studio_dark"
    ACTIVE_THEME = name
    PALETTE = THEMES[name]

    appearance = "Light" if name == "light" else "Dark"
    ctk.set_appearance_mode(appearance)
    ctk.set_default_color_theme("blue" if appearance == "Light" else "dark-blue")
    root.configure(fg_color=PALETTE["bg"])
    return PALETTE


def style_combo_box(combo: ctk.CTkComboBox, palette: dict) -> None:
    """Apply palette to quantity/choice combo boxes so they stay readable in both themes."""
    combo.configure(
        fg_color=palette["surface"],
        border_color=palette["border"],
        button_color=palette["accent"],
        button_hover_color=palette["accent_dim"],
        text_color=palette["text"],
        dropdown_fg_color=palette["surface"],
        dropdown_text_color=palette["text"],
        corner_radius=10,
        border_width=1,
    )


def accent_button(master: tk.Misc, text: str, command, palette: dict | None = None) -> ctk.CTkButton:
    palette = palette or PALETTE
    return ctk.CTkButton(
        master,
        text=text,
        command=command,
        fg_color=palette["accent"],
        hover_color=palette["accent_dim"],
        text_color="#ffffff",
    )

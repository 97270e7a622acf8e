import customtkinter as ctk

from studio_quote.core.services.catalog import PricingConfig
from studio_quote.core.services.session import VocalMixSession, WebCreateSession
from studio_quote.ui.controllers.submission_controller import SubmissionController
from studio_quote.ui.layouts.vocal_mix_form import VocalMixFormFrame
from studio_quote.ui.layouts.web_create_form import WebCreateFormFrame
from studio_quote.ui.styles import theme

VOCAL_TAB = "ボーカルミックス"
WEB_TAB = "Web制作"


class MainWindow(ctk.CTk):
    def __init__(self, config: PricingConfig, theme_name: str = "studio_dark"):
        super().__init__()
        self._palette = theme.apply_theme(self, theme_name)
        self.title("お見積もり・ご依頼")
        self.geometry("1100x720")
        self.minsize(900, 600)

        self._config = config
        self._submission = SubmissionController(self)

        self.tabs = ctk.CTkTabview(self)
        self.tabs.pack(fill="both", expand=True, padx=12, pady=12)
        vocal_tab = self.tabs.add(VOCAL_TAB)
        web_tab = self.tabs.add(WEB_TAB)

        self.vocal_form = VocalMixFormFrame(
            vocal_tab,
            VocalMixSession(config),
            on_submit=lambda: self._submission.request_submit(self.vocal_form),
        )
        self.vocal_form.pack(fill="both", expand=True)

        self.web_form = WebCreateFormFrame(
            web_tab,
            WebCreateSession(config),
            on_submit=lambda: self._submission.request_submit(self.web_form),
        )
        self.web_form.pack(fill="both", expand=True)

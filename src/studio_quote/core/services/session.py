from __future__ import annotations

from dataclasses import replace

from studio_quote.core.calculations.pricing_engine import (
    PricingBreakdown,
    PricingEngine,
    apply_selection_update,
    estimate_web_price,
)
from studio_quote.core.models.forms import PageSpec, VocalMixForm, WebCreateForm
from studio_quote.core.services.catalog import PricingConfig
from studio_quote.core.services.submission import build_payload
from studio_quote.core.services.summary import generate_order_summary, generate_web_create_summary
from studio_quote.core.services.validation import should_warn_url


class _RequestSession:
    """Send bookkeeping shared by both forms. At most one request is in flight."""

    def __init__(self, config: PricingConfig | None = None) -> None:
        self.config = config or PricingConfig()
        self.submitting = False

    @property
    def summary(self) -> str:
        raise NotImplementedError

    @property
    def can_submit(self) -> bool:
        return bool(self.summary)

    @property
    def can_send(self) -> bool:
        return self.can_submit and not self.submitting

    def payload(self) -> dict:
        return build_payload(self.form.name, self.form.email, self.summary)

    def begin_submit(self) -> dict | None:
        """Mark a request as in flight and return its payload; None when one is pending or the form is incomplete."""
        if not self.can_send:
            return None
        self.submitting = True
        return self.payload()

    def finish_submit(self, ok: bool) -> None:
        self.submitting = False
        if ok:
            self.reset()

    def reset(self) -> None:
        raise NotImplementedError


class VocalMixSession(_RequestSession):
    """
    Form state for one vocal mix request: selected options and customer fields.
    Total and summary are derived on every call.
    """

    def __init__(self, config: PricingConfig | None = None) -> None:
        super().__init__(config)
        self.pricing = PricingEngine(self.config.base_price)
        self.options = self.config.default_options()
        self.form = VocalMixForm()

    def set_field(self, field: str, value: str) -> None:
        self.form = replace(self.form, **{field: value})

    def update_option(self, key: str, field: str, value: bool | int) -> None:
        self.options = apply_selection_update(self.options, key, field, value)

    @property
    def breakdown(self) -> PricingBreakdown:
        return self.pricing.summarize(self.options)

    @property
    def total(self) -> int:
        return self.pricing.total(self.options)

    @property
    def summary(self) -> str:
        return generate_order_summary(self.form, self.options, self.total, self.config.contact_method)

    @property
    def url_warning(self) -> bool:
        return should_warn_url(self.form.video_url)

    def reset(self) -> None:
        self.options = self.config.default_options()
        self.form = VocalMixForm()


class WebCreateSession(_RequestSession):
    """Form state for a website request; the price follows the number of pages."""

    def __init__(self, config: PricingConfig | None = None) -> None:
        super().__init__(config)
        self.form = WebCreateForm()

    def set_field(self, field: str, value: str) -> None:
        if field == "pages":
            raise ValueError("use add_page/remove_page/update_page for pages")
        self.form = replace(self.form, **{field: value})

    def add_page(self) -> None:
        self.form = replace(self.form, pages=[*self.form.pages, PageSpec()])

    def remove_page(self, index: int) -> None:
        if len(self.form.pages) <= 1:
            return
        pages = [page for i, page in enumerate(self.form.pages) if i != index]
        self.form = replace(self.form, pages=pages)

    def update_page(self, index: int, field: str, value: str) -> None:
        pages = list(self.form.pages)
        pages[index] = replace(pages[index], **{field: value})
        self.form = replace(self.form, pages=pages)

    @property
    def estimated_price(self) -> int:
        return estimate_web_price(len(self.form.pages), self.config.price_per_page)

    @property
    def summary(self) -> str:
        return generate_web_create_summary(
            self.form,
            self.config.contact_method,
            estimated_price=self.estimated_price,
            price_per_page=self.config.price_per_page,
        )

    def reset(self) -> None:
        self.form = WebCreateForm()

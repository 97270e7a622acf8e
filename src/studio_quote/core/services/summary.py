from __future__ import annotations

import re

from studio_quote.core.calculations.pricing_engine import PRICE_PER_PAGE, PricingEngine
from studio_quote.core.models.forms import VocalMixForm, WebCreateForm
from studio_quote.core.models.option import QuoteOptions

SEPARATOR = "-" * 46
UNNAMED_PAGE = "(未入力)"
TOTAL_LABEL = "合計金額 : "

# Order matters: lines are emitted in this sequence.
OPTION_LABELS = {
    "vocal_addition": "・ボーカル追加: {quantity}人",
    "encoding": "・エンコード",
    "urgent_three_day": "・お急ぎ納品 (3日以内)",
    "urgent_seven_day": "・お急ぎ納品 (7日以内)",
}

_TOTAL_RE = re.compile(r"^" + re.escape(TOTAL_LABEL) + r"¥([\d,]+)$")


def _blank(value: str | None) -> bool:
    return not (value or "").strip()


def _identity_lines(name: str, email: str, contact_method: str, sep: str) -> list[str]:
    lines = [f"名前{sep}{name}"]
    if contact_method == "email" and not _blank(email):
        lines.append(f"メール{sep}{email}")
    return lines


def generate_order_summary(
    form: VocalMixForm,
    options: QuoteOptions,
    total: int,
    contact_method: str = "email",
) -> str:
    """
    Build the plain-text vocal mix order shown to the customer and sent as the message body.

    Returns "" while the name or the video URL is still blank.
    """
    if _blank(form.name) or _blank(form.video_url):
        return ""

    lines = _identity_lines(form.name, form.email, contact_method, " : ")
    lines.append(f"動画URL : {form.video_url}")
    lines.append(SEPARATOR)
    lines.append("ボーカルミックス基本プラン")
    for key, selection in options.items():
        if selection.selected:
            lines.append(OPTION_LABELS[key].format(quantity=selection.quantity))
    lines.append(SEPARATOR)

    notes = (form.other_requests or "").strip()
    if notes:
        lines.append("その他のご要望・ご質問等 : ")
        lines.append(notes)
        lines.append(SEPARATOR)
    lines.append(TOTAL_LABEL + PricingEngine.format_currency(total))
    return "\n".join(lines)


def generate_web_create_summary(
    form: WebCreateForm,
    contact_method: str = "email",
    estimated_price: int | None = None,
    price_per_page: int = PRICE_PER_PAGE,
) -> str:
    """Build the website request summary; "" while the name or site overview is blank."""
    if _blank(form.name) or _blank(form.site_overview):
        return ""

    lines = _identity_lines(form.name, form.email, contact_method, ": ")
    lines.append(f"サイトの概要: {form.site_overview}")
    lines.append(SEPARATOR)
    lines.append("ページ構成:")
    for index, page in enumerate(form.pages, start=1):
        if not (page.name or page.content):
            continue
        lines.append(f"{index}. {page.name or UNNAMED_PAGE}")
        if page.content:
            lines.append(f"   内容: {page.content}")
    lines.append(SEPARATOR)

    if estimated_price is not None:
        fmt = PricingEngine.format_currency
        lines.append(f"概算見積もり: {fmt(estimated_price)} ({len(form.pages)}ページ × {fmt(price_per_page)})")
        lines.append("※内容により料金は変動いたします")
        lines.append(SEPARATOR)

    if not _blank(form.deadline):
        lines.append(f"納期: {form.deadline}")
    if not _blank(form.budget):
        lines.append(f"予算: {form.budget}")
    return "\n".join(lines)


def parse_summary_total(summary: str) -> int | None:
    """Read the total back out of a vocal mix summary's last line."""
    if not summary:
        return None
    match = _TOTAL_RE.match(summary.splitlines()[-1])
    if not match:
        return None
    return int(match.group(1).replace(",", ""))

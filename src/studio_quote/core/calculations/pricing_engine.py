from __future__ import annotations

from dataclasses import dataclass, replace

from studio_quote.core.models.option import OptionSelection, QuoteOptions

PRICE_PER_PAGE = 1500

# Selecting one side of a pair clears the other.
EXCLUSIVE_OPTIONS: tuple[tuple[str, str], ...] = (
    ("urgent_three_day", "urgent_seven_day"),
    ("urgent_seven_day", "urgent_three_day"),
)

_EDITABLE_FIELDS = {"selected", "quantity", "unit_price"}


@dataclass
class PricingBreakdown:
    base: int
    extras: int

    @property
    def total(self) -> int:
        return self.base + self.extras


def compute_total(base_price: int, options: QuoteOptions) -> int:
    return base_price + sum(selection.line_total for _key, selection in options.items())


def estimate_web_price(page_count: int, price_per_page: int = PRICE_PER_PAGE) -> int:
    return page_count * price_per_page


def apply_selection_update(prev: QuoteOptions, key: str, field: str, value: bool | int) -> QuoteOptions:
    """
    Return a new QuoteOptions with ``prev.<key>.<field>`` set to ``value``.

    ``prev`` is left untouched. Turning on one side of an exclusive pair
    deselects its partner in the result.
    """
    if field not in _EDITABLE_FIELDS:
        raise ValueError(f"unknown option field: {field}")
    current: OptionSelection = prev.get(key)
    updated = replace(prev, **{key: replace(current, **{field: value})})

    if field == "selected" and value is True:
        for source, conflicting in EXCLUSIVE_OPTIONS:
            if source == key:
                other = updated.get(conflicting)
                updated = replace(updated, **{conflicting: replace(other, selected=False)})
    return updated


class PricingEngine:
    """Simple calculator that sums a base price with selected add-on options."""

    def __init__(self, base_price: int = 0):
        self.base_price = base_price

    def summarize(self, options: QuoteOptions) -> PricingBreakdown:
        extras = compute_total(0, options)
        return PricingBreakdown(base=self.base_price, extras=extras)

    def total(self, options: QuoteOptions) -> int:
        return compute_total(self.base_price, options)

    @staticmethod
    def format_currency(value: int) -> str:
        return f"¥{value:,}"

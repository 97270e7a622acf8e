from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path

from studio_quote.core.calculations.pricing_engine import PRICE_PER_PAGE
from studio_quote.core.models.option import QuoteOptions

logger = logging.getLogger(__name__)

PRICING_PATH = Path(__file__).resolve().parents[2] / "data" / "pricing.json"


def _default_option_prices() -> dict[str, int]:
    return {
        "vocal_addition": 2000,
        "encoding": 500,
        "urgent_three_day": 2000,
        "urgent_seven_day": 1000,
    }


def _default_quantity_choices() -> list[int]:
    return [1, 2, 3, 4, 5]


@dataclass
class PricingConfig:
    """Price list and form settings for both services."""

    base_price: int = 3000
    option_prices: dict[str, int] = field(default_factory=_default_option_prices)
    quantity_choices: list[int] = field(default_factory=_default_quantity_choices)
    price_per_page: int = PRICE_PER_PAGE
    contact_method: str = "email"
    submit_delay: float = 1.0

    def default_options(self) -> QuoteOptions:
        return QuoteOptions.default(**self.option_prices)


def _parse_config(data: dict) -> PricingConfig:
    vocal = data.get("vocal_mix", {})
    web = data.get("web_create", {})
    submission = data.get("submission", {})
    defaults = PricingConfig()

    prices = dict(defaults.option_prices)
    for key, value in (vocal.get("options") or {}).items():
        if key not in prices:
            raise KeyError(f"unknown option in pricing config: {key}")
        prices[key] = int(value)

    choices = [int(q) for q in vocal.get("quantity_choices", defaults.quantity_choices)]
    if not choices or min(choices) < 1:
        raise ValueError("quantity_choices must be positive integers")

    return PricingConfig(
        base_price=int(vocal.get("base_price", defaults.base_price)),
        option_prices=prices,
        quantity_choices=choices,
        price_per_page=int(web.get("price_per_page", defaults.price_per_page)),
        contact_method=str(submission.get("contact_method", defaults.contact_method)),
        submit_delay=float(submission.get("delay_seconds", defaults.submit_delay)),
    )


def load_pricing_config(path: str | Path | None = None) -> PricingConfig:
    """
    Load the price list from JSON; fall back to built-in defaults.

    A missing or broken file is logged and never stops the application.
    """
    target = Path(path) if path else PRICING_PATH
    if not target.exists():
        logger.warning("Pricing config %s not found, using defaults", target)
        return PricingConfig()
    try:
        data = json.loads(target.read_text(encoding="utf-8"))
        return _parse_config(data)
    except (OSError, ValueError, TypeError, KeyError, AttributeError) as exc:
        logger.warning("Failed to load pricing config %s: %s", target, exc)
        return PricingConfig()


def save_pricing_config(config: PricingConfig, path: str | Path | None = None) -> Path:
    target = Path(path) if path else PRICING_PATH
    target.parent.mkdir(parents=True, exist_ok=True)
    raw = asdict(config)
    payload = {
        "vocal_mix": {
            "base_price": raw["base_price"],
            "quantity_choices": raw["quantity_choices"],
            "options": raw["option_prices"],
        },
        "web_create": {"price_per_page": raw["price_per_page"]},
        "submission": {
            "contact_method": raw["contact_method"],
            "delay_seconds": raw["submit_delay"],
        },
    }
    target.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
    return target

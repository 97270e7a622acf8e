from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Iterator


@dataclass(frozen=True)
class OptionSelection:
    """A single paid add-on with its selection state."""

    unit_price: int
    selected: bool = False
    quantity: int = 1
    quantity_capable: bool = False

    @property
    def line_total(self) -> int:
        if not self.selected:
            return 0
        qty = self.quantity if self.quantity_capable else 1
        return self.unit_price * qty


@dataclass(frozen=True)
class QuoteOptions:
    """The full set of vocal-mix add-ons for one quoting session."""

    vocal_addition: OptionSelection
    encoding: OptionSelection
    urgent_three_day: OptionSelection
    urgent_seven_day: OptionSelection

    @classmethod
    def default(
        cls,
        vocal_addition: int = 2000,
        encoding: int = 500,
        urgent_three_day: int = 2000,
        urgent_seven_day: int = 1000,
    ) -> "QuoteOptions":
        return cls(
            vocal_addition=OptionSelection(unit_price=vocal_addition, quantity_capable=True),
            encoding=OptionSelection(unit_price=encoding),
            urgent_three_day=OptionSelection(unit_price=urgent_three_day),
            urgent_seven_day=OptionSelection(unit_price=urgent_seven_day),
        )

    @classmethod
    def keys(cls) -> list[str]:
        return [f.name for f in fields(cls)]

    def get(self, key: str) -> OptionSelection:
        if key not in self.keys():
            raise KeyError(key)
        return getattr(self, key)

    def items(self) -> Iterator[tuple[str, OptionSelection]]:
        for key in self.keys():
            yield key, getattr(self, key)

# SPDX-License-Identifier: MIT
"""Basket and item model — the mutable cart promotions are evaluated against."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


def to_money(value: Decimal | float | int | str) -> Decimal:
    """Coerce to Decimal via str() so 5.0 becomes Decimal("5.0"), not its binary expansion."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def format_item(name: str, price: Decimal) -> str:
    return f"Name: {name}\nPrice: {price}\n---"


def format_basket_lines(items: Iterable[tuple[str, Decimal]], total: Decimal) -> str:
    """Basket text layout shared by ``Basket.__str__`` and the report renderer."""
    lines = ["Basket:"]
    lines.extend(format_item(name, price) for name, price in items)
    lines.append("========")
    lines.append(f"Total: {total}")
    return "\n".join(lines)


@dataclass(frozen=True)
class Item:
    """A named, priced line entry within a basket."""

    name: str
    price: Decimal

    def __post_init__(self) -> None:
        object.__setattr__(self, "price", to_money(self.price))

    def __str__(self) -> str:
        return format_item(self.name, self.price)


class Basket:
    """Ordered items plus an incrementally maintained running total.

    The total is never recomputed from the items: it is the sum of every
    price passed through ``add_item`` minus every amount passed to
    ``decrease_total``. It has no floor and may go negative.
    """

    def __init__(self, created: datetime | None = None) -> None:
        self._items: list[Item] = []
        self._total = Decimal("0")
        self._created = created if created is not None else datetime.now()

    @property
    def items(self) -> list[Item]:
        return list(self._items)

    @property
    def total(self) -> Decimal:
        return self._total

    @property
    def created(self) -> datetime:
        return self._created

    def add_item(self, item: Item) -> None:
        self._items.append(item)
        self._total += item.price

    def decrease_total(self, amount: Decimal | float | int | str) -> None:
        self._total -= to_money(amount)

    def __len__(self) -> int:
        return len(self._items)

    def __str__(self) -> str:
        return format_basket_lines(((i.name, i.price) for i in self._items), self._total)

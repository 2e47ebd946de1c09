# SPDX-License-Identifier: MIT
"""Seasonal promotions — month-gated rules that add a bonus item and a discount."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from promorules.model import Basket, Item
from promorules.rules.base import Clock


class SeasonalPromotion:
    """Base for rules active when both now and basket creation fall in ``month``.

    Two separate time references are read: the evaluation moment from the
    injected clock, and ``basket.created``.
    """

    id: str
    description: str
    discount: Decimal
    month: int
    bonus_item: str

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock: Clock = clock or datetime.now

    def matches(self, basket: Basket) -> bool:
        return self._clock().month == self.month and basket.created.month == self.month

    def apply(self, basket: Basket) -> None:
        basket.add_item(Item(name=self.bonus_item, price=Decimal("0.00")))
        basket.decrease_total(self.discount)

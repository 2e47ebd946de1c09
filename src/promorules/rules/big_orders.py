# SPDX-License-Identifier: MIT
"""Big-order discount — 100.00 off any basket whose running total exceeds 1000.00."""

from __future__ import annotations

from decimal import Decimal

from promorules.model import Basket

BIG_ORDER_THRESHOLD = Decimal("1000.00")


class DiscountForBigOrdersPromotion:
    """Flat discount for baskets strictly above the threshold. Adds no item."""

    id = "big-orders"
    description = "Baskets over 1000.00 get 100.00 off"
    discount = Decimal("100.00")

    def matches(self, basket: Basket) -> bool:
        return basket.total > BIG_ORDER_THRESHOLD

    def apply(self, basket: Basket) -> None:
        basket.decrease_total(self.discount)

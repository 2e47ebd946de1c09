# SPDX-License-Identifier: MIT
"""Christmas promotion — late-December baskets get a Santa hat and 10.00 off."""

from __future__ import annotations

from decimal import Decimal

from promorules.model import Basket
from promorules.rules.seasonal import SeasonalPromotion

# Baskets created on or before this day of December do not qualify
_LAST_EXCLUDED_DAY = 20


class ChristmasPromotion(SeasonalPromotion):
    id = "christmas"
    description = "December baskets created after the 20th get a free Santa hat and 10.00 off"
    discount = Decimal("10.00")
    month = 12
    bonus_item = "Promo - Santa Hat"

    def matches(self, basket: Basket) -> bool:
        return super().matches(basket) and basket.created.day > _LAST_EXCLUDED_DAY

# SPDX-License-Identifier: MIT
"""Halloween promotion — October baskets get a skeleton suit and 13.00 off."""

from __future__ import annotations

from decimal import Decimal

from promorules.rules.seasonal import SeasonalPromotion


class HalloweenPromotion(SeasonalPromotion):
    id = "halloween"
    description = "October baskets get a free skeleton suit and 13.00 off"
    discount = Decimal("13.00")
    month = 10
    bonus_item = "Promo - Creepy Skeleton Suit"

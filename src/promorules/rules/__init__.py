# SPDX-License-Identifier: MIT
"""Promotion rules — predicate + effect pairs and the engine that applies them."""

from promorules.rules.base import Clock, Rule
from promorules.rules.big_orders import BIG_ORDER_THRESHOLD, DiscountForBigOrdersPromotion
from promorules.rules.christmas import ChristmasPromotion
from promorules.rules.engine import PromotionEngine
from promorules.rules.halloween import HalloweenPromotion
from promorules.rules.registry import RULE_REGISTRY, RULES_BY_ID, create_rules
from promorules.rules.seasonal import SeasonalPromotion

__all__ = [
    "BIG_ORDER_THRESHOLD",
    "RULES_BY_ID",
    "RULE_REGISTRY",
    "ChristmasPromotion",
    "Clock",
    "DiscountForBigOrdersPromotion",
    "HalloweenPromotion",
    "PromotionEngine",
    "Rule",
    "SeasonalPromotion",
    "create_rules",
]

# SPDX-License-Identifier: MIT
"""promorules — a basket, a handful of promotion rules, and the engine that applies them."""

from promorules.config import EngineConfig, load_config
from promorules.model import Basket, Item
from promorules.report import format_report
from promorules.rules import (
    ChristmasPromotion,
    DiscountForBigOrdersPromotion,
    HalloweenPromotion,
    PromotionEngine,
    Rule,
    create_rules,
)
from promorules.schema import AppliedPromotion, BasketSnapshot, ItemSnapshot, PromotionReport

__all__ = [
    "AppliedPromotion",
    "Basket",
    "BasketSnapshot",
    "ChristmasPromotion",
    "DiscountForBigOrdersPromotion",
    "EngineConfig",
    "HalloweenPromotion",
    "Item",
    "ItemSnapshot",
    "PromotionEngine",
    "PromotionReport",
    "Rule",
    "create_rules",
    "format_report",
    "load_config",
]

# SPDX-License-Identifier: MIT
"""Promotion engine — applies every matching rule to a basket, in declared order."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from promorules.rules.base import Rule
from promorules.schema import AppliedPromotion, BasketSnapshot, PromotionReport

if TYPE_CHECKING:
    from promorules.model import Basket

log = logging.getLogger(__name__)


class PromotionEngine:
    """Holds an ordered collection of rules and runs them against baskets.

    Rules are never reordered. Each rule sees the basket as left by the rules
    before it, so the order is part of the observable result.
    """

    def __init__(self, rules: Sequence[Rule] | None = None) -> None:
        if rules is None:
            from promorules.rules.registry import create_rules

            rules = create_rules()
        self._rules: tuple[Rule, ...] = tuple(rules)

    @property
    def rules(self) -> tuple[Rule, ...]:
        return self._rules

    def process(self, basket: Basket) -> PromotionReport:
        """Apply every matching rule to ``basket`` in place and report what changed.

        Exceptions raised by a rule propagate to the caller; rules already
        applied are not rolled back.
        """
        before = BasketSnapshot.from_basket(basket)
        applied: list[AppliedPromotion] = []
        for rule in self._rules:
            if not rule.matches(basket):
                continue
            rule.apply(basket)
            name = type(rule).__name__
            log.info("Applying %s promotion -%s", name, rule.discount)
            applied.append(
                AppliedPromotion(
                    rule_id=rule.id,
                    name=name,
                    discount=rule.discount,
                    bonus_item=getattr(rule, "bonus_item", None),
                )
            )
        return PromotionReport(
            before=before,
            after=BasketSnapshot.from_basket(basket),
            applied=applied,
        )

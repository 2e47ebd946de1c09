# SPDX-License-Identifier: MIT
"""Rule class registry — explicit, ordered list of all promotion rules."""

from __future__ import annotations

from collections.abc import Sequence

from promorules.rules.base import Clock, Rule
from promorules.rules.big_orders import DiscountForBigOrdersPromotion
from promorules.rules.christmas import ChristmasPromotion
from promorules.rules.halloween import HalloweenPromotion
from promorules.rules.seasonal import SeasonalPromotion

RULE_REGISTRY: list[type[Rule]] = [
    ChristmasPromotion,
    HalloweenPromotion,
    DiscountForBigOrdersPromotion,
]

RULES_BY_ID: dict[str, type[Rule]] = {cls.id: cls for cls in RULE_REGISTRY}


def create_rules(rule_ids: Sequence[str] | None = None, *, clock: Clock | None = None) -> list[Rule]:
    """Instantiate rules in the order given (registry order when omitted).

    Seasonal rules receive ``clock`` as their evaluation-time source.

    Raises:
        ValueError: If any id is not in the registry.
    """
    if rule_ids is None:
        classes = list(RULE_REGISTRY)
    else:
        unknown = [rid for rid in rule_ids if rid not in RULES_BY_ID]
        if unknown:
            msg = f"Unknown rule(s): {unknown!r}. Valid rules: {sorted(RULES_BY_ID)}"
            raise ValueError(msg)
        classes = [RULES_BY_ID[rid] for rid in rule_ids]

    rules: list[Rule] = []
    for cls in classes:
        if issubclass(cls, SeasonalPromotion):
            rules.append(cls(clock=clock))
        else:
            rules.append(cls())
    return rules

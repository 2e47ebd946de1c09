# SPDX-License-Identifier: MIT
"""Pydantic snapshots of basket state and the promotions applied to it."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from promorules.model import Basket, Item


class ItemSnapshot(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    price: Decimal

    def to_item(self) -> Item:
        return Item(name=self.name, price=self.price)


class BasketSnapshot(BaseModel):
    """Point-in-time copy of a basket's items, total and creation moment."""

    model_config = ConfigDict(frozen=True)

    items: list[ItemSnapshot]
    total: Decimal
    created: datetime

    @classmethod
    def from_basket(cls, basket: Basket) -> BasketSnapshot:
        return cls(
            items=[ItemSnapshot(name=i.name, price=i.price) for i in basket.items],
            total=basket.total,
            created=basket.created,
        )


class AppliedPromotion(BaseModel):
    """One rule that matched and was applied, in application order."""

    model_config = ConfigDict(frozen=True)

    rule_id: str
    name: str
    discount: Decimal
    bonus_item: str | None = None


class PromotionReport(BaseModel):
    """Result of one engine pass: basket before, basket after, rules applied."""

    before: BasketSnapshot
    after: BasketSnapshot
    applied: list[AppliedPromotion]

    @property
    def applied_rule_ids(self) -> list[str]:
        return [a.rule_id for a in self.applied]

    @property
    def total_discount(self) -> Decimal:
        return sum((a.discount for a in self.applied), Decimal("0"))


class BasketInput(BaseModel):
    """Basket file payload: ``{"created": ISO?, "items": [{"name", "price"}]}``."""

    created: datetime | None = None
    items: list[ItemSnapshot] = Field(default_factory=list)

    def to_basket(self, default_created: datetime | None = None) -> Basket:
        created = self.created if self.created is not None else default_created
        basket = Basket(created=created)
        for snapshot in self.items:
            basket.add_item(snapshot.to_item())
        return basket

# SPDX-License-Identifier: MIT
"""Tests for promorules.model — Item coercion and the Basket running total."""

from __future__ import annotations

import dataclasses
from datetime import datetime
from decimal import Decimal

import pytest
from hypothesis import given
from hypothesis import strategies as st

from promorules.model import Basket, Item

_MONEY = st.decimals(min_value=0, max_value=100_000, places=2, allow_nan=False, allow_infinity=False)

# (is_add, amount) pairs: an add_item or a decrease_total call
_OPERATIONS = st.lists(st.tuples(st.booleans(), _MONEY), max_size=40)


class TestItem:
    def test_decimal_price_kept(self) -> None:
        item = Item(name="Book", price=Decimal("5.00"))
        assert item.price == Decimal("5.00")

    def test_float_price_coerced_via_str(self) -> None:
        item = Item(name="Book", price=0.1)  # type: ignore[arg-type]
        assert item.price == Decimal("0.1")

    def test_int_and_str_prices_coerced(self) -> None:
        assert Item(name="a", price=15).price == Decimal("15")  # type: ignore[arg-type]
        assert Item(name="b", price="1400.00").price == Decimal("1400.00")  # type: ignore[arg-type]

    def test_frozen(self) -> None:
        item = Item(name="Book", price=Decimal("5.00"))
        with pytest.raises(dataclasses.FrozenInstanceError):
            item.price = Decimal("1.00")  # type: ignore[misc]

    def test_str(self) -> None:
        assert str(Item(name="Book", price=Decimal("5.00"))) == "Name: Book\nPrice: 5.00\n---"


class TestBasket:
    def test_new_basket_is_empty(self) -> None:
        basket = Basket()
        assert basket.items == []
        assert basket.total == Decimal("0")
        assert len(basket) == 0

    def test_created_defaults_to_now(self) -> None:
        before = datetime.now()
        basket = Basket()
        after = datetime.now()
        assert before <= basket.created <= after

    def test_created_explicit(self) -> None:
        moment = datetime(2024, 12, 25, 9, 30)
        assert Basket(created=moment).created == moment

    def test_created_is_read_only(self) -> None:
        basket = Basket(created=datetime(2024, 1, 1))
        with pytest.raises(AttributeError):
            basket.created = datetime(2024, 12, 25)  # type: ignore[misc]

    def test_add_item_appends_in_order_and_increments_total(self) -> None:
        basket = Basket()
        basket.add_item(Item(name="a", price=Decimal("5.00")))
        basket.add_item(Item(name="b", price=Decimal("15.00")))
        assert [i.name for i in basket.items] == ["a", "b"]
        assert basket.total == Decimal("20.00")

    def test_decrease_total_leaves_items_alone(self) -> None:
        basket = Basket()
        basket.add_item(Item(name="a", price=Decimal("50.00")))
        basket.decrease_total(Decimal("10.00"))
        assert basket.total == Decimal("40.00")
        assert len(basket) == 1

    def test_decrease_total_accepts_float(self) -> None:
        basket = Basket()
        basket.add_item(Item(name="a", price=20.0))  # type: ignore[arg-type]
        basket.decrease_total(10.1)
        assert basket.total == Decimal("9.9")

    def test_decrease_total_accepts_int_and_str(self) -> None:
        basket = Basket()
        basket.add_item(Item(name="a", price=Decimal("50.00")))
        basket.decrease_total(10)
        basket.decrease_total("0.50")
        assert basket.total == Decimal("39.50")

    def test_total_may_go_negative(self) -> None:
        basket = Basket()
        basket.add_item(Item(name="a", price=Decimal("5.00")))
        basket.decrease_total(Decimal("13.00"))
        assert basket.total == Decimal("-8.00")

    def test_items_returns_copy(self) -> None:
        basket = Basket()
        basket.add_item(Item(name="a", price=Decimal("5.00")))
        basket.items.append(Item(name="sneaky", price=Decimal("1.00")))
        assert len(basket) == 1
        assert basket.total == Decimal("5.00")

    def test_str_layout(self) -> None:
        basket = Basket()
        basket.add_item(Item(name="Book", price=Decimal("5.00")))
        assert str(basket) == "Basket:\nName: Book\nPrice: 5.00\n---\n========\nTotal: 5.00"

    def test_str_empty(self) -> None:
        assert str(Basket()) == "Basket:\n========\nTotal: 0"


@given(operations=_OPERATIONS)
def test_total_is_running_sum(operations: list[tuple[bool, Decimal]]) -> None:
    """Total == sum of added prices minus sum of decreases, for any call sequence."""
    basket = Basket()
    added = Decimal("0")
    removed = Decimal("0")
    for is_add, amount in operations:
        if is_add:
            basket.add_item(Item(name="x", price=amount))
            added += amount
        else:
            basket.decrease_total(amount)
            removed += amount
        assert basket.total == added - removed
    assert len(basket) == sum(1 for is_add, _ in operations if is_add)

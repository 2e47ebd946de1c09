# SPDX-License-Identifier: MIT
"""Rule protocol and clock type for the promotion engine."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from promorules.model import Basket

Clock = Callable[[], datetime]


@runtime_checkable
class Rule(Protocol):
    """Protocol that every promotion rule must satisfy.

    ``matches`` must not mutate the basket. ``apply`` is only called after
    ``matches`` returned True for the same basket.
    """

    id: str
    description: str
    discount: Decimal

    def matches(self, basket: Basket) -> bool: ...

    def apply(self, basket: Basket) -> None: ...

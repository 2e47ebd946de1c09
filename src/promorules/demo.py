# SPDX-License-Identifier: MIT
"""Demo entry point — builds a basket, runs the promotion engine, prints the trace.

Usage:
    python -m promorules [--rules IDS] [--now ISO] [--created ISO] [--basket PATH] [--json]

Environment variables:
    PROMO_RULES  — comma-separated rule ids, in evaluation order
                   (default: christmas,halloween,big-orders)
    PROMO_NOW    — ISO-8601 moment used as "now" by seasonal rules (default: system clock)
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from pydantic import ValidationError

from promorules.config import load_config, parse_moment
from promorules.model import Basket, Item
from promorules.report import format_json, format_report
from promorules.rules import PromotionEngine, create_rules
from promorules.schema import BasketInput

DEMO_ITEMS: list[tuple[str, Decimal]] = [
    ("The Shinning Book", Decimal("5.00")),
    ("Hereditary Bluray", Decimal("15.00")),
    ("The extremely expensive new Iphone", Decimal("1400.00")),
]


class BasketLoadError(Exception):
    """Raised when a basket file cannot be read or fails validation."""

    def __init__(self, path: Path, errors: list[str]) -> None:
        self.path = path
        self.errors = errors
        super().__init__(f"Failed to load basket from {path}: {'; '.join(errors)}")


def _safe_error_summary(e: ValidationError) -> list[str]:
    """Field paths and error type codes only — never the offending values."""
    return [f"{'.'.join(str(loc) for loc in err['loc'])}: {err['type']}" for err in e.errors()]


def demo_basket(created: datetime | None = None) -> Basket:
    """The built-in three-item demo basket (total 1420.00)."""
    basket = Basket(created=created)
    for name, price in DEMO_ITEMS:
        basket.add_item(Item(name=name, price=price))
    return basket


def load_basket(path: Path, *, default_created: datetime | None = None) -> Basket:
    """Read a basket JSON file into a Basket.

    ``default_created`` is used when the file has no ``created`` value.

    Raises:
        BasketLoadError: If the file cannot be read, is not JSON, or fails validation.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise BasketLoadError(path, ["file not found"]) from None
    except OSError as e:
        raise BasketLoadError(path, [type(e).__name__]) from None
    except UnicodeDecodeError:
        raise BasketLoadError(path, ["not UTF-8 text"]) from None
    except json.JSONDecodeError as e:
        raise BasketLoadError(path, [f"JSON decode error at line {e.lineno}"]) from None

    try:
        payload = BasketInput.model_validate(data)
    except ValidationError as e:
        raise BasketLoadError(path, _safe_error_summary(e)) from None
    return payload.to_basket(default_created=default_created)


def main(
    *,
    rules: str | None = None,
    now: str | None = None,
    created: str | None = None,
    basket_path: str | None = None,
    as_json: bool = False,
) -> int:
    """Composition root — wire rules into an engine, process one basket, print it.

    Returns the process exit code.
    """
    try:
        config = load_config(cli_rules=rules, cli_now=now)
        created_at = parse_moment(created) if created else None
        if basket_path:
            basket = load_basket(Path(basket_path), default_created=created_at)
        else:
            basket = demo_basket(created=created_at)
    except (ValueError, BasketLoadError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    engine = PromotionEngine(create_rules(config.rule_ids, clock=config.clock))
    report = engine.process(basket)

    if as_json:
        print(format_json(report))
    else:
        print(format_report(report))
    return 0


def configure_logging(*, verbose: bool = False) -> None:
    """Plain-message logs; engine INFO traces only when verbose."""
    logging.basicConfig(level=logging.INFO if verbose else logging.WARNING, format="%(message)s")

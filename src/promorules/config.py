# SPDX-License-Identifier: MIT
"""Engine configuration — which rules run, and what moment counts as "now"."""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime

from promorules.rules.base import Clock
from promorules.rules.registry import RULE_REGISTRY, RULES_BY_ID


@dataclass(frozen=True)
class EngineConfig:
    """Resolved engine settings — ordered rule ids and an optional fixed clock."""

    rule_ids: tuple[str, ...]
    now: datetime | None = None

    @property
    def clock(self) -> Clock | None:
        """A clock pinned to ``now``, or None to read the system clock."""
        if self.now is None:
            return None
        fixed = self.now
        return lambda: fixed


DEFAULT_RULE_IDS: tuple[str, ...] = tuple(cls.id for cls in RULE_REGISTRY)


def parse_rule_ids(value: str) -> tuple[str, ...]:
    """Split a comma-separated rule list, keeping order.

    Raises:
        ValueError: If the list is empty or names an unknown rule.
    """
    ids = tuple(part.strip() for part in value.split(",") if part.strip())
    if not ids:
        msg = f"Empty rule list. Valid rules: {sorted(RULES_BY_ID)}"
        raise ValueError(msg)
    unknown = [rid for rid in ids if rid not in RULES_BY_ID]
    if unknown:
        msg = f"Unknown rule(s): {unknown!r}. Valid rules: {sorted(RULES_BY_ID)}"
        raise ValueError(msg)
    return ids


def parse_moment(value: str) -> datetime:
    """Parse an ISO-8601 date or datetime.

    Raises:
        ValueError: If the value is not ISO-8601.
    """
    try:
        return datetime.fromisoformat(value.strip())
    except ValueError:
        msg = f"Invalid date/time: {value!r}. Expected ISO-8601, e.g. 2024-12-24T10:00"
        raise ValueError(msg) from None


def load_config(cli_rules: str | None = None, cli_now: str | None = None) -> EngineConfig:
    """Load engine config with CLI > env > default priority.

    Args:
        cli_rules: Comma-separated rule ids from the --rules flag.
        cli_now: ISO-8601 evaluation moment from the --now flag.

    Environment:
        PROMO_RULES: comma-separated rule ids (default: every registered rule).
        PROMO_NOW: ISO-8601 evaluation moment (default: system clock).

    Raises:
        ValueError: If a rule id or the evaluation moment is not recognized.
    """
    rules_value = cli_rules or os.environ.get("PROMO_RULES", "")
    rule_ids = parse_rule_ids(rules_value) if rules_value else DEFAULT_RULE_IDS

    now_value = cli_now or os.environ.get("PROMO_NOW", "")
    now = parse_moment(now_value) if now_value else None

    return EngineConfig(rule_ids=rule_ids, now=now)

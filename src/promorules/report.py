# SPDX-License-Identifier: MIT
"""Presentation — render a PromotionReport as the console trace or as JSON."""

from __future__ import annotations

from promorules.model import format_basket_lines
from promorules.schema import AppliedPromotion, BasketSnapshot, PromotionReport


def format_basket(snapshot: BasketSnapshot) -> str:
    """Render a basket snapshot in the same layout as ``str(Basket)``."""
    return format_basket_lines(((i.name, i.price) for i in snapshot.items), snapshot.total)


def format_applied(applied: AppliedPromotion) -> str:
    return f"Applying {applied.name} promotion -{applied.discount}"


def format_report(report: PromotionReport) -> str:
    """Before/after basket state with one notice per applied rule."""
    sections = [
        "=== BEFORE Promotions ===",
        format_basket(report.before),
        "",
        "Applying promotions",
    ]
    sections.extend(format_applied(a) for a in report.applied)
    if not report.applied:
        sections.append("No promotions matched")
    sections.extend(
        [
            "Promotions applied",
            "",
            "=== AFTER Promotions ===",
            format_basket(report.after),
        ]
    )
    return "\n".join(sections)


def format_json(report: PromotionReport) -> str:
    return report.model_dump_json(indent=2)

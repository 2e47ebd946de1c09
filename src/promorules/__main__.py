# SPDX-License-Identifier: MIT
"""Package entry point — run the promotion demo via `python -m promorules`."""

import argparse
import sys

from promorules.demo import configure_logging, main
from promorules.rules import RULES_BY_ID

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Apply promotion rules to a shopping basket")
    parser.add_argument(
        "--rules",
        default=None,
        help=f"Comma-separated rule ids in evaluation order (choices: {', '.join(RULES_BY_ID)}; "
        "overrides PROMO_RULES env var)",
    )
    parser.add_argument(
        "--now",
        default=None,
        help="ISO-8601 evaluation moment (overrides PROMO_NOW env var)",
    )
    parser.add_argument(
        "--created",
        default=None,
        help="ISO-8601 basket creation moment, also used for --basket files without one "
        "(default: now)",
    )
    parser.add_argument(
        "--basket",
        default=None,
        help="Path to a basket JSON file instead of the built-in demo basket",
    )
    parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log each rule as the engine applies it"
    )
    args = parser.parse_args()
    configure_logging(verbose=args.verbose)
    sys.exit(
        main(
            rules=args.rules,
            now=args.now,
            created=args.created,
            basket_path=args.basket,
            as_json=args.json,
        )
    )

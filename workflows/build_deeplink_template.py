"""CLI for building a deep-link template from an example booking URL.

Usage:
  # Parse and show suggested mappings:
  uv run python -m workflows.build_deeplink_template \
      --url "https://example.com/booking?arrive=2025-12-05&depart=2025-12-08&adults=2"

  # Override mappings, print the template JSON, and save it:
  uv run python -m workflows.build_deeplink_template \
      --url "https://example.com/booking/HOTEL1?arrive=2025-12-05" \
      --assign path_segment:1=hotelId --assign query_param:arrive:0= --json --save
"""

import argparse
import asyncio
import json
import sys
from typing import Optional

from loguru import logger

from lib.deeplink.errors import DeepLinkTemplateError
from lib.deeplink.slots import filter_slots, slot_label, sort_slots
from lib.deeplink.variables import VARIABLE_CATALOG, InternalVariable
from services.deeplink.service import (
    BuilderState,
    assign,
    build_template,
    parse_example,
    save_template,
)


def parse_assignment(text: str) -> tuple[str, Optional[InternalVariable]]:
    """Parse SLOT_ID=VARIABLE. An empty variable clears the slot."""
    slot_id, sep, key = text.rpartition("=")
    if not sep or not slot_id:
        raise argparse.ArgumentTypeError(f"Expected SLOT_ID=VARIABLE, got {text!r}")
    if not key:
        return slot_id, None
    try:
        return slot_id, InternalVariable(key)
    except ValueError:
        valid = ", ".join(spec.key.value for spec in VARIABLE_CATALOG)
        raise argparse.ArgumentTypeError(f"Unknown variable {key!r} (expected one of: {valid})")


def print_slot_table(state: BuilderState, slot_filter: str = "") -> None:
    parsed = state.parsed
    print(f"\nHost:             {parsed.host}")
    print(f"Path slots:       {len(parsed.path_slots)}")
    print(f"Query params:     {len(parsed.query_slots)}")
    print(f"Fragment paths:   {len(parsed.fragment_path_slots)}")
    print(f"Fragment queries: {len(parsed.fragment_query_slots)}\n")

    rules = {rule.slot_id: rule for rule in state.rules}
    for slot in sort_slots(filter_slots(state.slots, slot_filter)):
        rule = rules.get(slot.slot_id)
        mapped = "-"
        if rule:
            mapped = rule.source_variable.value
            if rule.format_pattern:
                mapped += f" [{rule.format_pattern}]"
            if rule.uppercase:
                mapped += " (UPPER)"
        print(f"  {slot_label(slot):<24} {slot.value:<30} {mapped:<28} {slot.slot_id}")


def main():
    parser = argparse.ArgumentParser(
        description="Decompose an example deep link and map its slots to booking variables",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s --url "https://example.com/booking?arrive=2025-12-05&depart=2025-12-08"
  %(prog)s --url "hotels.example.com/book#room?checkin=20251205&promo=summer" --json
  %(prog)s --url "https://example.com/b/H1?ci=2025-12-05" --assign path_segment:1=hotelId --save
        """,
    )
    parser.add_argument("--url", type=str, required=True, help="Example booking URL")
    parser.add_argument("--filter", type=str, default="", help="Only show slots matching this text")
    parser.add_argument("--assign", type=parse_assignment, action="append", default=[],
                        metavar="SLOT_ID=VARIABLE", help="Override a mapping (empty VARIABLE clears it)")
    parser.add_argument("--json", action="store_true", help="Print the template JSON")
    parser.add_argument("--save", action="store_true", help="Save the template to the partner config API")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")

    args = parser.parse_args()

    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if args.verbose else "INFO", format="<level>{level: <8}</level> | {message}")

    try:
        state = parse_example(BuilderState(), args.url)
    except DeepLinkTemplateError as e:
        logger.error(str(e))
        sys.exit(1)

    for slot_id, variable in args.assign:
        state = assign(state, slot_id, variable)

    print_slot_table(state, args.filter)

    template = build_template(state)
    if args.json:
        print(json.dumps(template.to_payload(), indent=2, ensure_ascii=False))

    if args.save:
        try:
            asyncio.run(save_template(template))
        except DeepLinkTemplateError as e:
            logger.error(f"Error: {e}")
            sys.exit(1)
        print("\nTemplate saved successfully!")


if __name__ == "__main__":
    main()

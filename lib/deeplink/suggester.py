"""Guess which internal variable each slot of an example URL represents.

Heuristics run on the lower-cased slot name, first match wins:

  1. contains checkin/ci/arrive/from/fechaentrada    -> checkIn (format guessed)
  2. contains checkout/co/depart/to/fechasalida      -> checkOut (format guessed)
  3. is month/day/year with a value                  -> checkIn as MM/DD/YYYY
  4. contains adult                                  -> adults
  5. contains child                                  -> children
  6. is currency/curr                                -> currency
  7. is promo/promocode/code                         -> promoCode, uppercased
  8. contains hotelcode/hotelid                      -> hotelId
  9. is nights                                       -> nights

Path segments have no name, so only query-like slots ever match.
"""

import re
from typing import Optional

from loguru import logger

from lib.deeplink.models import MappingRule, ParsedUrl, Slot
from lib.deeplink.variables import InternalVariable, default_format_for

CHECK_IN_KEYS = ("checkin", "ci", "arrive", "from", "fechaentrada")
CHECK_OUT_KEYS = ("checkout", "co", "depart", "to", "fechasalida")
DATE_PART_FORMATS = {"month": "MM", "day": "DD", "year": "YYYY"}
ADULT_KEYS = ("adult", "adults")
CHILD_KEYS = ("child", "children")
CURRENCY_NAMES = frozenset({"currency", "curr"})
PROMO_NAMES = frozenset({"promo", "promocode", "code"})
HOTEL_ID_KEYS = ("hotelcode", "hotelid")

_EIGHT_DIGITS = re.compile(r"^\d{8}$")


def guess_date_format(value: str) -> str:
    """Guess a date format from an example value. "" when unsure."""
    if not value:
        return ""
    if "-" in value:
        return "YYYY-MM-DD"
    if _EIGHT_DIGITS.match(value):
        return "DDMMYYYY"
    return ""


def _contains_any(name: str, keys) -> bool:
    return any(key in name for key in keys)


def suggest_for_slot(slot: Slot) -> Optional[MappingRule]:
    """Rule for a single slot, or None when no heuristic matches."""
    name = (slot.name or "").lower()
    value = slot.value or ""

    variable = None
    format_pattern = ""
    uppercase = False

    if _contains_any(name, CHECK_IN_KEYS):
        variable = InternalVariable.CHECK_IN
        format_pattern = guess_date_format(value)
    elif _contains_any(name, CHECK_OUT_KEYS):
        variable = InternalVariable.CHECK_OUT
        format_pattern = guess_date_format(value)
    elif name in DATE_PART_FORMATS and value:
        variable = InternalVariable.CHECK_IN
        format_pattern = DATE_PART_FORMATS[name]
    elif _contains_any(name, ADULT_KEYS):
        variable = InternalVariable.ADULTS
    elif _contains_any(name, CHILD_KEYS):
        variable = InternalVariable.CHILDREN
    elif name in CURRENCY_NAMES:
        variable = InternalVariable.CURRENCY
    elif name in PROMO_NAMES:
        variable = InternalVariable.PROMO_CODE
        uppercase = True
    elif _contains_any(name, HOTEL_ID_KEYS):
        variable = InternalVariable.HOTEL_ID
    elif name == "nights":
        variable = InternalVariable.NIGHTS

    if variable is None:
        return None

    return MappingRule.for_slot(
        slot,
        variable,
        format_pattern=format_pattern or default_format_for(variable),
        uppercase=uppercase,
    )


def suggest(parsed: ParsedUrl) -> tuple[MappingRule, ...]:
    """Propose a fresh rule set for a parsed URL.

    Candidates are visited query, path, fragment path, fragment query.
    Never merges with earlier rules.
    """
    candidates = (
        *parsed.query_slots,
        *parsed.path_slots,
        *parsed.fragment_path_slots,
        *parsed.fragment_query_slots,
    )
    rules = tuple(
        rule for rule in (suggest_for_slot(slot) for slot in candidates) if rule is not None
    )
    logger.debug(f"Suggested {len(rules)} mapping rule(s) for {len(candidates)} slot(s) on {parsed.host}")
    return rules

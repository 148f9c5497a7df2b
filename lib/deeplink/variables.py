"""Catalog of internal booking variables a template slot can be bound to."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class InternalVariable(str, Enum):
    """Booking-domain fields a deep-link template can populate."""

    CHECK_IN = "checkIn"
    CHECK_OUT = "checkOut"
    ADULTS = "adults"
    CHILDREN = "children"
    TOTAL_GUESTS = "totalGuests"
    NIGHTS = "nights"
    PROMO_CODE = "promoCode"
    CURRENCY = "currency"
    HOTEL_ID = "hotelId"


@dataclass(frozen=True)
class VariableSpec:
    key: InternalVariable
    label: str
    format_hint: Optional[str] = None  # UI only


VARIABLE_CATALOG = (
    VariableSpec(InternalVariable.CHECK_IN, "checkIn (ISO date)", "YYYY-MM-DD"),
    VariableSpec(InternalVariable.CHECK_OUT, "checkOut (ISO date)", "YYYY-MM-DD"),
    VariableSpec(InternalVariable.ADULTS, "adults (integer)"),
    VariableSpec(InternalVariable.CHILDREN, "children (integer)"),
    VariableSpec(InternalVariable.TOTAL_GUESTS, "totalGuests (adults+children)", "integer"),
    VariableSpec(InternalVariable.NIGHTS, "nights (auto if missing)"),
    VariableSpec(InternalVariable.PROMO_CODE, "promoCode (text)"),
    VariableSpec(InternalVariable.CURRENCY, "currency (ISO 4217)"),
    VariableSpec(InternalVariable.HOTEL_ID, "hotelId (text)"),
)

DATE_VARIABLES = frozenset({InternalVariable.CHECK_IN, InternalVariable.CHECK_OUT})

DEFAULT_DATE_FORMAT = "YYYY-MM-DD"


def default_format_for(variable: InternalVariable) -> str:
    """Default format pattern for a variable. Only dates have one."""
    if variable in DATE_VARIABLES:
        return DEFAULT_DATE_FORMAT
    return ""

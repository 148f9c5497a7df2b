"""Deep-link template builder core.

Decompose an example booking URL into slots, suggest which internal booking
variable each slot carries, and edit the resulting mapping rules.

Shared library: pure functions and models only.
Builder state and the template store live in services/deeplink/.
API layer lives in api/deeplink/.
"""

from lib.deeplink.decomposer import decompose
from lib.deeplink.errors import (
    DeepLinkTemplateError,
    InvalidUrlError,
    MissingUrlError,
    TemplateSaveError,
)
from lib.deeplink.mapping import apply_assignment, prune_rules, set_format_pattern, set_uppercase
from lib.deeplink.models import MappingRule, ParsedUrl, Slot, SlotKind, Template
from lib.deeplink.sanitize import sanitize_url_input
from lib.deeplink.suggester import guess_date_format, suggest
from lib.deeplink.variables import VARIABLE_CATALOG, InternalVariable, default_format_for

__all__ = [
    "decompose",
    "sanitize_url_input",
    "suggest",
    "guess_date_format",
    "apply_assignment",
    "set_format_pattern",
    "set_uppercase",
    "prune_rules",
    "default_format_for",
    "Slot",
    "SlotKind",
    "ParsedUrl",
    "MappingRule",
    "Template",
    "InternalVariable",
    "VARIABLE_CATALOG",
    "DeepLinkTemplateError",
    "InvalidUrlError",
    "MissingUrlError",
    "TemplateSaveError",
]

"""Business logic for building deep-link templates.

The builder is a pure state machine: every user action takes the current
BuilderState and returns a new one. A failed action raises and leaves the
caller holding its previous state.

  parse_example   -> sanitize, decompose, replace rules with fresh suggestions
  assign          -> bind/unbind a slot to an internal variable
  edit_format     -> change a rule's format pattern
  edit_uppercase  -> change a rule's uppercase flag
  build_template  -> snapshot the state as a Template
  save_template   -> send a Template to the partner config API
"""

from typing import Any, Optional

import httpx
from loguru import logger
from pydantic import BaseModel, ConfigDict

from lib.deeplink.decomposer import decompose
from lib.deeplink.errors import InvalidUrlError, MissingUrlError, TemplateSaveError
from lib.deeplink.mapping import apply_assignment, prune_rules, set_format_pattern, set_uppercase
from lib.deeplink.models import MappingRule, ParsedUrl, Slot, Template
from lib.deeplink.sanitize import sanitize_url_input
from lib.deeplink.slots import all_slots
from lib.deeplink.suggester import suggest
from lib.deeplink.variables import InternalVariable
from services.deeplink import repo
from services.deeplink.config import StoreSettings


class BuilderState(BaseModel):
    """Snapshot of the template builder: the example URL, its parse and rules."""

    model_config = ConfigDict(frozen=True)

    example_url: str = ""
    parsed: Optional[ParsedUrl] = None
    rules: tuple[MappingRule, ...] = ()

    @property
    def slots(self) -> tuple[Slot, ...]:
        return all_slots(self.parsed)

    @classmethod
    def from_template(cls, template: Template) -> "BuilderState":
        """Rebuild state from a template, dropping rules that point at no slot."""
        return cls(
            example_url=template.example_url,
            parsed=template.example_parsed,
            rules=prune_rules(template.mapping_rules, all_slots(template.example_parsed)),
        )


def parse_example(state: BuilderState, raw_url: str) -> BuilderState:
    """Parse a pasted example URL and auto-suggest mappings.

    Raises MissingUrlError for empty input and InvalidUrlError when the URL
    cannot be decomposed. Rules from any previous parse are discarded.
    """
    cleaned = sanitize_url_input(raw_url)
    if not cleaned:
        logger.warning("Parse requested with an empty URL")
        raise MissingUrlError()

    try:
        parsed = decompose(cleaned)
    except InvalidUrlError as e:
        logger.warning(f"Could not parse {cleaned}: {e}")
        raise

    rules = suggest(parsed)
    logger.info(
        f"Parsed {parsed.host}: {len(parsed.path_slots)} path, {len(parsed.query_slots)} query, "
        f"{len(parsed.fragment_path_slots)} fragment path, {len(parsed.fragment_query_slots)} fragment query slot(s); "
        f"{len(rules)} suggested rule(s)"
    )
    return BuilderState(example_url=cleaned, parsed=parsed, rules=rules)


def assign(
    state: BuilderState, slot_id: str, variable: Optional[InternalVariable]
) -> BuilderState:
    """Bind a slot to a variable, or clear it with None. No-op before any parse."""
    if state.parsed is None:
        return state
    rules = apply_assignment(state.rules, slot_id, variable, state.slots)
    return state.model_copy(update={"rules": rules})


def edit_format(state: BuilderState, slot_id: str, format_pattern: str) -> BuilderState:
    return state.model_copy(update={"rules": set_format_pattern(state.rules, slot_id, format_pattern)})


def edit_uppercase(state: BuilderState, slot_id: str, uppercase: bool) -> BuilderState:
    return state.model_copy(update={"rules": set_uppercase(state.rules, slot_id, uppercase)})


def build_template(state: BuilderState) -> Optional[Template]:
    """Template for the current state, or None if nothing has been parsed."""
    if state.parsed is None or not state.example_url:
        return None
    return Template(
        example_url=state.example_url,
        example_parsed=state.parsed,
        mapping_rules=state.rules,
    )


async def save_template(
    template: Optional[Template],
    settings: Optional[StoreSettings] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> Any:
    """Persist a template. Raises TemplateSaveError; the template is left as-is."""
    if template is None:
        raise TemplateSaveError("Please parse a URL first")

    try:
        result = await repo.store_template(template, settings=settings, client=client)
    except TemplateSaveError as e:
        logger.error(f"Error saving template for {template.example_url}: {e}")
        raise

    logger.info(f"Template saved for {template.example_url} ({len(template.mapping_rules)} rule(s))")
    return result

"""Edits to a mapping rule set.

Every function takes the current rules and returns a new tuple; the input is
never modified. At most one rule exists per slot id.
"""

from typing import Iterable, Optional

from loguru import logger

from lib.deeplink.models import MappingRule, Slot
from lib.deeplink.slots import find_slot
from lib.deeplink.variables import InternalVariable, default_format_for


def find_rule(rules: Iterable[MappingRule], slot_id: str) -> Optional[MappingRule]:
    for rule in rules:
        if rule.slot_id == slot_id:
            return rule
    return None


def apply_assignment(
    rules: tuple[MappingRule, ...],
    slot_id: str,
    variable: Optional[InternalVariable],
    slots: Iterable[Slot],
) -> tuple[MappingRule, ...]:
    """Bind a slot to a variable, or unbind it when variable is None.

    A reassignment resets format_pattern to the new variable's default and
    keeps uppercase only when the variable is unchanged. A slot id that does
    not resolve against slots leaves the rules unchanged.
    """
    if variable is None:
        return tuple(rule for rule in rules if rule.slot_id != slot_id)

    slot = find_slot(slots, slot_id)
    if slot is None:
        logger.warning(f"Ignoring assignment for unknown slot {slot_id}")
        return rules

    existing = find_rule(rules, slot_id)
    if existing is None:
        return (*rules, MappingRule.for_slot(slot, variable, default_format_for(variable)))

    uppercase = existing.uppercase if existing.source_variable == variable else False
    replacement = MappingRule.for_slot(
        slot,
        variable,
        format_pattern=default_format_for(variable),
        uppercase=uppercase,
    )
    return tuple(replacement if rule.slot_id == slot_id else rule for rule in rules)


def set_format_pattern(
    rules: tuple[MappingRule, ...], slot_id: str, format_pattern: str
) -> tuple[MappingRule, ...]:
    """Point update of format_pattern. No-op when the slot has no rule."""
    return tuple(
        rule.model_copy(update={"format_pattern": format_pattern})
        if rule.slot_id == slot_id
        else rule
        for rule in rules
    )


def set_uppercase(
    rules: tuple[MappingRule, ...], slot_id: str, uppercase: bool
) -> tuple[MappingRule, ...]:
    """Point update of uppercase. No-op when the slot has no rule."""
    return tuple(
        rule.model_copy(update={"uppercase": uppercase}) if rule.slot_id == slot_id else rule
        for rule in rules
    )


def prune_rules(rules: Iterable[MappingRule], slots: Iterable[Slot]) -> tuple[MappingRule, ...]:
    """Drop rules whose slot no longer exists and duplicates of a slot id (first wins)."""
    known = {slot.slot_id for slot in slots}
    seen = set()
    kept = []
    for rule in rules:
        if rule.slot_id not in known or rule.slot_id in seen:
            continue
        seen.add(rule.slot_id)
        kept.append(rule)
    return tuple(kept)

"""Helpers for listing, filtering and labelling the slots of a parsed URL."""

from typing import Iterable, Optional

from lib.deeplink.models import ParsedUrl, Slot, SlotKind

# Display order for slot tables
KIND_ORDER = {
    SlotKind.PATH_SEGMENT: 0,
    SlotKind.QUERY_PARAM: 1,
    SlotKind.FRAGMENT_PATH_SEGMENT: 2,
    SlotKind.FRAGMENT_QUERY_PARAM: 3,
}


def all_slots(parsed: Optional[ParsedUrl]) -> tuple[Slot, ...]:
    """Every slot of a parsed URL: path, query, fragment path, fragment query."""
    if parsed is None:
        return ()
    return (
        *parsed.path_slots,
        *parsed.query_slots,
        *parsed.fragment_path_slots,
        *parsed.fragment_query_slots,
    )


def find_slot(slots: Iterable[Slot], slot_id: str) -> Optional[Slot]:
    """Resolve a slot id against a slot list. None if it no longer exists."""
    for slot in slots:
        if slot.slot_id == slot_id:
            return slot
    return None


def filter_slots(slots: Iterable[Slot], text: str) -> list[Slot]:
    """Case-insensitive match of text against "name value kind"."""
    slots = list(slots)
    if not text:
        return slots
    needle = text.lower()
    return [
        slot
        for slot in slots
        if needle in f"{slot.name or ''} {slot.value or ''} {slot.kind.value}".lower()
    ]


def sort_slots(slots: Iterable[Slot]) -> list[Slot]:
    return sorted(slots, key=lambda s: (KIND_ORDER[s.kind], s.ordinal))


def slot_label(slot: Slot) -> str:
    """Short label for a slot table row, e.g. "SEG 0" or "arrive (#0)"."""
    if slot.kind == SlotKind.PATH_SEGMENT:
        return f"SEG {slot.ordinal}"
    if slot.kind == SlotKind.FRAGMENT_PATH_SEGMENT:
        return f"FRAG_PATH {slot.ordinal}"
    return f"{slot.name or '?'} (#{slot.ordinal})"

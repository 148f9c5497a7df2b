"""Data models for deep-link template building.

Slots are the addressable pieces of an example booking URL. Mapping rules bind
a slot to an internal booking variable. A template bundles both with the
example URL so downstream code can rebuild links for the same partner site.

All models are frozen. Wire names are camelCase (exampleUrl, pathSlots, ...).
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from lib.deeplink.variables import InternalVariable


class SlotKind(str, Enum):
    """Where in the URL a slot was extracted from."""

    PATH_SEGMENT = "path_segment"
    QUERY_PARAM = "query_param"
    FRAGMENT_PATH_SEGMENT = "fragment_path_segment"
    FRAGMENT_QUERY_PARAM = "fragment_query_param"

    @property
    def is_path(self) -> bool:
        return self in (SlotKind.PATH_SEGMENT, SlotKind.FRAGMENT_PATH_SEGMENT)


class _FrozenModel(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class Slot(_FrozenModel):
    """One extracted unit of a URL: a path segment or a name/value pair."""

    kind: SlotKind
    value: str
    ordinal: int  # position within its own kind's sequence
    name: Optional[str] = None  # query-like kinds only

    @property
    def slot_id(self) -> str:
        """Stable identity key: kind:ordinal for paths, kind:name:ordinal otherwise."""
        if self.kind.is_path:
            return f"{self.kind.value}:{self.ordinal}"
        return f"{self.kind.value}:{self.name}:{self.ordinal}"


class ParsedUrl(_FrozenModel):
    """Full decomposition of one example URL."""

    origin: str
    host: str
    scheme: str
    path_slots: tuple[Slot, ...] = ()
    query_slots: tuple[Slot, ...] = ()
    fragment_path_slots: tuple[Slot, ...] = ()
    fragment_query_slots: tuple[Slot, ...] = ()


class MappingRule(_FrozenModel):
    """Binding of one slot identity to one internal variable."""

    slot_id: str
    target_kind: SlotKind
    ordinal: int
    source_variable: InternalVariable
    name: Optional[str] = None
    format_pattern: str = ""  # dates only
    uppercase: bool = False

    @classmethod
    def for_slot(
        cls,
        slot: Slot,
        variable: InternalVariable,
        format_pattern: str = "",
        uppercase: bool = False,
    ) -> "MappingRule":
        return cls(
            slot_id=slot.slot_id,
            target_kind=slot.kind,
            name=slot.name,
            ordinal=slot.ordinal,
            source_variable=variable,
            format_pattern=format_pattern,
            uppercase=uppercase,
        )


class Template(_FrozenModel):
    """Persisted unit: example URL, its decomposition and the mapping rules."""

    example_url: str
    example_parsed: ParsedUrl
    mapping_rules: tuple[MappingRule, ...] = ()

    def to_payload(self) -> dict:
        """JSON-ready dict with camelCase keys, as sent to the template store."""
        return self.model_dump(mode="json", by_alias=True)

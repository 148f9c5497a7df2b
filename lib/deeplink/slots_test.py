"""Unit tests for slot listing helpers."""

import pytest

from lib.deeplink.slots import all_slots, filter_slots, find_slot, slot_label, sort_slots

pytestmark = pytest.mark.offline


class TestAllSlots:
    def test_order(self, parsed_booking):
        kinds = [s.kind.value for s in all_slots(parsed_booking)]
        assert kinds == (
            ["path_segment"] * 2
            + ["query_param"] * 6
            + ["fragment_path_segment"]
            + ["fragment_query_param"] * 2
        )

    def test_none(self):
        assert all_slots(None) == ()


class TestFindSlot:
    def test_found(self, parsed_booking):
        slot = find_slot(all_slots(parsed_booking), "query_param:currency:4")
        assert slot.value == "USD"

    def test_name_must_match(self, parsed_booking):
        assert find_slot(all_slots(parsed_booking), "query_param:adults:4") is None


class TestFilterSlots:
    def test_empty_filter_returns_all(self, parsed_booking):
        slots = all_slots(parsed_booking)
        assert filter_slots(slots, "") == list(slots)

    def test_matches_name_and_value(self, parsed_booking):
        slots = all_slots(parsed_booking)
        assert [s.name for s in filter_slots(slots, "ARRIVE")] == ["arrive"]
        assert [s.value for s in filter_slots(slots, "hotel42")] == ["HOTEL42"]

    def test_matches_kind(self, parsed_booking):
        matched = filter_slots(all_slots(parsed_booking), "fragment_query")
        assert [s.name for s in matched] == ["bedType", "view"]


class TestSortSlots:
    def test_kind_then_ordinal(self, parsed_booking):
        slots = list(all_slots(parsed_booking))
        shuffled = list(reversed(slots))
        assert sort_slots(shuffled) == slots


class TestSlotLabel:
    def test_labels(self, parsed_booking):
        assert slot_label(parsed_booking.path_slots[0]) == "SEG 0"
        assert slot_label(parsed_booking.fragment_path_slots[0]) == "FRAG_PATH 0"
        assert slot_label(parsed_booking.query_slots[2]) == "adults (#2)"
        assert slot_label(parsed_booking.fragment_query_slots[1]) == "view (#1)"

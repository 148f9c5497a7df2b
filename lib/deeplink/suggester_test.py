"""Unit tests for mapping suggestions."""

import pytest

from lib.deeplink.decomposer import decompose
from lib.deeplink.models import Slot, SlotKind
from lib.deeplink.suggester import guess_date_format, suggest, suggest_for_slot
from lib.deeplink.variables import InternalVariable

pytestmark = pytest.mark.offline


def _query(name, value=""):
    return Slot(kind=SlotKind.QUERY_PARAM, name=name, value=value, ordinal=0)


def _variable(name, value=""):
    rule = suggest_for_slot(_query(name, value))
    return rule.source_variable if rule else None


class TestGuessDateFormat:
    def test_empty(self):
        assert guess_date_format("") == ""

    def test_dashed(self):
        assert guess_date_format("2026-03-01") == "YYYY-MM-DD"

    def test_eight_digits(self):
        assert guess_date_format("01032026") == "DDMMYYYY"

    def test_unknown(self):
        assert guess_date_format("03/01/2026") == ""
        assert guess_date_format("2026031") == ""


class TestHeuristics:
    @pytest.mark.parametrize(
        "name,expected",
        [
            ("checkin", InternalVariable.CHECK_IN),
            ("CheckInDate", InternalVariable.CHECK_IN),
            ("arrive", InternalVariable.CHECK_IN),
            ("dateFrom", InternalVariable.CHECK_IN),
            ("fechaEntrada", InternalVariable.CHECK_IN),
            ("checkout", InternalVariable.CHECK_OUT),
            ("depart", InternalVariable.CHECK_OUT),
            ("dateTo", InternalVariable.CHECK_OUT),
            ("fechaSalida", InternalVariable.CHECK_OUT),
            ("numAdults", InternalVariable.ADULTS),
            ("adult", InternalVariable.ADULTS),
            ("children", InternalVariable.CHILDREN),
            ("childAges", InternalVariable.CHILDREN),
            ("currency", InternalVariable.CURRENCY),
            ("CURR", InternalVariable.CURRENCY),
            ("promo", InternalVariable.PROMO_CODE),
            ("hotelId", InternalVariable.HOTEL_ID),
            ("nights", InternalVariable.NIGHTS),
            ("lang", None),
            ("rooms", None),
        ],
    )
    def test_name_to_variable(self, name, expected):
        assert _variable(name, "x") == expected

    def test_checkin_beats_code(self):
        rule = suggest_for_slot(_query("checkin_code", "2026-03-01"))
        assert rule.source_variable == InternalVariable.CHECK_IN
        assert rule.uppercase is False

    def test_co_substring_shadows_code(self):
        # "code" contains "co", so the check-out rule fires first
        assert _variable("code", "SUMMER") == InternalVariable.CHECK_OUT
        assert _variable("promocode", "SUMMER") == InternalVariable.CHECK_OUT

    def test_currency_must_match_exactly(self):
        assert _variable("currencyCode") == InternalVariable.CHECK_OUT
        assert _variable("curr_iso") is None

    def test_date_format_from_value(self):
        assert suggest_for_slot(_query("checkin", "01032026")).format_pattern == "DDMMYYYY"
        assert suggest_for_slot(_query("depart", "2026-03-03")).format_pattern == "YYYY-MM-DD"

    def test_date_format_falls_back_to_default(self):
        assert suggest_for_slot(_query("arrive", "03/01/2026")).format_pattern == "YYYY-MM-DD"
        assert suggest_for_slot(_query("arrive", "")).format_pattern == "YYYY-MM-DD"

    @pytest.mark.parametrize("name,fmt", [("month", "MM"), ("day", "DD"), ("year", "YYYY")])
    def test_date_parts(self, name, fmt):
        rule = suggest_for_slot(_query(name, "12"))
        assert rule.source_variable == InternalVariable.CHECK_IN
        assert rule.format_pattern == fmt

    def test_date_part_needs_value(self):
        assert suggest_for_slot(_query("day", "")) is None

    def test_promo_is_uppercased(self):
        rule = suggest_for_slot(_query("promo", "summer"))
        assert rule.uppercase is True
        assert rule.format_pattern == ""

    def test_non_date_has_no_format(self):
        assert suggest_for_slot(_query("adults", "2")).format_pattern == ""

    def test_path_segments_never_match(self):
        slot = Slot(kind=SlotKind.PATH_SEGMENT, value="checkin", ordinal=0)
        assert suggest_for_slot(slot) is None


class TestSuggest:
    def test_booking_url(self, parsed_booking):
        rules = suggest(parsed_booking)
        assert [(r.slot_id, r.source_variable) for r in rules] == [
            ("query_param:arrive:0", InternalVariable.CHECK_IN),
            ("query_param:depart:1", InternalVariable.CHECK_OUT),
            ("query_param:adults:2", InternalVariable.ADULTS),
            ("query_param:children:3", InternalVariable.CHILDREN),
            ("query_param:currency:4", InternalVariable.CURRENCY),
            ("query_param:promo:5", InternalVariable.PROMO_CODE),
        ]

    def test_rule_carries_slot_identity(self, parsed_booking):
        rule = suggest(parsed_booking)[1]
        assert rule.target_kind == SlotKind.QUERY_PARAM
        assert rule.name == "depart"
        assert rule.ordinal == 1

    def test_query_before_fragment(self):
        parsed = decompose("https://example.com/?adults=2#checkin=2026-03-01&checkout=2026-03-03")
        rules = suggest(parsed)
        assert [(r.target_kind, r.source_variable) for r in rules] == [
            (SlotKind.QUERY_PARAM, InternalVariable.ADULTS),
            (SlotKind.FRAGMENT_QUERY_PARAM, InternalVariable.CHECK_IN),
            (SlotKind.FRAGMENT_QUERY_PARAM, InternalVariable.CHECK_OUT),
        ]

    def test_no_matches(self):
        assert suggest(decompose("https://example.com/a/b?lang=en#top")) == ()

    def test_one_rule_per_slot(self, parsed_booking):
        ids = [r.slot_id for r in suggest(parsed_booking)]
        assert len(ids) == len(set(ids))

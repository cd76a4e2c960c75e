"""
Unit tests for B2 Cloud field formatting helpers

Author: TM3
Date: 2026-10-17
"""
import pytest
from datetime import date, datetime

from app.domain.b2 import TimeSlot
from app.services.b2_formatting import (
    compose_address_line1,
    compose_address_line2,
    compose_recipient_name,
    digits_only,
    format_date,
    join_parts,
    normalize_time_slot,
    resolve_service_type,
)


class TestNormalizeTimeSlot:
    """Test free-text delivery time -> B2 time-slot code"""

    @pytest.mark.parametrize("code", [slot.value for slot in TimeSlot])
    def test_valid_codes_pass_through(self, code):
        assert normalize_time_slot(code) == code

    @pytest.mark.parametrize("text,expected", [
        ("12-14", "1214"),
        ("14:00-16:00", "1416"),
        ("午前中", "0812"),
        ("午前", "0812"),
        ("AM", "0812"),
        ("morning", "0812"),
        ("8-12", "0812"),
        ("16〜18", "1618"),
        ("18:00～20:00", "1820"),
        ("１９：００ー２１：００", "1921"),
        (" 14 - 16 ", "1416"),
        ("14時-16時", "1416"),
        ("14–16", "1416"),
        (" 1416", "1416"),
        ("１４１６", "1416"),
    ])
    def test_recognised_text(self, text, expected):
        assert normalize_time_slot(text) == expected

    @pytest.mark.parametrize("text", [
        "",
        "   ",
        None,
        "夕方",
        "午後",
        "10-12",
        "20-22",
        "1200",
        "2024-12-14",
        "いつでも",
        "14-16-18",
    ])
    def test_unrecognised_text_is_empty(self, text):
        assert normalize_time_slot(text) == ""


class TestFormatDate:
    """Test date -> YYYY/MM/DD"""

    def test_none(self):
        assert format_date(None) == ""

    def test_invalid(self):
        assert format_date("not a date") == ""
        assert format_date("2024-13-45") == ""
        assert format_date(12345) == ""

    def test_date(self):
        assert format_date(date(2024, 3, 5)) == "2024/03/05"

    def test_datetime_keeps_calendar_date(self):
        assert format_date(datetime(2024, 3, 5, 23, 59)) == "2024/03/05"

    def test_strings(self):
        assert format_date("2024-03-05") == "2024/03/05"
        assert format_date("2024/3/5") == "2024/03/05"
        assert format_date("2024-03-05T23:30:00+09:00") == "2024/03/05"


class TestAddressComposer:
    """Test joining address and name parts"""

    def test_join_line1(self):
        assert join_parts(["大阪府", "大阪市", "1-2-3"], "") == "大阪府大阪市1-2-3"

    def test_join_skips_blank_parts(self):
        assert join_parts([None, "", "  "], " ") == ""
        assert join_parts(["大阪府", None, "1-2-3"], "") == "大阪府1-2-3"

    def test_join_trims_kept_parts(self):
        assert join_parts([" 山田 ", "花子 "], " ") == "山田 花子"

    def test_compose_helpers(self):
        assert compose_address_line1("東京都", "渋谷区", None) == "東京都渋谷区"
        assert compose_address_line2(None) == ""
        assert compose_address_line2("梅田ビル 101") == "梅田ビル 101"
        assert compose_recipient_name("山田", "花子") == "山田 花子"
        assert compose_recipient_name("山田", None) == "山田"
        assert compose_recipient_name(None, None) == ""

    def test_digits_only(self):
        assert digits_only("530-0001") == "5300001"
        assert digits_only("〒５３０－０００１") == "5300001"
        assert digits_only(None) == ""


class TestResolveServiceType:
    """Test per-order service code selection"""

    def test_override_a_is_honoured(self):
        assert resolve_service_type(1, {1: "A"}) == "A"

    def test_invalid_override_falls_back(self):
        assert resolve_service_type(1, {1: "X"}) == "0"

    def test_missing_override_falls_back(self):
        assert resolve_service_type(1, {2: "A"}) == "0"
        assert resolve_service_type(1, None) == "0"
        assert resolve_service_type(1, {1: None}) == "0"

    def test_override_is_trimmed_and_case_folded(self):
        assert resolve_service_type(1, {1: " a "}) == "A"

"""
B2 Cloud field formatting

Pure, total helpers used by the record mapper. None of them raise: bad input
degrades to an empty string (or the default service code) so one messy order
never aborts a whole export.

Author: TM3
Date: 2026-10-17
"""
import re
import unicodedata
from datetime import date, datetime
from typing import Any, Iterable, Mapping, Optional

from app.domain.b2 import ServiceType, TimeSlot


VALID_TIME_SLOTS = frozenset(slot.value for slot in TimeSlot)
VALID_SERVICE_TYPES = frozenset(service.value for service in ServiceType)

# Dash/tilde look-alikes customers type between two hours (after NFKC)
_DASHES = "-‐‑‒–—―−ー~〜～〰"
_DASH_RE = re.compile("[" + re.escape(_DASHES) + "]")
_WHITESPACE_RE = re.compile(r"\s+")
_RANGE_RE = re.compile(r"(\d{1,2})(?::\d{2})?時?-(\d{1,2})(?::\d{2})?時?")

_MORNING_KEYWORDS = ("午前", "morning")
_MORNING_EXACT = ("am", "a.m.")


def normalize_time_slot(value: Optional[str]) -> str:
    """
    Map free-form delivery time text to a B2 time-slot code

    Examples:
        "1416"           -> "1416"
        "午前中"          -> "0812"
        "14:00〜16:00"    -> "1416"
        "12-14"          -> "1214"
        "夕方ごろ"        -> ""

    Returns:
        One of the TimeSlot codes, or "" when the text cannot be mapped
    """
    if value is None:
        return ""
    text = str(value)
    if not text.strip():
        return ""
    if text in VALID_TIME_SLOTS:
        return text

    text = unicodedata.normalize("NFKC", text)
    text = _DASH_RE.sub("-", text)
    text = _WHITESPACE_RE.sub("", text)
    if text in VALID_TIME_SLOTS:
        return text
    lowered = text.lower()

    if any(keyword in lowered for keyword in _MORNING_KEYWORDS) or lowered in _MORNING_EXACT:
        return TimeSlot.MORNING.value

    match = _RANGE_RE.fullmatch(text)
    if match:
        start, end = match.groups()
        candidate = start.zfill(2) + end.zfill(2)
        if candidate in VALID_TIME_SLOTS:
            return candidate

    return ""


def _parse_date(value: Any) -> Optional[date]:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None
    for fmt in ("%Y-%m-%d", "%Y/%m/%d"):
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    try:
        # ISO timestamps: keep the calendar date as written
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


def format_date(value: Any) -> str:
    """Render a date as YYYY/MM/DD, or "" for missing/unparseable input"""
    parsed = _parse_date(value)
    if parsed is None:
        return ""
    return f"{parsed.year:04d}/{parsed.month:02d}/{parsed.day:02d}"


def join_parts(parts: Iterable[Optional[str]], separator: str = "") -> str:
    """Join the non-blank parts in order; kept parts are trimmed, None and whitespace-only values are skipped"""
    kept = []
    for part in parts:
        if part is None:
            continue
        text = str(part).strip()
        if text:
            kept.append(text)
    return separator.join(kept)


def compose_address_line1(prefecture: Optional[str], city: Optional[str], address: Optional[str]) -> str:
    return join_parts([prefecture, city, address], "")


def compose_address_line2(building: Optional[str]) -> str:
    return join_parts([building], "")


def compose_recipient_name(last_name: Optional[str], first_name: Optional[str]) -> str:
    return join_parts([last_name, first_name], " ")


def digits_only(value: Optional[str]) -> str:
    """Strip everything but ASCII digits (fullwidth digits are folded first)"""
    if value is None:
        return ""
    text = unicodedata.normalize("NFKC", str(value))
    return "".join(ch for ch in text if "0" <= ch <= "9")


def resolve_service_type(
    order_id: int,
    overrides: Optional[Mapping[int, Optional[str]]] = None,
    default: str = ServiceType.STANDARD.value,
) -> str:
    """
    Pick the 送り状種類 code for one order

    An override is honoured only if it is a known service code; anything else
    (missing, blank, "X", ...) falls back to the default.
    """
    if not overrides:
        return default
    requested = overrides.get(order_id)
    if requested is None:
        return default
    if isinstance(requested, ServiceType):
        requested = requested.value
    code = str(requested).strip().upper()
    if code in VALID_SERVICE_TYPES:
        return code
    return default

from __future__ import annotations

import calendar
import logging
import re
from datetime import date, datetime, timedelta
from typing import Optional

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")

# Checked in order: 大后天 must be tried before 后天.
RELATIVE_DAY_RULES: list[tuple[re.Pattern, int]] = [
    (re.compile(r"大后天"), 3),
    (re.compile(r"后天"), 2),
    (re.compile(r"明天|明日"), 1),
    (re.compile(r"今天|今日|今儿"), 0),
]

DAY_OF_MONTH = re.compile(r"(?<![0-9])([0-9]{1,2})[号日]")

WEEKDAY = re.compile(r"(下周|下星期|这周|本周|本星期|周|星期)([一二三四五六日天])")

WEEKDAY_ORDINALS = {
    "一": 1,
    "二": 2,
    "三": 3,
    "四": 4,
    "五": 5,
    "六": 6,
    "日": 7,
    "天": 7,
}

NEXT_WEEK_PREFIXES = {"下周", "下星期"}


def _next_month(year: int, month: int) -> tuple[int, int]:
    if month == 12:
        return year + 1, 1
    return year, month + 1


def _day_in_month(year: int, month: int, day: int) -> Optional[date]:
    if day > calendar.monthrange(year, month)[1]:
        return None
    return date(year, month, day)


def _resolve_relative(content: str, today: date) -> Optional[date]:
    for pattern, offset in RELATIVE_DAY_RULES:
        if pattern.search(content):
            return today + timedelta(days=offset)
    return None


def _resolve_day_of_month(content: str, today: date) -> Optional[date]:
    m = DAY_OF_MONTH.search(content)
    if not m:
        return None
    day = int(m.group(1))
    if not 1 <= day <= 31:
        return None

    year, month = today.year, today.month
    candidate = _day_in_month(year, month, day)
    if candidate is not None and candidate >= today:
        return candidate

    # passed this month (or this month is too short): first later month that has the day
    while True:
        year, month = _next_month(year, month)
        candidate = _day_in_month(year, month, day)
        if candidate is not None:
            return candidate


def _resolve_weekday(content: str, today: date) -> Optional[date]:
    m = WEEKDAY.search(content)
    if not m:
        return None
    prefix, day_char = m.group(1), m.group(2)
    target = WEEKDAY_ORDINALS[day_char]

    diff = target - today.isoweekday()
    if diff < 0:
        diff += 7
    if prefix in NEXT_WEEK_PREFIXES:
        diff += 7
    return today + timedelta(days=diff)


DATE_RULES = [
    _resolve_relative,
    _resolve_day_of_month,
    _resolve_weekday,
]


def resolve_date(text: str, now: datetime) -> Optional[date]:
    """Infer the calendar day a spoken item refers to.

    Rules in DATE_RULES are tried in order and the first hit wins.
    Returns None when the text carries no recognizable date phrase.
    """
    content = _WHITESPACE.sub("", text)
    today = now.date()
    for rule in DATE_RULES:
        resolved = rule(content, today)
        if resolved is not None:
            logger.debug(f"Resolved date {resolved.isoformat()} via {rule.__name__}")
            return resolved
    return None


def anchor_timestamp(text: str, now: datetime) -> datetime:
    """Resolved day (or today) at the time of day of `now`, keeping its tzinfo."""
    resolved = resolve_date(text, now)
    if resolved is None:
        return now
    return datetime.combine(resolved, now.timetz())

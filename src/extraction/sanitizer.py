from __future__ import annotations

import re

# Longest forms first, so "下周三" and "大后天" go away whole instead of leaving "三" or "大".
DATE_WORD_PATTERNS: list[re.Pattern] = [
    re.compile(r"大后天"),
    re.compile(r"后天"),
    re.compile(r"明天|明日"),
    re.compile(r"今天|今日|今儿"),
    re.compile(r"(?:下周|下星期|这周|本周|本星期|周|星期)[一二三四五六天日]"),
    re.compile(r"本周|这周|本星期|下周|下星期"),
    re.compile(r"(?<![0-9])[0-9]{1,2}月[0-9]{1,2}[号日]?"),
    re.compile(r"(?<![0-9])[0-9]{1,2}月"),
    re.compile(r"(?<![0-9])[0-9]{1,2}[号日]"),
]

_MULTI_SPACE = re.compile(r"\s{2,}")


def _strip_once(text: str) -> str:
    for pattern in DATE_WORD_PATTERNS:
        text = pattern.sub("", text)
    return text


def strip_date_words(text: str) -> str:
    """Remove date phrases so a stored task does not say "下周五" forever.

    Removal is repeated until nothing matches: deleting one phrase can
    join its neighbours into a new one ("明今天天" -> "明天").
    """
    result = text
    while True:
        stripped = _strip_once(result)
        if stripped == result:
            break
        result = stripped
    result = _MULTI_SPACE.sub(" ", result)
    return result.strip()

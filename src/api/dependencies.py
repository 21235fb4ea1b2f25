import os
from datetime import datetime
from zoneinfo import ZoneInfo

from mind_dump.models import TagSet
from api import state

# Configuration
MIND_DUMP_TIMEZONE = os.getenv("MIND_DUMP_TIMEZONE", "Asia/Shanghai")

timezone = ZoneInfo(MIND_DUMP_TIMEZONE)


def get_now() -> datetime:
    return datetime.now(timezone)


def get_tag_set() -> TagSet:
    return state.tag_set

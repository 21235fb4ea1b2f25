from collections import deque
import os
from typing import Deque, Dict, Any

from mind_dump.models import TagSet, Task

RECENT_TASKS_LIMIT = int(os.getenv("RECENT_TASKS_LIMIT", "100"))

# In-memory storage for confirmed tasks, newest first
recent_tasks: Deque[Task] = deque(maxlen=RECENT_TASKS_LIMIT)

# Candidates from the last utterance, waiting for confirm/discard (keyed by candidate id)
pending_candidates: Dict[str, Dict[str, Any]] = {}

# User-editable category labels
tag_set: TagSet = TagSet()


def reset() -> None:
    global tag_set
    recent_tasks.clear()
    pending_candidates.clear()
    tag_set = TagSet()

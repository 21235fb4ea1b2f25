from __future__ import annotations

from typing import Iterable, List, Optional

from mind_dump.models import Task, TaskKind


def filter_tasks(
    tasks: Iterable[Task],
    date_key: Optional[str] = None,
    kind: Optional[TaskKind] = None,
) -> List[Task]:
    """Tasks for one calendar day (YYYY-MM-DD) and/or one kind, order kept."""
    out = []
    for t in tasks:
        if kind is not None and t.kind != kind:
            continue
        if date_key is not None and t.date_key != date_key:
            continue
        out.append(t)
    return out


def date_keys_with_todos(tasks: Iterable[Task]) -> List[str]:
    return sorted({t.date_key for t in tasks if t.kind == TaskKind.ACTIONABLE})


def summarize(tasks: Iterable[Task]) -> dict:
    todos = 0
    completed = 0
    ideas = 0
    for t in tasks:
        if t.kind == TaskKind.IDEA:
            ideas += 1
            continue
        todos += 1
        if t.completed:
            completed += 1
    return {"todos": todos, "completed": completed, "ideas": ideas}

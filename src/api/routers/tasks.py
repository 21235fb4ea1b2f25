import logging
from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from api import state
from api.dependencies import get_now, get_tag_set
from api.metrics import TASKS_CONFIRMED_TOTAL
from mind_dump.models import TagSet, TagSetError, TaskCandidate, TaskKind, confirm
from mind_dump.task_list import date_keys_with_todos, filter_tasks, summarize

router = APIRouter()
logger = logging.getLogger(__name__)


class ConfirmIn(BaseModel):
    candidates: List[TaskCandidate]


@router.get("/tasks")
async def get_tasks(
    limit: int = 20,
    date: Optional[str] = None,
    kind: Optional[TaskKind] = None,
    now: datetime = Depends(get_now),
) -> dict:
    """
    Get confirmed tasks, newest first.
    `date` is YYYY-MM-DD or "today"; `kind` is "actionable" or "idea".
    """
    date_key = None
    if date == "today":
        date_key = now.date().isoformat()
    elif date:
        try:
            date_key = _parse_date(date)
        except ValueError:
            raise HTTPException(
                status_code=400, detail="Invalid date format. Use YYYY-MM-DD"
            )

    matching = filter_tasks(state.recent_tasks, date_key=date_key, kind=kind)
    return {
        "date": date_key,
        "tasks": [t.model_dump(mode="json") for t in matching[:limit]],
        "total": len(matching),
        "counts": summarize(state.recent_tasks),
    }


def _parse_date(value: str) -> str:
    return datetime.strptime(value, "%Y-%m-%d").date().isoformat()


@router.get("/tasks/dates")
async def get_task_dates() -> dict:
    """Days that have at least one actionable task, for marking calendar cells."""
    return {"dates": date_keys_with_todos(state.recent_tasks)}


@router.post("/tasks/confirm")
async def confirm_tasks(
    payload: ConfirmIn, tag_set: TagSet = Depends(get_tag_set)
) -> dict:
    """
    Commit the pending batch. The client sends the candidates back with
    whatever kind/category edits the user made.
    """
    if not payload.candidates:
        raise HTTPException(status_code=400, detail="nothing to confirm")

    ids = [c.id for c in payload.candidates]
    if len(set(ids)) != len(ids):
        raise HTTPException(status_code=400, detail="duplicate candidate ids")
    unknown = [i for i in ids if i not in state.pending_candidates]
    if unknown:
        raise HTTPException(
            status_code=409, detail=f"Candidates are not pending: {', '.join(unknown)}"
        )

    try:
        confirmed = confirm(payload.candidates, tag_set=tag_set)
    except TagSetError as e:
        raise HTTPException(status_code=400, detail=str(e))

    # newest batch first, keeping spoken order inside the batch
    for task in reversed(confirmed):
        state.recent_tasks.appendleft(task)
    # the review is over once a batch is committed
    state.pending_candidates.clear()

    try:
        for t in confirmed:
            TASKS_CONFIRMED_TOTAL.labels(kind=t.kind.value).inc()
    except Exception:
        pass

    logger.info(f"Confirmed {len(confirmed)} tasks")
    return {
        "status": "confirmed",
        "tasks": [t.model_dump(mode="json") for t in confirmed],
        "total": len(state.recent_tasks),
    }


@router.patch("/tasks/{task_id}/toggle")
async def toggle_task(task_id: str) -> dict:
    """Flip the completed flag of an actionable task."""
    for i, task in enumerate(state.recent_tasks):
        if task.id != task_id:
            continue
        try:
            updated = task.toggled()
        except ValueError as e:
            raise HTTPException(status_code=400, detail=str(e))
        state.recent_tasks[i] = updated
        return {"task": updated.model_dump(mode="json")}
    raise HTTPException(status_code=404, detail=f"Unknown task: {task_id}")


@router.delete("/tasks")
async def clear_tasks() -> dict:
    """Clear all items from the recent tasks list."""
    state.recent_tasks.clear()
    return {"status": "cleared"}

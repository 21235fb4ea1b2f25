import logging
import time
from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from api import state
from api.backend import BackendAPI
from api.dependencies import get_now
from api.metrics import REQUESTS_TOTAL, REQUEST_LATENCY_SECONDS

router = APIRouter()
logger = logging.getLogger(__name__)
backend = BackendAPI()


class NotesIn(BaseModel):
    notes: str


@router.post("/notes")
async def submit_notes(payload: NotesIn, now: datetime = Depends(get_now)) -> dict:
    start = time.time()

    if not payload.notes.strip():
        REQUESTS_TOTAL.labels(endpoint="/notes", status="rejected").inc()
        raise HTTPException(status_code=400, detail="notes must not be blank")

    logger.info(f"Received notes submission: {payload.notes[:50]}...")

    try:
        result = backend.submit_notes(payload.notes, now=now)
    except Exception as e:
        logger.error(f"Error processing notes: {e}")
        raise

    # A new utterance replaces whatever was still waiting for review
    state.pending_candidates.clear()
    for candidate in result["candidates"]:
        state.pending_candidates[candidate["id"]] = candidate

    logger.info(f"Notes processed successfully. Candidates found: {result['tasks_processed']}")

    # Prometheus counters (best-effort)
    try:
        REQUESTS_TOTAL.labels(endpoint="/notes", status="processed").inc()
        REQUEST_LATENCY_SECONDS.labels(endpoint="/notes").observe(time.time() - start)
    except Exception:
        pass

    return {"status": "processed", **result}


@router.get("/candidates")
async def get_candidates() -> dict:
    """Candidates from the last utterance that were neither confirmed nor discarded."""
    candidates = list(state.pending_candidates.values())
    return {"candidates": candidates, "total": len(candidates)}


@router.delete("/candidates")
async def discard_candidates() -> dict:
    discarded = len(state.pending_candidates)
    state.pending_candidates.clear()
    logger.info(f"Discarded {discarded} pending candidates")
    return {"status": "discarded", "discarded": discarded}

import logging
from datetime import datetime

from api.metrics import CANDIDATES_DERIVED_TOTAL, CANDIDATES_BY_CATEGORY_TOTAL
from mind_dump.derivation import derive

logger = logging.getLogger(__name__)


class BackendAPI:
    """Central orchestration component of the Mind Dump service."""

    def submit_notes(self, notes: str, now: datetime) -> dict:
        """Accepts one transcribed utterance and derives task candidates from it."""

        candidates = derive(notes, now)

        # Prometheus counters (best-effort)
        try:
            CANDIDATES_DERIVED_TOTAL.inc(len(candidates))
            for c in candidates:
                if c.category:
                    CANDIDATES_BY_CATEGORY_TOTAL.labels(category=c.category).inc()
        except Exception as e:
            logger.warning(f"Could not record derivation metrics: {e}")

        return {
            "candidates": [c.model_dump(mode="json") for c in candidates],
            "tasks_processed": len(candidates),
        }

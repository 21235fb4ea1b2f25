from __future__ import annotations

import logging
from datetime import datetime
from typing import List

from classification.task_classifier import TaskClassifier
from extraction.sanitizer import strip_date_words
from extraction.task_extractor import TaskExtractor
from mind_dump.models import DEFAULT_CATEGORY, TaskCandidate, TaskKind
from scheduling.temporal_resolver import anchor_timestamp

logger = logging.getLogger(__name__)


class EmptyUtteranceError(ValueError):
    pass


def candidate_id(anchor: datetime, index: int) -> str:
    return f"{anchor.isoformat()}-{index}"


def derive(utterance: str, now: datetime) -> List[TaskCandidate]:
    """Turn one transcribed utterance into reviewable task candidates.

    Every candidate shares one anchor timestamp: the date named anywhere in
    the utterance (or today's) at the time of day of `now`. Output order
    follows spoken order. No clock is read here; `now` is the only source
    of time, so equal inputs give equal outputs.
    """
    if not utterance or not utterance.strip():
        raise EmptyUtteranceError("utterance must not be blank")

    anchor = anchor_timestamp(utterance, now)
    items = TaskExtractor().extract(utterance)

    if not items:
        text = strip_date_words(utterance) or utterance.strip()
        logger.debug(f"No items segmented, falling back to whole utterance: {text!r}")
        return [
            TaskCandidate(
                id=candidate_id(anchor, 0),
                kind=TaskKind.ACTIONABLE,
                text=text,
                category=DEFAULT_CATEGORY.value,
                anchor_timestamp=anchor,
            )
        ]

    categories = TaskClassifier().classify(items)
    return [
        TaskCandidate(
            id=candidate_id(anchor, index),
            kind=TaskKind.ACTIONABLE,
            text=item,
            category=category.value,
            anchor_timestamp=anchor,
        )
        for index, (item, category) in enumerate(zip(items, categories))
    ]

import logging

from extraction.sanitizer import strip_date_words
from extraction.segmenter import segment

logger = logging.getLogger(__name__)


class TaskExtractor:

    def extract(self, text: str) -> list[str]:
        """Segment an utterance and clean each item of date phrases.

        An item that is nothing but date words keeps its raw text.
        """
        items = []
        for raw in segment(text):
            cleaned = strip_date_words(raw)
            if not cleaned:
                logger.debug(f"Item {raw!r} is only date words, keeping raw text")
                cleaned = raw
            items.append(cleaned)
        return items

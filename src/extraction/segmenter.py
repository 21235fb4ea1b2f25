from __future__ import annotations

import re

DELIMITERS = re.compile(r"[,，。；;、]")


def segment(text: str) -> list[str]:
    """Split an utterance into items on Chinese/ASCII punctuation, keeping spoken order."""
    return [piece.strip() for piece in DELIMITERS.split(text) if piece.strip()]

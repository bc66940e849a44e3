"""Status extraction from spoken phrasing."""

import logging

from .models import Extraction, Status
from .patterns import Rule, compile_phrase, run_cascade

logger = logging.getLogger(__name__)

STATUS_RULES: tuple[Rule, ...] = (
    (
        compile_phrase(r"\b(?:in[\s-]progress|currently\s+working|working\s+on|(?<!not\s)started)\b"),
        lambda match: Status.IN_PROGRESS,
    ),
    (
        compile_phrase(r"\b(?:already\s+done|completed|(?<!be\s)done|finished)\b"),
        lambda match: Status.COMPLETED,
    ),
    (
        compile_phrase(r"\b(?:pending|to[\s-]?do|not\s+started|needs\s+to\s+be\s+done)\b"),
        lambda match: Status.PENDING,
    ),
)


def extract_status(text: str) -> Extraction[Status]:
    """Classify status from phrase cues and strip the matched phrase.

    Args:
        text: The working text.

    Returns:
        Extraction with the status (PENDING when no cue was found) and the
        residual text.
    """
    hit = run_cascade(text, STATUS_RULES)
    if hit is None:
        return Extraction(value=Status.PENDING, text=text)

    status, residual = hit
    logger.debug("Matched %s status cue", status.value)
    return Extraction(value=status, text=residual)

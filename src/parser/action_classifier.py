"""Classify what a command asks for and isolate the text it applies to."""

import logging
import re

from .models import Action, Extraction
from .patterns import Rule, compile_phrase, run_cascade

logger = logging.getLogger(__name__)

_POLITE = r"(?:(?:please|can\s+you|could\s+you)\s+)?"


def _capture(match: re.Match) -> str:
    return match.group(1).strip()


def _leading_clause(match: re.Match) -> str:
    """Keep a clause said before an embedded "add task" phrase."""
    lead = match.group(1).strip()
    rest = match.group(2).strip()
    return f"{lead} {rest}".strip()


def _nothing(match: re.Match) -> str:
    return ""


ADD_RULES: tuple[Rule, ...] = (
    (compile_phrase(rf"^{_POLITE}add\s+(?:a\s+)?(?:new\s+)?(?:task\s+)?(?:to\s+)?(.+)"), _capture),
    (compile_phrase(rf"^{_POLITE}create\s+(?:a\s+)?(?:new\s+)?(?:task\s+)?(.+)"), _capture),
    (compile_phrase(r"^new\s+task\s+(.+)"), _capture),
    (
        compile_phrase(
            r"^(?:please\s+)?(?:remind\s+me\s+to|don'?t\s+forget\s+to|remember\s+to)\s+(.+)"
        ),
        _capture,
    ),
    (
        compile_phrase(
            r"^(?:i\s+)?(?:need\s+to|have\s+to|should|must|want\s+to|gotta|got\s+to)\s+(.+)"
        ),
        _capture,
    ),
    (compile_phrase(r"^(?:make|be)\s+sure\s+(?:to\s+)?(.+)"), _capture),
    (compile_phrase(r"^(?:schedule|plan)\s+(?:to\s+)?(.+)"), _capture),
    (compile_phrase(r"^(?:put|set)\s+(?:a\s+)?(?:reminder\s+(?:to\s+)?)?(.+)"), _capture),
    # Only after a clause closed by punctuation, e.g. "This is urgent, add task ..."
    (
        compile_phrase(r"^(.*?[,.;:!?])\s*(?:add|create)\s+(?:a\s+)?(?:new\s+)?task\s+(?:to\s+)?(.+)"),
        _leading_clause,
    ),
)

COMPLETE_RULES: tuple[Rule, ...] = (
    (
        compile_phrase(
            r"^(?:complete|finish|done(?!\s+with\b)|mark\s+(?:as\s+)?(?:done|complete|finished))"
            r"\s+(?:the\s+)?(?:task\s+)?(.+)"
        ),
        _capture,
    ),
    (
        compile_phrase(
            r"^mark\s+(?:the\s+)?(?:task\s+)?(.+?)\s+as\s+(?:done|complete|completed|finished)$"
        ),
        _capture,
    ),
    (compile_phrase(r"^(?:i\s+)?(?:finished|completed|done\s+with)\s+(.+)"), _capture),
)

DELETE_RULES: tuple[Rule, ...] = (
    (
        compile_phrase(r"^(?:delete|remove|cancel|get\s+rid\s+of)\s+(?:the\s+)?(?:task\s+)?(.+)"),
        _capture,
    ),
)

LIST_RULES: tuple[Rule, ...] = (
    (
        compile_phrase(
            r"^(?:list|show|read|what\s+are|tell\s+me)\s+(?:me\s+)?(?:all\s+)?(?:of\s+)?"
            r"(?:my\s+)?(?:all\s+)?tasks?\b"
        ),
        _nothing,
    ),
    (compile_phrase(r"^what\s+do\s+i\s+(?:have|need)\s+to\s+do\b"), _nothing),
    (compile_phrase(r"^(?:show|list|read)\s+(?:me\s+)?(?:my\s+)?to-?do(?:\s+list)?\b"), _nothing),
)

ACTION_FAMILIES: tuple[tuple[Action, tuple[Rule, ...]], ...] = (
    (Action.ADD, ADD_RULES),
    (Action.COMPLETE, COMPLETE_RULES),
    (Action.DELETE, DELETE_RULES),
    (Action.LIST, LIST_RULES),
)


def classify_action(transcript: str) -> Extraction[Action]:
    """Classify the command's action and isolate the working text.

    Families are tried in order (add, complete, delete, list); the first
    family with a matching pattern wins and its capture becomes the working
    text. List requests carry no working text. Anything else that is not
    blank is treated as an add request for the whole sentence.

    Args:
        transcript: The raw sentence from the user.

    Returns:
        Extraction with the action and the initial working text.
    """
    text = " ".join(transcript.split())
    if not text:
        return Extraction(value=Action.UNKNOWN, text="")

    for action, rules in ACTION_FAMILIES:
        hit = run_cascade(text, rules)
        if hit is not None:
            working_text, _ = hit
            return Extraction(value=action, text=working_text)

    logger.debug("No action phrase recognized, defaulting to add")
    return Extraction(value=Action.ADD, text=text)

"""Priority extraction from spoken phrasing."""

import logging

from .models import Extraction, Priority
from .patterns import Rule, compile_phrase, run_cascade

logger = logging.getLogger(__name__)

# Optional lead-ins ("it's", "this is", "a", "very") belong to the span so
# that no dangling fragment is left for the title.
_LEAD_IN = r"(?:(?:it'?s|it\s+is|this\s+is)\s+)?"

# Keeps "not urgent" and friends out of the high family.
_NOT_NEGATED = r"(?<!not\s)(?<!not\sa\s)(?<!not\sthat\s)(?<!not\svery\s)"


def _is(priority: Priority):
    return lambda match: priority


HIGH_PRIORITY_RULES: tuple[Rule, ...] = tuple(
    (compile_phrase(pattern), _is(Priority.HIGH))
    for pattern in (
        rf"\b{_NOT_NEGATED}{_LEAD_IN}(?:a\s+)?high\s+priority\b",
        rf"\b{_NOT_NEGATED}{_LEAD_IN}(?:very\s+)?urgent\b",
        rf"\b{_NOT_NEGATED}{_LEAD_IN}(?:very\s+)?important\b",
        rf"\b{_NOT_NEGATED}{_LEAD_IN}critical\b",
        r"\basap\b",
        r"\bimmediately\b",
        r"\bright\s+away\b",
        r"\b(?:top|highest)\s+priority\b",
        r"\bmust\s+(?:be\s+)?(?:done|do|finish|complete)\b",
        r"\bpriority\s*:\s*high\b",
    )
)

LOW_PRIORITY_RULES: tuple[Rule, ...] = tuple(
    (compile_phrase(pattern), _is(Priority.LOW))
    for pattern in (
        rf"\b{_LEAD_IN}(?:a\s+)?low\s+priority\b",
        rf"\b{_LEAD_IN}not\s+(?:a\s+|that\s+|very\s+)?urgent\b",
        rf"\b{_LEAD_IN}not\s+(?:a\s+|that\s+|very\s+)?important\b",
        r"\bwhenever\s+(?:you\s+)?(?:can|possible)\b",
        r"\beventually\b",
        r"\bsomeday\b",
        r"\bno\s+rush\b",
        r"\bwhen\s+(?:you\s+)?(?:have|get)\s+(?:a\s+)?(?:chance|time)\b",
        r"\bpriority\s*:\s*low\b",
    )
)

PRIORITY_FAMILIES: tuple[tuple[Rule, ...], ...] = (
    HIGH_PRIORITY_RULES,
    LOW_PRIORITY_RULES,
)


def extract_priority(text: str) -> Extraction[Priority]:
    """Classify priority from phrase cues and strip the matched phrase.

    The high family is checked before the low family; within a family the
    first listed pattern that matches wins. Only the first occurrence of
    the matched phrase is removed.

    Args:
        text: The working text.

    Returns:
        Extraction with the priority (MEDIUM when no cue was found) and the
        residual text.
    """
    for rules in PRIORITY_FAMILIES:
        hit = run_cascade(text, rules)
        if hit is not None:
            priority, residual = hit
            logger.debug("Matched %s priority cue", priority.value)
            return Extraction(value=priority, text=residual)
    return Extraction(value=Priority.MEDIUM, text=text)

"""Turn the text left over after extraction into a clean task title."""

import re
from typing import Optional

_LEADING_FILLER = tuple(
    re.compile(pattern, re.IGNORECASE)
    for pattern in (
        r"^(?:i\s+)?(?:need\s+to|have\s+to|should|must|want\s+to|going\s+to|gonna)\s+",
        r"^(?:please\s+)?(?:remind\s+me\s+to|don'?t\s+forget\s+to|remember\s+to)\s+",
        r"^(?:i\s+)?(?:gotta|got\s+to|wanna)\s+",
        r"^(?:make|be)\s+sure\s+(?:to\s+)?",
        r"^please\s+",
    )
)

_TRAILING_FILLER = tuple(
    re.compile(pattern, re.IGNORECASE)
    for pattern in (
        r"[,\s]+(?:please|thanks|thank\s+you)\.?$",
        r"[,\s]+if\s+(?:you\s+)?(?:can|could|would)\.?$",
        r"[,\s]+when\s+(?:you\s+)?(?:can|get\s+(?:a\s+)?chance)\.?$",
    )
)

# Words stranded at the end once a date, time or priority phrase is removed,
# e.g. "submit report by" from "submit report by Friday".
_DANGLING = tuple(
    re.compile(pattern, re.IGNORECASE)
    for pattern in (
        r"(?:^|\s+)(?:by|due|for|at|on|and|but|or|so)\s*$",
        r"\s*,\s*$",
        r"(?:^|\s+)it'?s\s*$",
    )
)

_WHITESPACE = re.compile(r"\s+")
_EDGE_PUNCTUATION = re.compile(r"^[,.;:!?\s-]+|[,.;:!?\s-]+$")


def _strip_all(text: str, patterns: tuple[re.Pattern, ...]) -> str:
    for pattern in patterns:
        text = pattern.sub("", text).strip()
    return text


def capitalize_first(text: str) -> str:
    """Uppercase the first character, leaving the rest untouched."""
    if not text:
        return text
    return text[0].upper() + text[1:]


def _normalize_once(text: str) -> str:
    text = _strip_all(text, _LEADING_FILLER)
    text = _strip_all(text, _TRAILING_FILLER)
    text = _WHITESPACE.sub(" ", text)
    text = _EDGE_PUNCTUATION.sub("", text)
    text = _strip_all(text, _DANGLING)
    text = _EDGE_PUNCTUATION.sub("", text)
    return capitalize_first(text)


def normalize_title(text: str) -> Optional[str]:
    """Clean residual working text into a task title.

    Filler phrases, stray punctuation and dangling prepositions are removed
    until nothing more changes, so normalizing an already normalized title
    returns it unchanged.

    Args:
        text: Text surviving all extraction stages.

    Returns:
        The title with its first letter capitalized, or None if nothing is
        left. Callers fall back to the original transcript in that case.
    """
    current = text
    while True:
        cleaned = _normalize_once(current)
        if cleaned == current:
            break
        current = cleaned
    return current or None

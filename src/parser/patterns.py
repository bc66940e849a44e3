"""Shared helpers for ordered first-match-wins pattern cascades."""

import re
from typing import Any, Callable, Optional, Sequence

# A cascade rule pairs a compiled pattern with a handler that turns the match
# into a field value. Handlers return None to reject a match (for example an
# impossible calendar date), in which case the cascade keeps looking.
Rule = tuple[re.Pattern, Callable[..., Any]]


def compile_phrase(pattern: str) -> re.Pattern:
    """Compile a phrase pattern the way every cascade expects it."""
    return re.compile(pattern, re.IGNORECASE)


def remove_span(text: str, match: re.Match) -> str:
    """Remove exactly the matched span from text, closing the gap it leaves."""
    before = text[: match.start()].rstrip()
    after = text[match.end():].lstrip()
    if before and after:
        return f"{before} {after}"
    return before or after


def run_cascade(
    text: str, rules: Sequence[Rule], *context: Any
) -> Optional[tuple[Any, str]]:
    """Try each rule top to bottom and apply the first one that fires.

    Args:
        text: The working text to search.
        rules: Ordered (pattern, handler) pairs.
        *context: Extra positional arguments passed to every handler
            after the match object.

    Returns:
        (value, residual_text) for the first accepted match, or None when
        no rule fired.
    """
    for pattern, handler in rules:
        for match in pattern.finditer(text):
            value = handler(match, *context)
            if value is None:
                continue
            return value, remove_span(text, match)
    return None

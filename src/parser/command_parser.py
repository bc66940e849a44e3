"""Parse a free-form sentence into a structured task command."""

import logging
from datetime import datetime
from typing import Optional

from .action_classifier import classify_action
from .datetime_resolver import resolve_datetime
from .models import Command
from .priority import extract_priority
from .status import extract_status
from .title import normalize_title

logger = logging.getLogger(__name__)


def parse_command(transcript: str, now: Optional[datetime] = None) -> Command:
    """Parse a spoken or typed sentence into a Command.

    Stages run in a fixed order, each consuming the working text left by
    the previous one: action, priority, due date/time, status, title.
    Status runs after the date so words like "done" are only treated as a
    status once date phrases have been taken out.

    Never raises for any input string. An unrecognized sentence yields
    Action.UNKNOWN and a sentence with nothing left to name the task yields
    a None title.

    Args:
        transcript: Raw text from speech-to-text or the keyboard.
        now: Reference instant for relative dates. Defaults to the
            configured wall clock.

    Returns:
        The parsed Command, carrying the transcript verbatim.
    """
    action = classify_action(transcript)
    priority = extract_priority(action.text)
    due = resolve_datetime(priority.text, now)
    status = extract_status(due.text)
    title = normalize_title(status.text)

    command = Command(
        action=action.value,
        original_transcript=transcript,
        title=title,
        priority=priority.value,
        status=status.value,
        due_date=due.date,
        due_time=due.time,
    )
    logger.debug(
        "Parsed %r as %s (title=%r, priority=%s)",
        transcript,
        command.action.value,
        command.title,
        command.priority.value,
    )
    return command

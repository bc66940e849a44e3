"""Project parsed commands into finalized task payloads."""

from datetime import datetime
from typing import Optional

from src.parser import Command, parse_command

from .models import TaskDraft


def project_task(command: Command) -> TaskDraft:
    """Build the task-creation payload for a parsed command.

    The title falls back to the trimmed original transcript when the parser
    left nothing to name the task. Due date and time are carried unchanged.

    Args:
        command: A parsed Command.

    Returns:
        TaskDraft with every required field set.
    """
    return TaskDraft(
        title=command.title or command.original_transcript.strip(),
        priority=command.priority,
        status=command.status,
        original_transcript=command.original_transcript,
        due_date=command.due_date,
        due_time=command.due_time,
    )


def draft_from_transcript(
    transcript: str, now: Optional[datetime] = None
) -> TaskDraft:
    """Parse a sentence and project it straight into a task payload."""
    return project_task(parse_command(transcript, now))

"""Data models for voice command dispatch results."""

from dataclasses import dataclass
from typing import Any, Optional

from src.parser.models import Command
from src.tasks.models import TaskDraft


@dataclass
class DispatchResult:
    """Outcome of handling one transcript.

    Attributes:
        transcript: The raw transcript that was handled.
        handled: False when the transcript was blank and nothing was done.
        command: The parsed command, when parsing got that far.
        draft: Task payload awaiting review, for add requests with a title.
        response: Sentence for the speech-output collaborator, if any.
        needs_review: Whether the caller should open the review step
            before committing the draft.
        error: Error message if handling failed unexpectedly.
    """

    transcript: str
    handled: bool = True
    command: Optional[Command] = None
    draft: Optional[TaskDraft] = None
    response: Optional[str] = None
    needs_review: bool = False
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "transcript": self.transcript,
            "handled": self.handled,
            "command": self.command.to_dict() if self.command else None,
            "draft": self.draft.to_dict() if self.draft else None,
            "response": self.response,
            "needs_review": self.needs_review,
            "error": self.error,
        }

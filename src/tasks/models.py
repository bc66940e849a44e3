"""Data models for the tasks module."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from src.parser.models import Priority, Status


@dataclass
class TaskDraft:
    """A finalized task-creation payload built from a parsed command.

    Handed to the persistence collaborator, which assigns identity and
    storage fields, or to a review step that pre-fills editable fields.

    Attributes:
        title: Task title (never empty).
        priority: Task priority.
        status: Task status.
        original_transcript: The sentence the task was parsed from.
        due_date: Optional due date (local midnight, or an exact instant).
        due_time: Optional due time as "HH:MM".
    """

    title: str
    priority: Priority
    status: Status
    original_transcript: str
    due_date: Optional[datetime] = None
    due_time: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "title": self.title,
            "priority": self.priority.value,
            "status": self.status.value,
            "original_transcript": self.original_transcript,
            "due_date": self.due_date.isoformat() if self.due_date else None,
            "due_time": self.due_time,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TaskDraft":
        """Deserialize from dictionary."""
        due_date = None
        if data.get("due_date"):
            due_date = datetime.fromisoformat(data["due_date"])

        return cls(
            title=data["title"],
            priority=Priority(data.get("priority", "medium")),
            status=Status(data.get("status", "pending")),
            original_transcript=data.get("original_transcript", ""),
            due_date=due_date,
            due_time=data.get("due_time"),
        )


@dataclass
class TaskSummary:
    """The minimal view of an existing task needed to answer "list my tasks".

    Attributes:
        title: Task title.
        status: Current task status.
    """

    title: str
    status: Status = Status.PENDING

    @property
    def is_pending(self) -> bool:
        """Check if the task still needs doing."""
        return self.status != Status.COMPLETED

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TaskSummary":
        """Deserialize from dictionary."""
        return cls(
            title=data["title"],
            status=Status(data.get("status", "pending")),
        )

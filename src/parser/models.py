"""Data models for the command parser module."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


class Action(Enum):
    """What the user asked the assistant to do."""

    ADD = "add"
    COMPLETE = "complete"
    DELETE = "delete"
    LIST = "list"
    UNKNOWN = "unknown"

    @property
    def targets_task(self) -> bool:
        """Whether this action operates on a single titled task."""
        return self in (Action.ADD, Action.COMPLETE, Action.DELETE)


class Priority(Enum):
    """Task priority levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Status(Enum):
    """Task workflow status."""

    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"


@dataclass(frozen=True)
class Extraction(Generic[T]):
    """Output of a single extraction stage.

    Attributes:
        value: The field recognized by the stage.
        text: The working text with the matched span removed.
    """

    value: T
    text: str


@dataclass(frozen=True)
class DateTimeResult:
    """Output of the date/time resolver.

    Attributes:
        date: Resolved due date. Local midnight for calendar days, or an
            exact instant for "in N hours" phrases.
        time: Resolved time of day as "HH:MM".
        text: The working text with both matched spans removed.
    """

    text: str
    date: Optional[datetime] = None
    time: Optional[str] = None


@dataclass
class Command:
    """A structured intent parsed from a spoken or typed sentence.

    Attributes:
        action: The classified action.
        original_transcript: The caller's raw input, verbatim.
        title: Normalized task title, or None when nothing was left.
        priority: Extracted priority (medium when not mentioned).
        status: Extracted status (pending when not mentioned).
        due_date: Optional due date (see DateTimeResult.date).
        due_time: Optional due time as "HH:MM".
    """

    action: Action
    original_transcript: str
    title: Optional[str] = None
    priority: Priority = Priority.MEDIUM
    status: Status = Status.PENDING
    due_date: Optional[datetime] = None
    due_time: Optional[str] = None

    @property
    def needs_clarification(self) -> bool:
        """Whether the caller should ask the user to retry or review."""
        if self.action == Action.UNKNOWN:
            return True
        return self.action.targets_task and not self.title

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "action": self.action.value,
            "original_transcript": self.original_transcript,
            "title": self.title,
            "priority": self.priority.value,
            "status": self.status.value,
            "due_date": self.due_date.isoformat() if self.due_date else None,
            "due_time": self.due_time,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Command":
        """Deserialize from dictionary."""
        due_date = None
        if data.get("due_date"):
            due_date = datetime.fromisoformat(data["due_date"])

        return cls(
            action=Action(data["action"]),
            original_transcript=data["original_transcript"],
            title=data.get("title"),
            priority=Priority(data.get("priority", "medium")),
            status=Status(data.get("status", "pending")),
            due_date=due_date,
            due_time=data.get("due_time"),
        )

"""Task payloads produced from parsed voice commands.

This module turns a parsed Command into the finalized payload that the
task-persistence collaborator or review UI consumes.

Public API:
    project_task: Build a TaskDraft from a Command.
    draft_from_transcript: Parse a sentence straight into a TaskDraft.
    TaskDraft: Finalized task-creation payload.
    TaskSummary: Minimal view of an existing task.
"""

from .models import TaskDraft, TaskSummary
from .projector import draft_from_transcript, project_task

__all__ = [
    "project_task",
    "draft_from_transcript",
    "TaskDraft",
    "TaskSummary",
]

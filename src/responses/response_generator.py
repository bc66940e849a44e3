"""Generate the sentence read back to the user after a command."""

from typing import Iterable

from src.parser.models import Action, Command
from src.tasks.models import TaskSummary

from .templates import (
    ADDED_TEMPLATE,
    COMPLETED_TEMPLATE,
    DELETED_TEMPLATE,
    FAILURE_RESPONSE,
    LIST_RESPONSE,
    TASK_COUNT_TEMPLATE,
    UNKNOWN_RESPONSE,
)


def generate_response(command: Command, success: bool) -> str:
    """Map a command and its outcome to one confirmation sentence.

    Args:
        command: The parsed command.
        success: Whether the caller managed to carry the command out.

    Returns:
        The sentence for the speech-output collaborator.
    """
    if not success:
        return FAILURE_RESPONSE

    if command.action == Action.ADD:
        return ADDED_TEMPLATE.format(
            title=command.title, priority=command.priority.value
        )
    if command.action == Action.COMPLETE:
        return COMPLETED_TEMPLATE.format(title=command.title)
    if command.action == Action.DELETE:
        return DELETED_TEMPLATE.format(title=command.title)
    if command.action == Action.LIST:
        return LIST_RESPONSE
    return UNKNOWN_RESPONSE


def summarize_tasks(tasks: Iterable[TaskSummary]) -> str:
    """Describe how many tasks exist and how many are still pending.

    Example:
        "You have 3 tasks, 1 is pending."
    """
    tasks = list(tasks)
    total = len(tasks)
    pending = sum(1 for task in tasks if task.is_pending)
    return TASK_COUNT_TEMPLATE.format(
        total=total,
        task_noun="task" if total == 1 else "tasks",
        pending=pending,
        verb="is" if pending == 1 else "are",
    )

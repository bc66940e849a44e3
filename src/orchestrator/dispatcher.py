"""VoiceCommandDispatcher - turns a transcript into the caller's next step."""

import logging
from datetime import datetime
from typing import Callable, Iterable, Optional

from src.parser import Action, Command, parse_command
from src.responses import generate_response, summarize_tasks
from src.responses.templates import (
    ERROR_RESPONSE,
    HELP_RESPONSE,
    LIST_RESPONSE,
    MISSING_TITLE_RESPONSE,
)
from src.tasks import TaskSummary, project_task

from .models import DispatchResult

logger = logging.getLogger(__name__)

Parser = Callable[[str, Optional[datetime]], Command]


class VoiceCommandDispatcher:
    """Decides what the surrounding app should do with a transcript.

    Parses the transcript, builds a task draft for add requests, and picks
    the sentence to read back. Storage, speech and review UI stay with the
    caller; the dispatcher only tells them what to do.

    Example:
        result = VoiceCommandDispatcher().process("add task buy milk tomorrow")
        if result.needs_review:
            show_review(result.draft)
    """

    def __init__(self, parser: Optional[Parser] = None):
        """Initialize the dispatcher.

        Args:
            parser: Callable with the parse_command signature. Defaults to
                parse_command.
        """
        self._parser = parser or parse_command

    def _dispatch(
        self, command: Command, tasks: Optional[Iterable[TaskSummary]]
    ) -> DispatchResult:
        result = DispatchResult(transcript=command.original_transcript, command=command)

        if command.action == Action.LIST:
            result.response = (
                summarize_tasks(tasks) if tasks is not None else LIST_RESPONSE
            )
        elif command.action == Action.UNKNOWN:
            result.response = HELP_RESPONSE
        elif not command.title:
            result.response = MISSING_TITLE_RESPONSE
        elif command.action == Action.ADD:
            result.draft = project_task(command)
            result.needs_review = True
            result.response = generate_response(command, success=True)
        else:
            result.response = generate_response(command, success=True)

        return result

    def process(
        self,
        transcript: str,
        now: Optional[datetime] = None,
        tasks: Optional[Iterable[TaskSummary]] = None,
    ) -> DispatchResult:
        """Handle one transcript.

        Args:
            transcript: Raw text from speech-to-text.
            now: Reference instant for relative dates.
            tasks: The user's current tasks, used to answer list requests.
                When omitted, list requests get a generic reply.

        Returns:
            DispatchResult describing the command, any draft awaiting
            review, and the sentence to speak. Unexpected failures are
            logged and reported in-band with an apology.
        """
        if not transcript.strip():
            return DispatchResult(transcript=transcript, handled=False)

        command: Optional[Command] = None
        try:
            command = self._parser(transcript, now)
            result = self._dispatch(command, tasks)
        except Exception as e:
            logger.exception("Failed to process voice command %r", transcript)
            return DispatchResult(
                transcript=transcript,
                command=command,
                response=ERROR_RESPONSE,
                error=str(e),
            )

        logger.info(
            "Dispatched %s command (review=%s)",
            command.action.value,
            result.needs_review,
            extra={"action": command.action.value, "needs_review": result.needs_review},
        )
        return result

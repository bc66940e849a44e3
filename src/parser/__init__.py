"""Natural-language command parser for voice-driven task management.

This module turns a free-form sentence ("remind me to call mom tomorrow at
5pm, it's urgent") into a structured Command through an ordered cascade of
extraction stages.

Public API:
    parse_command: Parse a sentence into a Command.
    classify_action: Action classifier stage.
    extract_priority: Priority extractor stage.
    resolve_datetime: Due date/time resolver stage.
    extract_status: Status extractor stage.
    normalize_title: Title normalizer stage.
    Command: The parsed command.
    Action, Priority, Status: Enumerations of command fields.
    Extraction, DateTimeResult: Stage outputs.
    ParserError: Base exception for module errors.
    ParserConfigError: Raised on invalid environment settings.
"""

from .action_classifier import classify_action
from .command_parser import parse_command
from .datetime_resolver import resolve_datetime
from .exceptions import ParserConfigError, ParserError
from .models import Action, Command, DateTimeResult, Extraction, Priority, Status
from .priority import extract_priority
from .status import extract_status
from .title import normalize_title

__all__ = [
    # Entry point
    "parse_command",
    # Stages
    "classify_action",
    "extract_priority",
    "resolve_datetime",
    "extract_status",
    "normalize_title",
    # Models
    "Command",
    "Action",
    "Priority",
    "Status",
    "Extraction",
    "DateTimeResult",
    # Exceptions
    "ParserError",
    "ParserConfigError",
]

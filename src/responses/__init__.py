"""Spoken responses for voice commands.

Public API:
    generate_response: Confirmation or failure sentence for a command.
    summarize_tasks: Task count sentence for list requests.
"""

from .response_generator import generate_response, summarize_tasks

__all__ = [
    "generate_response",
    "summarize_tasks",
]

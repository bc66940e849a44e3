"""Voice command dispatch.

Connects the parser, task projector and response generator into the single
call the surrounding voice app makes per transcript.
"""

from .dispatcher import VoiceCommandDispatcher
from .models import DispatchResult

__all__ = [
    "VoiceCommandDispatcher",
    "DispatchResult",
]

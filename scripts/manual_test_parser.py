#!/usr/bin/env python3
"""Manual smoke test: run sample sentences through the voice command parser.

Run from project root:
    python scripts/manual_test_parser.py
    python scripts/manual_test_parser.py "remind me to call mom next friday at 6pm"
    python scripts/manual_test_parser.py --now 2026-03-04T10:00 "next monday"

Reads TASK_PARSER_TIMEZONE, LOG_LEVEL and LOG_FORMAT from the environment
or a .env file in the project root.
"""

import argparse
import sys
from datetime import datetime
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent

# Add project root to sys.path so `src` is importable
sys.path.insert(0, str(PROJECT_ROOT))

from dotenv import load_dotenv

from src.logging_config import configure_logging
from src.orchestrator import VoiceCommandDispatcher
from src.tasks import TaskSummary

SAMPLE_SENTENCES = [
    "Add task buy milk tomorrow at 5pm",
    "This is urgent, add task finish report",
    "Remind me to call the dentist next Monday in the morning",
    "I need to submit the expense report by end of week, no rush",
    "Schedule team sync on March 3rd at 14:30",
    "Pick up dry cleaning in 2 hours please",
    "Mark buy milk as done",
    "Delete task groceries",
    "List my tasks",
]

SAMPLE_TASKS = [
    TaskSummary(title="Buy milk"),
    TaskSummary(title="Finish report"),
]


def main() -> int:
    load_dotenv(PROJECT_ROOT / ".env")

    parser = argparse.ArgumentParser(description="Parse sample voice commands")
    parser.add_argument(
        "sentences",
        nargs="*",
        help="Sentences to parse (defaults to a built-in sample set)",
    )
    parser.add_argument(
        "--now",
        type=datetime.fromisoformat,
        default=None,
        help="Reference instant in ISO format (defaults to the wall clock)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Set logging level (overrides LOG_LEVEL env var)",
    )
    args = parser.parse_args()
    configure_logging(level_override=args.log_level)

    dispatcher = VoiceCommandDispatcher()
    failures = 0

    for sentence in args.sentences or SAMPLE_SENTENCES:
        result = dispatcher.process(sentence, now=args.now, tasks=SAMPLE_TASKS)
        print(f"\n> {sentence}")
        if result.command:
            for key, value in result.command.to_dict().items():
                if key != "original_transcript":
                    print(f"    {key}: {value}")
        print(f"    review: {result.needs_review}")
        print(f"    says: {result.response}")
        if result.error:
            failures += 1
            print(f"    error: {result.error}")

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())

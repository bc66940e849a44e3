"""Sentence templates for spoken confirmations and prompts."""

FAILURE_RESPONSE = "Sorry, I couldn't process that command. Please try again."

ADDED_TEMPLATE = 'Task "{title}" has been added with {priority} priority.'

COMPLETED_TEMPLATE = 'Task "{title}" has been marked as complete.'

DELETED_TEMPLATE = 'Task "{title}" has been deleted.'

LIST_RESPONSE = "Here are your tasks."

UNKNOWN_RESPONSE = (
    "I didn't understand that command. "
    "Try saying 'add task' followed by your task."
)

MISSING_TITLE_RESPONSE = "I couldn't understand the task title. Please try again."

HELP_RESPONSE = (
    "I didn't understand that command. Try saying 'add task' followed by "
    "your task name, or 'list my tasks'."
)

ERROR_RESPONSE = (
    "Sorry, there was an error processing your command. Please try again."
)

TASK_COUNT_TEMPLATE = "You have {total} {task_noun}, {pending} {verb} pending."

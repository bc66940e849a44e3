"""Exceptions for the command parser module."""


class ParserError(Exception):
    """Base exception for command parser errors."""

    pass


class ParserConfigError(ParserError):
    """Raised when a parser setting from the environment is invalid."""

    def __init__(self, setting: str, value: str, reason: str):
        self.setting = setting
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid value '{value}' for {setting}: {reason}")

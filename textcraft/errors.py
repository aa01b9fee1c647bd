from __future__ import annotations


class TextcraftError(Exception):
    """Base class for every error raised by textcraft."""


class InvalidInputError(TextcraftError, ValueError):
    """Blank text, a non-positive count/length, or an unknown option value."""


class NoCompatibleAlgorithmError(TextcraftError, LookupError):
    """No algorithm profile supports the requested task type."""

    def __init__(self, task_type: str):
        super().__init__(f"No compatible algorithms found for task type: {task_type}")
        self.task_type = task_type

from __future__ import annotations

from typing import Any


class TaskWorkflowError(Exception):
    """Base class for task workflow errors."""


class InvalidStatusError(TaskWorkflowError):
    """Raised when a task is built from a status outside the known set."""

    def __init__(self, status: Any) -> None:
        super().__init__(f"Unexpected task status: {status!r}")
        self.status = status


class UnknownActionError(TaskWorkflowError):
    """Raised when an action code does not match any defined action."""

    def __init__(self, code: Any) -> None:
        super().__init__(f"Unknown task action: {code!r}")
        self.code = code


class ActionNotPermittedError(TaskWorkflowError):
    """Raised when a viewer submits an action that is not available to them."""

    def __init__(self, action: str, status: str, user_id: int) -> None:
        super().__init__(
            f"Action {action!r} is not permitted for user {user_id} on a task in status {status!r}"
        )
        self.action = action
        self.status = status
        self.user_id = user_id


class TransitionTableError(TaskWorkflowError):
    """Raised when the static transition tables are incomplete or inconsistent."""

from __future__ import annotations

from enum import IntEnum
from typing import Any

from src.taskforce.domain.exceptions import InvalidStatusError


class TaskStatus(IntEnum):
    """Lifecycle statuses of a marketplace task, keyed by their persisted code."""
    NEW = 1
    CANCELED = 2
    IN_WORK = 3
    COMPLETED = 4
    FAILED = 5

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def parse(cls, raw: Any) -> TaskStatus:
        """
        Convert a raw persisted value into a status.

        Accepts members, plain ints and digit strings. Anything else, including
        bools and out-of-range codes, raises ``InvalidStatusError``.
        """
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, bool):
            raise InvalidStatusError(raw)
        code = raw.strip() if isinstance(raw, str) else raw
        if isinstance(code, str) and not (code.isascii() and code.isdigit()):
            raise InvalidStatusError(raw)
        if not isinstance(code, (int, str)):
            raise InvalidStatusError(raw)
        try:
            return cls(int(code))
        except ValueError:
            raise InvalidStatusError(raw) from None


_LABELS: dict[TaskStatus, str] = {
    TaskStatus.NEW: "New",
    TaskStatus.CANCELED: "Canceled",
    TaskStatus.IN_WORK: "In work",
    TaskStatus.COMPLETED: "Completed",
    TaskStatus.FAILED: "Failed",
}

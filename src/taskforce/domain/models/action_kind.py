from __future__ import annotations

from enum import Enum

from src.taskforce.domain.exceptions import UnknownActionError


class ActionKind(str, Enum):
    """Actions a viewer may take on a task. Values are stable wire codes."""
    RESPOND = "respond"
    CANCEL = "cancel"
    COMPLETE = "complete"
    REFUSE = "refuse"

    @classmethod
    def parse(cls, code: str) -> ActionKind:
        """Return the action for ``code`` or raise ``UnknownActionError``."""
        try:
            return cls(code)
        except ValueError:
            raise UnknownActionError(code) from None

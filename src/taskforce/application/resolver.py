from __future__ import annotations

import logging

from src.taskforce.domain.actions import get_action
from src.taskforce.domain.models.action_kind import ActionKind
from src.taskforce.domain.models.resolved_action import ResolvedAction
from src.taskforce.domain.models.task_state import TaskState
from src.taskforce.domain.models.task_status import TaskStatus
from src.taskforce.domain.transitions import ACTION_NEXT_STATUS, STATUS_ACTIONS

logger = logging.getLogger(__name__)


class ActionResolver:
    """
    Resolve which action a viewer may take on a task and where it leads.

    Stateless: every method is a pure function of the given ``TaskState``, so one
    instance can be shared across requests and threads.

    Resolution is first-match: candidates are tried in table order and only the
    first permitted one is surfaced. This assumes the guards of a status are
    mutually exclusive per viewer, which holds for the current action set.
    """

    def available_actions(self, state: TaskState) -> tuple[ActionKind, ...]:
        """Return the candidate actions for the state's status, in table order."""
        return STATUS_ACTIONS[state.status]

    def permitted_actions(self, state: TaskState) -> tuple[ActionKind, ...]:
        """Return every candidate action whose guard holds for the viewer."""
        return tuple(
            kind
            for kind in self.available_actions(state)
            if get_action(kind).is_permitted(state.performer_id, state.customer_id, state.user_id)
        )

    def resolve_action(self, state: TaskState) -> ResolvedAction | None:
        """Return the first permitted action with its title, or ``None``."""
        for kind in self.available_actions(state):
            action = get_action(kind)
            if action.is_permitted(state.performer_id, state.customer_id, state.user_id):
                logger.debug(
                    "Resolved task action",
                    extra={
                        "task_id": state.task_id,
                        "status": state.status.name,
                        "action": action.code,
                        "role": action.role.value,
                    },
                )
                return ResolvedAction(action=kind, title=action.title(state.task_id))
        logger.debug(
            "No action available for viewer",
            extra={
                "task_id": state.task_id,
                "status": state.status.name,
                "user_id": state.user_id,
                "viewer_role": state.viewer_role.value if state.viewer_role else None,
            },
        )
        return None

    def next_status(self, state: TaskState) -> TaskStatus | None:
        """Return the status the viewer's action leads to, or ``None``."""
        resolved = self.resolve_action(state)
        if resolved is None:
            return None
        return ACTION_NEXT_STATUS[resolved.action]

from __future__ import annotations

import logging

import inject
from pydantic import BaseModel, ConfigDict, Field

from src.taskforce.application.resolver import ActionResolver
from src.taskforce.domain.exceptions import ActionNotPermittedError
from src.taskforce.domain.models.action_kind import ActionKind
from src.taskforce.domain.models.resolved_action import ResolvedAction
from src.taskforce.domain.models.task_state import TaskState
from src.taskforce.domain.models.task_status import TaskStatus
from src.taskforce.domain.transitions import ACTION_NEXT_STATUS

logger = logging.getLogger(__name__)


class WorkflowView(BaseModel):
    """What a viewer sees of a task's workflow."""
    model_config = ConfigDict(frozen=True)

    status: TaskStatus
    available_actions: tuple[ActionKind, ...] = Field(
        description="Candidate actions for the current status, in resolution order."
    )
    resolved_action: ResolvedAction | None = Field(
        default=None, description="Action surfaced to the viewer, if any."
    )
    next_status: TaskStatus | None = Field(
        default=None, description="Status the surfaced action leads to."
    )


class WorkflowService:
    """
    Applies viewer-submitted actions to task states.

    Never persists anything. Callers must serialise concurrent writers per task,
    since a stale ``status`` read cannot be detected here.
    """

    def __init__(self) -> None:
        self._resolver: ActionResolver = inject.instance(ActionResolver)

    def describe(self, state: TaskState) -> WorkflowView:
        """Return the workflow view of ``state`` for its viewer."""
        resolved = self._resolver.resolve_action(state)
        return WorkflowView(
            status=state.status,
            available_actions=self._resolver.available_actions(state),
            resolved_action=resolved,
            next_status=ACTION_NEXT_STATUS[resolved.action] if resolved is not None else None,
        )

    def apply(self, state: TaskState, action_code: str) -> TaskState:
        """
        Apply ``action_code`` on behalf of the viewer and return the new state.

        Raises ``UnknownActionError`` for codes outside the defined set and
        ``ActionNotPermittedError`` when the code is not the viewer's action.
        """
        kind = ActionKind.parse(action_code)
        resolved = self._resolver.resolve_action(state)
        if resolved is None or resolved.action is not kind:
            logger.warning(
                "Rejected task action",
                extra={
                    "task_id": state.task_id,
                    "status": state.status.name,
                    "action": kind.value,
                    "user_id": state.user_id,
                    "viewer_role": state.viewer_role.value if state.viewer_role else None,
                },
            )
            raise ActionNotPermittedError(kind.value, state.status.name, state.user_id)

        new_state = state.with_status(ACTION_NEXT_STATUS[kind])
        logger.info(
            "Applied task action",
            extra={
                "task_id": state.task_id,
                "action": kind.value,
                "from_status": state.status.name,
                "to_status": new_state.status.name,
            },
        )
        return new_state

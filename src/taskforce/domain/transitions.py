from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from src.taskforce.domain.actions import ACTIONS
from src.taskforce.domain.exceptions import TransitionTableError
from src.taskforce.domain.models.action_kind import ActionKind
from src.taskforce.domain.models.task_status import TaskStatus

STATUS_ACTIONS: Mapping[TaskStatus, tuple[ActionKind, ...]] = MappingProxyType(
    {
        TaskStatus.NEW: (ActionKind.RESPOND, ActionKind.CANCEL),
        TaskStatus.IN_WORK: (ActionKind.COMPLETE, ActionKind.REFUSE),
        TaskStatus.CANCELED: (),
        TaskStatus.COMPLETED: (),
        TaskStatus.FAILED: (),
    }
)

ACTION_NEXT_STATUS: Mapping[ActionKind, TaskStatus] = MappingProxyType(
    {
        ActionKind.RESPOND: TaskStatus.IN_WORK,
        ActionKind.CANCEL: TaskStatus.CANCELED,
        ActionKind.REFUSE: TaskStatus.FAILED,
        ActionKind.COMPLETE: TaskStatus.COMPLETED,
    }
)

INITIAL_STATUS = TaskStatus.NEW


def validate_tables(
    status_actions: Mapping[TaskStatus, tuple[ActionKind, ...]],
    action_next_status: Mapping[ActionKind, TaskStatus],
) -> None:
    """Raise ``TransitionTableError`` unless both tables cover every status and action."""
    missing_statuses = [s for s in TaskStatus if s not in status_actions]
    if missing_statuses:
        raise TransitionTableError(f"No action row for statuses: {missing_statuses}")

    for kind in ActionKind:
        if kind not in action_next_status:
            raise TransitionTableError(f"No next status for action {kind.value!r}")
        if kind not in ACTIONS:
            raise TransitionTableError(f"No action variant for {kind.value!r}")

    for status, kinds in status_actions.items():
        if len(set(kinds)) != len(kinds):
            raise TransitionTableError(f"Duplicate actions listed for {status.name}")
        for kind in kinds:
            target = action_next_status.get(kind)
            if target is None:
                raise TransitionTableError(f"No next status for action {kind.value!r}")
            if target == status:
                raise TransitionTableError(f"Self-loop on {status.name} via {kind.value!r}")
            if target == INITIAL_STATUS:
                raise TransitionTableError(f"Action {kind.value!r} leads back to {INITIAL_STATUS.name}")


def terminal_statuses(
    status_actions: Mapping[TaskStatus, tuple[ActionKind, ...]] = STATUS_ACTIONS,
) -> frozenset[TaskStatus]:
    return frozenset(status for status, kinds in status_actions.items() if not kinds)


validate_tables(STATUS_ACTIONS, ACTION_NEXT_STATUS)

TERMINAL_STATUSES = terminal_statuses()

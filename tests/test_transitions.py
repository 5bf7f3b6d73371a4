from __future__ import annotations

from types import MappingProxyType

import pytest

from src.taskforce.domain.exceptions import TransitionTableError
from src.taskforce.domain.models.action_kind import ActionKind
from src.taskforce.domain.models.task_status import TaskStatus
from src.taskforce.domain.transitions import (
    ACTION_NEXT_STATUS,
    STATUS_ACTIONS,
    TERMINAL_STATUSES,
    validate_tables,
)


def test_status_actions_table():
    assert STATUS_ACTIONS[TaskStatus.NEW] == (ActionKind.RESPOND, ActionKind.CANCEL)
    assert STATUS_ACTIONS[TaskStatus.IN_WORK] == (ActionKind.COMPLETE, ActionKind.REFUSE)
    for status in (TaskStatus.CANCELED, TaskStatus.COMPLETED, TaskStatus.FAILED):
        assert STATUS_ACTIONS[status] == ()


def test_action_next_status_table():
    assert dict(ACTION_NEXT_STATUS) == {
        ActionKind.RESPOND: TaskStatus.IN_WORK,
        ActionKind.CANCEL: TaskStatus.CANCELED,
        ActionKind.REFUSE: TaskStatus.FAILED,
        ActionKind.COMPLETE: TaskStatus.COMPLETED,
    }


def test_terminal_statuses():
    assert TERMINAL_STATUSES == {TaskStatus.CANCELED, TaskStatus.COMPLETED, TaskStatus.FAILED}


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        STATUS_ACTIONS[TaskStatus.FAILED] = (ActionKind.RESPOND,)  # type: ignore[index]
    with pytest.raises(TypeError):
        ACTION_NEXT_STATUS[ActionKind.CANCEL] = TaskStatus.NEW  # type: ignore[index]


def test_no_transition_returns_to_new_or_loops():
    for status, kinds in STATUS_ACTIONS.items():
        for kind in kinds:
            assert ACTION_NEXT_STATUS[kind] not in (TaskStatus.NEW, status)


def test_validate_rejects_missing_status_row():
    rows = {k: v for k, v in STATUS_ACTIONS.items() if k is not TaskStatus.FAILED}
    with pytest.raises(TransitionTableError):
        validate_tables(MappingProxyType(rows), ACTION_NEXT_STATUS)


def test_validate_rejects_missing_next_status():
    targets = {k: v for k, v in ACTION_NEXT_STATUS.items() if k is not ActionKind.REFUSE}
    with pytest.raises(TransitionTableError):
        validate_tables(STATUS_ACTIONS, targets)


def test_validate_rejects_return_to_new():
    targets = dict(ACTION_NEXT_STATUS)
    targets[ActionKind.REFUSE] = TaskStatus.NEW
    with pytest.raises(TransitionTableError):
        validate_tables(STATUS_ACTIONS, targets)


def test_validate_rejects_self_loop():
    rows = dict(STATUS_ACTIONS)
    rows[TaskStatus.CANCELED] = (ActionKind.CANCEL,)
    with pytest.raises(TransitionTableError):
        validate_tables(rows, ACTION_NEXT_STATUS)

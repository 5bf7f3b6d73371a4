from __future__ import annotations

import inject
import pytest

from src.setup.app_config import _bindings
from src.taskforce.application.resolver import ActionResolver
from src.taskforce.domain.models.task_state import TaskState
from src.taskforce.domain.models.task_status import TaskStatus

CUSTOMER_ID = 5
PERFORMER_ID = 11
STRANGER_ID = 99


@pytest.fixture(autouse=True)
def _di():
    inject.clear_and_configure(_bindings)
    yield
    inject.clear()


@pytest.fixture()
def resolver() -> ActionResolver:
    return ActionResolver()


@pytest.fixture()
def make_state():
    """Build a TaskState with the shared customer/performer ids."""

    def _make(status=TaskStatus.NEW, user_id=STRANGER_ID, performer_id=PERFORMER_ID, task_id=42):
        return TaskState(
            performer_id=performer_id,
            customer_id=CUSTOMER_ID,
            user_id=user_id,
            status=status,
            task_id=task_id,
        )

    return _make

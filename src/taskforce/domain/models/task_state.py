from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.taskforce.domain.models.role import Role
from src.taskforce.domain.models.task_status import TaskStatus
from src.taskforce.domain.transitions import TERMINAL_STATUSES


class TaskState(BaseModel):
    """
    Workflow position of one task as seen by one viewer.

    Built per request from persisted task data and the current viewer's id.
    Instances are frozen: a transition yields a new ``TaskState`` that the
    caller persists.
    """
    model_config = ConfigDict(frozen=True)

    performer_id: int | None = Field(
        default=None, description="Assigned performer, absent while nobody has responded."
    )
    customer_id: int = Field(description="Customer who published the task.")
    user_id: int = Field(description="Viewer whose permissions are evaluated.")
    status: TaskStatus = Field(description="Current lifecycle status.")
    task_id: int | None = Field(
        default=None, description="Task identity used when rendering action titles."
    )

    @field_validator("status", mode="before")
    @classmethod
    def _parse_status(cls, value: Any) -> TaskStatus:
        return TaskStatus.parse(value)

    @property
    def viewer_role(self) -> Role | None:
        """Role of the viewer on this task, ``None`` for a third party."""
        if self.user_id == self.customer_id:
            return Role.CUSTOMER
        if self.performer_id is not None and self.user_id == self.performer_id:
            return Role.PERFORMER
        return None

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATUSES

    def with_status(self, status: TaskStatus | int) -> TaskState:
        """Return a copy of this state carrying ``status``."""
        return TaskState(
            performer_id=self.performer_id,
            customer_id=self.customer_id,
            user_id=self.user_id,
            status=status,
            task_id=self.task_id,
        )

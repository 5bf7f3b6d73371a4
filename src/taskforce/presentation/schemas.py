from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from src.taskforce.domain.models.task_state import TaskState


class TaskStateRequest(BaseModel):
    """Persisted task data plus the current viewer, as sent by the caller."""
    performer_id: int | None = Field(default=None, description="Assigned performer, if any.")
    customer_id: int = Field(description="Customer who published the task.")
    user_id: int = Field(description="Current viewer.")
    status: Any = Field(description="Persisted status code (1-5).")
    task_id: int | None = Field(default=None, description="Task identity for action titles.")

    def to_state(self) -> TaskState:
        """Build the domain state. Raises ``InvalidStatusError`` on a foreign status."""
        return TaskState(
            performer_id=self.performer_id,
            customer_id=self.customer_id,
            user_id=self.user_id,
            status=self.status,
            task_id=self.task_id,
        )


class ApplyActionRequest(TaskStateRequest):
    action: str = Field(description="Action code submitted by the viewer.")


class ActionOut(BaseModel):
    code: str
    title: str


class ResolveResponse(BaseModel):
    status: int
    status_label: str
    available_actions: list[str]
    action: ActionOut | None = None
    next_status: int | None = None


class ApplyResponse(BaseModel):
    task_id: int | None = None
    action: str
    previous_status: int
    status: int
    status_label: str

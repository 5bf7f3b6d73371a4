from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from src.taskforce.domain.models.action_kind import ActionKind
from src.taskforce.domain.models.role import Role

Guard = Callable[[int | None, int, int], bool]


@dataclass(frozen=True)
class Action:
    """
    One task action: its code, its label and the guard deciding who may invoke it.

    The guard receives ``(performer_id, customer_id, user_id)`` and must be pure.
    ``role`` names who the action is meant for and is reported in logs; the guard
    alone decides permission.
    """
    kind: ActionKind
    role: Role
    label: str
    title_template: str
    guard: Guard

    @property
    def code(self) -> str:
        return self.kind.value

    def title(self, task_id: int | None = None) -> str:
        """Render the action label, embedding ``task_id`` when one is given."""
        if task_id is None:
            return self.label
        return self.title_template.format(task_id=task_id)

    def is_permitted(self, performer_id: int | None, customer_id: int, user_id: int) -> bool:
        return self.guard(performer_id, customer_id, user_id)


def _is_customer(performer_id: int | None, customer_id: int, user_id: int) -> bool:
    return user_id == customer_id


def _is_not_customer(performer_id: int | None, customer_id: int, user_id: int) -> bool:
    return user_id != customer_id


def _is_performer(performer_id: int | None, customer_id: int, user_id: int) -> bool:
    return performer_id is not None and user_id == performer_id


RESPOND = Action(
    kind=ActionKind.RESPOND,
    role=Role.PERFORMER,
    label="Respond",
    title_template="Respond to task #{task_id}",
    guard=_is_not_customer,
)

CANCEL = Action(
    kind=ActionKind.CANCEL,
    role=Role.CUSTOMER,
    label="Cancel",
    title_template="Cancel task #{task_id}",
    guard=_is_customer,
)

COMPLETE = Action(
    kind=ActionKind.COMPLETE,
    role=Role.PERFORMER,
    label="Complete",
    title_template="Complete task #{task_id}",
    guard=_is_performer,
)

REFUSE = Action(
    kind=ActionKind.REFUSE,
    role=Role.PERFORMER,
    label="Refuse",
    title_template="Refuse task #{task_id}",
    guard=_is_performer,
)

ACTIONS: Mapping[ActionKind, Action] = MappingProxyType(
    {action.kind: action for action in (RESPOND, CANCEL, COMPLETE, REFUSE)}
)


def get_action(kind: ActionKind) -> Action:
    """Return the action variant for ``kind``."""
    return ACTIONS[kind]

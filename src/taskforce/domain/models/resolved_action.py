from pydantic import BaseModel, ConfigDict, Field

from src.taskforce.domain.models.action_kind import ActionKind


class ResolvedAction(BaseModel):
    """The single action surfaced to a viewer, with its rendered title."""
    model_config = ConfigDict(frozen=True)

    action: ActionKind = Field(description="Action available to the viewer.")
    title: str = Field(description="Human-readable label for the action.")

    @property
    def code(self) -> str:
        return self.action.value

    def as_pair(self) -> tuple[str, str]:
        """Return ``(code, title)`` as consumed by rendering callers."""
        return self.code, self.title

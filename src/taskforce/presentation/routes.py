from fastapi import APIRouter, Depends

from src.setup.api_config import ApiSettings, get_api_settings
from src.taskforce.application.services import WorkflowService
from src.taskforce.presentation.schemas import (
    ActionOut,
    ApplyActionRequest,
    ApplyResponse,
    ResolveResponse,
    TaskStateRequest,
)

router = APIRouter()


def get_workflow_service() -> WorkflowService:
    return WorkflowService()


@router.get("/health")
async def health(settings: ApiSettings = Depends(get_api_settings)) -> dict:
    return {"status": "ok", "app": settings.APP_NAME, "version": settings.APP_VERSION}


@router.post("/workflow/resolve", response_model=ResolveResponse)
async def resolve(
    body: TaskStateRequest,
    service: WorkflowService = Depends(get_workflow_service),
) -> ResolveResponse:
    """Return the action available to the viewer and the status it leads to."""
    view = service.describe(body.to_state())
    resolved = view.resolved_action
    return ResolveResponse(
        status=view.status.value,
        status_label=view.status.label,
        available_actions=[kind.value for kind in view.available_actions],
        action=ActionOut(code=resolved.code, title=resolved.title) if resolved is not None else None,
        next_status=view.next_status.value if view.next_status is not None else None,
    )


@router.post("/workflow/apply", response_model=ApplyResponse)
async def apply(
    body: ApplyActionRequest,
    service: WorkflowService = Depends(get_workflow_service),
) -> ApplyResponse:
    """Apply the viewer's action and return the status the caller must persist."""
    state = body.to_state()
    new_state = service.apply(state, body.action)
    return ApplyResponse(
        task_id=new_state.task_id,
        action=body.action,
        previous_status=state.status.value,
        status=new_state.status.value,
        status_label=new_state.status.label,
    )

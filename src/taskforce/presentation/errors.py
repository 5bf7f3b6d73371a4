from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from src.taskforce.domain.exceptions import (
    ActionNotPermittedError,
    InvalidStatusError,
    UnknownActionError,
)


async def _invalid_status(request: Request, exc: InvalidStatusError) -> JSONResponse:
    return JSONResponse(status_code=422, content={"detail": str(exc)})


async def _unknown_action(request: Request, exc: UnknownActionError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"detail": str(exc)})


async def _not_permitted(request: Request, exc: ActionNotPermittedError) -> JSONResponse:
    return JSONResponse(status_code=409, content={"detail": str(exc)})


def register_exception_handlers(app: FastAPI) -> None:
    """Map workflow errors onto HTTP responses."""
    app.add_exception_handler(InvalidStatusError, _invalid_status)
    app.add_exception_handler(UnknownActionError, _unknown_action)
    app.add_exception_handler(ActionNotPermittedError, _not_permitted)

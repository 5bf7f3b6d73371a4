from fastapi import FastAPI

from src.setup.api_config import get_api_settings
from src.setup.app_config import configure_di
from src.setup.logging_config import configure_logging
from src.taskforce.presentation.errors import register_exception_handlers
from src.taskforce.presentation.routes import router as workflow_router

settings = get_api_settings()
configure_logging(settings.LOG_LEVEL)
configure_di()

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Task workflow: available actions and status transitions per viewer",
)

register_exception_handlers(app)
app.include_router(workflow_router, prefix="")

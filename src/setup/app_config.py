import inject

from src.taskforce.application.resolver import ActionResolver


def _bindings(binder: inject.Binder) -> None:
    # The resolver is stateless, a single instance serves every request.
    binder.bind(ActionResolver, ActionResolver())


def configure_di() -> None:
    """Configure dependency injection once per process."""
    if inject.is_configured():
        return
    inject.configure(_bindings)

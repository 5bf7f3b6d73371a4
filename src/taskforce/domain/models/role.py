from enum import Enum


class Role(str, Enum):
    """Relationship of the viewer to a task, derived from identity comparison."""
    PERFORMER = "performer"
    CUSTOMER = "customer"

"""Operation handlers and the dispatcher that selects between them."""

from .add import handle_add
from .base import OperationContext
from .dispatcher import perform, validate
from .find import handle_find_by_id
from .listing import handle_list
from .params import Arguments
from .remove import handle_remove

__all__ = [
    "Arguments",
    "OperationContext",
    "perform",
    "validate",
    "handle_add",
    "handle_find_by_id",
    "handle_remove",
    "handle_list",
]

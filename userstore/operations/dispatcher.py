import logging
from typing import Any, Callable, TextIO

from ..store.errors import InvalidArgument, UnsupportedOperation, UserStoreError
from .add import handle_add
from .base import OperationContext
from .find import handle_find_by_id
from .listing import handle_list
from .params import (
    OPERATIONS,
    AddParams,
    Arguments,
    FindByIdParams,
    ListParams,
    RemoveParams,
)
from .remove import handle_remove

logger = logging.getLogger(__name__)


def validate(args: Arguments) -> None:
    """Check that every flag the requested operation needs is present.

    Checks run in order and stop at the first failure.
    """
    if not args.operation:
        raise InvalidArgument("--operation flag has to be specified")
    if args.operation not in OPERATIONS:
        raise UnsupportedOperation(args.operation)
    if not args.file_name:
        raise InvalidArgument("--fileName flag has to be specified")
    if args.operation in ("remove", "findById") and not args.id:
        raise InvalidArgument("--id flag has to be specified")
    if args.operation == "add" and not args.item:
        raise InvalidArgument("--item flag has to be specified")


def perform(args: Arguments | dict[str, str], output: TextIO, indent: int | None = None) -> None:
    """Validate args and run the requested operation, writing results to output.

    Raises:
        UserStoreError (or a subclass) on any failure; nothing is retried
    """
    if isinstance(args, dict):
        args = Arguments.model_validate(args)

    validate(args)

    ctx = OperationContext(output=output, indent=indent)

    handlers: dict[str, Callable[[], Any]] = {
        "add": lambda: handle_add(ctx, AddParams(item=args.item, file_name=args.file_name)),
        "findById": lambda: handle_find_by_id(ctx, FindByIdParams(id=args.id, file_name=args.file_name)),
        "remove": lambda: handle_remove(ctx, RemoveParams(id=args.id, file_name=args.file_name)),
        "list": lambda: handle_list(ctx, ListParams(file_name=args.file_name)),
    }

    logger.info(f"Running {args.operation} on {args.file_name}")
    try:
        handlers[args.operation]()
    except UserStoreError as e:
        logger.warning(f"{args.operation} failed: {e}")
        raise

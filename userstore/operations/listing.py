"""Handler for the list operation."""

from ..store.io import load_records
from .base import OperationContext
from .params import ListParams


def handle_list(ctx: OperationContext, params: ListParams) -> None:
    ctx.write(load_records(params.file_name))

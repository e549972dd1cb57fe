"""Handler for the findById operation."""

from ..store.collection import find_record
from ..store.errors import NotFound
from ..store.io import load_records
from .base import OperationContext
from .params import FindByIdParams


def handle_find_by_id(ctx: OperationContext, params: FindByIdParams) -> None:
    records = load_records(params.file_name)

    record = find_record(records, params.id)
    if record is None:
        ctx.write("")
        raise NotFound(params.id)

    ctx.write(record)

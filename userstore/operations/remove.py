"""Handler for the remove operation."""

import logging

from ..store.collection import remove_records
from ..store.errors import NotFound
from ..store.io import load_records, save_records
from .base import OperationContext
from .params import RemoveParams

logger = logging.getLogger(__name__)


def handle_remove(ctx: OperationContext, params: RemoveParams) -> None:
    records = load_records(params.file_name)

    remaining, removed = remove_records(records, params.id)
    if not removed:
        raise NotFound(params.id)

    save_records(remaining, params.file_name)
    logger.info(f"Removed {removed} item(s) with id {params.id} from {params.file_name}")

"""Handler for the add operation."""

import logging

from pydantic import ValidationError

from ..store.collection import append_record, contains_id
from ..store.errors import DecodeError, EncodeError, FileAccessError, WriteError
from ..store.io import load_records, save_records
from ..store.types import Record
from .base import OperationContext
from .params import AddParams

logger = logging.getLogger(__name__)


def handle_add(ctx: OperationContext, params: AddParams) -> None:
    try:
        pending = Record.model_validate_json(params.item)
    except ValidationError as e:
        raise DecodeError(f"Error to unmarshal a user defined with JSON: {e}") from e

    records = load_records(params.file_name)

    if contains_id(records, pending.id):
        # Reported, not raised: a duplicate still exits successfully
        ctx.write(f"Item with id {pending.id} already exists")
        return

    try:
        save_records(append_record(records, pending), params.file_name)
    except (FileAccessError, EncodeError, WriteError) as e:
        raise type(e)(f"failed to save users: {e}") from e

    logger.info(f"Added item {pending.id} to {params.file_name}")

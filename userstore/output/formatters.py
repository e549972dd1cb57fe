from typing import Any

from pydantic import BaseModel, TypeAdapter

from ..store.types import Record, RecordCollection

_COLLECTION = TypeAdapter(RecordCollection)


def format_output(data: Any, indent: int | None = None) -> str:
    """Render an operation result for the output sink.

    Records and record lists become JSON, compact unless indent is given.
    Strings pass through untouched and None renders as nothing.
    """
    if data is None:
        return ""

    if isinstance(data, str):
        return data

    if isinstance(data, BaseModel):
        return format_record(data, indent)

    if isinstance(data, list):
        return format_records(data, indent)

    raise TypeError(f"Cannot format {type(data).__name__}")


def format_record(record: Record, indent: int | None = None) -> str:
    return record.model_dump_json(indent=indent)


def format_records(records: RecordCollection, indent: int | None = None) -> str:
    return _COLLECTION.dump_json(records, indent=indent).decode()

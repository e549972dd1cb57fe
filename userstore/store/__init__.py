"""Record model, file persistence and collection transforms."""

from .collection import append_record, contains_id, find_record, remove_records
from .errors import (
    DecodeError,
    EncodeError,
    FileAccessError,
    InvalidArgument,
    NotFound,
    ReadError,
    UnsupportedOperation,
    UserStoreError,
    WriteError,
)
from .io import load_records, save_records
from .types import Record, RecordCollection

__all__ = [
    "Record",
    "RecordCollection",
    "load_records",
    "save_records",
    "find_record",
    "contains_id",
    "append_record",
    "remove_records",
    "UserStoreError",
    "InvalidArgument",
    "UnsupportedOperation",
    "FileAccessError",
    "ReadError",
    "WriteError",
    "DecodeError",
    "EncodeError",
    "NotFound",
]

import logging
from pathlib import Path

from pydantic import ValidationError

from .errors import DecodeError, EncodeError, FileAccessError, ReadError, WriteError
from .types import COLLECTION_ADAPTER, RecordCollection

logger = logging.getLogger(__name__)


def load_records(path: str | Path) -> RecordCollection:
    """Read the whole record collection from path, creating the file if needed.

    An empty file is an empty collection.

    Raises:
        FileAccessError if the file cannot be opened or created
        ReadError if reading the opened file fails
        DecodeError if the content is not a JSON array of records
    """
    try:
        f = open(path, "a+b")
    except OSError as e:
        raise FileAccessError(f"Error while opening file with users: {e}") from e

    with f:
        try:
            f.seek(0)
            data = f.read()
        except OSError as e:
            raise ReadError(f"Error while reading users from file: {e}") from e

    if not data:
        logger.debug(f"{path} is empty, starting with no records")
        return []

    try:
        records = COLLECTION_ADAPTER.validate_json(data) or []
    except ValidationError as e:
        raise DecodeError(f"Error to unmarshal users from {path}: {e}") from e

    logger.debug(f"Loaded {len(records)} records from {path}")
    return records


def save_records(records: RecordCollection, path: str | Path) -> None:
    """Replace the content of path with the whole collection as a JSON array.

    A write failure after the file was truncated leaves it empty or partial.
    """
    try:
        f = open(path, "wb")
    except OSError as e:
        raise FileAccessError(f"Error while opening file with users: {e}") from e

    with f:
        try:
            data = COLLECTION_ADAPTER.dump_json(records)
        except Exception as e:
            raise EncodeError(f"Error while marshaling users to json file: {e}") from e

        try:
            f.write(data)
            f.flush()
        except OSError as e:
            raise WriteError(f"Error while writing users to a file: {e}") from e

    logger.debug(f"Saved {len(records)} records to {path}")

"""Pure transforms over a record collection.

None of these mutate their input; callers load, transform and save.
"""

from .types import Record, RecordCollection


def find_record(records: RecordCollection, record_id: str) -> Record | None:
    """Return the first record with record_id.

    A record whose id is empty is never returned, since the empty id is what
    an unmatched lookup looks like.
    """
    for record in records:
        if record.id == record_id:
            if not record.id:
                return None
            return record
    return None


def contains_id(records: RecordCollection, record_id: str) -> bool:
    return any(record.id == record_id for record in records)


def append_record(records: RecordCollection, record: Record) -> RecordCollection:
    return [*records, record]


def remove_records(records: RecordCollection, record_id: str) -> tuple[RecordCollection, int]:
    """Drop every record with record_id, keeping the order of the rest.

    Returns the remaining records and how many were removed.
    """
    remaining = [record for record in records if record.id != record_id]
    return remaining, len(records) - len(remaining)

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationInfo, field_validator

MAX_AGE = 2**64 - 1


class Record(BaseModel):
    """A single user entry. Missing or null fields decode to their zero value."""
    model_config = ConfigDict(strict=True)

    id: str = ""
    email: str = ""
    age: int = Field(default=0, ge=0, le=MAX_AGE)

    @field_validator("id", "email", "age", mode="before")
    @classmethod
    def _null_to_zero(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return cls.model_fields[info.field_name].default
        return value


RecordCollection = list[Record]

# null decodes to an empty collection, same as an empty file
COLLECTION_ADAPTER = TypeAdapter(RecordCollection | None)

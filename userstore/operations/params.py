"""Argument and per-operation parameter models."""

from pydantic import BaseModel, ConfigDict, Field

OPERATIONS: tuple[str, ...] = ("add", "findById", "remove", "list")


class Arguments(BaseModel):
    """Flag values as parsed from the command line.

    Every field is a plain string; an unset flag is the empty string.
    """
    model_config = ConfigDict(populate_by_name=True)

    operation: str = ""
    file_name: str = Field(default="", alias="fileName")
    id: str = ""
    item: str = ""


class AddParams(BaseModel):
    item: str
    file_name: str


class FindByIdParams(BaseModel):
    id: str
    file_name: str


class RemoveParams(BaseModel):
    id: str
    file_name: str


class ListParams(BaseModel):
    file_name: str

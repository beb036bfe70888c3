# src/parser_utils/normalize/schema.py
from collections.abc import Mapping
from typing import Annotated, Any, Dict, List, Literal, Union

from pydantic import BaseModel, Field, field_validator

# Fields every normalized file record carries, in output order.
CANONICAL_FIELDS: List[str] = ["path", "content", "data", "orig"]

# Properties merged into `data`, lowest precedence first.
DATA_PROPS: List[str] = ["locals", "data"]


def file_defaults() -> Dict[str, Any]:
    """Return a fresh copy of the default file record."""
    return {"path": "", "content": "", "data": {}, "orig": {}}


def stringify_keys(value: Mapping) -> Dict[str, Any]:
    return {str(key): item for key, item in value.items()}


class FileRecord(BaseModel):
    """
    Canonical file record handed to the next parser.

    `orig` never stores `content`: the original content is always the
    record's current `content`, read through `get_orig_content()`.
    """

    path: Any = Field("", description="Source file path, never inspected")
    content: Any = Field("", description="Current content of the file")
    data: Dict[str, Any] = Field(
        default_factory=dict, description="Merged metadata (front matter, locals)"
    )
    orig: Dict[str, Any] = Field(
        default_factory=dict, description="Properties that are not canonical"
    )

    @field_validator("data", "orig", mode="before")
    @classmethod
    def validate_keys(cls, v: Any) -> Any:
        if isinstance(v, Mapping):
            return stringify_keys(v)
        return v

    @field_validator("orig")
    @classmethod
    def validate_orig(cls, v: Dict[str, Any]) -> Dict[str, Any]:
        if "content" in v:
            raise ValueError(
                "orig.content is derived from content and cannot be assigned"
            )
        return v

    def get_orig_content(self) -> Any:
        """Original content of the file; mirrors `content` at read time."""
        return self.content

    def to_dict(self) -> Dict[str, Any]:
        """Plain dict of the record with `orig.content` rendered in."""
        record = self.model_dump()
        record["orig"]["content"] = self.get_orig_content()
        return record

    class Config:
        validate_assignment = True


class RawString(BaseModel):
    """A bare content string passed in place of a file record."""

    kind: Literal["raw"] = "raw"
    content: str


class PartialRecord(BaseModel):
    """A mapping carrying some canonical fields and any extra properties."""

    kind: Literal["record"] = "record"
    fields: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("fields", mode="before")
    @classmethod
    def validate_fields(cls, v: Any) -> Any:
        if isinstance(v, Mapping):
            return stringify_keys(v)
        return v


FileInput = Annotated[Union[RawString, PartialRecord], Field(discriminator="kind")]

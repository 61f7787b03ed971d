"""Data model for the API description and the generated output.

The document side is a set of frozen pydantic models. ``Schema`` is a single
recursive record used at every depth (request body schema, component schema,
property, array item, ``oneOf`` alternative); any combination of its fields
is accepted and the type summarizer decides which one wins.

The output side is :class:`Artifact`, the only value mutated during a run.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import SpecLoadError

# Keys of a path item that name operations; anything else is ignored
HTTP_METHODS = frozenset(
    {"get", "put", "post", "delete", "options", "head", "patch", "trace"}
)

INDEX_FILENAME = "index.js"


class _Node(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class Schema(_Node):
    type: Optional[str] = None
    format: Optional[str] = None
    ref: Optional[str] = Field(default=None, alias="$ref")
    properties: Optional[dict[str, Schema]] = None
    items: Optional[Schema] = None
    one_of: Optional[list[Schema]] = Field(default=None, alias="oneOf")
    enum: Optional[list[Any]] = None


class MediaType(_Node):
    schema_: Optional[Schema] = Field(default=None, alias="schema")


class RequestBody(_Node):
    content: dict[str, MediaType]


class Operation(_Node):
    summary: Optional[str] = None
    request_body: Optional[RequestBody] = Field(default=None, alias="requestBody")


class Components(_Node):
    schemas: Optional[dict[str, Schema]] = None


class Document(_Node):
    """Root of a parsed API description."""

    paths: dict[str, dict[str, Operation]]
    components: Optional[Components] = None

    @field_validator("paths", mode="before")
    @classmethod
    def keep_operations(cls, value: Any) -> Any:
        # Path items may carry shared keys (parameters, servers, ...)
        if not isinstance(value, dict):
            return value
        return {
            path: (
                {str(k).lower(): v for k, v in item.items() if str(k).lower() in HTTP_METHODS}
                if isinstance(item, dict)
                else item
            )
            for path, item in value.items()
        }


def parse_document(raw: Any) -> Document:
    """Validate a raw mapping into a :class:`Document`.

    Raises:
        SpecLoadError: If the mapping does not have the expected structure.
    """
    if not isinstance(raw, dict):
        raise SpecLoadError(
            f"API document must be a mapping, got {type(raw).__name__}"
        )
    try:
        return Document.model_validate(raw)
    except ValidationError as exc:
        raise SpecLoadError(f"Invalid API document: {exc}") from exc


@dataclass
class Artifact:
    """Generated text for one path (or the root aggregator when ``segments`` is empty)."""

    segments: tuple[str, ...]
    content: str = ""

    def replace(self, text: str) -> None:
        self.content = text

    def append(self, text: str) -> None:
        self.content += text + "\n"

    @property
    def relative_path(self) -> str:
        # Empty segments ("/" or "a//b") add no directory level
        return "/".join((*(s for s in self.segments if s), INDEX_FILENAME))

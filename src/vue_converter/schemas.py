"""Pydantic schemas for runtime validation of conversion inputs and payloads."""

from __future__ import annotations

import codecs
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from vue_converter.application.results import ConversionResult
from vue_converter.types import MessageKind

MAX_SOURCE_CHARS = 1_000_000


class FileConversionConfig(BaseModel):
    """Validated input for file-based component conversion."""

    model_config = ConfigDict(extra="forbid")

    source_path: Path
    output_path: Path | None = None
    encoding: str = "utf-8"

    @field_validator("encoding")
    @classmethod
    def _validate_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"unknown text encoding '{value}'.") from exc
        return value

    @model_validator(mode="after")
    def _validate_distinct_paths(self) -> FileConversionConfig:
        if self.output_path is not None and self.output_path == self.source_path:
            raise ValueError("output_path must differ from source_path.")
        return self


class ConvertPayload(BaseModel):
    """JSON request body for the convert endpoint."""

    model_config = ConfigDict(extra="forbid")

    source: str = Field(max_length=MAX_SOURCE_CHARS)


class MessagePayload(BaseModel):
    """One conversion status message."""

    model_config = ConfigDict(extra="forbid")

    kind: MessageKind
    text: str


class ConvertResponse(BaseModel):
    """JSON response body for the convert endpoint."""

    model_config = ConfigDict(extra="forbid")

    output: str
    messages: list[MessagePayload]
    component_name: str | None = None

    @classmethod
    def from_result(cls, result: ConversionResult) -> ConvertResponse:
        """Build a response payload from a conversion result."""
        return cls(
            output=result.output_text,
            messages=[MessagePayload(kind=m.kind, text=m.text) for m in result.messages],
            component_name=result.component_name,
        )

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator


class ParsedDocument(BaseModel):
    text: str
    source_type: str
    mime_type: str
    details: dict[str, Any] = Field(default_factory=dict)

    @field_validator("source_type")
    @classmethod
    def _validate_source_type(cls, value: str) -> str:
        normalized = value.strip().lower()
        if normalized not in {"pdf", "word"}:
            raise ValueError("source_type must be one of: pdf, word")
        return normalized

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ExtractedData(BaseModel):
    """Contact fields found in a resume's text.

    Every optional field is ``None`` when its detector found nothing, so callers
    can tell "not found" apart from a blank value. Serializes with the camelCase
    names the application form uses (``fullName``, ``linkedIn``, ``rawText``).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    full_name: str | None = Field(default=None, alias="fullName")
    email: str | None = None
    phone: str | None = None
    location: str | None = None
    linkedin: str | None = Field(default=None, alias="linkedIn")
    portfolio: str | None = None
    raw_text: str = Field(alias="rawText")

    def contact_fields(self) -> dict[str, str | None]:
        return {
            "fullName": self.full_name,
            "email": self.email,
            "phone": self.phone,
            "location": self.location,
            "linkedIn": self.linkedin,
            "portfolio": self.portfolio,
        }

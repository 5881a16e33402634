from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from resume_autofill.extraction import ExtractedData


class ApplicationForm(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    full_name: str = Field(default="", alias="fullName", max_length=200)
    email: str = Field(default="", max_length=320)
    phone: str = Field(default="", max_length=50)
    location: str = Field(default="", max_length=200)
    linkedin: str = Field(default="", alias="linkedIn", max_length=500)
    portfolio: str = Field(default="", max_length=500)
    resume_file_name: str = Field(default="", alias="resumeFileName", max_length=255)


class ExtractTextRequest(BaseModel):
    text: str = Field(default="", max_length=50000)


class ExtractTextResponse(BaseModel):
    fields_found: int = Field(ge=0, le=6)
    data: ExtractedData


class ExtractResumeResponse(ExtractTextResponse):
    file_name: str = Field(default="", max_length=255)
    source_type: str


class AutofillRequest(BaseModel):
    text: str = Field(default="", max_length=50000)
    form: ApplicationForm = Field(default_factory=ApplicationForm)
    resume_file_name: str | None = Field(default=None, max_length=255)


class AutofillResponse(BaseModel):
    fields_found: int = Field(ge=0, le=6)
    form: ApplicationForm

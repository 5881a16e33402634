from __future__ import annotations

import logging

from resume_autofill.extraction import ExtractedData, extract
from resume_autofill.parsing import extract_document_text
from resume_autofill.schemas.resume import ApplicationForm

logger = logging.getLogger(__name__)

# ExtractedData attribute -> ApplicationForm attribute
_FORM_FIELDS = {
    "full_name": "full_name",
    "email": "email",
    "phone": "phone",
    "location": "location",
    "linkedin": "linkedin",
    "portfolio": "portfolio",
}


def parse_resume(content: bytes, mime_type: str) -> tuple[ExtractedData, str]:
    """Decode an uploaded resume and extract its contact fields.

    Returns the extracted record and the document's source type. Decode errors
    (``UnsupportedFormat``, ``ExtractionFailed``) propagate to the caller.
    """
    parsed = extract_document_text(content, mime_type)
    data = extract(parsed.text)
    logger.info(
        "resume_parse_done source_type=%s chars=%s fields=%s",
        parsed.source_type,
        len(parsed.text),
        fields_found(data),
    )
    return data, parsed.source_type


def fields_found(data: ExtractedData) -> int:
    return sum(1 for value in data.contact_fields().values() if value)


def _max_length(form_attr: str) -> int | None:
    for constraint in ApplicationForm.model_fields[form_attr].metadata:
        max_length = getattr(constraint, "max_length", None)
        if max_length is not None:
            return max_length
    return None


def autofill_form(
    form: ApplicationForm,
    data: ExtractedData,
    *,
    resume_file_name: str | None = None,
) -> ApplicationForm:
    """Merge the present fields of ``data`` into a copy of ``form``.

    A value longer than the form field allows is not merged, so the returned
    form always validates against ``ApplicationForm``.
    """
    updates: dict[str, str] = {}
    for source_attr, form_attr in _FORM_FIELDS.items():
        value = getattr(data, source_attr)
        if value is None:
            continue
        max_length = _max_length(form_attr)
        if max_length is not None and len(value) > max_length:
            logger.info("autofill_field_skipped field=%s chars=%s", form_attr, len(value))
            continue
        updates[form_attr] = value
    if resume_file_name:
        updates["resume_file_name"] = resume_file_name
    return form.model_copy(update=updates)

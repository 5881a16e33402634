from __future__ import annotations

import logging
from io import BytesIO

from docx import Document
from pypdf import PdfReader

from .models import ParsedDocument

logger = logging.getLogger(__name__)

PDF_MIME_TYPE = "application/pdf"
MSWORD_MIME_TYPE = "application/msword"
DOCX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

SUPPORTED_MIME_TYPES = (PDF_MIME_TYPE, MSWORD_MIME_TYPE, DOCX_MIME_TYPE)


class DocumentParseError(ValueError):
    pass


class UnsupportedFormat(DocumentParseError):
    pass


class ExtractionFailed(DocumentParseError):
    pass


def normalize_mime_type(mime_type: str | None) -> str:
    return (mime_type or "").split(";")[0].strip().lower()


def _parse_pdf(content: bytes) -> tuple[str, dict[str, int]]:
    reader = PdfReader(BytesIO(content))
    text_parts: list[str] = []
    for page in reader.pages:
        text_parts.append((page.extract_text() or "") + "\n")
    return "".join(text_parts), {"pages": len(reader.pages)}


def _parse_word(content: bytes) -> tuple[str, dict[str, int]]:
    document = Document(BytesIO(content))
    paragraphs = [p.text for p in document.paragraphs if p.text and p.text.strip()]
    return "\n".join(paragraphs), {"paragraphs": len(document.paragraphs), "tables": len(document.tables)}


def extract_document_text(content: bytes, mime_type: str) -> ParsedDocument:
    """Decode PDF or Word bytes into plain text.

    Raises ``UnsupportedFormat`` for any MIME type other than PDF, legacy Word
    or OOXML Word, and ``ExtractionFailed`` when the bytes cannot be decoded.
    """
    normalized = normalize_mime_type(mime_type)
    if normalized == PDF_MIME_TYPE:
        source_type = "pdf"
        parser = _parse_pdf
        failure = "Failed to extract text from PDF file"
    elif normalized in {MSWORD_MIME_TYPE, DOCX_MIME_TYPE}:
        source_type = "word"
        parser = _parse_word
        failure = "Failed to extract text from DOCX file"
    else:
        raise UnsupportedFormat("Unsupported file type. Please upload a PDF or DOCX file.")

    try:
        text, details = parser(content)
    except Exception as exc:
        logger.warning("document_extract_failed source_type=%s bytes=%s: %s", source_type, len(content), exc)
        raise ExtractionFailed(failure) from exc

    logger.debug("document_extract_done source_type=%s chars=%s", source_type, len(text))
    return ParsedDocument(text=text, source_type=source_type, mime_type=normalized, details=details)

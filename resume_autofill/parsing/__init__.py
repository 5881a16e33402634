from .models import ParsedDocument
from .parse import (
    SUPPORTED_MIME_TYPES,
    DocumentParseError,
    ExtractionFailed,
    UnsupportedFormat,
    extract_document_text,
)

__all__ = [
    "SUPPORTED_MIME_TYPES",
    "DocumentParseError",
    "ExtractionFailed",
    "ParsedDocument",
    "UnsupportedFormat",
    "extract_document_text",
]

from __future__ import annotations

from io import BytesIO
from zipfile import BadZipFile, ZipFile

from resume_autofill.parsing.parse import (
    DOCX_MIME_TYPE,
    MSWORD_MIME_TYPE,
    PDF_MIME_TYPE,
    SUPPORTED_MIME_TYPES,
    normalize_mime_type,
)

PDF_MAGIC = b"%PDF-"
OLE2_MAGIC = b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1"
ZIP_MAGICS = (b"PK\x03\x04", b"PK\x05\x06", b"PK\x07\x08")


class UploadRejected(ValueError):
    def __init__(self, message: str, *, status_code: int = 400) -> None:
        super().__init__(message)
        self.status_code = status_code


def _is_zip_payload(content: bytes) -> bool:
    return any(content.startswith(prefix) for prefix in ZIP_MAGICS)


def _zip_has_paths(content: bytes, prefixes: tuple[str, ...]) -> bool:
    try:
        with ZipFile(BytesIO(content)) as archive:
            names = archive.namelist()
    except BadZipFile:
        return False
    return any(any(name.startswith(prefix) for prefix in prefixes) for name in names)


def _is_ooxml_word(content: bytes) -> bool:
    return _is_zip_payload(content) and _zip_has_paths(content, ("word/",))


def validate_upload_signature(*, mime_type: str, content: bytes) -> None:
    if mime_type == PDF_MIME_TYPE:
        if not content.startswith(PDF_MAGIC):
            raise UploadRejected("File signature does not match PDF content.")
        return

    if mime_type == DOCX_MIME_TYPE:
        if not _is_ooxml_word(content):
            raise UploadRejected("File signature does not match .docx content.")
        return

    if mime_type == MSWORD_MIME_TYPE:
        # .doc uploads are often renamed .docx files
        if not (content.startswith(OLE2_MAGIC) or _is_ooxml_word(content)):
            raise UploadRejected("File signature does not match Word document content.")


def validate_resume_upload(*, filename: str, content_type: str | None, content: bytes, max_bytes: int) -> str:
    """Check a resume upload before it is decoded and return its normalized MIME type."""
    mime_type = normalize_mime_type(content_type)
    if mime_type not in SUPPORTED_MIME_TYPES:
        raise UploadRejected("Please upload a PDF or Word document")

    if len(content) > max_bytes:
        raise UploadRejected(
            f"File size must be less than {max_bytes // (1024 * 1024)}MB",
            status_code=413,
        )

    if not content:
        raise UploadRejected(f"Uploaded file '{filename}' is empty.")

    validate_upload_signature(mime_type=mime_type, content=content)
    return mime_type

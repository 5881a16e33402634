import logging

from fastapi import APIRouter, Depends, File, HTTPException, Request, UploadFile, status
from fastapi.concurrency import run_in_threadpool

from resume_autofill.core.config import settings
from resume_autofill.core.rate_limit import rate_limit
from resume_autofill.core.security import require_api_key
from resume_autofill.extraction import extract
from resume_autofill.parsing import ExtractionFailed, UnsupportedFormat
from resume_autofill.schemas.resume import (
    AutofillRequest,
    AutofillResponse,
    ExtractResumeResponse,
    ExtractTextRequest,
    ExtractTextResponse,
)
from resume_autofill.services.autofill_service import autofill_form, fields_found, parse_resume
from resume_autofill.services.upload_validation import UploadRejected, validate_resume_upload

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(require_api_key)])

_READ_CHUNK_BYTES = 1024 * 64


async def _read_upload(file: UploadFile, max_bytes: int) -> bytes:
    chunks: list[bytes] = []
    total = 0
    while True:
        chunk = await file.read(_READ_CHUNK_BYTES)
        if not chunk:
            break
        total += len(chunk)
        if total > max_bytes:
            raise HTTPException(
                status_code=413,
                detail=f"File size must be less than {max_bytes // (1024 * 1024)}MB",
            )
        chunks.append(chunk)
    return b"".join(chunks)


@router.post("/resume/extract", response_model=ExtractResumeResponse)
@rate_limit()
async def resume_extract(request: Request, file: UploadFile = File(...)):
    filename = file.filename or "resume"
    content = await _read_upload(file, settings.max_upload_bytes)

    try:
        mime_type = validate_resume_upload(
            filename=filename,
            content_type=file.content_type,
            content=content,
            max_bytes=settings.max_upload_bytes,
        )
        data, source_type = await run_in_threadpool(parse_resume, content, mime_type)
    except UploadRejected as exc:
        raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc
    except UnsupportedFormat as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except ExtractionFailed as exc:
        logger.info("resume_extract_failed file=%s", filename[: settings.log_text_max_chars])
        raise HTTPException(
            status_code=422,
            detail=f"{exc}. Please try another file or fill in the form manually.",
        ) from exc

    return ExtractResumeResponse(
        file_name=filename[:255],
        source_type=source_type,
        fields_found=fields_found(data),
        data=data,
    )


@router.post("/resume/extract-text", response_model=ExtractTextResponse)
@rate_limit()
async def resume_extract_text(request: Request, payload: ExtractTextRequest):
    data = await run_in_threadpool(extract, payload.text)
    return ExtractTextResponse(fields_found=fields_found(data), data=data)


@router.post("/resume/autofill", response_model=AutofillResponse)
@rate_limit()
async def resume_autofill(request: Request, payload: AutofillRequest):
    data = await run_in_threadpool(extract, payload.text)
    form = autofill_form(payload.form, data, resume_file_name=payload.resume_file_name)
    return AutofillResponse(fields_found=fields_found(data), form=form)

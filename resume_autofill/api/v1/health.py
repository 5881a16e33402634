from fastapi import APIRouter

from resume_autofill.parsing import SUPPORTED_MIME_TYPES

router = APIRouter()


@router.get("/health", summary="Health Check", description="Report service status and accepted resume formats.")
async def health_check():
    return {"status": "healthy", "accepted_mime_types": list(SUPPORTED_MIME_TYPES)}

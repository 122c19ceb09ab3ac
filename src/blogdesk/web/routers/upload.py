from fastapi import APIRouter, UploadFile
from pydantic import BaseModel, Field

from blogdesk.web.deps import AppDep, SessionIdDep
from blogdesk.web.openapi import ErrorResponse

router = APIRouter(tags=["upload"])


class UploadResponse(BaseModel):
    success: bool = Field(True, description="Always true on success")
    url: str = Field(..., description="Public URL of the stored file")


@router.post(
    "/upload",
    summary="Upload file",
    description="Store a file in the configured GitHub repository and return its raw URL.",
    operation_id="uploadFile",
    responses={
        400: {"model": ErrorResponse, "description": "No file in the form"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        501: {"model": ErrorResponse, "description": "Upload not configured"},
        502: {"model": ErrorResponse, "description": "GitHub rejected the upload"},
    },
)
async def upload_file(app: AppDep, session_id: SessionIdDep, file: UploadFile | None = None) -> UploadResponse:
    content = await file.read() if file is not None else None
    filename = file.filename if file is not None else None
    content_type = (file.content_type if file is not None else None) or "application/octet-stream"
    url = await app.upload_file(session_id, filename, content, content_type)
    return UploadResponse(url=url)

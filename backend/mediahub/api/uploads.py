from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile

from mediahub.api.deps import get_provider
from mediahub.schemas.upload import UploadOptions, UploadResult
from mediahub.storage.base import BaseUploadProvider

router = APIRouter(prefix="/upload", tags=["uploads"])


@router.post("", response_model=UploadResult)
async def upload_file(
    file: UploadFile = File(...),
    folder: str = Form("general"),
    filename: Optional[str] = Form(None),
    provider: BaseUploadProvider = Depends(get_provider),
) -> UploadResult:
    """Store a file and return its public URL and metadata."""
    # Invalid folder / mimetype raise ValueError -> 400 via the app handler
    options = UploadOptions(
        folder=folder,
        mimetype=file.content_type or "application/octet-stream",
        filename=filename or file.filename,
    )
    content = await file.read()
    return await provider.upload(content, options)


@router.get("/url/{public_id:path}")
async def get_upload_url(public_id: str, provider: BaseUploadProvider = Depends(get_provider)) -> dict:
    return {"url": provider.get_url(public_id)}


@router.delete("/{public_id:path}")
async def delete_upload(
    public_id: str,
    resource_type: str = "image",
    provider: BaseUploadProvider = Depends(get_provider),
) -> dict:
    """Delete a stored file.  Always succeeds, even if it was already gone."""
    return {"deleted": await provider.delete(public_id, resource_type)}

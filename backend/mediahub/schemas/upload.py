from pathlib import PurePosixPath
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from mediahub.storage.classifier import ResourceType


class UploadOptions(BaseModel):
    folder: str = "general"
    mimetype: str = Field(min_length=1)
    filename: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @field_validator("folder")
    @classmethod
    def folder_must_be_relative(cls, v: str) -> str:
        """Normalise to ``a/b`` form: no leading/trailing ``/``, no ``.`` or empty segments."""
        if "\\" in v:
            raise ValueError(f"folder '{v}' must not contain backslashes")
        parts = PurePosixPath(v.strip("/")).parts
        if ".." in parts:
            raise ValueError(f"folder '{v}' must stay inside the upload directory")
        if not parts:
            raise ValueError("folder must not be empty")
        return "/".join(parts)


class UploadResult(BaseModel):
    """Descriptive record of one stored upload.

    Serialises with camelCase keys (``publicId``, ``resourceType``).
    """

    url: str
    public_id: str
    resource_type: ResourceType
    format: str
    width: Optional[int] = None
    height: Optional[int] = None
    bytes: int = Field(ge=0)
    provider: str

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

"""Storage provider contract.

Swap the concrete provider to move uploads off local disk; callers only ever
talk to ``BaseUploadProvider``.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Union

from mediahub.schemas.upload import UploadOptions, UploadResult
from mediahub.storage import classifier
from mediahub.storage.classifier import ResourceType


class BaseUploadProvider(ABC):
    """Abstract backend.  Cannot be instantiated directly (``TypeError``)."""

    name: str = "base"

    @abstractmethod
    async def upload(self, buffer: bytes, options: Union[UploadOptions, Mapping[str, Any]]) -> UploadResult:
        raise NotImplementedError("upload() must be implemented")

    @abstractmethod
    async def delete(self, public_id: str, resource_type: str = "image") -> bool:
        """Remove a stored file.  A missing file counts as success."""
        raise NotImplementedError("delete() must be implemented")

    @abstractmethod
    def get_url(self, public_id: str, **options: Any) -> str:
        """Derive the public URL for *public_id* without touching storage."""
        raise NotImplementedError("get_url() must be implemented")

    def get_resource_type(self, mimetype: str) -> ResourceType:
        return classifier.resource_type_of(mimetype)

    def is_pdf(self, mimetype: str) -> bool:
        return classifier.is_pdf(mimetype)

    @staticmethod
    def coerce_options(options: Union[UploadOptions, Mapping[str, Any], None]) -> UploadOptions:
        """Accept either ``UploadOptions`` or a plain mapping.

        Raises ``ValueError`` (pydantic ``ValidationError``) when the mimetype
        is missing or the folder escapes the upload root.
        """
        if isinstance(options, UploadOptions):
            return options
        return UploadOptions.model_validate(dict(options or {}))

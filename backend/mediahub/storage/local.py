"""Local disk upload provider.

Layout on disk::

    <base_path>/<upload_dir>/<folder>/<name>-<unixMillis>-<hex16>.<ext>

The ``<upload_dir>`` root is expected to be served statically at
``<base_url>/<upload_dir>/``.
"""

import logging
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Optional

import aiofiles
import aiofiles.os

from mediahub.schemas.upload import UploadResult
from mediahub.storage.base import BaseUploadProvider
from mediahub.storage.classifier import KIND_RULES, classify, extension_for, format_of
from mediahub.storage.dirs import ensure_dir
from mediahub.storage.images import MAX_WIDTH, WEBP_QUALITY, process_image
from mediahub.storage.naming import generate_filename

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LocalProviderConfig:
    upload_dir: str = "uploads"
    base_url: str = "http://localhost:5001"
    base_path: Optional[str] = None  # None = current working directory
    max_image_width: int = MAX_WIDTH
    image_quality: int = WEBP_QUALITY

    @classmethod
    def from_settings(cls, settings) -> "LocalProviderConfig":
        return cls(
            upload_dir=settings.LOCAL_UPLOAD_PATH,
            base_url=settings.storage_server_url,
            base_path=settings.UPLOAD_BASE_PATH or None,
            max_image_width=settings.MAX_IMAGE_WIDTH,
            image_quality=settings.IMAGE_QUALITY,
        )


class DeleteOutcome(str, Enum):
    DELETED = "deleted"
    MISSING = "missing"
    FAILED = "failed"
    REFUSED = "refused"  # public_id resolved outside the upload root


class LocalProvider(BaseUploadProvider):
    name = "local"

    def __init__(self, config: Optional[LocalProviderConfig] = None) -> None:
        self.config = config or LocalProviderConfig()
        self.upload_dir = self.config.upload_dir.strip("/")
        self.base_url = self.config.base_url.rstrip("/")
        self.base_path = Path(self.config.base_path or os.getcwd()).resolve()
        self.root = self.base_path / self.upload_dir
        # Every instance needs a writable root before serving a request.
        self.root.mkdir(parents=True, exist_ok=True)
        logger.info("Local uploads stored under %s", self.root)

    def resolve_path(self, public_id: str) -> Path:
        return self.root / public_id

    def get_url(self, public_id: str, **options: Any) -> str:
        return f"{self.base_url}/{self.upload_dir}/{public_id}"

    async def upload(self, buffer: bytes, options) -> UploadResult:
        opts = self.coerce_options(options)
        kind = classify(opts.mimetype)
        rule = KIND_RULES[kind]

        folder_path = self.root / opts.folder
        await ensure_dir(folder_path)

        width = height = None
        if rule.transcode:
            transformed = await process_image(
                buffer,
                max_width=self.config.max_image_width,
                quality=self.config.image_quality,
            )
            buffer = transformed.buffer
            width, height = transformed.width, transformed.height

        extension = rule.extension or extension_for(opts.mimetype)
        filename = generate_filename(opts.filename, extension)
        file_path = folder_path / filename
        async with aiofiles.open(file_path, "wb") as fh:
            await fh.write(buffer)

        public_id = f"{opts.folder}/{filename}"
        logger.info("Stored %s (%s, %d bytes)", public_id, opts.mimetype, len(buffer))
        return UploadResult(
            url=self.get_url(public_id),
            public_id=public_id,
            resource_type=rule.resource_type,
            format=format_of(extension),
            width=width,
            height=height,
            bytes=len(buffer),
            provider=self.name,
        )

    async def remove(self, public_id: str) -> DeleteOutcome:
        """Delete the file behind *public_id* and report what happened.

        Never raises.
        """
        path = self.resolve_path(public_id)
        if not path.resolve().is_relative_to(self.root):
            logger.warning("Refusing to delete %r: outside upload root", public_id)
            return DeleteOutcome.REFUSED
        try:
            await aiofiles.os.remove(path)
        except FileNotFoundError:
            logger.debug("Delete target %s already gone", public_id)
            return DeleteOutcome.MISSING
        except OSError as exc:
            logger.warning("Failed to delete %s: %s", public_id, exc)
            return DeleteOutcome.FAILED
        return DeleteOutcome.DELETED

    async def delete(self, public_id: str, resource_type: str = "image") -> bool:
        await self.remove(public_id)
        return True

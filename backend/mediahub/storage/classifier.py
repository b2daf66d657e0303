"""MIME type classification for uploaded media.

Pure functions only.  The provider calls ``classify`` once per upload and
looks the result up in ``KIND_RULES`` instead of re-deriving booleans.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ResourceType(str, Enum):
    IMAGE = "image"
    VIDEO = "video"
    RAW = "raw"


class MediaKind(str, Enum):
    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"
    PDF = "pdf"
    RAW = "raw"


PDF_MIME_TYPES = frozenset(
    {
        "application/pdf",
        "application/x-pdf",
        "application/acrobat",
        "application/vnd.pdf",
        "text/pdf",
    }
)

MIME_EXTENSIONS: dict[str, str] = {
    "image/jpeg": ".jpg",
    "image/png": ".png",
    "image/gif": ".gif",
    "image/webp": ".webp",
    "video/mp4": ".mp4",
    "video/webm": ".webm",
    "audio/mpeg": ".mp3",
    "application/pdf": ".pdf",
}

DEFAULT_EXTENSION = ".bin"


@dataclass(frozen=True)
class KindRule:
    """How a media kind is stored.

    ``extension`` of ``None`` means "look the MIME type up in MIME_EXTENSIONS".
    """

    resource_type: ResourceType
    extension: Optional[str] = None
    transcode: bool = False


KIND_RULES: dict[MediaKind, KindRule] = {
    MediaKind.IMAGE: KindRule(ResourceType.IMAGE, extension=".webp", transcode=True),
    MediaKind.VIDEO: KindRule(ResourceType.VIDEO),
    # Audio is served through the same player as video.
    MediaKind.AUDIO: KindRule(ResourceType.VIDEO),
    MediaKind.PDF: KindRule(ResourceType.RAW, extension=".pdf"),
    MediaKind.RAW: KindRule(ResourceType.RAW),
}


def is_pdf(mimetype: str) -> bool:
    return mimetype in PDF_MIME_TYPES


def resource_type_of(mimetype: str) -> ResourceType:
    """Map a MIME type to the coarse category callers route on."""
    if mimetype.startswith("image/"):
        return ResourceType.IMAGE
    if mimetype.startswith("video/"):
        return ResourceType.VIDEO
    if mimetype.startswith("audio/"):
        return ResourceType.VIDEO
    return ResourceType.RAW


def classify(mimetype: str) -> MediaKind:
    if is_pdf(mimetype):
        return MediaKind.PDF
    if mimetype.startswith("image/"):
        return MediaKind.IMAGE
    if mimetype.startswith("video/"):
        return MediaKind.VIDEO
    if mimetype.startswith("audio/"):
        return MediaKind.AUDIO
    return MediaKind.RAW


def extension_for(mimetype: str) -> str:
    return MIME_EXTENSIONS.get(mimetype, DEFAULT_EXTENSION)


def format_of(extension: str) -> str:
    """``.WebP`` -> ``webp``"""
    return extension.lstrip(".").lower()

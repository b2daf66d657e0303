from functools import lru_cache

from mediahub.config import settings
from mediahub.storage.base import BaseUploadProvider
from mediahub.storage.local import LocalProvider, LocalProviderConfig


@lru_cache
def get_upload_provider() -> BaseUploadProvider:
    """Return the process-wide provider selected by ``UPLOAD_PROVIDER``."""
    name = settings.UPLOAD_PROVIDER.lower()
    if name == "local":
        return LocalProvider(LocalProviderConfig.from_settings(settings))
    raise ValueError(f"Unknown upload provider '{settings.UPLOAD_PROVIDER}'")

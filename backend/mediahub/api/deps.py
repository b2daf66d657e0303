from mediahub.storage.base import BaseUploadProvider
from mediahub.storage.factory import get_upload_provider


def get_provider() -> BaseUploadProvider:
    return get_upload_provider()

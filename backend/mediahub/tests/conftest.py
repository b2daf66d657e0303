"""
Pytest fixtures shared across all test modules.
Every provider writes under a temporary directory — nothing touches the
working tree.
"""

import atexit
import io
import os
import shutil
import tempfile

# Set env vars BEFORE any mediahub module is imported
_UPLOAD_BASE = tempfile.mkdtemp(prefix="mediahub-tests-")
atexit.register(shutil.rmtree, _UPLOAD_BASE, ignore_errors=True)
os.environ.setdefault("UPLOAD_BASE_PATH", _UPLOAD_BASE)
os.environ.setdefault("STORAGE_SERVER_URL", "http://testserver")
os.environ.setdefault("LOCAL_UPLOAD_PATH", "uploads")

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from mediahub.storage.local import LocalProvider, LocalProviderConfig  # noqa: E402


@pytest.fixture()
def provider(tmp_path):
    return LocalProvider(LocalProviderConfig(base_path=str(tmp_path), base_url="http://cdn.test"))


@pytest.fixture()
def client():
    from mediahub.main import app

    with TestClient(app) as c:
        yield c


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def make_image(width: int, height: int, fmt: str = "JPEG", mode: str = "RGB") -> bytes:
    """Encode a solid-colour image of the given size in memory."""
    color = (200, 30, 30, 128) if mode == "RGBA" else (200, 30, 30)
    img = Image.new(mode, (width, height), color[: len(mode)])
    buf = io.BytesIO()
    img.save(buf, fmt)
    return buf.getvalue()


def image_size(data: bytes) -> tuple[int, int]:
    with Image.open(io.BytesIO(data)) as img:
        return img.size

"""Tests for the storage server HTTP endpoints."""

import io

from fastapi.testclient import TestClient

from mediahub.storage.factory import get_upload_provider
from mediahub.tests.conftest import make_image


class TestHealth:
    def test_health(self, client: TestClient):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "healthy", "provider": "local"}


class TestUploadEndpoint:
    def test_upload_image_success(self, client: TestClient):
        resp = client.post(
            "/api/upload",
            files={"file": ("My Photo!.jpg", io.BytesIO(make_image(2000, 1000)), "image/jpeg")},
            data={"folder": "avatars"},
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["resourceType"] == "image"
        assert data["format"] == "webp"
        assert (data["width"], data["height"]) == (1280, 640)
        assert data["publicId"].startswith("avatars/MyPhotojpg-")
        assert data["url"] == f"http://testserver/uploads/{data['publicId']}"
        assert data["provider"] == "local"

    def test_uploaded_file_is_served(self, client: TestClient):
        payload = b"plain text body"
        resp = client.post(
            "/api/upload",
            files={"file": ("notes.txt", io.BytesIO(payload), "text/plain")},
        )
        assert resp.status_code == 200
        data = resp.json()
        assert data["format"] == "bin"
        assert data["publicId"].startswith("general/notestxt-")

        served = client.get(f"/uploads/{data['publicId']}")
        assert served.status_code == 200
        assert served.content == payload

    def test_filename_field_overrides_upload_name(self, client: TestClient):
        resp = client.post(
            "/api/upload",
            files={"file": ("blob", io.BytesIO(b"%PDF-1.4"), "application/pdf")},
            data={"filename": "Q3 report.pdf"},
        )
        data = resp.json()
        assert data["resourceType"] == "raw"
        assert data["format"] == "pdf"
        assert data["publicId"].startswith("general/Q3reportpdf-")

    def test_unsafe_folder_returns_400(self, client: TestClient):
        resp = client.post(
            "/api/upload",
            files={"file": ("a.txt", io.BytesIO(b"x"), "text/plain")},
            data={"folder": "../etc"},
        )
        assert resp.status_code == 400

    def test_returns_unique_public_ids(self, client: TestClient):
        payload = b"\x89PNG\r\n\x1a\n" + b"\x00" * 20
        r1 = client.post("/api/upload", files={"file": ("a.png", io.BytesIO(payload), "image/png")})
        r2 = client.post("/api/upload", files={"file": ("a.png", io.BytesIO(payload), "image/png")})
        assert r1.status_code == r2.status_code == 200
        assert r1.json()["publicId"] != r2.json()["publicId"]
        # Broken PNG is stored untouched
        assert r1.json()["bytes"] == len(payload)
        assert r1.json()["width"] is None


class TestDeleteEndpoint:
    def test_delete_then_delete_again(self, client: TestClient):
        public_id = client.post(
            "/api/upload",
            files={"file": ("clip.mp4", io.BytesIO(b"\x00" * 32), "video/mp4")},
            data={"folder": "clips"},
        ).json()["publicId"]
        path = get_upload_provider().resolve_path(public_id)
        assert path.exists()

        resp = client.delete(f"/api/upload/{public_id}")
        assert resp.status_code == 200
        assert resp.json() == {"deleted": True}
        assert not path.exists()

        assert client.delete(f"/api/upload/{public_id}").json() == {"deleted": True}


class TestUrlEndpoint:
    def test_get_url(self, client: TestClient):
        resp = client.get("/api/upload/url/avatars/x.webp")
        assert resp.status_code == 200
        assert resp.json() == {"url": "http://testserver/uploads/avatars/x.webp"}

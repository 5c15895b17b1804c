"""Integration tests for image and video upload endpoints."""

import base64
from pathlib import Path

from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from bizhub.config import Settings
from tests.conftest import create_test_product

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 24


class TestImageUploads:
    async def test_upload_stores_file_and_returns_public_url(
        self, client: AsyncClient, settings: Settings
    ) -> None:
        response = await client.post(
            "/api/images/upload",
            files={"file": ("Logo.png", PNG_BYTES, "image/png")},
            data={"image_type": "banner"},
        )

        data = response.json()["data"]
        assert data["display_name"] == "Logo"
        assert data["image_type"] == "banner"
        assert data["size"] == len(PNG_BYTES)
        assert data["url"] == f"http://test/static/{data['relative_path']}"
        assert (settings.STATIC_FILES_DIR / data["relative_path"]).read_bytes() == PNG_BYTES

    async def test_base64_upload_detects_format(self, client: AsyncClient) -> None:
        payload = base64.b64encode(PNG_BYTES).decode()

        response = await client.post(
            "/api/images/upload/base64",
            json={"name": "inline", "base64_string": f"data:image/png;base64,{payload}"},
        )

        data = response.json()["data"]
        assert data["content_type"] == "image/png"
        assert data["file_name"].endswith(".png")

    async def test_base64_upload_rejects_unknown_format(self, client: AsyncClient) -> None:
        payload = base64.b64encode(b"%PDF-1.7 not an image").decode()

        response = await client.post(
            "/api/images/upload/base64", json={"name": "doc", "base64_string": payload}
        )

        assert response.json()["succeeded"] is False
        assert response.json()["messages"] == ["Unsupported image format."]

    async def test_info_and_delete(self, client: AsyncClient, settings: Settings) -> None:
        uploaded = await client.post(
            "/api/images/upload", files={"file": ("a.png", PNG_BYTES, "image/png")}
        )
        image = uploaded.json()["data"]

        info = await client.get(f"/api/images/info/{image['file_name']}")
        deleted = await client.delete(f"/api/images/{image['id']}")
        missing_info = await client.get(f"/api/images/info/{image['file_name']}")

        assert info.json()["data"]["length"] == len(PNG_BYTES)
        assert deleted.json()["messages"] == ["Image was successfully removed"]
        assert not (settings.STATIC_FILES_DIR / image["relative_path"]).exists()
        assert missing_info.json()["messages"] == ["File not found"]

    async def test_delete_missing_image(self, client: AsyncClient) -> None:
        response = await client.delete("/api/images/missing")

        assert response.json()["messages"] == ["Image not found."]

    async def test_bulk_upload_reports_each_file(
        self, client: AsyncClient, settings: Settings
    ) -> None:
        settings.MAX_FILE_UPLOAD_BYTES = len(PNG_BYTES)

        response = await client.post(
            "/api/images/upload/bulk",
            files=[
                ("files", ("one.png", PNG_BYTES, "image/png")),
                ("files", ("huge.png", PNG_BYTES + b"\x00", "image/png")),
                ("files", ("two.png", PNG_BYTES, "image/png")),
            ],
        )

        items = response.json()
        assert [item["file_name"] for item in items] == ["one.png", "huge.png", "two.png"]
        assert [item["succeeded"] for item in items] == [True, False, True]
        assert items[1]["messages"] == [f"File too large (max {len(PNG_BYTES)} bytes)"]

        listed = await client.get("/api/images")
        assert len(listed.json()["data"]) == 2

    async def test_link_image_to_product(
        self, client: AsyncClient, db_session: AsyncSession
    ) -> None:
        product = await create_test_product(db_session, "Camera")
        uploaded = await client.post(
            "/api/images/upload", files={"file": ("cam.png", PNG_BYTES, "image/png")}
        )
        image_id = uploaded.json()["data"]["id"]

        linked = await client.post(
            "/api/products/addImage",
            json={"image_id": image_id, "entity_id": product.id, "selector": "cover"},
        )
        images = await client.get(f"/api/products/{product.id}/images")
        removed = await client.delete(f"/api/products/deleteImage/{linked.json()['data']['id']}")
        after = await client.get(f"/api/products/{product.id}/images")

        assert linked.json()["succeeded"] is True
        assert images.json()["data"][0]["image"]["id"] == image_id
        assert images.json()["data"][0]["selector"] == "cover"
        assert removed.json()["succeeded"] is True
        assert after.json()["data"] == []


class TestVideoUploads:
    async def test_upload_at_limit_passes_and_over_limit_fails(
        self, client: AsyncClient, settings: Settings
    ) -> None:
        settings.MAX_FILE_UPLOAD_BYTES = 8

        accepted = await client.post(
            "/api/videos/upload", files={"file": ("clip.mp4", b"v" * 8, "video/mp4")}
        )
        rejected = await client.post(
            "/api/videos/upload", files={"file": ("clip.mp4", b"v" * 9, "video/mp4")}
        )

        assert accepted.json()["succeeded"] is True
        assert accepted.json()["data"]["size"] == 8
        assert accepted.json()["data"]["path"].startswith("UploadedVideos/")
        assert rejected.json()["succeeded"] is False
        assert rejected.json()["messages"] == ["File too large (max 8 bytes)"]
        stored = list((settings.STATIC_FILES_DIR / "UploadedVideos").iterdir())
        assert len(stored) == 1

    async def test_empty_upload_is_rejected(self, client: AsyncClient) -> None:
        response = await client.post(
            "/api/videos/upload", files={"file": ("empty.mp4", b"", "video/mp4")}
        )

        assert response.json()["messages"] == ["No video found"]

    async def test_info_uses_video_folder(self, client: AsyncClient) -> None:
        uploaded = await client.post(
            "/api/videos/upload", files={"file": ("clip.mp4", b"data", "video/mp4")}
        )
        file_name = uploaded.json()["data"]["file_name"]

        found = await client.get(f"/api/videos/info/{file_name}")
        missing = await client.get("/api/videos/info/nothing.mp4")

        assert found.json()["data"]["name"] == file_name
        assert missing.json()["messages"] == ["File not Found"]

    async def test_delete_removes_row_and_file(
        self, client: AsyncClient, settings: Settings
    ) -> None:
        uploaded = await client.post(
            "/api/videos/upload", files={"file": ("clip.mp4", b"data", "video/mp4")}
        )
        video = uploaded.json()["data"]

        deleted = await client.delete(f"/api/videos/{video['id']}")

        assert deleted.json()["succeeded"] is True
        assert not (Path(settings.STATIC_FILES_DIR) / video["path"]).exists()


class TestHealth:
    async def test_health(self, client: AsyncClient) -> None:
        response = await client.get("/health")

        assert response.json()["status"] == "healthy"

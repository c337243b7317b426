"""Image storage backed by Cloudinary's upload API."""

import hashlib
import logging
import time

import httpx

from src.config import Settings, get_settings
from src.exceptions import UploadFailedError

logger = logging.getLogger(__name__)

TASKS_FOLDER = "tasks"
PROFILE_PICTURES_FOLDER = "profilePictures"
ALLOWED_FORMATS = ("jpg", "png", "jpeg", "webp")


def sign_params(params: dict[str, str], api_secret: str) -> str:
    """Sign upload params the way Cloudinary expects.

    Params are sorted by key, joined as ``key=value`` pairs with ``&``, the API
    secret is appended, and the result is SHA-1 hashed.
    """
    to_sign = "&".join(f"{key}={params[key]}" for key in sorted(params) if params[key] != "")
    return hashlib.sha1(f"{to_sign}{api_secret}".encode()).hexdigest()  # noqa: S324


class ImageStorageService:
    """Stores uploaded images under a namespaced folder and returns their URL."""

    def __init__(
        self,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.settings = settings or get_settings()
        self.base_url = (
            f"https://api.cloudinary.com/v1_1/{self.settings.cloudinary_cloud_name}/image/upload"
        )
        self.timeout = self.settings.upload_timeout_seconds
        self.transport = transport

    def folder_for(self, namespace: str) -> str:
        return f"{self.settings.cloudinary_base_folder}/{namespace}"

    async def upload(
        self,
        image_data: bytes,
        namespace: str,
        filename: str = "upload",
        content_type: str = "application/octet-stream",
    ) -> str:
        """Upload an image and return its durable HTTPS URL.

        Raises:
            UploadFailedError: storage is not configured, the request timed out,
                or Cloudinary answered with an error.
        """
        if not self.settings.cloudinary_configured:
            logger.error("Cloudinary credentials are not configured")
            raise UploadFailedError()

        params = {
            "allowed_formats": ",".join(ALLOWED_FORMATS),
            "folder": self.folder_for(namespace),
            "timestamp": str(int(time.time())),
        }
        data = {
            **params,
            "api_key": self.settings.cloudinary_api_key,
            "signature": sign_params(params, self.settings.cloudinary_api_secret),
        }

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.post(
                    self.base_url,
                    data=data,
                    files={"file": (filename, image_data, content_type)},
                )
                response.raise_for_status()
                url = response.json()["secure_url"]
        except httpx.HTTPStatusError as e:
            logger.error(f"Cloudinary rejected upload to {params['folder']}: {e.response.text}")
            raise UploadFailedError() from e
        except httpx.HTTPError as e:
            logger.error(f"HTTP error uploading to Cloudinary: {e}")
            raise UploadFailedError() from e
        except (KeyError, ValueError) as e:
            logger.error(f"Unexpected Cloudinary response: {e}")
            raise UploadFailedError() from e

        logger.info(f"Uploaded image to {params['folder']}: {url}")
        return url


def get_image_storage() -> ImageStorageService:
    """Get an image storage service instance."""
    return ImageStorageService()

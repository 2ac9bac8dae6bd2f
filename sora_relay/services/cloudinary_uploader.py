import asyncio
import functools
import logging

import cloudinary.uploader

from sora_relay.config import CloudinaryConfig
from sora_relay.errors import AuthError, UploadError, is_auth_failure

logger = logging.getLogger(__name__)


def _upload_blocking(video_url: str, config: CloudinaryConfig) -> dict:
    # Credentials are passed per call; the SDK's global config is left untouched.
    return cloudinary.uploader.upload(
        video_url,
        resource_type="video",
        folder=config.folder,
        timeout=config.upload_timeout,
        cloud_name=config.cloud_name,
        api_key=config.api_key,
        api_secret=config.api_secret,
        secure=config.secure,
    )


async def upload_video(video_url: str, config: CloudinaryConfig) -> str:
    """
    Have Cloudinary fetch `video_url` and store it as a video resource.

    Cloudinary pulls the remote file itself, so nothing is downloaded here.
    Returns the permanent `secure_url`. Raises AuthError when Cloudinary reports
    401, UploadError on any other failure.
    """
    logger.info("Uploading video to Cloudinary from remote URL...")

    # Blocking SDK call, run in thread pool
    loop = asyncio.get_event_loop()
    try:
        result = await loop.run_in_executor(
            None, functools.partial(_upload_blocking, video_url, config)
        )
    except Exception as exc:
        logger.error(f"Cloudinary upload failed: {exc}")
        if config.is_placeholder:
            logger.error("!!! CLOUDINARY CONFIGURATION ERROR: check CLOUDINARY_* settings in .env !!!")
        message = f"Cloudinary upload failed: {exc}"
        if is_auth_failure(exc):
            raise AuthError(message, stage="uploading") from exc
        raise UploadError(message, stage="uploading") from exc

    secure_url = (result or {}).get("secure_url")
    if not secure_url:
        raise UploadError("Cloudinary response did not include a secure_url", stage="uploading")

    logger.info(f"Cloudinary upload complete. Public URL: {secure_url}")
    return secure_url

"""
Replicate adapter for Sora video generation.

A fresh client is built for every call, scoped to the caller's token. The call
waits for the prediction to finish (often several minutes) and hands back the
output as a plain URL string, which is what the Cloudinary uploader needs.
"""

import logging
from typing import Any

import replicate

from sora_relay.errors import AuthError, GenerationError, is_auth_failure

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "openai/sora-2-pro"


def extract_video_url(output: Any) -> str:
    """
    Coerce a Replicate output into a plain URL string.

    Handles `FileOutput` (url attribute), legacy `url()` methods, plain strings
    and lists of any of those (first item wins).
    """
    if isinstance(output, (list, tuple)):
        if not output:
            raise GenerationError("Replicate returned an empty output", stage="generating")
        output = output[0]

    if output is None:
        raise GenerationError("Replicate returned no output", stage="generating")

    if isinstance(output, str):
        url = output
    else:
        url = getattr(output, "url", output)
        if callable(url):
            url = url()

    url = str(url)
    if not url:
        raise GenerationError("Replicate returned an empty video URL", stage="generating")
    return url


async def generate_video(
    api_key: str,
    provider_input: dict,
    model: str = DEFAULT_MODEL,
) -> str:
    """
    Run `model` on Replicate with the caller's token and return the video URL.

    Raises:
        AuthError: Replicate rejected the token.
        GenerationError: any other provider, network or output failure.
    """
    client = replicate.Client(api_token=api_key)

    logger.info(f"Submitting {model} job. Waiting for video generation...")
    try:
        output = await client.async_run(model, input=provider_input)
    except Exception as exc:
        logger.error(f"Replicate job failed: {exc}")
        if is_auth_failure(exc):
            raise AuthError(str(exc), stage="generating") from exc
        raise GenerationError(str(exc), stage="generating") from exc

    video_url = extract_video_url(output)
    logger.info(f"Replicate job complete. Video URL: {video_url}")
    return video_url

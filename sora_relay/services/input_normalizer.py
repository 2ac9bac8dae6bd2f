import logging

from sora_relay.errors import MissingPromptError
from sora_relay.schemas.generation import VideoGenerationRequest

logger = logging.getLogger(__name__)

DEFAULT_SECONDS = 4
DEFAULT_ASPECT_RATIO = "landscape"
RESOLUTION = "high"


def build_provider_input(request: VideoGenerationRequest) -> dict:
    """
    Turn a validated request body into the model input Replicate expects.

    Defaults: 4 seconds, "landscape", resolution fixed at "high".
    `input_reference` is only set when reference images were supplied, since the
    model switches to image-to-video on the key's presence. The list form is
    passed through as-is (order preserved); the deprecated single-URL form is
    passed as a plain string.
    """
    if not request.prompt or not request.prompt.strip():
        raise MissingPromptError()

    provider_input = {
        "prompt": request.prompt,
        "seconds": request.duration_seconds or DEFAULT_SECONDS,
        "aspect_ratio": request.aspect_ratio or DEFAULT_ASPECT_RATIO,
        "resolution": RESOLUTION,
    }

    reference = request.reference_image_urls or request.reference_image_url
    if reference:
        provider_input["input_reference"] = (
            list(reference) if isinstance(reference, list) else reference
        )
        logger.info(f"I2V enabled. Reference image(s): {reference}")

    return provider_input

import logging
from enum import Enum

from sora_relay.config import Settings
from sora_relay.errors import RelayError
from sora_relay.schemas.generation import VideoGenerationRequest, VideoGenerationResponse
from sora_relay.services.cloudinary_uploader import upload_video
from sora_relay.services.input_normalizer import build_provider_input
from sora_relay.services.video_generator import generate_video

logger = logging.getLogger(__name__)


class Stage(str, Enum):
    RECEIVED = "received"
    CREDENTIAL_CHECKED = "credential_checked"
    INPUT_VALIDATED = "input_validated"
    GENERATING = "generating"
    UPLOADING = "uploading"
    COMPLETED = "completed"
    FAILED = "failed"


async def run_generation_pipeline(
    request: VideoGenerationRequest,
    api_key: str,
    settings: Settings,
) -> VideoGenerationResponse:
    """
    Generate a video on Replicate and re-host it on Cloudinary.

    The credential has already been checked by the route dependency. Any failure
    ends the request; the Replicate URL is never returned as a fallback when the
    upload fails.
    """
    stage = Stage.CREDENTIAL_CHECKED
    try:
        provider_input = build_provider_input(request)
        stage = _advance(stage, Stage.INPUT_VALIDATED)

        stage = _advance(stage, Stage.GENERATING)
        video_url = await generate_video(
            api_key, provider_input, model=settings.REPLICATE_MODEL
        )

        stage = _advance(stage, Stage.UPLOADING)
        secure_url = await upload_video(video_url, settings.cloudinary())
    except RelayError as exc:
        exc.stage = exc.stage or stage.value
        logger.error(f"Pipeline {Stage.FAILED.value} at {exc.stage}: {exc.message}")
        raise
    except Exception as exc:
        logger.error(f"Pipeline {Stage.FAILED.value} at {stage.value}: {exc}")
        raise

    _advance(stage, Stage.COMPLETED)
    return VideoGenerationResponse(
        cloudinary_video_url=secure_url,
        model=settings.REPLICATE_MODEL,
    )


def _advance(current: Stage, new: Stage) -> Stage:
    logger.info(f"Pipeline {current.value} -> {new.value}")
    return new

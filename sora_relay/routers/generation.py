from fastapi import APIRouter, Depends

from sora_relay.config import Settings, get_settings
from sora_relay.dependencies import get_replicate_api_key
from sora_relay.schemas.generation import (
    ErrorResponse,
    UnauthorizedResponse,
    VideoGenerationRequest,
    VideoGenerationResponse,
)
from sora_relay.services.pipeline import run_generation_pipeline

router = APIRouter(tags=["generation"])


@router.post(
    "/generate-video",
    response_model=VideoGenerationResponse,
    responses={
        400: {"description": "Missing prompt or invalid body"},
        401: {"model": UnauthorizedResponse},
        500: {"model": ErrorResponse},
    },
)
async def generate_video_endpoint(
    request_data: VideoGenerationRequest = VideoGenerationRequest(),
    api_key: str = Depends(get_replicate_api_key),
    settings: Settings = Depends(get_settings),
):
    """Generate a Sora video on Replicate, re-host it on Cloudinary and return the permanent link."""
    return await run_generation_pipeline(request_data, api_key, settings)

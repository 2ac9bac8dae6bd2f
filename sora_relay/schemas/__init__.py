from sora_relay.schemas.generation import (
    ErrorResponse,
    UnauthorizedResponse,
    VideoGenerationRequest,
    VideoGenerationResponse,
)

__all__ = [
    "VideoGenerationRequest", "VideoGenerationResponse",
    "ErrorResponse", "UnauthorizedResponse",
]

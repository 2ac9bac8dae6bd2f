from typing import Literal

from pydantic import BaseModel, Field, model_validator


class VideoGenerationRequest(BaseModel):
    # Presence of prompt is checked by the input normalizer so that a missing
    # prompt gets its own 400 payload rather than a schema error.
    prompt: str | None = None
    duration_seconds: int | float | None = Field(default=None, gt=0)
    aspect_ratio: str | None = None
    reference_image_url: str | None = Field(
        default=None,
        description="Deprecated single-image form. Use reference_image_urls.",
    )
    reference_image_urls: list[str] | None = None

    @model_validator(mode="after")
    def check_single_reference_shape(self) -> "VideoGenerationRequest":
        if self.reference_image_url and self.reference_image_urls:
            raise ValueError(
                "Provide either reference_image_url or reference_image_urls, not both"
            )
        return self


class VideoGenerationResponse(BaseModel):
    status: Literal["completed"] = "completed"
    cloudinary_video_url: str
    model: str


class ErrorResponse(BaseModel):
    status: Literal["failed"] = "failed"
    error: str


class UnauthorizedResponse(BaseModel):
    error: str
    message: str

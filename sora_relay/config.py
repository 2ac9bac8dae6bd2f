from dataclasses import dataclass

from pydantic_settings import BaseSettings

PLACEHOLDER_CLOUD_NAME = "your_cloud_name"


@dataclass(frozen=True)
class CloudinaryConfig:
    """Immutable Cloudinary credentials and upload options, built once at startup."""

    cloud_name: str | None
    api_key: str | None
    api_secret: str | None
    folder: str = "sora_generated_videos"
    upload_timeout: int = 180
    secure: bool = True

    @property
    def is_placeholder(self) -> bool:
        return not self.cloud_name or self.cloud_name == PLACEHOLDER_CLOUD_NAME


class Settings(BaseSettings):
    CLOUDINARY_CLOUD_NAME: str | None = None
    CLOUDINARY_API_KEY: str | None = None
    CLOUDINARY_API_SECRET: str | None = None
    CLOUDINARY_FOLDER: str = "sora_generated_videos"
    CLOUDINARY_UPLOAD_TIMEOUT: int = 180  # seconds

    REPLICATE_MODEL: str = "openai/sora-2-pro"

    APP_HOST: str = "0.0.0.0"
    APP_PORT: int = 3000
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: list[str] = ["*"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    def cloudinary(self) -> CloudinaryConfig:
        return CloudinaryConfig(
            cloud_name=self.CLOUDINARY_CLOUD_NAME,
            api_key=self.CLOUDINARY_API_KEY,
            api_secret=self.CLOUDINARY_API_SECRET,
            folder=self.CLOUDINARY_FOLDER,
            upload_timeout=self.CLOUDINARY_UPLOAD_TIMEOUT,
        )


settings = Settings()


def get_settings() -> Settings:
    return settings

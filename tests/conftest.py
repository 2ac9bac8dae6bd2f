import pytest
from fastapi.testclient import TestClient

from sora_relay.config import Settings, get_settings
from sora_relay.main import app
from sora_relay.services import video_generator

REPLICATE_VIDEO_URL = "https://replicate.delivery/xezq/abc123/output.mp4"
CLOUDINARY_VIDEO_URL = (
    "https://res.cloudinary.com/demo-cloud/video/upload/v1/sora_generated_videos/abc123.mp4"
)


class FakeFileOutput:
    """Mimics replicate's FileOutput: a `url` attribute rather than a str."""

    def __init__(self, url: str):
        self.url = url


class FakeReplicateClient:
    """Stands in for replicate.Client; records every construction and run."""

    instances: list["FakeReplicateClient"] = []
    output = FakeFileOutput(REPLICATE_VIDEO_URL)
    error: Exception | None = None

    def __init__(self, api_token=None, **kwargs):
        self.api_token = api_token
        self.runs: list[tuple[str, dict]] = []
        FakeReplicateClient.instances.append(self)

    async def async_run(self, ref, input=None, **kwargs):
        self.runs.append((ref, input))
        if FakeReplicateClient.error is not None:
            raise FakeReplicateClient.error
        return FakeReplicateClient.output


@pytest.fixture
def fake_replicate(monkeypatch):
    FakeReplicateClient.instances = []
    FakeReplicateClient.output = FakeFileOutput(REPLICATE_VIDEO_URL)
    FakeReplicateClient.error = None
    monkeypatch.setattr(video_generator.replicate, "Client", FakeReplicateClient)
    return FakeReplicateClient


@pytest.fixture
def fake_cloudinary(monkeypatch):
    """Replaces cloudinary.uploader.upload and records its arguments."""
    calls: list[dict] = []
    state = {"error": None, "result": {"secure_url": CLOUDINARY_VIDEO_URL}}

    def fake_upload(file, **options):
        calls.append({"file": file, **options})
        if state["error"] is not None:
            raise state["error"]
        return state["result"]

    monkeypatch.setattr("cloudinary.uploader.upload", fake_upload)
    return {"calls": calls, "state": state}


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        CLOUDINARY_CLOUD_NAME="demo-cloud",
        CLOUDINARY_API_KEY="123456789012345",
        CLOUDINARY_API_SECRET="cloudinary-secret",
        _env_file=None,
    )


@pytest.fixture
def client(test_settings, fake_replicate, fake_cloudinary):
    app.dependency_overrides[get_settings] = lambda: test_settings
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers() -> dict:
    return {"X-REPLICATE-API-KEY": "r8_test_token_abcd"}

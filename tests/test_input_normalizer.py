import pytest

from sora_relay.errors import MissingPromptError
from sora_relay.schemas.generation import VideoGenerationRequest
from sora_relay.services.input_normalizer import build_provider_input


def test_defaults_applied():
    provider_input = build_provider_input(VideoGenerationRequest(prompt="a cat"))

    assert provider_input == {
        "prompt": "a cat",
        "seconds": 4,
        "aspect_ratio": "landscape",
        "resolution": "high",
    }


def test_caller_values_override_defaults():
    provider_input = build_provider_input(
        VideoGenerationRequest(prompt="a cat", duration_seconds=12, aspect_ratio="portrait")
    )

    assert provider_input["seconds"] == 12
    assert provider_input["aspect_ratio"] == "portrait"
    assert provider_input["resolution"] == "high"


@pytest.mark.parametrize("prompt", [None, "", "  \n"])
def test_missing_prompt_raises(prompt):
    with pytest.raises(MissingPromptError) as exc_info:
        build_provider_input(VideoGenerationRequest(prompt=prompt))

    assert exc_info.value.status_code == 400
    assert exc_info.value.to_payload() == {"error": "Missing required parameter: prompt"}


def test_reference_list_copied_in_order():
    urls = ["https://img.example/3.png", "https://img.example/1.png", "https://img.example/2.png"]
    request = VideoGenerationRequest(prompt="a cat", reference_image_urls=urls)

    provider_input = build_provider_input(request)

    assert provider_input["input_reference"] == urls
    assert provider_input["input_reference"] is not request.reference_image_urls


@pytest.mark.parametrize(
    "fields", [{}, {"reference_image_urls": []}, {"reference_image_url": ""}]
)
def test_no_reference_omits_field(fields):
    provider_input = build_provider_input(VideoGenerationRequest(prompt="a cat", **fields))

    assert "input_reference" not in provider_input


def test_both_reference_shapes_rejected_by_schema():
    with pytest.raises(ValueError):
        VideoGenerationRequest(
            prompt="a cat",
            reference_image_url="https://img.example/a.png",
            reference_image_urls=["https://img.example/b.png"],
        )

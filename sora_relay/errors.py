"""
Error taxonomy for the generate-and-upload pipeline.

Adapters raise these; the exception handlers in ``sora_relay.main`` map each one
to its HTTP status and payload without inspecting the message text.
"""

MISSING_HEADER_MESSAGE = (
    "Missing X-REPLICATE-API-KEY header. Please provide your Replicate API token."
)
MISSING_PROMPT_MESSAGE = "Missing required parameter: prompt"
DEFAULT_FAILURE_MESSAGE = "An unexpected server error occurred during processing."


class RelayError(Exception):
    """Base class for failures that end a request with a structured error."""

    status_code: int = 500

    def __init__(self, message: str | None = None, stage: str | None = None):
        self.message = message or DEFAULT_FAILURE_MESSAGE
        self.stage = stage
        super().__init__(self.message)

    def to_payload(self) -> dict:
        return {"status": "failed", "error": self.message}


class MissingCredentialError(RelayError):
    status_code = 401

    def __init__(self):
        super().__init__(MISSING_HEADER_MESSAGE, stage="received")

    def to_payload(self) -> dict:
        return {"error": "Unauthorized", "message": self.message}


class InvalidRequestError(RelayError):
    status_code = 400


class MissingPromptError(InvalidRequestError):
    def __init__(self):
        super().__init__(MISSING_PROMPT_MESSAGE, stage="credential_checked")

    def to_payload(self) -> dict:
        return {"error": self.message}


class AuthError(RelayError):
    """The generation provider rejected the caller's credential."""

    status_code = 401


class UpstreamError(RelayError):
    status_code = 500


class GenerationError(UpstreamError):
    pass


class UploadError(UpstreamError):
    pass


def is_auth_failure(exc: Exception) -> bool:
    """True when a provider error reports HTTP 401, by status attribute or message."""
    if getattr(exc, "status", None) == 401:
        return True
    return "401" in str(exc)

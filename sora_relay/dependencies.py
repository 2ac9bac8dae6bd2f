import logging

from fastapi import Header

from sora_relay.errors import MissingCredentialError

logger = logging.getLogger(__name__)


def mask_secret(value: str) -> str:
    """Return a log-safe form of a token, keeping only its prefix and last 4 chars."""
    if len(value) <= 8:
        return "****"
    return f"{value[:3]}****{value[-4:]}"


async def get_replicate_api_key(
    x_replicate_api_key: str | None = Header(default=None, alias="X-REPLICATE-API-KEY"),
) -> str:
    """Pull the caller's Replicate token from the request. Raises 401 if absent."""
    if not x_replicate_api_key:
        raise MissingCredentialError()

    logger.debug(f"Replicate credential supplied: {mask_secret(x_replicate_api_key)}")
    return x_replicate_api_key

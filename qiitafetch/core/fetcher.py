"""httpx-based fetcher for the Qiita user profile endpoint."""

from urllib.parse import quote

import httpx

from qiitafetch.exceptions import HttpStatusError, TransportError
from qiitafetch.logging import get_logger
from qiitafetch.models.result import Failure, Outcome, Success

API_BASE_URL = "https://qiita.com"
PROFILE_PATH = "/api/v2/users/{username}"

# Longest slice of an error body kept in HttpStatusError messages
ERROR_BODY_EXCERPT = 200


def build_profile_url(username: str) -> str:
    """Return the profile endpoint URL with username as a single path segment."""
    return API_BASE_URL + PROFILE_PATH.format(username=quote(username, safe=""))


async def fetch_profile_body(
    username: str,
    access_token: str,
    transport: httpx.AsyncBaseTransport | None = None,
    user_agent: str | None = None,
) -> Outcome[str, TransportError]:
    """
    GET the raw JSON body of a Qiita user profile.

    Args:
        username: Qiita user id
        access_token: Bearer token, attached verbatim
        transport: Optional httpx transport (used for mocking)
        user_agent: Custom User-Agent header

    Returns:
        Success with the body text, or Failure with a TransportError.
        4xx/5xx responses fail with HttpStatusError.
    """
    log = get_logger("fetcher")
    url = build_profile_url(username)
    headers = {"Authorization": f"Bearer {access_token}"}
    if user_agent:
        headers["User-Agent"] = user_agent

    try:
        async with httpx.AsyncClient(transport=transport) as client:
            response = await client.get(url, headers=headers)
    except httpx.HTTPError as e:
        log.error("fetch_failed", username=username, error=str(e), error_type=type(e).__name__)
        return Failure(TransportError(f"HTTP error: {e!r}"))
    except Exception as e:
        log.error("fetch_failed", username=username, error=str(e), error_type=type(e).__name__)
        return Failure(TransportError(f"Unexpected error: {e!r}"))

    if response.is_error:
        log.warning("fetch_failed", username=username, status=response.status_code)
        excerpt = response.text[:ERROR_BODY_EXCERPT]
        return Failure(
            HttpStatusError(response.status_code, f"HTTP {response.status_code}: {excerpt}")
        )

    log.debug("fetch_complete", username=username, status=response.status_code, size=len(response.text))
    return Success(response.text)

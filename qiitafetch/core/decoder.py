"""Pydantic-based decoder for Qiita profile JSON."""

from pydantic import ValidationError

from qiitafetch.exceptions import DecodeError
from qiitafetch.models.profile import Profile
from qiitafetch.models.result import Failure, Outcome, Success


def _describe(error: ValidationError) -> str:
    """Flatten validation errors into one line, e.g. 'team_only: Field required'."""
    parts = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "body"
        parts.append(f"{location}: {item['msg']}")
    return "; ".join(parts)


def decode_profile(raw_body: str) -> Outcome[Profile, DecodeError]:
    """
    Parse a raw response body into a Profile.

    The whole record is rejected if the body is not a JSON object or any
    required counter or flag is missing or mistyped.

    Args:
        raw_body: Response body text

    Returns:
        Success with the Profile, or Failure with a DecodeError
    """
    try:
        return Success(Profile.model_validate_json(raw_body))
    except ValidationError as e:
        return Failure(DecodeError(_describe(e)))

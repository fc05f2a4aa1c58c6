"""qiitafetch - Qiita user profile client."""

from qiitafetch.models.profile import Profile
from qiitafetch.models.request import ProfileRequest
from qiitafetch.models.result import Failure, Outcome, Success
from qiitafetch.config import ClientConfig
from qiitafetch.core.orchestrator import ProfileClient
from qiitafetch.core.fetcher import fetch_profile_body
from qiitafetch.core.decoder import decode_profile
from qiitafetch.exceptions import (
    DecodeError,
    HttpStatusError,
    InvalidRequestError,
    ProfileError,
    QiitaFetchError,
    TransportError,
)

__version__ = "0.1.0"

__all__ = [
    # Main interface
    "ProfileClient",
    "ClientConfig",
    # Pipeline steps
    "fetch_profile_body",
    "decode_profile",
    # Models
    "Profile",
    "ProfileRequest",
    "Outcome",
    "Success",
    "Failure",
    # Errors
    "QiitaFetchError",
    "ProfileError",
    "InvalidRequestError",
    "TransportError",
    "HttpStatusError",
    "DecodeError",
    "__version__",
]

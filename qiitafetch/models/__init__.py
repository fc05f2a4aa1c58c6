"""Pydantic models and outcome types for qiitafetch."""

from qiitafetch.models.profile import Profile
from qiitafetch.models.request import ProfileRequest
from qiitafetch.models.result import Failure, Outcome, Success

__all__ = [
    "Profile",
    "ProfileRequest",
    "Outcome",
    "Success",
    "Failure",
]

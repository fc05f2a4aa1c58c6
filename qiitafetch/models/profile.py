"""Profile data model."""

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt

# Display order and labels for list-style presentation
DISPLAY_LABELS = {
    "id": "ID",
    "name": "Name",
    "description": "Description",
    "location": "Location",
    "organization": "Organization",
    "website_url": "Website",
    "profile_image_url": "Profile Image",
    "github_login_name": "GitHub",
    "twitter_screen_name": "Twitter",
    "facebook_id": "Facebook",
    "linkedin_id": "LinkedIn",
    "followees_count": "Following",
    "followers_count": "Followers",
    "items_count": "Items",
    "permanent_id": "Permanent ID",
    "team_only": "Team Only",
}


class Profile(BaseModel):
    """Represents a Qiita user profile as returned by /api/v2/users/:id."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    description: str | None = None
    facebook_id: str | None = None
    github_login_name: str | None = None
    id: str | None = None
    linkedin_id: str | None = None
    location: str | None = None
    name: str | None = None
    organization: str | None = None
    profile_image_url: str | None = None
    twitter_screen_name: str | None = None
    website_url: str | None = None

    followees_count: StrictInt = Field(ge=0)
    followers_count: StrictInt = Field(ge=0)
    items_count: StrictInt = Field(ge=0)
    permanent_id: StrictInt = Field(ge=0)
    team_only: StrictBool

    def display_fields(self) -> list[tuple[str, str | int | bool | None]]:
        """Return (label, value) pairs in display order."""
        return [(label, getattr(self, field)) for field, label in DISPLAY_LABELS.items()]

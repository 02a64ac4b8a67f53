"""
Request Variants - Endpoint-Specific Input Shapes.

Each KillrVideo endpoint accepts its own request model. All variants are
frozen pydantic models carrying a ``kind`` literal, which makes ``Request``
a discriminated (tagged) union.

Field defaults mirror decoded wire defaults:
    - Identifiers: None when absent
    - Free text: "" when absent
    - Counts: 0 when absent
    - Lists: () when absent

Passwords are excluded from repr so they never reach rejection text.
"""

from __future__ import annotations

from typing import Annotated, Any, Dict, Literal, Optional, Tuple, Type, Union

from pydantic import BaseModel, Field, TypeAdapter


class _RequestBase(BaseModel):
    """Shared configuration for request variants."""

    model_config = {"frozen": True}


# =============================================================================
# Comments
# =============================================================================


class CommentOnVideoRequest(_RequestBase):
    """Add a comment to a video."""

    kind: Literal["comment_on_video"] = "comment_on_video"
    user_id: Optional[str] = None
    video_id: Optional[str] = None
    comment_id: Optional[str] = None
    comment: str = ""


class GetUserCommentsRequest(_RequestBase):
    """Page through the comments a user has made."""

    kind: Literal["get_user_comments"] = "get_user_comments"
    user_id: Optional[str] = None
    page_size: int = 0
    starting_comment_id: Optional[str] = None
    paging_state: str = ""


class GetVideoCommentsRequest(_RequestBase):
    """Page through the comments on a video."""

    kind: Literal["get_video_comments"] = "get_video_comments"
    video_id: Optional[str] = None
    page_size: int = 0
    starting_comment_id: Optional[str] = None
    paging_state: str = ""


# =============================================================================
# Ratings
# =============================================================================


class RateVideoRequest(_RequestBase):
    """Rate a video on behalf of a user."""

    kind: Literal["rate_video"] = "rate_video"
    video_id: Optional[str] = None
    user_id: Optional[str] = None
    rating: int = 0


class GetRatingRequest(_RequestBase):
    """Fetch the aggregate rating of a video."""

    kind: Literal["get_rating"] = "get_rating"
    video_id: Optional[str] = None


class GetUserRatingRequest(_RequestBase):
    """Fetch the rating a user gave a video."""

    kind: Literal["get_user_rating"] = "get_user_rating"
    video_id: Optional[str] = None
    user_id: Optional[str] = None


# =============================================================================
# Search
# =============================================================================


class SearchVideosRequest(_RequestBase):
    """Search videos by query string."""

    kind: Literal["search_videos"] = "search_videos"
    query: str = ""
    page_size: int = 0
    paging_state: str = ""


class GetQuerySuggestionsRequest(_RequestBase):
    """Suggest completions for a partial query."""

    kind: Literal["get_query_suggestions"] = "get_query_suggestions"
    query: str = ""
    page_size: int = 0


# =============================================================================
# Statistics
# =============================================================================


class RecordPlaybackStartedRequest(_RequestBase):
    """Record that playback of a video started."""

    kind: Literal["record_playback_started"] = "record_playback_started"
    video_id: Optional[str] = None


class GetNumberOfPlaysRequest(_RequestBase):
    """Fetch play counts for a batch of videos."""

    kind: Literal["get_number_of_plays"] = "get_number_of_plays"
    video_ids: Tuple[Optional[str], ...] = ()


# =============================================================================
# Suggested videos
# =============================================================================


class GetRelatedVideosRequest(_RequestBase):
    """Fetch videos related to a video."""

    kind: Literal["get_related_videos"] = "get_related_videos"
    video_id: Optional[str] = None
    page_size: int = 0
    paging_state: str = ""


# =============================================================================
# User management
# =============================================================================


class CreateUserRequest(_RequestBase):
    """Create a user account."""

    kind: Literal["create_user"] = "create_user"
    user_id: Optional[str] = None
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    password: str = Field(default="", repr=False)


class VerifyCredentialsRequest(_RequestBase):
    """Check an email/password pair."""

    kind: Literal["verify_credentials"] = "verify_credentials"
    email: str = ""
    password: str = Field(default="", repr=False)


class GetUserProfileRequest(_RequestBase):
    """Fetch profiles for a batch of users."""

    kind: Literal["get_user_profile"] = "get_user_profile"
    user_ids: Tuple[Optional[str], ...] = ()


# =============================================================================
# Video catalog
# =============================================================================


class SubmitUploadedVideoRequest(_RequestBase):
    """Register a video uploaded by a user."""

    kind: Literal["submit_uploaded_video"] = "submit_uploaded_video"
    video_id: Optional[str] = None
    user_id: Optional[str] = None
    name: str = ""
    description: str = ""
    tags: Tuple[str, ...] = ()
    upload_url: str = ""


class SubmitYouTubeVideoRequest(_RequestBase):
    """Register a video hosted on YouTube."""

    kind: Literal["submit_youtube_video"] = "submit_youtube_video"
    video_id: Optional[str] = None
    user_id: Optional[str] = None
    name: str = ""
    description: str = ""
    tags: Tuple[str, ...] = ()
    you_tube_video_id: str = ""


class GetVideoRequest(_RequestBase):
    """Fetch a single video."""

    kind: Literal["get_video"] = "get_video"
    video_id: Optional[str] = None


class GetVideoPreviewsRequest(_RequestBase):
    """Fetch previews for a batch of videos."""

    kind: Literal["get_video_previews"] = "get_video_previews"
    video_ids: Tuple[Optional[str], ...] = ()


class GetLatestVideoPreviewsRequest(_RequestBase):
    """Page through the most recently added videos."""

    kind: Literal["get_latest_video_previews"] = "get_latest_video_previews"
    page_size: int = 0
    starting_video_id: Optional[str] = None
    paging_state: str = ""


class GetUserVideoPreviewsRequest(_RequestBase):
    """Page through the videos a user has added."""

    kind: Literal["get_user_video_previews"] = "get_user_video_previews"
    user_id: Optional[str] = None
    page_size: int = 0
    starting_video_id: Optional[str] = None
    paging_state: str = ""


Request = Annotated[
    Union[
        CommentOnVideoRequest,
        GetUserCommentsRequest,
        GetVideoCommentsRequest,
        RateVideoRequest,
        GetRatingRequest,
        GetUserRatingRequest,
        SearchVideosRequest,
        GetQuerySuggestionsRequest,
        RecordPlaybackStartedRequest,
        GetNumberOfPlaysRequest,
        GetRelatedVideosRequest,
        CreateUserRequest,
        VerifyCredentialsRequest,
        GetUserProfileRequest,
        SubmitUploadedVideoRequest,
        SubmitYouTubeVideoRequest,
        GetVideoRequest,
        GetVideoPreviewsRequest,
        GetLatestVideoPreviewsRequest,
        GetUserVideoPreviewsRequest,
    ],
    Field(discriminator="kind"),
]

# Every supported variant; a rule set must exist for each one.
REQUEST_VARIANTS: Tuple[Type[BaseModel], ...] = (
    CommentOnVideoRequest,
    GetUserCommentsRequest,
    GetVideoCommentsRequest,
    RateVideoRequest,
    GetRatingRequest,
    GetUserRatingRequest,
    SearchVideosRequest,
    GetQuerySuggestionsRequest,
    RecordPlaybackStartedRequest,
    GetNumberOfPlaysRequest,
    GetRelatedVideosRequest,
    CreateUserRequest,
    VerifyCredentialsRequest,
    GetUserProfileRequest,
    SubmitUploadedVideoRequest,
    SubmitYouTubeVideoRequest,
    GetVideoRequest,
    GetVideoPreviewsRequest,
    GetLatestVideoPreviewsRequest,
    GetUserVideoPreviewsRequest,
)

_REQUEST_ADAPTER: TypeAdapter[Any] = TypeAdapter(Request)


def variant_kind(variant: Type[BaseModel]) -> str:
    """Return the discriminator value of a request variant class."""
    return variant.model_fields["kind"].default


def parse_request(data: Dict[str, Any]) -> BaseModel:
    """
    Decode a mapping into the matching request variant.

    Args:
        data: Decoded request payload, including its ``kind``

    Returns:
        The frozen request model for that kind

    Raises:
        pydantic.ValidationError: If ``kind`` is unknown or a field has
            the wrong type
    """
    return _REQUEST_ADAPTER.validate_python(data)

"""
Default Rule Sets - Static Rule Table for KillrVideo Endpoints.

One rule set per request variant. Rule order within a set is the order
failure lines appear in the composite description.

Batch lookups are capped at MAX_BULK_IDS (rejected when count > cap).
Only GetNumberOfPlays rejects an empty batch; empty profile and preview
lookups are allowed and return nothing.
"""

from __future__ import annotations

from typing import Tuple

from killrvideo_validation.domain.requests import (
    REQUEST_VARIANTS,
    CommentOnVideoRequest,
    CreateUserRequest,
    GetLatestVideoPreviewsRequest,
    GetNumberOfPlaysRequest,
    GetQuerySuggestionsRequest,
    GetRatingRequest,
    GetRelatedVideosRequest,
    GetUserCommentsRequest,
    GetUserProfileRequest,
    GetUserRatingRequest,
    GetUserVideoPreviewsRequest,
    GetVideoCommentsRequest,
    GetVideoPreviewsRequest,
    GetVideoRequest,
    RateVideoRequest,
    RecordPlaybackStartedRequest,
    SearchVideosRequest,
    SubmitUploadedVideoRequest,
    SubmitYouTubeVideoRequest,
    VerifyCredentialsRequest,
)
from killrvideo_validation.validation.rule_set_registry import RuleSetRegistry
from killrvideo_validation.validation.rules import (
    RuleSet,
    elements_present,
    max_items,
    non_empty,
    positive,
    required,
)

DEFAULT_RULE_SETS: Tuple[RuleSet, ...] = (
    # Comments
    RuleSet(
        variant=CommentOnVideoRequest,
        label="comment on video request",
        rules=(
            required("user id", "user_id"),
            required("video id", "video_id"),
            required("comment id", "comment_id"),
            required("comment", "comment"),
        ),
    ),
    RuleSet(
        variant=GetUserCommentsRequest,
        label="get user comments request",
        rules=(
            required("user id", "user_id"),
            positive("page size", "page_size"),
        ),
    ),
    RuleSet(
        variant=GetVideoCommentsRequest,
        label="get video comments request",
        rules=(
            required("video id", "video_id"),
            positive("page size", "page_size"),
        ),
    ),
    # Ratings
    RuleSet(
        variant=RateVideoRequest,
        label="rate video request",
        rules=(
            required("video id", "video_id"),
            required("user id", "user_id"),
        ),
    ),
    RuleSet(
        variant=GetRatingRequest,
        label="get video rating request",
        rules=(required("video id", "video_id"),),
    ),
    RuleSet(
        variant=GetUserRatingRequest,
        label="get user rating request",
        rules=(
            required("video id", "video_id"),
            required("user id", "user_id"),
        ),
    ),
    # Search
    RuleSet(
        variant=SearchVideosRequest,
        label="search videos request",
        rules=(
            required("query string", "query"),
            positive("page size", "page_size"),
        ),
    ),
    RuleSet(
        variant=GetQuerySuggestionsRequest,
        label="get query suggestions request",
        rules=(
            required("query string", "query"),
            positive("page size", "page_size"),
        ),
    ),
    # Statistics
    RuleSet(
        variant=RecordPlaybackStartedRequest,
        label="record playback started request",
        rules=(required("video id", "video_id"),),
    ),
    RuleSet(
        variant=GetNumberOfPlaysRequest,
        label="get number of plays request",
        rules=(
            non_empty("video ids", "video_ids"),
            max_items("video ids", "video_ids"),
            elements_present("video ids", "video_ids"),
        ),
    ),
    # Suggested videos
    RuleSet(
        variant=GetRelatedVideosRequest,
        label="get related videos request",
        rules=(required("video id", "video_id"),),
    ),
    # User management
    RuleSet(
        variant=CreateUserRequest,
        label="create user request",
        rules=(
            required("user id", "user_id"),
            required("password", "password"),
            required("email", "email"),
        ),
    ),
    RuleSet(
        variant=VerifyCredentialsRequest,
        label="verify credentials request",
        rules=(
            required("email", "email"),
            required("password", "password"),
        ),
    ),
    RuleSet(
        variant=GetUserProfileRequest,
        label="get user profile request",
        rules=(
            max_items("user ids", "user_ids"),
            elements_present("user ids", "user_ids"),
        ),
    ),
    # Video catalog
    RuleSet(
        variant=SubmitUploadedVideoRequest,
        label="submit uploaded video request",
        rules=(
            required("video id", "video_id"),
            required("user id", "user_id"),
            required("video name", "name"),
            required("video description", "description"),
            non_empty("video tags", "tags"),
            required("video upload url", "upload_url"),
        ),
    ),
    RuleSet(
        variant=SubmitYouTubeVideoRequest,
        label="submit youtube video request",
        rules=(
            required("video id", "video_id"),
            required("user id", "user_id"),
            required("video name", "name"),
            required("video description", "description"),
            required("video youtube id", "you_tube_video_id"),
        ),
    ),
    RuleSet(
        variant=GetVideoRequest,
        label="get video request",
        rules=(required("video id", "video_id"),),
    ),
    RuleSet(
        variant=GetVideoPreviewsRequest,
        label="get video previews request",
        rules=(
            max_items("video ids", "video_ids"),
            elements_present("video ids", "video_ids"),
        ),
    ),
    RuleSet(
        variant=GetLatestVideoPreviewsRequest,
        label="get latest video previews request",
        rules=(positive("page size", "page_size"),),
    ),
    RuleSet(
        variant=GetUserVideoPreviewsRequest,
        label="get user video previews request",
        rules=(
            required("user id", "user_id"),
            positive("page size", "page_size"),
        ),
    ),
)


def build_default_registry() -> RuleSetRegistry:
    """
    Build the frozen registry holding every default rule set.

    Raises:
        UnregisteredVariantError: If a supported variant lacks a rule set
    """
    registry = RuleSetRegistry()
    for rule_set in DEFAULT_RULE_SETS:
        registry.register(rule_set)
    registry.ensure_complete(REQUEST_VARIANTS)
    registry.freeze()
    return registry

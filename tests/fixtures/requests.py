"""
Request Builders - Valid Requests for Every Variant.
"""

from __future__ import annotations

from typing import Dict, List, Type

from pydantic import BaseModel

from killrvideo_validation.domain.requests import (
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

USER_ID = "7f2b9a52-55d6-4c33-9b0e-0f5c7d1f8a11"
VIDEO_ID = "0c4d2a7e-2f0b-4c8a-a3b5-3e1d9f6c2b44"
COMMENT_ID = "a9e1c3f0-6b2d-11ee-8c99-0242ac120002"


def bulk_ids(count: int) -> List[str]:
    """``count`` distinct, well-formed identifiers."""
    return [f"00000000-0000-4000-8000-{i:012d}" for i in range(count)]


def valid_requests() -> Dict[Type[BaseModel], BaseModel]:
    """One fully valid request per variant."""
    requests: List[BaseModel] = [
        CommentOnVideoRequest(
            user_id=USER_ID, video_id=VIDEO_ID, comment_id=COMMENT_ID, comment="Great video!"
        ),
        GetUserCommentsRequest(user_id=USER_ID, page_size=10),
        GetVideoCommentsRequest(video_id=VIDEO_ID, page_size=10),
        RateVideoRequest(video_id=VIDEO_ID, user_id=USER_ID, rating=5),
        GetRatingRequest(video_id=VIDEO_ID),
        GetUserRatingRequest(video_id=VIDEO_ID, user_id=USER_ID),
        SearchVideosRequest(query="cassandra", page_size=10),
        GetQuerySuggestionsRequest(query="cass", page_size=5),
        RecordPlaybackStartedRequest(video_id=VIDEO_ID),
        GetNumberOfPlaysRequest(video_ids=(VIDEO_ID,)),
        GetRelatedVideosRequest(video_id=VIDEO_ID, page_size=4),
        CreateUserRequest(
            user_id=USER_ID,
            first_name="Ada",
            last_name="Lovelace",
            email="ada@example.com",
            password="s3cret",
        ),
        VerifyCredentialsRequest(email="ada@example.com", password="s3cret"),
        GetUserProfileRequest(user_ids=(USER_ID,)),
        SubmitUploadedVideoRequest(
            video_id=VIDEO_ID,
            user_id=USER_ID,
            name="Data modeling",
            description="Intro to data modeling",
            tags=("cassandra", "modeling"),
            upload_url="https://uploads.example.com/v/1",
        ),
        SubmitYouTubeVideoRequest(
            video_id=VIDEO_ID,
            user_id=USER_ID,
            name="Data modeling",
            description="Intro to data modeling",
            tags=("cassandra",),
            you_tube_video_id="dQw4w9WgXcQ",
        ),
        GetVideoRequest(video_id=VIDEO_ID),
        GetVideoPreviewsRequest(video_ids=(VIDEO_ID,)),
        GetLatestVideoPreviewsRequest(page_size=8),
        GetUserVideoPreviewsRequest(user_id=USER_ID, page_size=8),
    ]
    return {type(request): request for request in requests}

"""
Unit Tests for the Default Rule Table.

Test Aspects Covered:
    ✅ Business Logic: Every variant's rules, in registration order
    ✅ Edge Cases: Pagination boundary, batch cap 20/21, empty batches
"""

from __future__ import annotations

from typing import Any, List

import pytest

from killrvideo_validation.domain.outcomes import FailureKind
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
from killrvideo_validation.validation.validator import Validator
from tests.fixtures.requests import bulk_ids, valid_requests

# (variant, attribute, blank value, field label)
REQUIRED_FIELDS: List[tuple] = [
    (CommentOnVideoRequest, "user_id", None, "user id"),
    (CommentOnVideoRequest, "video_id", None, "video id"),
    (CommentOnVideoRequest, "comment_id", None, "comment id"),
    (CommentOnVideoRequest, "comment", "", "comment"),
    (GetUserCommentsRequest, "user_id", None, "user id"),
    (GetVideoCommentsRequest, "video_id", None, "video id"),
    (RateVideoRequest, "video_id", None, "video id"),
    (RateVideoRequest, "user_id", None, "user id"),
    (GetRatingRequest, "video_id", None, "video id"),
    (GetUserRatingRequest, "video_id", None, "video id"),
    (GetUserRatingRequest, "user_id", None, "user id"),
    (SearchVideosRequest, "query", "", "query string"),
    (GetQuerySuggestionsRequest, "query", "", "query string"),
    (RecordPlaybackStartedRequest, "video_id", None, "video id"),
    (GetRelatedVideosRequest, "video_id", None, "video id"),
    (CreateUserRequest, "user_id", None, "user id"),
    (CreateUserRequest, "password", "", "password"),
    (CreateUserRequest, "email", "", "email"),
    (VerifyCredentialsRequest, "email", "", "email"),
    (VerifyCredentialsRequest, "password", "", "password"),
    (SubmitUploadedVideoRequest, "video_id", None, "video id"),
    (SubmitUploadedVideoRequest, "user_id", None, "user id"),
    (SubmitUploadedVideoRequest, "name", "", "video name"),
    (SubmitUploadedVideoRequest, "description", "", "video description"),
    (SubmitUploadedVideoRequest, "upload_url", "", "video upload url"),
    (SubmitYouTubeVideoRequest, "video_id", None, "video id"),
    (SubmitYouTubeVideoRequest, "user_id", None, "user id"),
    (SubmitYouTubeVideoRequest, "name", "", "video name"),
    (SubmitYouTubeVideoRequest, "description", "", "video description"),
    (SubmitYouTubeVideoRequest, "you_tube_video_id", "", "video youtube id"),
    (GetVideoRequest, "video_id", None, "video id"),
    (GetUserVideoPreviewsRequest, "user_id", None, "user id"),
]

PAGINATED = [
    GetUserCommentsRequest,
    GetVideoCommentsRequest,
    SearchVideosRequest,
    GetQuerySuggestionsRequest,
    GetLatestVideoPreviewsRequest,
    GetUserVideoPreviewsRequest,
]

BULK = [
    (GetNumberOfPlaysRequest, "video_ids", "video ids"),
    (GetUserProfileRequest, "user_ids", "user ids"),
    (GetVideoPreviewsRequest, "video_ids", "video ids"),
]


def with_fields(variant: type, **fields: Any):
    """A valid request of ``variant`` with some fields replaced."""
    return valid_requests()[variant].model_copy(update=fields)


def failure_lines(description: str) -> List[str]:
    """Failure lines of a description, without the header."""
    return description.split("\n")[1:]


class TestValidRequests:
    """Every variant accepts a fully valid request."""

    @pytest.mark.parametrize("variant", REQUEST_VARIANTS, ids=lambda v: v.__name__)
    def test_valid_request_passes(self, validator: Validator, variant: type) -> None:
        """
        SCENARIO: All required fields present and within bounds
        EXPECTED: valid=True, empty description
        """
        outcome = validator.validate(valid_requests()[variant])

        assert outcome.valid is True
        assert outcome.description == ""


class TestRequiredFields:
    """Omitting a required field is reported once, by name."""

    @pytest.mark.parametrize(
        "variant,attribute,blank,field_name",
        REQUIRED_FIELDS,
        ids=[f"{v.__name__}.{a}" for v, a, _, _ in REQUIRED_FIELDS],
    )
    def test_missing_field_reported_once(
        self,
        validator: Validator,
        variant: type,
        attribute: str,
        blank: Any,
        field_name: str,
    ) -> None:
        outcome = validator.validate(with_fields(variant, **{attribute: blank}))

        assert outcome.valid is False
        assert [f.field_name for f in outcome.failures] == [field_name]
        lines = failure_lines(outcome.description)
        assert len(lines) == 1
        assert lines[0].startswith(f"\t\t{field_name} should be provided for ")

    @pytest.mark.parametrize("blank", ["   ", "\t"])
    def test_whitespace_counts_as_blank(self, validator: Validator, blank: str) -> None:
        outcome = validator.validate(with_fields(CreateUserRequest, email=blank))

        assert [f.field_name for f in outcome.failures] == ["email"]


class TestPagination:
    """Page size must be strictly positive."""

    @pytest.mark.parametrize("variant", PAGINATED, ids=lambda v: v.__name__)
    @pytest.mark.parametrize("page_size,valid", [(0, False), (-1, False), (1, True)])
    def test_page_size_boundary(
        self, validator: Validator, variant: type, page_size: int, valid: bool
    ) -> None:
        outcome = validator.validate(with_fields(variant, page_size=page_size))

        assert outcome.valid is valid
        if not valid:
            assert outcome.failures[0].kind == FailureKind.NON_POSITIVE_NUMBER
            assert outcome.failures[0].field_name == "page size"


class TestBulkLookups:
    """Batch identifier lists are capped at 20 with no blank elements."""

    @pytest.mark.parametrize("variant,attribute,field_name", BULK)
    def test_exactly_twenty_passes(
        self, validator: Validator, variant: type, attribute: str, field_name: str
    ) -> None:
        outcome = validator.validate(with_fields(variant, **{attribute: tuple(bulk_ids(20))}))

        assert outcome.valid is True

    @pytest.mark.parametrize("variant,attribute,field_name", BULK)
    def test_twenty_one_is_too_large(
        self, validator: Validator, variant: type, attribute: str, field_name: str
    ) -> None:
        outcome = validator.validate(with_fields(variant, **{attribute: tuple(bulk_ids(21))}))

        assert outcome.valid is False
        assert [f.kind for f in outcome.failures] == [FailureKind.COLLECTION_TOO_LARGE]
        assert "too large" in outcome.description
        assert outcome.failures[0].field_name == field_name

    @pytest.mark.parametrize("variant,attribute,field_name", BULK)
    def test_blank_element_is_invalid(
        self, validator: Validator, variant: type, attribute: str, field_name: str
    ) -> None:
        ids = tuple(bulk_ids(5)) + ("",)

        outcome = validator.validate(with_fields(variant, **{attribute: ids}))

        assert [f.kind for f in outcome.failures] == [FailureKind.COLLECTION_ELEMENT_INVALID]
        assert "invalid element" in outcome.description

    def test_several_blank_elements_give_one_line(self, validator: Validator) -> None:
        ids = (None, "", "  ") + tuple(bulk_ids(2))

        outcome = validator.validate(with_fields(GetUserProfileRequest, user_ids=ids))

        assert len(failure_lines(outcome.description)) == 1

    def test_too_large_and_blank_both_reported(self, validator: Validator) -> None:
        """
        SCENARIO: 21 ids including a blank one
        EXPECTED: Two lines, cap first then element (registration order)
        """
        ids = tuple(bulk_ids(20)) + (None,)

        outcome = validator.validate(with_fields(GetVideoPreviewsRequest, video_ids=ids))

        assert [f.kind for f in outcome.failures] == [
            FailureKind.COLLECTION_TOO_LARGE,
            FailureKind.COLLECTION_ELEMENT_INVALID,
        ]

    def test_empty_plays_batch_rejected(self, validator: Validator) -> None:
        outcome = validator.validate(with_fields(GetNumberOfPlaysRequest, video_ids=()))

        assert [f.kind for f in outcome.failures] == [FailureKind.COLLECTION_EMPTY]

    @pytest.mark.parametrize(
        "variant,attribute",
        [(GetUserProfileRequest, "user_ids"), (GetVideoPreviewsRequest, "video_ids")],
    )
    def test_empty_lookup_batch_allowed(
        self, validator: Validator, variant: type, attribute: str
    ) -> None:
        outcome = validator.validate(with_fields(variant, **{attribute: ()}))

        assert outcome.valid is True


class TestVideoTags:
    """Uploaded videos need at least one tag."""

    def test_empty_tags_rejected(self, validator: Validator) -> None:
        outcome = validator.validate(with_fields(SubmitUploadedVideoRequest, tags=()))

        assert [f.field_name for f in outcome.failures] == ["video tags"]
        assert outcome.failures[0].kind == FailureKind.COLLECTION_EMPTY

    def test_youtube_tags_optional(self, validator: Validator) -> None:
        outcome = validator.validate(with_fields(SubmitYouTubeVideoRequest, tags=()))

        assert outcome.valid is True

"""Unit tests for domain value types."""

import pytest
from pydantic import ValidationError

from qanda.domain.value import (
    PageInfo,
    PageRequest,
    TopicName,
    TopicSlug,
    VoteCounts,
    VoteTarget,
    normalize_slug,
)


class TestNormalizeSlug:
    """Tests for slug normalization."""

    def test_trims_lowercases_and_hyphenates(self):
        assert normalize_slug("  Machine Learning  ") == "machine-learning"

    def test_collapses_whitespace_runs(self):
        assert normalize_slug("Arts \t and\n\nCulture") == "arts-and-culture"

    def test_is_idempotent(self):
        once = normalize_slug("  Machine Learning  ")
        assert normalize_slug(once) == once


class TestTopicSlug:
    """Tests for TopicSlug."""

    def test_from_text_normalizes(self):
        assert TopicSlug.from_text(" Data Science ").root == "data-science"

    def test_rejects_unnormalized_value(self):
        with pytest.raises(ValidationError):
            TopicSlug("Data Science")

    def test_rejects_empty(self):
        with pytest.raises(ValidationError):
            TopicSlug.from_text("   ")

    def test_rejects_too_long(self):
        with pytest.raises(ValidationError):
            TopicSlug.from_text("x" * 51)


class TestTopicName:
    """Tests for TopicName."""

    def test_from_text_trims_and_lowercases(self):
        assert TopicName.from_text("  Arts & Culture ").root == "arts & culture"

    def test_rejects_uppercase(self):
        with pytest.raises(ValidationError):
            TopicName("Science")


class TestVoteCounts:
    """Tests for VoteCounts."""

    def test_net_is_upvotes_minus_downvotes(self):
        counts = VoteCounts(upvotes=3, downvotes=5)
        assert counts.net == -2

    def test_net_is_serialized(self):
        assert VoteCounts(upvotes=2, downvotes=1).model_dump() == {
            "upvotes": 2,
            "downvotes": 1,
            "net": 1,
        }

    def test_rejects_negative_counts(self):
        with pytest.raises(ValidationError):
            VoteCounts(upvotes=-1, downvotes=0)


class TestVoteTarget:
    """Tests for VoteTarget."""

    def test_rejects_unknown_kind(self):
        with pytest.raises(ValidationError):
            VoteTarget(kind="comment", id="00000000-0000-0000-0000-000000000001")


class TestPageInfo:
    """Tests for pagination metadata."""

    @pytest.mark.parametrize(
        "total,limit,expected_pages",
        [(0, 20, 0), (1, 20, 1), (20, 20, 1), (21, 20, 2), (45, 10, 5)],
    )
    def test_total_pages_is_ceiling(self, total, limit, expected_pages):
        info = PageInfo.of(PageRequest(page=1, limit=limit), total)
        assert info.total_pages == expected_pages

    def test_offset(self):
        assert PageRequest(page=3, limit=10).offset == 20

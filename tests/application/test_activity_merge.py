"""Tests for merging and paginating the two activity streams."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from volunteer_api.application.use_cases.activity_feed import (
    merge_activity_streams,
    paginate_activity,
    summarize_activity,
)
from volunteer_api.domain.entities import (
    ActivityItem,
    ActivityKind,
    AnimalReference,
    CommentDetails,
    SessionMetadata,
)

BASE = datetime(2024, 5, 1, tzinfo=timezone.utc)


def _day(value: float) -> datetime:
    return BASE + timedelta(days=value)


def _announcement(item_id: int, created_at: datetime) -> ActivityItem:
    return ActivityItem(
        kind=ActivityKind.ANNOUNCEMENT,
        id=item_id,
        created_at=created_at,
        author=None,
        content=f"announcement {item_id}",
        title="Aviso",
    )


def _comment(
    item_id: int, created_at: datetime, metadata: SessionMetadata | None = None
) -> ActivityItem:
    return ActivityItem(
        kind=ActivityKind.COMMENT,
        id=item_id,
        created_at=created_at,
        author=None,
        content=f"comment {item_id}",
        comment=CommentDetails(
            animal=AnimalReference(id=1, name="Rex"), metadata=metadata
        ),
    )


@pytest.fixture()
def streams() -> tuple[list[ActivityItem], list[ActivityItem]]:
    announcements = [_announcement(3, _day(3)), _announcement(2, _day(2)), _announcement(1, _day(1))]
    comments = [_comment(2, _day(2.5)), _comment(1, _day(1.5))]
    return announcements, comments


def test_first_page_interleaves_both_sources(streams) -> None:
    page = paginate_activity(*streams, limit=3, offset=0)

    assert [item.created_at for item in page.items] == [_day(3), _day(2.5), _day(2)]
    assert page.total == 5
    assert page.has_more is True


def test_second_page_returns_the_remainder(streams) -> None:
    page = paginate_activity(*streams, limit=3, offset=3)

    assert [item.created_at for item in page.items] == [_day(1.5), _day(1)]
    assert page.has_more is False


@pytest.mark.parametrize("offset", [5, 6, 100])
def test_offset_overrun_returns_an_empty_page(streams, offset: int) -> None:
    page = paginate_activity(*streams, limit=3, offset=offset)

    assert page.items == []
    assert page.total == 5
    assert page.has_more is False


@pytest.mark.parametrize(("limit", "offset"), [(1, 0), (2, 1), (3, 2), (5, 0), (10, 4)])
def test_page_counts_are_consistent(streams, limit: int, offset: int) -> None:
    page = paginate_activity(*streams, limit=limit, offset=offset)

    assert len(page.items) <= limit
    assert offset + len(page.items) <= page.total
    assert page.has_more == (offset + len(page.items) < page.total)


def test_equal_timestamps_put_announcements_first_then_id_descending() -> None:
    moment = _day(1)
    announcements = [_announcement(9, moment), _announcement(4, moment)]
    comments = [_comment(7, moment), _comment(5, moment)]

    merged = merge_activity_streams(announcements, comments)
    again = merge_activity_streams(announcements, comments)

    assert [item.key for item in merged] == [
        ("announcement", 9),
        ("announcement", 4),
        ("comment", 7),
        ("comment", 5),
    ]
    assert merged == again


def test_merge_with_one_empty_stream(streams) -> None:
    announcements, comments = streams

    assert merge_activity_streams(announcements, []) == announcements
    assert merge_activity_streams([], comments) == comments
    assert merge_activity_streams([], []) == []


def test_invalid_window_is_rejected(streams) -> None:
    with pytest.raises(ValueError):
        paginate_activity(*streams, limit=0, offset=0)
    with pytest.raises(ValueError):
        paginate_activity(*streams, limit=1, offset=-1)


def test_announcements_never_expose_comment_attributes(streams) -> None:
    page = paginate_activity(*streams, limit=10, offset=0)

    for item in page.items:
        if item.kind is ActivityKind.ANNOUNCEMENT:
            assert item.tags == ()
            assert item.animal is None
            assert item.metadata is None


def test_summary_counts_concerns_and_poor_sessions() -> None:
    items = [
        _comment(1, _day(1), SessionMetadata(behavior_notes="jumpy", session_rating=2)),
        _comment(2, _day(2), SessionMetadata(medical_notes="limping", session_rating=5)),
        _comment(3, _day(3), SessionMetadata(session_rating=1)),
        _comment(4, _day(4)),
        _announcement(1, _day(5)),
    ]

    summary = summarize_activity(items)

    assert summary.behavior_concerns_count == 1
    assert summary.medical_concerns_count == 1
    assert summary.poor_sessions_count == 2

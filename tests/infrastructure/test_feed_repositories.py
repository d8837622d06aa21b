"""Tests for the announcement and comment read paths of the feed."""

from __future__ import annotations

from datetime import datetime

from volunteer_api.application.use_cases.activity_feed import parse_feed_filter
from volunteer_api.infrastructure.repositories import (
    AnimalCommentRepository,
    GroupUpdateRepository,
)


def _group_with_author(seeder):
    group = seeder.group("Dogs")
    author = seeder.user("coordinator", groups=(group,), first_name="Ana", last_name="Ruiz")
    return group, author


def test_announcements_are_scoped_sorted_and_skip_soft_deleted(db_session, seeder) -> None:
    group, author = _group_with_author(seeder)
    other_group = seeder.group("Cats")
    older = seeder.announcement(group, author, datetime(2024, 5, 1, 9))
    newer = seeder.announcement(group, author, datetime(2024, 5, 2, 9), image_url="https://cdn/x.png")
    same_time = seeder.announcement(group, author, datetime(2024, 5, 2, 9))
    seeder.announcement(group, author, datetime(2024, 5, 3), deleted=True)
    seeder.announcement(other_group, author, datetime(2024, 5, 4))

    updates, count = GroupUpdateRepository(db_session).list_for_feed(
        group.id, parse_feed_filter()
    )

    assert [update.id for update in updates] == [same_time.id, newer.id, older.id]
    assert count == 3
    assert updates[1].image_url == "https://cdn/x.png"
    assert updates[0].author.display_name == "Ana Ruiz"
    assert updates[0].created_at.tzinfo is not None


def test_announcements_are_empty_when_comment_only_filters_are_set(db_session, seeder) -> None:
    group, author = _group_with_author(seeder)
    seeder.announcement(group, author, datetime(2024, 5, 1))
    repository = GroupUpdateRepository(db_session)

    for kwargs in ({"tags": "behavior"}, {"animal": "1"}, {"rating": "poor"}, {"feed_type": "comments"}):
        updates, count = repository.list_for_feed(group.id, parse_feed_filter(**kwargs))
        assert updates == []
        assert count == 0


def test_comments_cover_only_live_animals_of_the_group(db_session, seeder) -> None:
    group, author = _group_with_author(seeder)
    rex = seeder.animal(group, "Rex", image_url="https://cdn/rex.png")
    gone = seeder.animal(group, "Ghost", deleted=True)
    outsider = seeder.animal(seeder.group("Cats"), "Tom")
    kept = seeder.comment(rex, author, datetime(2024, 5, 1))
    seeder.comment(rex, author, datetime(2024, 5, 2), deleted=True)
    seeder.comment(gone, author, datetime(2024, 5, 3))
    seeder.comment(outsider, author, datetime(2024, 5, 4))

    comments, count = AnimalCommentRepository(db_session).list_for_feed(
        group.id, parse_feed_filter()
    )

    assert [comment.id for comment in comments] == [kept.id]
    assert count == 1
    assert comments[0].animal.name == "Rex"
    assert comments[0].animal.image_url == "https://cdn/rex.png"


def test_comment_tag_filter_matches_any_requested_tag(db_session, seeder) -> None:
    group, author = _group_with_author(seeder)
    rex = seeder.animal(group)
    behavior = seeder.tag(group, "behavior")
    medical = seeder.tag(group, "medical", color="#3b82f6")
    only_behavior = seeder.comment(rex, author, datetime(2024, 5, 1), tags=(behavior,))
    only_medical = seeder.comment(rex, author, datetime(2024, 5, 2), tags=(medical,))
    both = seeder.comment(rex, author, datetime(2024, 5, 3), tags=(behavior, medical))
    seeder.comment(rex, author, datetime(2024, 5, 4))

    comments, count = AnimalCommentRepository(db_session).list_for_feed(
        group.id, parse_feed_filter(tags="behavior,medical")
    )

    assert [comment.id for comment in comments] == [both.id, only_medical.id, only_behavior.id]
    assert count == 3
    assert [tag.name for tag in comments[0].tags] == ["behavior", "medical"]


def test_soft_deleted_tags_neither_match_nor_display(db_session, seeder) -> None:
    group, author = _group_with_author(seeder)
    rex = seeder.animal(group)
    retired = seeder.tag(group, "retired", deleted=True)
    walk = seeder.tag(group, "walk")
    comment = seeder.comment(rex, author, datetime(2024, 5, 1), tags=(retired, walk))
    repository = AnimalCommentRepository(db_session)

    matched, _ = repository.list_for_feed(group.id, parse_feed_filter(tags="retired"))
    listed, _ = repository.list_for_feed(group.id, parse_feed_filter())

    assert matched == []
    assert listed[0].id == comment.id
    assert [tag.name for tag in listed[0].tags] == ["walk"]


def test_comment_rating_filters(db_session, seeder) -> None:
    group, author = _group_with_author(seeder)
    rex = seeder.animal(group)
    rated_one = seeder.comment(rex, author, datetime(2024, 5, 1), metadata={"session_rating": 1})
    rated_three = seeder.comment(rex, author, datetime(2024, 5, 2), metadata={"session_rating": 3})
    seeder.comment(rex, author, datetime(2024, 5, 3), metadata={"session_rating": 5})
    seeder.comment(rex, author, datetime(2024, 5, 4), metadata={"behavior_notes": "calm"})
    seeder.comment(rex, author, datetime(2024, 5, 5))
    repository = AnimalCommentRepository(db_session)

    poor, poor_count = repository.list_for_feed(
        group.id, parse_feed_filter(feed_type="comments", rating="poor")
    )
    exact, _ = repository.list_for_feed(group.id, parse_feed_filter(rating="3"))

    assert [comment.id for comment in poor] == [rated_one.id]
    assert poor_count == 1
    assert [comment.id for comment in exact] == [rated_three.id]
    assert exact[0].metadata.session_rating == 3


def test_comment_animal_and_date_filters(db_session, seeder) -> None:
    group, author = _group_with_author(seeder)
    rex = seeder.animal(group, "Rex")
    luna = seeder.animal(group, "Luna")
    start_of_day = seeder.comment(rex, author, datetime(2024, 5, 2, 0, 0))
    end_of_day = seeder.comment(rex, author, datetime(2024, 5, 2, 23, 59, 59))
    seeder.comment(rex, author, datetime(2024, 5, 3, 0, 0))
    seeder.comment(rex, author, datetime(2024, 5, 1, 23, 59))
    seeder.comment(luna, author, datetime(2024, 5, 2, 12))

    comments, count = AnimalCommentRepository(db_session).list_for_feed(
        group.id,
        parse_feed_filter(animal=str(rex.id), date_from="2024-05-02", date_to="2024-05-02"),
    )

    assert [comment.id for comment in comments] == [end_of_day.id, start_of_day.id]
    assert count == 2


def test_comments_are_empty_when_only_announcements_are_requested(db_session, seeder) -> None:
    group, author = _group_with_author(seeder)
    seeder.comment(seeder.animal(group), author, datetime(2024, 5, 1))

    comments, count = AnimalCommentRepository(db_session).list_for_feed(
        group.id, parse_feed_filter(feed_type="announcements")
    )

    assert comments == []
    assert count == 0

import itertools

import pytest

from src.models.diary import Like
from src.services.diaries import create_diary, privacy_flag
from src.services.feed import list_diaries, writer_fields


@pytest.fixture
def people(make_user):
    return {name: make_user(name) for name in ("alice", "bob", "admin")}


def test_private_diary_visibility(db, people):
    alice, bob, admin = people["alice"], people["bob"], people["admin"]
    secret = create_diary(db, alice, "비밀 일기", mood="sad", is_private=1)

    assert secret.id not in [d.id for d in list_diaries(db, bob)]
    assert secret.id in [d.id for d in list_diaries(db, alice)]
    assert secret.id in [d.id for d in list_diaries(db, admin)]


def test_visibility_rule_for_every_viewer(db, people):
    diaries = []
    for owner, private in itertools.product(people.values(), (0, 1)):
        diaries.append(create_diary(db, owner, f"{owner.username}-{private}", is_private=private))

    for viewer in people.values():
        visible = {d.id for d in list_diaries(db, viewer)}
        for d in diaries:
            expected = d.is_private == 0 or d.owner_id == viewer.id or viewer.username == "admin"
            assert (d.id in visible) == expected


def test_default_order_is_newest_first_and_reversible(db, people):
    alice = people["alice"]
    first = create_diary(db, alice, "1")
    second = create_diary(db, alice, "2")
    third = create_diary(db, alice, "3")

    assert [d.id for d in list_diaries(db, alice)] == [third.id, second.id, first.id]
    assert [d.id for d in list_diaries(db, alice, sort="oldest")] == [first.id, second.id, third.id]


def test_mood_filter(db, people):
    alice = people["alice"]
    happy = create_diary(db, alice, "좋은 날", mood="happy")
    create_diary(db, alice, "우울", mood="sad")

    assert [d.id for d in list_diaries(db, alice, mood="happy")] == [happy.id]
    assert len(list_diaries(db, alice, mood="all")) == 2
    assert list_diaries(db, alice, mood="angry") == []


def test_decoration_like_count_and_viewer_state(db, people):
    alice, bob = people["alice"], people["bob"]
    diary = create_diary(db, alice, "hello")
    db.add_all([
        Like(diary_id=diary.id, owner_id=alice.id),
        Like(diary_id=diary.id, owner_id=bob.id),
    ])
    db.commit()
    lonely = create_diary(db, bob, "no likes")

    items = {d.id: d for d in list_diaries(db, alice)}
    assert items[diary.id].like_count == 2
    assert items[diary.id].is_liked is True
    assert items[diary.id].user == "alice"
    assert items[diary.id].display_name == "alice"
    assert items[lonely.id].like_count == 0
    assert items[lonely.id].is_liked is False


def test_writer_fields_fallback_for_missing_writer():
    assert writer_fields(None) == {
        "user": None,
        "display_name": "알 수 없음",
        "profile_img": None,
    }


def test_empty_feed(db, people):
    assert list_diaries(db, people["bob"]) == []


@pytest.mark.parametrize(
    "raw, expected",
    [("0", 0), ("1", 1), ("", 0), ("true", 1), ("false", 0), (0, 0), (1, 1), (True, 1)],
)
def test_privacy_flag(raw, expected):
    assert privacy_flag(raw) == expected

from sqlalchemy import func, select

from src.db.database import SessionLocal
from src.models.diary import Comment, Like


def _post_diary(client, headers, content, **fields):
    data = {"content": content, **fields}
    return client.post("/diary", data=data, headers=headers)


def test_private_diary_end_to_end(client, login):
    alice = login("alice")
    bob = login("bob")
    admin = login("admin")

    res = _post_diary(client, alice, "비밀", user="alice", mood="sad", is_private="1")
    assert res.json() == {"success": True}

    assert client.get("/diaries/bob", headers=bob).json() == []
    mine = client.get("/diaries/alice", headers=alice).json()
    assert [d["content"] for d in mine] == ["비밀"]
    assert mine[0]["is_private"] == 1
    assert mine[0]["user"] == "alice"
    assert len(client.get("/diaries/admin", headers=admin).json()) == 1


def test_feed_for_another_viewer_is_forbidden(client, login):
    alice = login("alice")
    login("bob")
    assert client.get("/diaries/bob", headers=alice).status_code == 403


def test_diary_with_image_sort_and_mood(client, login):
    alice = login("alice")
    _post_diary(client, alice, "첫번째", mood="happy")
    client.post(
        "/diary",
        data={"content": "두번째", "mood": "sad"},
        files={"image": ("pic.jpg", b"jpeg-bytes", "image/jpeg")},
        headers=alice,
    )

    feed = client.get("/diaries/alice", headers=alice).json()
    assert [d["content"] for d in feed] == ["두번째", "첫번째"]
    assert feed[0]["image"].startswith("data:image/jpeg;base64,")
    assert feed[1]["image"] is None
    assert feed[1]["is_private"] == 0

    oldest = client.get("/diaries/alice?sort=oldest", headers=alice).json()
    assert [d["content"] for d in oldest] == ["첫번째", "두번째"]

    happy = client.get("/diaries/alice?mood=happy", headers=alice).json()
    assert [d["content"] for d in happy] == ["첫번째"]


def test_post_diary_as_someone_else_is_forbidden(client, login):
    alice = login("alice")
    login("bob")
    res = _post_diary(client, alice, "사칭", user="bob")
    assert res.status_code == 403


def test_like_toggle_endpoint(client, login):
    alice = login("alice")
    bob = login("bob")
    _post_diary(client, alice, "hello")
    diary_id = client.get("/diaries/alice", headers=alice).json()[0]["id"]

    assert client.post("/diary/like", json={"diary_id": diary_id, "user": "bob"}, headers=bob).json() == {"liked": True}
    item = client.get("/diaries/bob", headers=bob).json()[0]
    assert item["like_count"] == 1
    assert item["is_liked"] is True

    assert client.post("/diary/like", json={"diary_id": diary_id}, headers=bob).json() == {"liked": False}
    item = client.get("/diaries/bob", headers=bob).json()[0]
    assert item["like_count"] == 0
    assert item["is_liked"] is False

    res = client.post("/diary/like", json={"diary_id": 9999}, headers=bob)
    assert res.status_code == 404


def test_comments_update_and_delete(client, login):
    alice = login("alice")
    bob = login("bob")
    _post_diary(client, alice, "hello")
    diary_id = client.get("/diaries/alice", headers=alice).json()[0]["id"]

    client.post("/comment", json={"diary_id": diary_id, "user": "bob", "content": "좋아요"}, headers=bob)
    client.post("/diary/like", json={"diary_id": diary_id}, headers=bob)
    comments = client.get(f"/comments/{diary_id}", headers=alice).json()
    assert [(c["user"], c["content"]) for c in comments] == [("bob", "좋아요")]
    assert comments[0]["display_name"] == "bob"

    res = client.put(
        f"/diary/{diary_id}",
        json={"content": "수정됨", "mood": "calm", "is_private": 1},
        headers=bob,
    )
    assert res.status_code == 403

    res = client.put(
        f"/diary/{diary_id}",
        json={"content": "수정됨", "mood": "calm", "is_private": 1},
        headers=alice,
    )
    assert res.status_code == 200
    assert client.get("/diaries/bob", headers=bob).json() == []

    assert client.delete(f"/diary/{diary_id}", headers=bob).status_code == 403
    assert client.delete(f"/diary/{diary_id}", headers=alice).json() == {"success": True}
    assert client.get(f"/comments/{diary_id}", headers=alice).json() == []

    with SessionLocal() as session:
        assert session.execute(
            select(func.count(Comment.id)).where(Comment.diary_id == diary_id)
        ).scalar_one() == 0
        assert session.execute(
            select(func.count(Like.id)).where(Like.diary_id == diary_id)
        ).scalar_one() == 0


def test_put_diary_rejects_bad_privacy_flag(client, login):
    alice = login("alice")
    _post_diary(client, alice, "hello")
    diary_id = client.get("/diaries/alice", headers=alice).json()[0]["id"]

    res = client.put(f"/diary/{diary_id}", json={"content": "x", "is_private": 5}, headers=alice)
    assert res.status_code == 422


def test_oversized_image_rejected(client, login, monkeypatch):
    from src.config.settings import settings

    monkeypatch.setattr(settings, "max_image_bytes", 4)
    alice = login("alice")
    res = client.post(
        "/diary",
        data={"content": "big"},
        files={"image": ("pic.jpg", b"0123456789", "image/jpeg")},
        headers=alice,
    )
    assert res.status_code == 400

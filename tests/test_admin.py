from src.services.admin import latest_notice, post_notice, stats, user_detail
from src.services.diaries import create_diary
from src.services.questions import seed_default_question, submit_answer


def test_user_detail_redaction(db, make_user):
    alice = make_user("alice")
    create_diary(db, alice, "hello")
    submit_answer(db, seed_default_question(db).id, alice, "답")

    public = user_detail(db, "alice", viewer_is_admin=False).model_dump()
    assert set(public) == {"display_name", "bio", "profile_img"}

    full = user_detail(db, "alice", viewer_is_admin=True).model_dump()
    assert full["username"] == "alice"
    assert full["password"].startswith("pbkdf2:sha256")
    assert full["ip_address"] == "127.0.0.1"
    assert full["diary_count"] == 1
    assert full["answer_count"] == 1

    assert user_detail(db, "ghost", viewer_is_admin=True) is None


def test_stats(db, make_user):
    alice = make_user("alice")
    make_user("bob")
    create_diary(db, alice, "1")

    result = stats(db)
    assert (result.user_count, result.diary_count) == (2, 1)


def test_latest_notice_only(db):
    assert latest_notice(db) is None
    post_notice(db, "첫 공지")
    post_notice(db, "두번째 공지")
    assert latest_notice(db).content == "두번째 공지"


def test_admin_api_requires_admin(client, login):
    user_headers = login("alice")
    assert client.get("/admin/stats", headers=user_headers).status_code == 403
    assert client.get("/admin/users", headers=user_headers).status_code == 403
    res = client.post("/admin/notice", json={"content": "x"}, headers=user_headers)
    assert res.status_code == 403

    admin_headers = login("admin")
    res = client.get("/admin/stats", headers=admin_headers)
    assert res.status_code == 200
    assert res.json() == {"userCount": 2, "diaryCount": 0}

    roster = client.get("/admin/users", headers=admin_headers).json()
    assert {"username": "alice", "display_name": "alice"} in roster


def test_admin_user_detail_api(client, login):
    alice_headers = login("alice")
    admin_headers = login("admin")

    public = client.get("/admin/user/admin?viewer=admin", headers=alice_headers).json()
    assert "password" not in public
    assert "ip_address" not in public

    full = client.get("/admin/user/alice", headers=admin_headers).json()
    assert "password" in full
    assert "ip_address" in full

    assert client.get("/admin/user/ghost", headers=admin_headers).json() == {}


def test_notice_api(client, login):
    admin_headers = login("admin")
    user_headers = login("alice")

    assert client.get("/notices", headers=user_headers).json() == {}

    client.post("/admin/notice", json={"content": "점검 안내"}, headers=admin_headers)
    client.post("/admin/notice", json={"content": "새 공지"}, headers=admin_headers)
    notice = client.get("/notices", headers=user_headers).json()
    assert notice["content"] == "새 공지"

    res = client.delete(f"/admin/notice/{notice['id']}", headers=admin_headers)
    assert res.json() == {"success": True}
    assert client.get("/notices", headers=user_headers).json()["content"] == "점검 안내"


def test_question_admin_api(client, login):
    admin_headers = login("admin")

    res = client.post("/admin/questions/reserve", json={"text": "내일 질문"}, headers=admin_headers)
    assert res.status_code == 400

    res = client.post(
        "/admin/questions/reserve",
        json={"text": "예약 질문", "date": "2999-01-01"},
        headers=admin_headers,
    )
    assert res.status_code == 200

    questions = client.get("/questions", headers=admin_headers).json()
    assert questions[0]["date"] == "2999. 01. 01"
    # 기본 시드 질문 + 예약 질문
    assert len(questions) == 2

    res = client.delete(f"/admin/question/{questions[0]['id']}", headers=admin_headers)
    assert res.status_code == 200
    assert len(client.get("/questions", headers=admin_headers).json()) == 1

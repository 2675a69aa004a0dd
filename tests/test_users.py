import pytest
from sqlalchemy import UniqueConstraint, func, select

from src.models.users import User
from src.services import users as users_service
from src.services.errors import DuplicateIdentity, ValidationError
from src.services.users import register_user, update_profile


def test_concurrent_register_raises_duplicate(db, make_user, monkeypatch):
    # 중복 확인을 통과한 뒤 다른 요청이 먼저 가입한 상황 재현
    make_user("alice")
    monkeypatch.setattr(users_service, "get_user_by_username", lambda *args: None)

    with pytest.raises(DuplicateIdentity):
        register_user(db, "alice", "pw2")

    monkeypatch.undo()
    assert db.execute(select(func.count(User.id)).where(User.username == "alice")).scalar_one() == 1
    # rollback 후에도 세션은 계속 사용 가능
    assert register_user(db, "bob", "pw").username == "bob"


def test_register_requires_username_and_password(db):
    with pytest.raises(ValidationError):
        register_user(db, "", "pw")
    with pytest.raises(ValidationError):
        register_user(db, "alice", "")


def test_register_keeps_username_as_given(db):
    user = register_user(db, " alice ", "pw")
    assert user.username == " alice "
    assert user.display_name == " alice "


def test_update_profile_always_overwrites_name_and_bio(db, make_user):
    alice = make_user("alice")
    update_profile(db, alice, "앨리스", "소개", "data:image/png;base64,AAAA")

    update_profile(db, alice, "", None)
    db.refresh(alice)
    assert alice.display_name == ""
    assert alice.bio is None
    assert alice.profile_img == "data:image/png;base64,AAAA"


def test_username_has_single_unique_constraint():
    table = User.__table__
    assert not table.c.username.unique
    assert not table.c.username.index
    assert not [i for i in table.indexes if "username" in i.columns]

    uniques = [
        c.name
        for c in table.constraints
        if isinstance(c, UniqueConstraint) and [col.name for col in c.columns] == ["username"]
    ]
    assert uniques == ["uq_users_username"]

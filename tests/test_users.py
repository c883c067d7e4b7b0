from datetime import date, timedelta

import pytest
from pydantic import ValidationError

from filmorate.api.friends.schemas import FriendStatus
from filmorate.api.users.schemas import UserCreate, UserUpdate
from filmorate.core.exceptions import NotFoundError, DuplicatedDataError, ConditionsNotMetError
from factories import make_user


def test_create_assigns_sequential_ids(user_service):
    first = user_service.create(make_user(1))
    second = user_service.create(make_user(2))

    assert first.id == 1
    assert second.id == 2
    assert second.friends == {}
    assert [user.id for user in user_service.find_all()] == [1, 2]


def test_created_user_reads_back_unchanged(user_service):
    source = make_user(3)

    stored = user_service.find_by_id(user_service.create(source).id)

    assert stored.email == source.email
    assert stored.login == source.login
    assert stored.name == source.name
    assert stored.birthday == source.birthday
    assert stored.friends == {}


def test_blank_name_is_replaced_by_login(user_service):
    user = user_service.create(make_user(1, name="   "))
    assert user.name == "user1"

    user = user_service.create(make_user(2, name=None))
    assert user.name == "user2"


def test_duplicate_email_is_rejected(user_service):
    user_service.create(make_user(1))

    with pytest.raises(DuplicatedDataError):
        user_service.create(make_user(2, email="user1@mail.ru"))
    assert len(user_service.find_all()) == 1


def test_update_changes_only_given_fields(user_service):
    user_service.create(make_user(1))

    updated = user_service.update(UserUpdate(id=1, name="Новое имя"))

    assert updated.name == "Новое имя"
    assert updated.email == "user1@mail.ru"
    assert user_service.find_by_id(1).name == "Новое имя"


def test_update_requires_existing_id(user_service):
    with pytest.raises(ConditionsNotMetError):
        user_service.update(UserUpdate(name="Без id"))
    with pytest.raises(NotFoundError):
        user_service.update(UserUpdate(id=42, name="Нет такого"))


def test_update_email_taken_by_other_user(user_service):
    user_service.create(make_user(1))
    user_service.create(make_user(2))

    with pytest.raises(DuplicatedDataError):
        user_service.update(UserUpdate(id=2, email="user1@mail.ru"))
    # свой же email - не конфликт
    assert user_service.update(UserUpdate(id=1, email="user1@mail.ru")).id == 1


def test_remove_returns_snapshot(user_service):
    user_service.create(make_user(1))

    removed = user_service.remove_by_id(1)

    assert removed.login == "user1"
    with pytest.raises(NotFoundError):
        user_service.find_by_id(1)
    with pytest.raises(NotFoundError):
        user_service.remove_by_id(1)


def test_unconfirmed_friendship_is_one_directional(user_service):
    user_service.create(make_user(1))
    user_service.create(make_user(2))

    user = user_service.add_friend(1, 2)

    assert user.friends == {2: FriendStatus.UNCONFIRMED}
    assert user_service.find_by_id(2).friends == {}
    assert [friend.id for friend in user_service.find_friends(1)] == [2]
    assert user_service.find_friends(2) == []


def test_confirmed_friendship_is_mutual(user_service):
    user_service.create(make_user(1))
    user_service.create(make_user(2))

    user_service.add_friend(1, 2, "confirmed")

    assert user_service.find_by_id(1).friends == {2: FriendStatus.CONFIRMED}
    assert user_service.find_by_id(2).friends == {1: FriendStatus.CONFIRMED}


def test_confirmed_friendship_is_not_downgraded(user_service):
    user_service.create(make_user(1))
    user_service.create(make_user(2))

    user_service.add_friend(1, 2, "CONFIRMED")
    user_service.add_friend(2, 1, "UNCONFIRMED")

    assert user_service.find_by_id(2).friends == {1: FriendStatus.CONFIRMED}


def test_remove_friend_downgrades_reverse_edge(user_service):
    user_service.create(make_user(1))
    user_service.create(make_user(2))
    user_service.add_friend(1, 2, "CONFIRMED")

    user = user_service.remove_friend(1, 2)

    assert user.friends == {}
    assert user_service.find_by_id(2).friends == {1: FriendStatus.UNCONFIRMED}


def test_friendship_errors(user_service):
    user_service.create(make_user(1))

    with pytest.raises(ConditionsNotMetError):
        user_service.add_friend(1, 1)
    with pytest.raises(NotFoundError):
        user_service.add_friend(1, 99)
    with pytest.raises(NotFoundError):
        user_service.find_friends(99)
    user_service.create(make_user(2))
    with pytest.raises(ConditionsNotMetError):
        user_service.add_friend(1, 2, "BEST")


def test_common_friends(user_service):
    for n in range(1, 5):
        user_service.create(make_user(n))
    user_service.add_friend(1, 3)
    user_service.add_friend(1, 4)
    user_service.add_friend(2, 4)
    user_service.add_friend(2, 3, "CONFIRMED")

    common = user_service.find_common_friends(1, 2)

    assert [user.id for user in common] == [3, 4]
    assert user_service.find_common_friends(3, 4) == []


def test_removed_user_disappears_from_friends(user_service):
    user_service.create(make_user(1))
    user_service.create(make_user(2))
    user_service.add_friend(1, 2, "CONFIRMED")

    user_service.remove_by_id(2)

    assert user_service.find_by_id(1).friends == {}


def test_user_validation():
    with pytest.raises(ValidationError):
        make_user(1, email="почта-без-собаки")
    for email in ("user@mail..ru", "a,b@c.d", "user@-mail.ru"):
        with pytest.raises(ValidationError):
            make_user(1, email=email)
    with pytest.raises(ValidationError):
        UserUpdate(id=1, email="user@mail..ru")
    with pytest.raises(ValidationError):
        make_user(1, login="два слова")
    with pytest.raises(ValidationError):
        make_user(1, birthday=date.today() + timedelta(days=1))
    assert make_user(1, birthday=date.today()).birthday == date.today()


def test_user_accepts_camel_case_and_snake_case():
    assert UserCreate.model_validate(
        {"email": "a@b.ru", "login": "a", "birthday": "2000-01-01"}
    ).name is None
    assert UserUpdate.model_validate({"id": 1, "birthday": "2000-01-01"}).birthday == date(2000, 1, 1)

import pytest

USER = {"email": "mail@mail.ru", "login": "dolore", "name": "Nick Name", "birthday": "1946-08-20"}
FRIEND = {"email": "friend@common.ru", "login": "friend", "name": "friend adipisicing", "birthday": "1976-08-20"}
FILM = {
    "name": "nisi eiusmod",
    "description": "adipisicing",
    "releaseDate": "1967-03-25",
    "duration": 100,
    "mpa": {"id": 1},
}


def test_create_user(client):
    response = client.post("/users", json=USER)

    assert response.status_code == 201
    body = response.json()
    assert body["id"] == 1
    assert body["login"] == "dolore"
    assert body["friends"] == {}


def test_create_user_without_name(client):
    response = client.post("/users", json={**USER, "name": ""})

    assert response.status_code == 201
    assert response.json()["name"] == "dolore"


@pytest.mark.parametrize("field, value", [
    ("email", "mail.ru"),
    ("email", "user@mail..ru"),
    ("login", "dolore ullamco"),
    ("birthday", "2446-08-20"),
])
def test_create_user_validation(client, field, value):
    response = client.post("/users", json={**USER, field: value})

    assert response.status_code == 400
    body = response.json()
    assert body["violations"][0]["fieldName"] == field
    assert client.get("/users").json() == []


def test_create_user_duplicate_email(client):
    client.post("/users", json=USER)

    response = client.post("/users", json={**FRIEND, "email": USER["email"]})

    assert response.status_code == 400
    assert response.json()["error"] == "Этот имейл уже используется"


def test_update_user(client):
    client.post("/users", json=USER)

    response = client.put("/users", json={"id": 1, "login": "doloreUpdate"})

    assert response.status_code == 200
    assert response.json()["login"] == "doloreUpdate"
    assert response.json()["email"] == USER["email"]
    assert client.put("/users", json={"id": 9999, "login": "x"}).status_code == 404


def test_get_unknown_user(client):
    response = client.get("/users/9999")

    assert response.status_code == 404
    assert "9999" in response.json()["error"]


def test_friends_flow(client):
    client.post("/users", json=USER)
    client.post("/users", json=FRIEND)
    client.post("/users", json={**FRIEND, "email": "common@mail.ru", "login": "common"})

    response = client.put("/users/1/friends/2")
    assert response.status_code == 200
    assert response.json()["friends"] == {"2": "UNCONFIRMED"}

    client.put("/users/1/friends/3", params={"status": "confirmed"})
    client.put("/users/2/friends/3")

    friends = client.get("/users/1/friends").json()
    assert [user["id"] for user in friends] == [2, 3]
    assert client.get("/users/3").json()["friends"] == {"1": "CONFIRMED"}

    common = client.get("/users/1/friends/common/2").json()
    assert [user["id"] for user in common] == [3]

    response = client.delete("/users/1/friends/3")
    assert response.status_code == 200
    assert response.json()["friends"] == {"2": "UNCONFIRMED"}
    assert client.get("/users/3").json()["friends"] == {"1": "UNCONFIRMED"}


def test_friend_errors(client):
    client.post("/users", json=USER)

    assert client.put("/users/1/friends/1").status_code == 400
    assert client.put("/users/1/friends/-1").status_code == 404
    assert client.get("/users/9999/friends").status_code == 404


def test_create_film(client):
    response = client.post("/films", json={**FILM, "genres": [{"id": 2}, {"id": 1}]})

    assert response.status_code == 201
    body = response.json()
    assert body["id"] == 1
    assert body["releaseDate"] == "1967-03-25"
    assert body["mpa"] == {"id": 1, "name": "G", "description": "у фильма нет возрастных ограничений"}
    assert [genre["id"] for genre in body["genres"]] == [1, 2]
    assert body["likes"] == []


@pytest.mark.parametrize("field, value", [
    ("name", ""),
    ("description", "d" * 201),
    ("releaseDate", "1890-03-25"),
    ("duration", -200),
])
def test_create_film_validation(client, field, value):
    response = client.post("/films", json={**FILM, field: value})

    assert response.status_code == 400
    assert client.get("/films").json() == []


def test_create_film_with_unknown_mpa(client):
    response = client.post("/films", json={**FILM, "mpa": {"id": 999}})

    assert response.status_code == 404
    assert response.json()["error"] == "Mpa не найден, указанный id = 999"
    assert client.get("/films").json() == []


def test_update_film(client):
    client.post("/films", json=FILM)

    response = client.put("/films", json={"id": 1, "name": "Film Updated", "genres": [{"id": 3}]})

    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Film Updated"
    assert body["duration"] == 100
    assert [genre["name"] for genre in body["genres"]] == ["Мультфильм"]
    assert client.put("/films", json={"id": 9999, "name": "x"}).status_code == 404
    assert client.put("/films", json={"name": "x"}).status_code == 400


def test_likes_and_popular(client):
    client.post("/users", json=USER)
    client.post("/users", json=FRIEND)
    for name in ("first", "second", "third"):
        client.post("/films", json={**FILM, "name": name})

    assert client.put("/films/2/like/1").json()["likes"] == [1]
    client.put("/films/2/like/2")
    client.put("/films/3/like/1")

    popular = client.get("/films/popular", params={"count": 2}).json()
    assert [film["id"] for film in popular] == [2, 3]
    assert [film["id"] for film in client.get("/films/popular").json()] == [2, 3, 1]

    assert client.delete("/films/2/like/2").json()["likes"] == [1]
    assert client.put("/films/2/like/9999").status_code == 404
    assert client.get("/films/popular", params={"count": 0}).status_code == 400


def test_delete_film(client):
    client.post("/films", json=FILM)

    response = client.delete("/films/1")

    assert response.status_code == 200
    assert response.json()["name"] == FILM["name"]
    assert client.get("/films/1").status_code == 404


def test_reference_data(client):
    genres = client.get("/genres").json()
    assert len(genres) == 6
    assert client.get("/genres/1").json() == {"id": 1, "name": "Комедия"}
    assert client.get("/mpa/5").json()["name"] == "NC-17"
    assert client.get("/mpa/99").status_code == 404


def test_reference_changes_require_admin_key(client, admin_headers):
    response = client.post("/genres", json={"name": "Ужасы"})
    assert response.status_code == 403
    assert response.json() == {"error": "Неверный ключ администратора", "status_code": 403}
    assert client.post("/genres", json={"name": "Ужасы"}, headers={"X-Admin-Key": "wrong"}).status_code == 403

    response = client.post("/genres", json={"name": "Ужасы"}, headers=admin_headers)
    assert response.status_code == 201
    assert response.json()["id"] == 7

    assert client.put("/mpa", json={"id": 1, "name": "G+"}, headers=admin_headers).json()["name"] == "G+"
    assert client.delete("/genres/7", headers=admin_headers).status_code == 200
    assert client.delete("/mpa/1").status_code == 403


def test_unknown_route(client):
    response = client.get("/nothing")

    assert response.status_code == 404
    assert response.json()["error"] == "Не найдено"


def test_health(client, db_client):
    assert client.get("/health").json() == {"status": "healthy", "storage": "memory"}
    assert db_client.get("/health").json() == {"status": "healthy", "storage": "db"}


def test_database_backend_end_to_end(db_client):
    db_client.post("/users", json=USER)
    db_client.post("/users", json=FRIEND)
    db_client.post("/films", json={**FILM, "genres": [{"id": 1}]})

    db_client.put("/users/1/friends/2", params={"status": "CONFIRMED"})
    db_client.put("/films/1/like/2")

    assert db_client.get("/users/2").json()["friends"] == {"1": "CONFIRMED"}
    assert db_client.get("/films/popular", params={"count": 1}).json()[0]["likes"] == [2]

    assert db_client.delete("/users/2").status_code == 200
    assert db_client.get("/users/1").json()["friends"] == {}
    assert db_client.get("/films/1").json()["likes"] == []

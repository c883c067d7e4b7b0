import pytest

from filmorate.api.genres.schemas import GenreCreate, GenreUpdate
from filmorate.api.mpa.schemas import MpaCreate, MpaUpdate
from filmorate.core.exceptions import NotFoundError, DuplicatedDataError, ConditionsNotMetError


def test_default_genres(genre_service):
    genres = genre_service.find_all()

    assert [genre.id for genre in genres] == [1, 2, 3, 4, 5, 6]
    assert genres[0].name == "Комедия"
    assert genre_service.find_by_id(6).name == "Боевик"


def test_default_mpa(mpa_service):
    ratings = mpa_service.find_all()

    assert [mpa.name for mpa in ratings] == ["G", "PG", "PG-13", "R", "NC-17"]
    assert mpa_service.find_by_id(1).description == "у фильма нет возрастных ограничений"


def test_genre_crud(genre_service):
    created = genre_service.create(GenreCreate(name="Ужасы"))
    assert created.id == 7

    with pytest.raises(DuplicatedDataError):
        genre_service.create(GenreCreate(name="Ужасы"))

    updated = genre_service.update(GenreUpdate(id=7, name="Хоррор"))
    assert updated.name == "Хоррор"
    assert genre_service.find_by_id(7).name == "Хоррор"

    with pytest.raises(DuplicatedDataError):
        genre_service.update(GenreUpdate(id=7, name="Драма"))
    with pytest.raises(ConditionsNotMetError):
        genre_service.update(GenreUpdate(name="Без id"))

    assert genre_service.remove_by_id(7).name == "Хоррор"
    with pytest.raises(NotFoundError):
        genre_service.find_by_id(7)
    with pytest.raises(NotFoundError):
        genre_service.remove_by_id(7)


def test_mpa_crud(mpa_service):
    created = mpa_service.create(MpaCreate(name="TV-MA", description="только для взрослых"))
    assert created.id == 6

    with pytest.raises(DuplicatedDataError):
        mpa_service.create(MpaCreate(name="G"))

    # пустое описание не затирает старое
    updated = mpa_service.update(MpaUpdate(id=6, name="TV-18", description=" "))
    assert updated.name == "TV-18"
    assert updated.description == "только для взрослых"

    with pytest.raises(NotFoundError):
        mpa_service.update(MpaUpdate(id=60, name="X"))

    mpa_service.remove_by_id(6)
    with pytest.raises(NotFoundError):
        mpa_service.find_by_id(6)

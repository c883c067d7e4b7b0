from sqlalchemy import Column, Integer, String, Date, ForeignKey, Table, Index
from sqlalchemy.orm import relationship

from filmorate.api.genres.models import Genre
from filmorate.api.mpa.models import Mpa
from filmorate.database.database import Base

film_genres = Table(
    "film_genres",
    Base.metadata,
    Column("film_id", ForeignKey("films.id", ondelete="CASCADE"), primary_key=True),
    Column("genre_id", ForeignKey("genres.id", ondelete="CASCADE"), primary_key=True),
)

# Один пользователь не может лайкнуть один фильм дважды
likes = Table(
    "likes",
    Base.metadata,
    Column("film_id", ForeignKey("films.id", ondelete="CASCADE"), primary_key=True),
    Column("user_id", ForeignKey("users.id", ondelete="CASCADE"), primary_key=True),
    Index("idx_likes_user", "user_id"),
)


class Film(Base):
    """
    Таблица фильмов
    """
    __tablename__ = "films"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    description = Column(String(200))
    release_date = Column(Date, nullable=False)
    duration = Column(Integer, nullable=False)
    mpa_id = Column(Integer, ForeignKey("mpa.id", ondelete="SET NULL"), nullable=True)

    mpa = relationship(Mpa, lazy="joined")
    genres = relationship(Genre, secondary=film_genres, order_by=Genre.id, passive_deletes=True)

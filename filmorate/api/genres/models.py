from sqlalchemy import Column, Integer, String

from filmorate.database.database import Base


class Genre(Base):
    """
    Справочник жанров
    """
    __tablename__ = "genres"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), unique=True, nullable=False)

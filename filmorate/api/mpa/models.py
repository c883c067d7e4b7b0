from sqlalchemy import Column, Integer, String

from filmorate.database.database import Base


class Mpa(Base):
    """
    Справочник возрастных рейтингов MPA
    """
    __tablename__ = "mpa"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(20), unique=True, nullable=False)
    description = Column(String(255))

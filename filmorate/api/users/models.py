from sqlalchemy import Column, Integer, String, Date

from filmorate.database.database import Base


class User(Base):
    """
    Таблица пользователей
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), unique=True, index=True, nullable=False)
    login = Column(String(50), nullable=False)
    name = Column(String(100), nullable=False)
    birthday = Column(Date, nullable=False)

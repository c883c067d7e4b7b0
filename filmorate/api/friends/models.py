from sqlalchemy import Column, Integer, String, ForeignKey, CheckConstraint

from filmorate.database.database import Base


class Friendship(Base):
    """
    Направленная связь дружбы: владелец (user_id) -> друг (friend_id)
    """
    __tablename__ = "friends"

    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)
    friend_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)
    status = Column(String(20), nullable=False, default="UNCONFIRMED")  # UNCONFIRMED, CONFIRMED

    __table_args__ = (
        CheckConstraint("user_id <> friend_id", name="ck_friends_not_self"),
    )

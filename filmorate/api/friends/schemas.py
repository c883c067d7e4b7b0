from enum import Enum


class FriendStatus(str, Enum):
    UNCONFIRMED = "UNCONFIRMED"
    CONFIRMED = "CONFIRMED"

    @classmethod
    def parse(cls, value: str) -> "FriendStatus":
        """Статус из строки запроса, регистр не важен."""
        return cls(value.strip().upper())

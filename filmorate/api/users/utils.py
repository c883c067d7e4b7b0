import logging

from filmorate.api.users.schemas import User, UserUpdate

logger = logging.getLogger(__name__)

USER_FIELDS = ("email", "login", "name", "birthday")


def update_user_fields(old_user: User, new_user: UserUpdate) -> User:
    """Переносит в old_user все непустые (не None) поля new_user."""
    for field in USER_FIELDS:
        value = getattr(new_user, field)
        if value is not None:
            logger.info(f"Updating user {old_user.id} with {field}: {value}")
            setattr(old_user, field, value)
    return old_user

from fastapi import status


class FilmorateError(Exception):
    """Базовая ошибка приложения. Код ответа определяется подклассом."""
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(FilmorateError):
    status_code = status.HTTP_404_NOT_FOUND


class DuplicatedDataError(FilmorateError):
    status_code = status.HTTP_400_BAD_REQUEST


class ConditionsNotMetError(FilmorateError):
    status_code = status.HTTP_400_BAD_REQUEST


class ForbiddenError(FilmorateError):
    status_code = status.HTTP_403_FORBIDDEN


class InternalServerError(FilmorateError):
    """Хранилище отработало не так, как ожидалось (не та строка, нет ключа)."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

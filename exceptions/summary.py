from http import HTTPStatus

from exceptions.base import BaseError


class EmptyInputError(BaseError):
    def __init__(
        self,
        message: str = "Input text is required",
        status_code: HTTPStatus = HTTPStatus.BAD_REQUEST,
    ):
        super().__init__(message=message, status_code=status_code)


class WordLimitExceededError(BaseError):
    def __init__(
        self,
        count: int,
        limit: int,
        status_code: HTTPStatus = HTTPStatus.BAD_REQUEST,
    ):
        self.count = count
        self.limit = limit
        super().__init__(
            message=(
                f"Input has {count} words and exceeds the {limit} words limit. "
                "Please shorten your text."
            ),
            status_code=status_code,
        )

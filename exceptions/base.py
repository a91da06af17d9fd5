from http import HTTPStatus


class BaseError(Exception):
    def __init__(
        self,
        message: str = "Internal server error",
        status_code: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR,
    ):
        self.message = message
        self.status_code = status_code
        super().__init__(message)

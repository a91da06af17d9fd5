from http import HTTPStatus

from exceptions.base import BaseError


class TokenMissingError(BaseError):
    def __init__(
        self,
        message: str = "No token provided",
        status_code: HTTPStatus = HTTPStatus.UNAUTHORIZED,
    ):
        super().__init__(message=message, status_code=status_code)


class TokenInvalidError(BaseError):
    def __init__(
        self,
        message: str = "Token signature is invalid",
        status_code: HTTPStatus = HTTPStatus.UNAUTHORIZED,
    ):
        super().__init__(message=message, status_code=status_code)


class TokenExpiredError(BaseError):
    def __init__(
        self,
        message: str = "Token has expired",
        status_code: HTTPStatus = HTTPStatus.UNAUTHORIZED,
    ):
        super().__init__(message=message, status_code=status_code)


class TokenMalformedError(BaseError):
    def __init__(
        self,
        message: str = "Token is malformed",
        status_code: HTTPStatus = HTTPStatus.UNAUTHORIZED,
    ):
        super().__init__(message=message, status_code=status_code)


class UserAlreadyExistsError(BaseError):
    def __init__(
        self,
        message: str = "Username already exists",
        status_code: HTTPStatus = HTTPStatus.BAD_REQUEST,
    ):
        super().__init__(message=message, status_code=status_code)


class InvalidCredentialsError(BaseError):
    def __init__(
        self,
        message: str = "Invalid username or password",
        status_code: HTTPStatus = HTTPStatus.BAD_REQUEST,
    ):
        super().__init__(message=message, status_code=status_code)

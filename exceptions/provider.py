from http import HTTPStatus

from exceptions.base import BaseError


class ProviderUnavailableError(BaseError):
    def __init__(
        self,
        message: str = "Summarization provider is unavailable",
        status_code: HTTPStatus = HTTPStatus.BAD_GATEWAY,
    ):
        super().__init__(message=message, status_code=status_code)


class ProviderMalformedResponseError(BaseError):
    def __init__(
        self,
        message: str = "Unexpected response format from summarization provider",
        status_code: HTTPStatus = HTTPStatus.BAD_GATEWAY,
    ):
        super().__init__(message=message, status_code=status_code)


class ProviderTimeoutError(BaseError):
    def __init__(
        self,
        message: str = "Summarization provider timed out",
        status_code: HTTPStatus = HTTPStatus.GATEWAY_TIMEOUT,
    ):
        super().__init__(message=message, status_code=status_code)


class ProviderConfigError(BaseError):
    def __init__(
        self,
        message: str = "Summarization provider is not configured",
        status_code: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR,
    ):
        super().__init__(message=message, status_code=status_code)

from http import HTTPStatus

from exceptions.base import BaseError


class DocumentMissingError(BaseError):
    def __init__(
        self,
        message: str = "No file uploaded",
        status_code: HTTPStatus = HTTPStatus.BAD_REQUEST,
    ):
        super().__init__(message=message, status_code=status_code)


class DocumentTooLargeError(BaseError):
    def __init__(
        self,
        message: str = "Document is empty or too large",
        status_code: HTTPStatus = HTTPStatus.REQUEST_ENTITY_TOO_LARGE,
    ):
        super().__init__(message=message, status_code=status_code)


class DocumentNotSupportedError(BaseError):
    def __init__(
        self,
        message: str = "Please upload a PDF, DOCX, or TXT file",
        status_code: HTTPStatus = HTTPStatus.BAD_REQUEST,
    ):
        super().__init__(message=message, status_code=status_code)


class DocumentCorruptedError(BaseError):
    def __init__(
        self,
        message: str = "Document could not be parsed",
        status_code: HTTPStatus = HTTPStatus.UNPROCESSABLE_ENTITY,
    ):
        super().__init__(message=message, status_code=status_code)


class DocumentReadError(BaseError):
    def __init__(
        self,
        message: str = "Document could not be read",
        status_code: HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR,
    ):
        super().__init__(message=message, status_code=status_code)

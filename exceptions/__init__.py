from exceptions.auth import (
    InvalidCredentialsError,
    TokenExpiredError,
    TokenInvalidError,
    TokenMalformedError,
    TokenMissingError,
    UserAlreadyExistsError,
)
from exceptions.base import BaseError
from exceptions.document import (
    DocumentCorruptedError,
    DocumentMissingError,
    DocumentNotSupportedError,
    DocumentReadError,
    DocumentTooLargeError,
)
from exceptions.provider import (
    ProviderConfigError,
    ProviderMalformedResponseError,
    ProviderTimeoutError,
    ProviderUnavailableError,
)
from exceptions.summary import EmptyInputError, WordLimitExceededError

__all__ = [
    "BaseError",
    "TokenMissingError",
    "TokenInvalidError",
    "TokenExpiredError",
    "TokenMalformedError",
    "UserAlreadyExistsError",
    "InvalidCredentialsError",
    "DocumentMissingError",
    "DocumentTooLargeError",
    "DocumentNotSupportedError",
    "DocumentCorruptedError",
    "DocumentReadError",
    "EmptyInputError",
    "WordLimitExceededError",
    "ProviderUnavailableError",
    "ProviderMalformedResponseError",
    "ProviderTimeoutError",
    "ProviderConfigError",
]

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from exceptions import TokenMissingError
from schemas import Identity
from usecases import AuthUsecase
from utils import decode_access_token

bearer_scheme = HTTPBearer(auto_error=False)


def get_auth_usecase() -> AuthUsecase:
    """Get the auth usecase.

    Returns:
        The auth usecase.

    """
    return AuthUsecase()


def get_identity(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(dependency=bearer_scheme)
    ],
) -> Identity:
    """Resolve the identity behind the bearer token of the request.

    Args:
        credentials: The bearer credentials from the Authorization header.

    Returns:
        The authenticated identity.

    """
    if credentials is None or not credentials.credentials:
        raise TokenMissingError

    return decode_access_token(token=credentials.credentials)

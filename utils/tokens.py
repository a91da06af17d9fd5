from datetime import UTC, datetime, timedelta

import jwt

from constants import TOKEN_EXPIRY_CLAIM, TOKEN_ISSUED_AT_CLAIM, TOKEN_SUBJECT_CLAIM
from exceptions import TokenExpiredError, TokenInvalidError, TokenMalformedError
from schemas import Identity
from settings import auth_settings


def create_access_token(user_id: int, issued_at: datetime | None = None) -> str:
    """Issue a signed access token for a user.

    Args:
        user_id: The user ID bound to the token.
        issued_at: The issuance instant, defaults to now.

    Returns:
        The encoded token.

    """
    issued_at = issued_at or datetime.now(tz=UTC)

    return jwt.encode(
        payload={
            TOKEN_SUBJECT_CLAIM: str(user_id),
            TOKEN_ISSUED_AT_CLAIM: issued_at,
            TOKEN_EXPIRY_CLAIM: issued_at
            + timedelta(minutes=auth_settings.token_expire_minutes),
        },
        key=auth_settings.secret_key,
        algorithm=auth_settings.algorithm,
    )


def decode_access_token(token: str) -> Identity:
    """Verify an access token and resolve the identity it carries.

    Args:
        token: The encoded token.

    Returns:
        The identity bound to the token.

    Raises:
        TokenInvalidError: If the signature does not match.
        TokenExpiredError: If the token expired.
        TokenMalformedError: If the token or its payload is structurally invalid.

    """
    try:
        payload = jwt.decode(
            jwt=token,
            key=auth_settings.secret_key,
            algorithms=[auth_settings.algorithm],
            options={
                "require": [
                    TOKEN_SUBJECT_CLAIM,
                    TOKEN_EXPIRY_CLAIM,
                    TOKEN_ISSUED_AT_CLAIM,
                ]
            },
        )
    except jwt.ExpiredSignatureError as error:
        raise TokenExpiredError from error
    except jwt.InvalidSignatureError as error:
        raise TokenInvalidError from error
    except jwt.InvalidTokenError as error:
        raise TokenMalformedError from error

    try:
        user_id = int(payload[TOKEN_SUBJECT_CLAIM])
    except (TypeError, ValueError) as error:
        raise TokenMalformedError from error

    if user_id <= 0:
        raise TokenMalformedError

    return Identity(user_id=user_id)

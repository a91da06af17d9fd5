import asyncio

import logfire
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from db.repositories import UserRepository
from exceptions import InvalidCredentialsError, UserAlreadyExistsError
from schemas import (
    Identity,
    LoginRequest,
    RegisterRequest,
    TokenResponse,
    UserResponse,
)
from utils import create_access_token, hash_password, verify_password


class AuthUsecase:
    def __init__(self):
        self._user_repository = UserRepository()

    async def register(
        self, session: AsyncSession, data: RegisterRequest
    ) -> TokenResponse:
        """Register a new user.

        Args:
            session: The async session.
            data: The registration data.

        Returns:
            The access token of the new user.

        """
        if await self._user_repository.exists(session=session, username=data.username):
            raise UserAlreadyExistsError

        password_hash = await asyncio.to_thread(hash_password, data.password)

        try:
            user = await self._user_repository.create(
                session=session,
                data={
                    "username": data.username,
                    "password_hash": password_hash,
                    "display_name": data.display_name,
                },
            )
        except IntegrityError as error:
            await session.rollback()
            raise UserAlreadyExistsError from error

        logfire.info("User registered", user_id=user.id)

        return TokenResponse(token=create_access_token(user_id=user.id))

    async def login(self, session: AsyncSession, data: LoginRequest) -> TokenResponse:
        """Log a user in.

        Args:
            session: The async session.
            data: The login data.

        Returns:
            The access token of the user.

        """
        user = await self._user_repository.get_by(
            session=session, username=data.username
        )
        if not user or not await asyncio.to_thread(
            verify_password, data.password, user.password_hash
        ):
            logfire.info("Login rejected")
            raise InvalidCredentialsError

        return TokenResponse(token=create_access_token(user_id=user.id))

    async def get_user(self, session: AsyncSession, identity: Identity) -> UserResponse:
        """Get the authenticated user.

        Args:
            session: The async session.
            identity: The authenticated identity.

        Returns:
            The user.

        """
        user = await self._user_repository.get_by(session=session, id=identity.user_id)
        if not user:
            raise InvalidCredentialsError(message="User no longer exists")

        return UserResponse.model_validate(user)

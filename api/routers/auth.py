from typing import Annotated

from fastapi import APIRouter, Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from api.dependencies import auth, db
from schemas import (
    Identity,
    LoginRequest,
    RegisterRequest,
    TokenResponse,
    UserResponse,
)

router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.post(path="/register")
async def register(
    data: Annotated[RegisterRequest, Body(default=...)],
    session: Annotated[AsyncSession, Depends(dependency=db.get_session)],
    usecase: Annotated[auth.AuthUsecase, Depends(dependency=auth.get_auth_usecase)],
) -> TokenResponse:
    return await usecase.register(session=session, data=data)


@router.post(path="/login")
async def login(
    data: Annotated[LoginRequest, Body(default=...)],
    session: Annotated[AsyncSession, Depends(dependency=db.get_session)],
    usecase: Annotated[auth.AuthUsecase, Depends(dependency=auth.get_auth_usecase)],
) -> TokenResponse:
    return await usecase.login(session=session, data=data)


@router.get(path="/me")
async def get_me(
    identity: Annotated[Identity, Depends(dependency=auth.get_identity)],
    session: Annotated[AsyncSession, Depends(dependency=db.get_session)],
    usecase: Annotated[auth.AuthUsecase, Depends(dependency=auth.get_auth_usecase)],
) -> UserResponse:
    return await usecase.get_user(session=session, identity=identity)

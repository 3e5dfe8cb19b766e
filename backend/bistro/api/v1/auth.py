"""Back-office sign-in."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm

from bistro.api.deps import CurrentUserDep, SessionDep
from bistro.api.rate_limit import LOGIN_RATE_DEP
from bistro.schemas.auth import Token
from bistro.schemas.user import UserRead
from bistro.services import auth_service

router = APIRouter()


@router.post(
    "/token",
    response_model=Token,
    summary="Exchange email and password for a bearer token",
    dependencies=[LOGIN_RATE_DEP],
)
async def issue_token(
    form_data: Annotated[OAuth2PasswordRequestForm, Depends()],
    session: SessionDep,
) -> Token:
    user = await auth_service.authenticate_user(
        session, email=form_data.username, password=form_data.password
    )
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return Token(access_token=auth_service.create_access_token_for_user(user))


@router.get("/me", response_model=UserRead, summary="Current user")
async def read_current_user(current_user: CurrentUserDep) -> UserRead:
    return UserRead.model_validate(current_user)

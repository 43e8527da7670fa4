"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from src.api.dependencies import get_auth_service
from src.schemas.auth import AuthResponse, UserLogin, UserResponse, UserSignup
from src.services.auth import AuthService

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def signup(
    user_data: UserSignup,
    auth: Annotated[AuthService, Depends(get_auth_service)],
):
    """Create a new user and return a session token."""
    user, token = auth.signup(user_data.name, user_data.email, user_data.password)

    return AuthResponse(
        message="User created successfully",
        token=token,
        user=UserResponse.model_validate(user),
    )


@router.post("/login", response_model=AuthResponse)
def login(
    credentials: UserLogin,
    auth: Annotated[AuthService, Depends(get_auth_service)],
):
    """Login with email and password."""
    user, token = auth.login(credentials.email, credentials.password)

    return AuthResponse(
        message="Login successful",
        token=token,
        user=UserResponse.model_validate(user),
    )

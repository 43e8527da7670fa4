"""FastAPI dependencies for authentication and database.

Authenticated endpoints run an explicit chain: ``get_token_claims``
(authenticate) and then ``get_current_user`` (authorize) before the handler.
The token is verified before the database is consulted.
"""

from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from src.config import Settings
from src.database import get_db
from src.models.user import User
from src.services.auth import AuthService, PasswordHasher, TokenClaims, TokenService
from src.services.errors import NotFoundError, UnauthorizedError
from src.services.user_store import UserStore

security = HTTPBearer(auto_error=False)


def get_app_settings(request: Request) -> Settings:
    """Settings the application was created with."""
    return request.app.state.settings


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher


def get_user_store(db: Annotated[Session, Depends(get_db)]) -> UserStore:
    return UserStore(db)


def get_auth_service(
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_app_settings)],
    hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
) -> AuthService:
    """Get auth service with dependencies."""
    return AuthService(db, hasher, tokens, referral_code_suffix=settings.referral_code_suffix)


def get_token_claims(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
) -> TokenClaims:
    """Verify the bearer token; no database access happens here."""
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError()
    return tokens.verify(credentials.credentials)


def get_current_user(
    claims: Annotated[TokenClaims, Depends(get_token_claims)],
    store: Annotated[UserStore, Depends(get_user_store)],
) -> User:
    """Get the user named by a verified token."""
    user = store.find_by_id(claims.user_id)
    if user is None:
        raise NotFoundError()
    return user

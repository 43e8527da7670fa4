"""Authentication service for JWT and password handling."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from src.config import Settings
from src.models.user import User
from src.services.errors import (
    InvalidCredentialsError,
    InvalidInputError,
    InvalidSignatureError,
    MalformedTokenError,
    TokenExpiredError,
)
from src.services.referral import generate_referral_code
from src.services.user_store import UserStore

logger = logging.getLogger(__name__)


class PasswordHasher:
    """Salted, deliberately slow password hashing backed by bcrypt."""

    def __init__(self, rounds: int = 12):
        self.pwd_context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    def hash(self, password: str) -> str:
        """Hash a password with a fresh random salt."""
        return self.pwd_context.hash(password)

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """Verify a password against its hash."""
        try:
            return self.pwd_context.verify(plain_password, hashed_password)
        except (ValueError, TypeError):
            # Unrecognised or corrupt hash
            return False

    def dummy_verify(self) -> None:
        """Spend the time of one verification without a real hash."""
        self.pwd_context.dummy_verify()


@dataclass(frozen=True)
class TokenClaims:
    """Verified contents of a session token."""

    user_id: int
    email: str
    issued_at: datetime
    expires_at: datetime


class TokenService:
    """Issues and verifies signed, time-limited session tokens."""

    def __init__(self, secret: str, algorithm: str = "HS256", expiration_minutes: int = 1440):
        self.secret = secret
        self.algorithm = algorithm
        self.lifetime = timedelta(minutes=expiration_minutes)

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        return cls(
            secret=settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
            expiration_minutes=settings.jwt_expiration_minutes,
        )

    def issue(self, user_id: int, email: str, now: datetime | None = None) -> str:
        """Create a signed token for the given user."""
        issued_at = now or datetime.now(UTC)
        expire = issued_at + self.lifetime
        to_encode = {
            "sub": str(user_id),
            "email": email,
            "iat": int(issued_at.timestamp()),
            "exp": int(expire.timestamp()),
        }
        return jwt.encode(to_encode, self.secret, algorithm=self.algorithm)

    def verify(self, token: str, now: datetime | None = None) -> TokenClaims:
        """Decode and validate a token.

        Raises MalformedTokenError, InvalidSignatureError or TokenExpiredError.
        Every one of them is an UnauthorizedError.
        """
        try:
            jwt.get_unverified_claims(token)
        except (JWTError, AttributeError, TypeError) as e:
            raise MalformedTokenError() from e

        try:
            # Expiry is checked below against the caller's clock
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"verify_exp": False},
            )
        except JWTError as e:
            raise InvalidSignatureError() from e

        try:
            user_id = int(payload["sub"])
            email = payload["email"]
            issued_at = datetime.fromtimestamp(int(payload["iat"]), UTC)
            expires_at = datetime.fromtimestamp(int(payload["exp"]), UTC)
        except (KeyError, TypeError, ValueError) as e:
            raise MalformedTokenError() from e
        if not isinstance(email, str):
            raise MalformedTokenError()

        if (now or datetime.now(UTC)) >= expires_at:
            raise TokenExpiredError()

        return TokenClaims(
            user_id=user_id,
            email=email,
            issued_at=issued_at,
            expires_at=expires_at,
        )


class AuthService:
    """Signup and login, composed from the store, hasher and token issuer."""

    def __init__(
        self,
        db: Session,
        hasher: PasswordHasher,
        tokens: TokenService,
        referral_code_suffix: str = "2025",
    ):
        self.store = UserStore(db)
        self.hasher = hasher
        self.tokens = tokens
        self.referral_code_suffix = referral_code_suffix

    def signup(self, name: str, email: str, password: str) -> tuple[User, str]:
        """Create a user and return it with a fresh session token.

        Two users whose names normalise to the same referral code cannot
        both sign up; the second gets DuplicateReferralCodeError.
        """
        referral_code = generate_referral_code(name, self.referral_code_suffix)
        if not referral_code.removesuffix(self.referral_code_suffix):
            raise InvalidInputError("Name must contain non-whitespace characters")

        user = self.store.create(
            name=name,
            email=email,
            password_hash=self.hasher.hash(password),
            referral_code=referral_code,
        )
        logger.info(f"Signed up user {user.id} with referral code {user.referral_code}")
        return user, self.tokens.issue(user.id, user.email)

    def login(self, email: str, password: str) -> tuple[User, str]:
        """Check credentials and return the user with a fresh session token."""
        user = self.store.find_by_email(email)
        if user is None:
            self.hasher.dummy_verify()
            raise InvalidCredentialsError()
        if not self.hasher.verify(password, user.password_hash):
            logger.info(f"Failed login for user {user.id}")
            raise InvalidCredentialsError()

        logger.info(f"User {user.id} logged in")
        return user, self.tokens.issue(user.id, user.email)

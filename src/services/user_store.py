"""Persistence of user records."""

import logging

from sqlalchemy import func, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.models.user import MAX_DONATIONS_RAISED, User
from src.services.errors import (
    DuplicateEmailError,
    DuplicateReferralCodeError,
    InvalidInputError,
    NotFoundError,
)

logger = logging.getLogger(__name__)


class UserStore:
    """Reads and writes users. Every write is committed before returning."""

    def __init__(self, db: Session):
        self.db = db

    def find_by_email(self, email: str) -> User | None:
        return self.db.query(User).filter(User.email == email).first()

    def find_by_id(self, user_id: int) -> User | None:
        return self.db.query(User).filter(User.id == user_id).first()

    def find_by_referral_code(self, referral_code: str) -> User | None:
        return self.db.query(User).filter(User.referral_code == referral_code).first()

    def count(self) -> int:
        return self.db.query(func.count(User.id)).scalar()

    def create(
        self,
        name: str,
        email: str,
        password_hash: str,
        referral_code: str,
        donations_raised: int = 0,
    ) -> User:
        """Insert a new user.

        Raises DuplicateEmailError or DuplicateReferralCodeError when either
        unique column is already taken, including when a concurrent signup
        wins the race between the checks and the insert.
        """
        if not 0 <= donations_raised <= MAX_DONATIONS_RAISED:
            raise InvalidInputError(
                f"Donations raised must be between 0 and {MAX_DONATIONS_RAISED}"
            )
        self._check_unique(email, referral_code)

        user = User(
            name=name,
            email=email,
            password_hash=password_hash,
            referral_code=referral_code,
            donations_raised=donations_raised,
        )
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            # Lost a race with another insert; report which value collided
            self._check_unique(email, referral_code)
            raise
        self.db.refresh(user)
        return user

    def _check_unique(self, email: str, referral_code: str) -> None:
        if self.find_by_email(email) is not None:
            raise DuplicateEmailError()
        if self.find_by_referral_code(referral_code) is not None:
            raise DuplicateReferralCodeError()

    def list_all_sorted_by_donations(self, limit: int | None = None) -> list[User]:
        """Users by descending donation total; ties keep insertion order."""
        query = self.db.query(User).order_by(User.donations_raised.desc(), User.id.asc())
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def increment_donations(self, user_id: int, amount: int) -> User:
        """Atomically add ``amount`` to a user's donation total.

        The addition happens inside a single UPDATE so concurrent increments
        on the same row cannot overwrite each other. A negative amount is
        allowed as long as the total stays at or above zero, and the total may
        not exceed MAX_DONATIONS_RAISED.
        """
        if abs(amount) > MAX_DONATIONS_RAISED:
            raise InvalidInputError(
                f"Amount must be between -{MAX_DONATIONS_RAISED} and {MAX_DONATIONS_RAISED}"
            )

        new_total = User.donations_raised + amount
        result = self.db.execute(
            update(User)
            .where(User.id == user_id, new_total >= 0, new_total <= MAX_DONATIONS_RAISED)
            .values(donations_raised=new_total)
            .execution_options(synchronize_session=False)
        )
        self.db.commit()

        if result.rowcount == 0:
            user = self.find_by_id(user_id)
            if user is None:
                raise NotFoundError()
            if amount < 0:
                raise InvalidInputError("Donations raised cannot go below zero")
            raise InvalidInputError(f"Donations raised cannot exceed {MAX_DONATIONS_RAISED}")

        user = self.find_by_id(user_id)
        if user is None:
            raise NotFoundError()
        logger.info(f"Donations for user {user_id} changed by {amount} to {user.donations_raised}")
        return user

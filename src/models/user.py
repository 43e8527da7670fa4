"""User model."""

from sqlalchemy import BigInteger, CheckConstraint, Column, DateTime, Integer, String, func

from src.database import Base
from src.models.mixins import TimestampMixin

# Largest donation total a user can hold; fits a 64-bit column on every backend
MAX_DONATIONS_RAISED = 10**15


class User(Base, TimestampMixin):
    """A participant with credentials, a referral code and a donation total."""

    __tablename__ = "users"
    __table_args__ = (
        CheckConstraint("donations_raised >= 0", name="ck_users_donations_non_negative"),
        CheckConstraint(
            f"donations_raised <= {MAX_DONATIONS_RAISED}", name="ck_users_donations_max"
        ),
    )

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    referral_code = Column(String(255), unique=True, nullable=False, index=True)
    donations_raised = Column(BigInteger, nullable=False, default=0, server_default="0")
    joining_date = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    def __repr__(self) -> str:
        return f"<User id={self.id} referral_code={self.referral_code!r}>"

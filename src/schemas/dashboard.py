"""Dashboard, leaderboard and donation schemas."""

from datetime import datetime

from pydantic import ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.models.user import MAX_DONATIONS_RAISED
from src.schemas.auth import CamelModel
from src.services.ranking import RewardTier


class DashboardResponse(CamelModel):
    """The signed-in user's own standing."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    name: str
    email: str
    referral_code: str
    donations_raised: int
    joining_date: datetime


class LeaderboardEntryResponse(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    rank: int
    name: str
    referral_code: str
    donations_raised: int


class DonationUpdate(CamelModel):
    """Amount to add to the signed-in user's donation total."""

    amount: int = Field(..., strict=True, ge=-MAX_DONATIONS_RAISED, le=MAX_DONATIONS_RAISED)


class DonationResponse(CamelModel):
    message: str
    donations_raised: int


class RewardStatusResponse(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    tier: RewardTier
    threshold: int
    unlocked: bool


class RewardProgressResponse(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    current_tier: RewardTier
    next_tier: RewardTier | None
    amount_to_next: int
    progress_percent: int
    rewards: list[RewardStatusResponse]

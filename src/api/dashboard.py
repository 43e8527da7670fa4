"""Dashboard, leaderboard, donation and reward endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.api.dependencies import (
    get_app_settings,
    get_current_user,
    get_token_claims,
    get_user_store,
)
from src.config import Settings
from src.models.user import User
from src.schemas.dashboard import (
    DashboardResponse,
    DonationResponse,
    DonationUpdate,
    LeaderboardEntryResponse,
    RewardProgressResponse,
)
from src.services.auth import TokenClaims
from src.services.ranking import rank, reward_progress
from src.services.user_store import UserStore

router = APIRouter(prefix="/api", tags=["dashboard"])


@router.get("/dashboard", response_model=DashboardResponse)
def get_dashboard(
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Get the current user's dashboard data."""
    return current_user


@router.get("/leaderboard", response_model=list[LeaderboardEntryResponse])
def get_leaderboard(
    claims: Annotated[TokenClaims, Depends(get_token_claims)],
    store: Annotated[UserStore, Depends(get_user_store)],
    settings: Annotated[Settings, Depends(get_app_settings)],
):
    """Top users by donations raised."""
    users = store.list_all_sorted_by_donations(limit=settings.leaderboard_size)
    return rank(users, limit=settings.leaderboard_size)


@router.put("/donations", response_model=DonationResponse)
def update_donations(
    donation: DonationUpdate,
    claims: Annotated[TokenClaims, Depends(get_token_claims)],
    store: Annotated[UserStore, Depends(get_user_store)],
):
    """Add to the current user's donation total."""
    user = store.increment_donations(claims.user_id, donation.amount)
    return DonationResponse(
        message="Donation amount updated",
        donations_raised=user.donations_raised,
    )


@router.get("/rewards", response_model=RewardProgressResponse)
def get_rewards(
    current_user: Annotated[User, Depends(get_current_user)],
):
    """Reward tiers reached and the gap to the next one."""
    return reward_progress(current_user.donations_raised)

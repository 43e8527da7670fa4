"""Pydantic schemas for API request/response validation."""

from src.schemas.auth import AuthResponse, UserLogin, UserResponse, UserSignup
from src.schemas.dashboard import (
    DashboardResponse,
    DonationResponse,
    DonationUpdate,
    LeaderboardEntryResponse,
    RewardProgressResponse,
    RewardStatusResponse,
)

__all__ = [
    "UserSignup",
    "UserLogin",
    "UserResponse",
    "AuthResponse",
    "DashboardResponse",
    "LeaderboardEntryResponse",
    "DonationUpdate",
    "DonationResponse",
    "RewardProgressResponse",
    "RewardStatusResponse",
]

"""Leaderboard ranking and reward tiers."""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

DEFAULT_LEADERBOARD_SIZE = 10


class Rankable(Protocol):
    name: str
    referral_code: str
    donations_raised: int


@dataclass(frozen=True)
class LeaderboardEntry:
    rank: int
    name: str
    referral_code: str
    donations_raised: int


def rank(
    users: Iterable[Rankable], limit: int = DEFAULT_LEADERBOARD_SIZE
) -> list[LeaderboardEntry]:
    """Order users by donations raised, highest first, and number them.

    The sort is stable, so users with equal totals keep their input order.
    Ranks are consecutive positions starting at 1; tied users still get
    distinct ranks. Only the first ``limit`` entries are returned.
    """
    ordered = sorted(users, key=lambda user: user.donations_raised, reverse=True)
    return [
        LeaderboardEntry(
            rank=position,
            name=user.name,
            referral_code=user.referral_code,
            donations_raised=user.donations_raised,
        )
        for position, user in enumerate(ordered[:limit], start=1)
    ]


class RewardTier(str, Enum):
    """Rewards unlocked by donation milestones."""

    NONE = "None"
    SWAG_KIT = "SwagKit"
    LINKEDIN_SHOUTOUT = "LinkedInShoutout"
    CERTIFICATE_GOODIES = "Certificate+Goodies"

    @property
    def threshold(self) -> int:
        return REWARD_THRESHOLDS[self]


# Ascending; each threshold is inclusive
REWARD_THRESHOLDS: dict[RewardTier, int] = {
    RewardTier.NONE: 0,
    RewardTier.SWAG_KIT: 1000,
    RewardTier.LINKEDIN_SHOUTOUT: 2500,
    RewardTier.CERTIFICATE_GOODIES: 5000,
}

UNLOCKABLE_TIERS = [tier for tier in REWARD_THRESHOLDS if tier is not RewardTier.NONE]


def tier(amount: int) -> RewardTier:
    """Return the highest reward tier reached by ``amount``."""
    reached = RewardTier.NONE
    for candidate in UNLOCKABLE_TIERS:
        if amount >= candidate.threshold:
            reached = candidate
    return reached


def next_reward(amount: int) -> tuple[RewardTier, int] | None:
    """Return the smallest unmet tier and how much is still missing.

    None means every reward is already unlocked.
    """
    for candidate in UNLOCKABLE_TIERS:
        if amount < candidate.threshold:
            return candidate, candidate.threshold - amount
    return None


@dataclass(frozen=True)
class RewardStatus:
    tier: RewardTier
    threshold: int
    unlocked: bool


@dataclass(frozen=True)
class RewardProgress:
    current_tier: RewardTier
    next_tier: RewardTier | None
    amount_to_next: int
    progress_percent: int
    rewards: list[RewardStatus]


def reward_progress(amount: int) -> RewardProgress:
    """Summarise reward standing for a donation total."""
    upcoming = next_reward(amount)
    top_threshold = UNLOCKABLE_TIERS[-1].threshold
    return RewardProgress(
        current_tier=tier(amount),
        next_tier=upcoming[0] if upcoming else None,
        amount_to_next=upcoming[1] if upcoming else 0,
        progress_percent=min(max(amount, 0) * 100 // top_threshold, 100),
        rewards=[
            RewardStatus(
                tier=candidate,
                threshold=candidate.threshold,
                unlocked=amount >= candidate.threshold,
            )
            for candidate in UNLOCKABLE_TIERS
        ],
    )

"""Tests for leaderboard ranking and reward tiers."""

from dataclasses import dataclass

import pytest

from src.services.ranking import RewardTier, next_reward, rank, reward_progress, tier


@dataclass
class Donor:
    name: str
    referral_code: str
    donations_raised: int


def donors(*pairs):
    return [Donor(name, f"{name.lower()}2025", amount) for name, amount in pairs]


class TestRank:
    """Tests for rank()."""

    def test_descending_with_stable_ties(self):
        result = rank(donors(("D", 900), ("B", 3500), ("A", 5000), ("C", 3500)))
        assert [(e.rank, e.name) for e in result] == [(1, "A"), (2, "B"), (3, "C"), (4, "D")]

    def test_tie_order_follows_input(self):
        result = rank(donors(("C", 3500), ("B", 3500)))
        assert [e.name for e in result] == ["C", "B"]
        assert [e.rank for e in result] == [1, 2]

    def test_entry_fields(self):
        (entry,) = rank(donors(("Alice", 1200)))
        assert entry.rank == 1
        assert entry.name == "Alice"
        assert entry.referral_code == "alice2025"
        assert entry.donations_raised == 1200

    def test_truncates_to_top_n(self):
        users = donors(*[(f"U{i}", i) for i in range(15)])
        result = rank(users)
        assert len(result) == 10
        assert result[0].name == "U14"
        assert result[-1].rank == 10

        assert len(rank(users, limit=3)) == 3

    def test_empty(self):
        assert rank([]) == []


class TestRewardTiers:
    """Tests for tier() and next_reward()."""

    @pytest.mark.parametrize(
        "amount,expected",
        [
            (0, RewardTier.NONE),
            (999, RewardTier.NONE),
            (1000, RewardTier.SWAG_KIT),
            (2499, RewardTier.SWAG_KIT),
            (2500, RewardTier.LINKEDIN_SHOUTOUT),
            (4999, RewardTier.LINKEDIN_SHOUTOUT),
            (5000, RewardTier.CERTIFICATE_GOODIES),
            (12000, RewardTier.CERTIFICATE_GOODIES),
        ],
    )
    def test_tier(self, amount, expected):
        assert tier(amount) == expected

    def test_tier_names(self):
        assert tier(999).value == "None"
        assert tier(1000).value == "SwagKit"
        assert tier(2500).value == "LinkedInShoutout"
        assert tier(5000).value == "Certificate+Goodies"

    def test_next_reward(self):
        assert next_reward(0) == (RewardTier.SWAG_KIT, 1000)
        assert next_reward(999) == (RewardTier.SWAG_KIT, 1)
        assert next_reward(1000) == (RewardTier.LINKEDIN_SHOUTOUT, 1500)
        assert next_reward(4900) == (RewardTier.CERTIFICATE_GOODIES, 100)

    def test_all_rewards_unlocked(self):
        assert next_reward(5000) is None

    def test_reward_progress(self):
        progress = reward_progress(1500)
        assert progress.current_tier == RewardTier.SWAG_KIT
        assert progress.next_tier == RewardTier.LINKEDIN_SHOUTOUT
        assert progress.amount_to_next == 1000
        assert progress.progress_percent == 30
        assert [(r.tier, r.unlocked) for r in progress.rewards] == [
            (RewardTier.SWAG_KIT, True),
            (RewardTier.LINKEDIN_SHOUTOUT, False),
            (RewardTier.CERTIFICATE_GOODIES, False),
        ]

    def test_reward_progress_capped(self):
        progress = reward_progress(9000)
        assert progress.next_tier is None
        assert progress.amount_to_next == 0
        assert progress.progress_percent == 100

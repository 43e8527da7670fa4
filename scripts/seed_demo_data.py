#!/usr/bin/env python3
"""Seed demo users for the leaderboard.

Creates a handful of users with fixed donation totals so the dashboard and
leaderboard have something to show. Does nothing if any user already exists.

Usage:
    DATABASE_URL=sqlite:///./referral_dashboard.db python scripts/seed_demo_data.py
"""

import os
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy.orm import Session

from src.config import get_settings
from src.database import build_engine, build_session_factory, init_db
from src.services.auth import PasswordHasher
from src.services.referral import generate_referral_code
from src.services.user_store import UserStore

DEMO_PASSWORD = "password123"  # noqa: S105

DEMO_USERS = [
    ("Akshad Pastambh", "akshad@example.com", 5000),
    ("John Doe", "john@example.com", 3500),
    ("Alice Smith", "alice@example.com", 2800),
    ("Bob Johnson", "bob@example.com", 1500),
    ("Emma Wilson", "emma@example.com", 900),
]


def seed_demo_data(session: Session) -> int:
    """Insert the demo users into an empty database. Returns how many were added."""
    settings = get_settings()
    store = UserStore(session)
    if store.count() > 0:
        print("Demo data already exists")
        return 0

    hasher = PasswordHasher(rounds=settings.bcrypt_rounds)
    password_hash = hasher.hash(DEMO_PASSWORD)
    for name, email, donations in DEMO_USERS:
        store.create(
            name=name,
            email=email,
            password_hash=password_hash,
            referral_code=generate_referral_code(name, settings.referral_code_suffix),
            donations_raised=donations,
        )
        print(f"Created {name} ({email})")
    return len(DEMO_USERS)


if __name__ == "__main__":
    engine = build_engine(get_settings().database_url)
    init_db(engine)
    session = build_session_factory(engine)()
    try:
        if seed_demo_data(session):
            print("Demo data created successfully")
    finally:
        session.close()

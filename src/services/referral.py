"""Referral code generation."""

import re

DEFAULT_REFERRAL_SUFFIX = "2025"

_WHITESPACE = re.compile(r"\s+")


def generate_referral_code(name: str, suffix: str = DEFAULT_REFERRAL_SUFFIX) -> str:
    """Derive a referral code from a display name.

    The name is lowercased, all whitespace is removed and the suffix is
    appended, e.g. "Alice Smith" -> "alicesmith2025". Identical names always
    give identical codes, so uniqueness is enforced by the store.
    """
    return f"{_WHITESPACE.sub('', name.lower())}{suffix}"

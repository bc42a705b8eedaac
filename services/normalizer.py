import logging
import os
from typing import FrozenSet, Iterable, Optional

logger = logging.getLogger(__name__)

DEFAULT_WHITELIST = ("swear",)


def load_whitelist(raw: Optional[str] = None) -> FrozenSet[str]:
    """
    Load the whitelist of tokens that are never analysed

    Args:
        raw: Comma separated tokens. Falls back to PROFANITY_WHITELIST, then DEFAULT_WHITELIST

    Returns:
        Lower-cased, immutable set of tokens
    """
    if raw is None:
        raw = os.getenv("PROFANITY_WHITELIST")

    if raw is None:
        tokens: Iterable[str] = DEFAULT_WHITELIST
    else:
        tokens = raw.split(",")

    whitelist = frozenset(token.strip().lower() for token in tokens if token.strip())
    logger.info(f"Loaded whitelist with {len(whitelist)} token(s)")
    return whitelist


def normalize(raw: str, whitelist: FrozenSet[str]) -> str:
    """Drop whitelisted tokens (case-insensitive) and rejoin with single spaces"""
    return " ".join(word for word in raw.split() if word.lower() not in whitelist)

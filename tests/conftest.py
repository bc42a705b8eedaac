"""Shared fixtures: an in-memory stand-in for the vector index."""

import asyncio

import pytest

from models import MatchResult


class FakeSimilarityClient:
    """Answers queries from a dict of text -> (score, matched text) or exception."""

    def __init__(self, matches=None, delays=None, default=None):
        self.matches = matches or {}
        self.delays = delays or {}
        self.default = default
        self.queries = []
        self.cancelled = []

    async def query(self, data, top_k=1, include_metadata=True):
        self.queries.append((data, top_k, include_metadata))
        try:
            await asyncio.sleep(self.delays.get(data, 0))
        except asyncio.CancelledError:
            self.cancelled.append(data)
            raise

        match = self.matches.get(data, self.default)
        if isinstance(match, Exception):
            raise match
        if match is None:
            return []
        score, text = match
        return [MatchResult(id="1", score=score, text=text)]


@pytest.fixture
def fake_client():
    return FakeSimilarityClient

"""
Profanity classification pipeline: normalize, chunk, fan out lookups, decide
"""
import logging
import os
from typing import FrozenSet, Optional

from models import ClassificationResult
from services.chunking import SemanticChunker, split_words
from services.decision import decide
from services.fanout import DEFAULT_BATCH_TIMEOUT, query_chunks
from services.normalizer import load_whitelist, normalize
from services.vector_client import VectorIndexClient

logger = logging.getLogger(__name__)


class ProfanityClassifier:
    """Classifies a message by nearest-neighbour search against a corpus of flagged phrases"""

    def __init__(self, client=None, whitelist: Optional[FrozenSet[str]] = None,
                 chunker: Optional[SemanticChunker] = None, batch_timeout: Optional[float] = DEFAULT_BATCH_TIMEOUT):
        self.client = client
        self.whitelist = whitelist if whitelist is not None else frozenset()
        self.chunker = chunker or SemanticChunker()
        self.batch_timeout = batch_timeout

    @property
    def is_initialized(self) -> bool:
        return self.client is not None

    def initialize(self):
        """Load whitelist and index client from configuration"""
        logger.info("Initializing profanity classifier...")
        self.whitelist = load_whitelist()
        self.client = VectorIndexClient.from_env()
        self.batch_timeout = float(os.getenv("PROFANITY_BATCH_TIMEOUT", DEFAULT_BATCH_TIMEOUT))
        logger.info("Profanity classifier initialized successfully")

    async def close(self):
        if self.client is not None and hasattr(self.client, "aclose"):
            await self.client.aclose()

    async def classify(self, message: str) -> ClassificationResult:
        if self.client is None:
            raise RuntimeError("Profanity classifier not initialized")

        text = normalize(message, self.whitelist)
        word_chunks = split_words(text)
        semantic_chunks = list(self.chunker.split(text))

        # Single batch so word and semantic lookups share the fail-fast group
        results = await query_chunks(self.client, word_chunks + semantic_chunks, timeout=self.batch_timeout)
        word_results = results[:len(word_chunks)]
        semantic_results = results[len(word_chunks):]

        result = decide(word_results, semantic_results)
        logger.info(
            f"Classified message ({len(word_chunks)} word / {len(semantic_chunks)} semantic chunks): "
            f"is_profanity={result.is_profanity}, score={result.score:.4f}"
        )
        return result


# Global service instance
profanity_classifier = ProfanityClassifier()

def initialize_profanity_classifier():
    """Initialize the global profanity classifier"""
    profanity_classifier.initialize()

def get_profanity_classifier() -> ProfanityClassifier:
    """Get the global profanity classifier instance"""
    return profanity_classifier

import logging
from typing import Iterator, List

from models import Chunk, ChunkKind

logger = logging.getLogger(__name__)

SEMANTIC_WINDOW_WORDS = 25
SEMANTIC_OVERLAP_WORDS = 12


def split_words(text: str) -> List[Chunk]:
    """One word chunk per whitespace delimited token, in input order"""
    return [Chunk(kind=ChunkKind.WORD, text=word) for word in text.split()]


class SemanticChunker:
    def __init__(self, window_size: int = SEMANTIC_WINDOW_WORDS, overlap: int = SEMANTIC_OVERLAP_WORDS):
        if window_size <= 0:
            raise ValueError("window_size must be positive")
        if overlap < 0 or overlap >= window_size:
            raise ValueError("overlap must be between 0 and window_size - 1")

        self.window_size = window_size
        self.overlap = overlap
        logger.debug(f"SemanticChunker initialized with window: {window_size}, overlap: {overlap}")

    def split(self, text: str) -> Iterator[Chunk]:
        """
        Split text into overlapping word windows.

        Consecutive windows share the last `overlap` words of the previous one,
        so a phrase can never fall unseen between two windows. Single word
        texts produce nothing since the word chunk already covers them.
        """
        words = text.split()
        if len(words) <= 1:
            return

        step = self.window_size - self.overlap
        start = 0
        while True:
            end = start + self.window_size
            yield Chunk(kind=ChunkKind.SEMANTIC, text=" ".join(words[start:end]))
            if end >= len(words):
                break
            start += step

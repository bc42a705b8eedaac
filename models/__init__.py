from .profanity_model import (Chunk, ChunkKind, MatchResult, FlaggedEntry, ProfaneResult, CleanResult,
                              ClassificationResult, ErrorResponse)
from .health_model import HealthResponse

__all__ = [
    "Chunk",
    "ChunkKind",
    "MatchResult",
    "FlaggedEntry",
    "ProfaneResult",
    "CleanResult",
    "ClassificationResult",
    "ErrorResponse",
    "HealthResponse"
]

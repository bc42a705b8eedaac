from enum import Enum
from typing import Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field


class ChunkKind(str, Enum):
    WORD = "word"
    SEMANTIC = "semantic"


class Chunk(BaseModel):
    kind: ChunkKind
    text: str


class MatchResult(BaseModel):
    """Top nearest neighbour returned by the vector index for one chunk"""
    id: Optional[str] = None
    score: float
    text: str


class FlaggedEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: float
    text: str
    kind: ChunkKind


class ProfaneResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    is_profanity: Literal[True] = Field(True, alias="isProfanity")
    score: float
    flagged_for: str = Field(..., alias="flaggedFor")


class CleanResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    is_profanity: Literal[False] = Field(False, alias="isProfanity")
    score: float


ClassificationResult = Union[ProfaneResult, CleanResult]


class ErrorResponse(BaseModel):
    error: str

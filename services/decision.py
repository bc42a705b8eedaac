from typing import Dict, Optional, Sequence, Tuple

from models import ChunkKind, CleanResult, ClassificationResult, FlaggedEntry, MatchResult, ProfaneResult

# A multi-word window can contain a flagged word in harmless context
# ("it is f*cking awesome"), so semantic matches get a lower bar.
WORD_THRESHOLD = 0.95
SEMANTIC_THRESHOLD = 0.88

THRESHOLDS = {
    ChunkKind.WORD: WORD_THRESHOLD,
    ChunkKind.SEMANTIC: SEMANTIC_THRESHOLD,
}


def collect_flagged(word_results: Sequence[Optional[MatchResult]],
                    semantic_results: Sequence[Optional[MatchResult]]) -> Sequence[FlaggedEntry]:
    """Flagged entries in input order, word results first, deduplicated by (score, text)"""
    flagged: Dict[Tuple[float, str], FlaggedEntry] = {}

    for kind, results in ((ChunkKind.WORD, word_results), (ChunkKind.SEMANTIC, semantic_results)):
        threshold = THRESHOLDS[kind]
        for result in results:
            if result is None or result.score <= threshold:
                continue
            key = (result.score, result.text)
            if key not in flagged:
                flagged[key] = FlaggedEntry(score=result.score, text=result.text, kind=kind)

    return list(flagged.values())


def decide(word_results: Sequence[Optional[MatchResult]],
           semantic_results: Sequence[Optional[MatchResult]]) -> ClassificationResult:
    """
    Reduce per-chunk matches to a single classification

    The highest scoring flagged entry wins; ties keep input order. When nothing
    crosses its threshold the best score seen overall is reported, 0 if there
    were no matches at all.
    """
    flagged = collect_flagged(word_results, semantic_results)

    if flagged:
        top = max(flagged, key=lambda entry: entry.score)
        return ProfaneResult(score=top.score, flagged_for=top.text)

    scores = [result.score for result in (*word_results, *semantic_results) if result is not None]
    return CleanResult(score=max(scores, default=0.0))

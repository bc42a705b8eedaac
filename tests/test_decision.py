"""Tests for threshold policy and result selection."""

from models import ChunkKind, CleanResult, MatchResult, ProfaneResult
from services.decision import SEMANTIC_THRESHOLD, WORD_THRESHOLD, collect_flagged, decide


def _match(score, text="ref"):
    return MatchResult(score=score, text=text)


def test_word_above_threshold_is_profane():
    result = decide([_match(0.97, "damn")], [])
    assert isinstance(result, ProfaneResult)
    assert result.score == 0.97
    assert result.flagged_for == "damn"


def test_thresholds_are_strict():
    result = decide([_match(WORD_THRESHOLD)], [_match(SEMANTIC_THRESHOLD)])
    assert isinstance(result, CleanResult)
    assert result.score == WORD_THRESHOLD


def test_semantic_threshold_is_lower_than_word_threshold():
    assert not collect_flagged([_match(0.9)], [])
    flagged = collect_flagged([], [_match(0.9, "phrase")])
    assert [(entry.text, entry.kind) for entry in flagged] == [("phrase", ChunkKind.SEMANTIC)]


def test_highest_flagged_entry_wins():
    result = decide([_match(0.96, "a"), _match(0.99, "b")], [_match(0.98, "c")])
    assert result.score == 0.99
    assert result.flagged_for == "b"


def test_ties_keep_input_order():
    result = decide([_match(0.97, "first"), _match(0.97, "second")], [_match(0.97, "third")])
    assert result.flagged_for == "first"


def test_duplicate_entries_collapse():
    flagged = collect_flagged([_match(0.97, "x"), _match(0.97, "x")], [_match(0.97, "x")])
    assert len(flagged) == 1
    assert flagged[0].kind == ChunkKind.WORD


def test_clean_result_reports_best_score():
    result = decide([_match(0.5), _match(0.94)], [_match(0.8)])
    assert isinstance(result, CleanResult)
    assert result.score == 0.94


def test_missing_matches_count_as_zero():
    assert decide([None, None], [None]).score == 0


def test_no_results_is_clean_with_zero_score():
    result = decide([], [])
    assert isinstance(result, CleanResult)
    assert result.score == 0


def test_clean_result_serializes_without_flagged_for():
    assert CleanResult(score=0.3).model_dump(by_alias=True) == {"isProfanity": False, "score": 0.3}
    assert ProfaneResult(score=0.97, flagged_for="damn").model_dump(by_alias=True) == {
        "isProfanity": True,
        "score": 0.97,
        "flaggedFor": "damn",
    }

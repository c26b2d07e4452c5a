import pytest
from verb_lookup.models import MatchKind, VerbCandidate, VerbSearchResult


def test_exact_result_has_no_score():
    result = VerbSearchResult(verb="run", entry={"past": "ran"})

    assert result.match_kind is MatchKind.EXACT
    assert result.score is None
    assert result.to_dict() == {"verb": "run", "entry": {"past": "ran"}}


def test_fuzzy_result_serializes_score():
    result = VerbSearchResult(
        verb="run", entry={"past": "ran"}, match_kind=MatchKind.FUZZY, score=0.14
    )

    assert result.to_dict() == {"verb": "run", "entry": {"past": "ran"}, "score": 0.14}


def test_fuzzy_result_requires_score():
    with pytest.raises(ValueError):
        VerbSearchResult(verb="run", entry={}, match_kind=MatchKind.FUZZY)


def test_form_result_rejects_score():
    with pytest.raises(ValueError):
        VerbSearchResult(verb="run", entry={}, match_kind=MatchKind.FORM, score=0.2)


def test_candidate_to_dict():
    assert VerbCandidate(verb="run").to_dict() == {"verb": "run"}
    assert VerbCandidate(verb="ruin", score=0.14).to_dict() == {"verb": "ruin", "score": 0.14}

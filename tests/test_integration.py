"""
End-to-end tests: configuration -> resolver -> queries over the sample dictionary.
"""
import asyncio
from pathlib import Path

import pytest
from verb_lookup import MatchKind, VerbLookupConfig, create_verb_resolver

SAMPLE_PATH = Path(__file__).resolve().parent.parent / "data" / "verbs.sample.json"


@pytest.fixture
def resolver():
    return create_verb_resolver(VerbLookupConfig(dictionary_path=str(SAMPLE_PATH)))


@pytest.mark.parametrize(
    "query,verb,kind",
    [
        ("walk", "walk", MatchKind.EXACT),
        ("WENT", "go", MatchKind.FORM),
        (" were ", "be", MatchKind.FORM),
        ("lain", "lie", MatchKind.FORM),
        ("lay", "lay", MatchKind.EXACT),
        ("saw", "saw", MatchKind.EXACT),
        ("sawn", "saw", MatchKind.FORM),
        ("writen", "write", MatchKind.FUZZY),
    ],
)
def test_find_verb_entry(resolver, query, verb, kind):
    result = asyncio.run(resolver.find_verb_entry(query))

    assert result.verb == verb
    assert result.match_kind is kind
    assert (result.score is not None) == (kind is MatchKind.FUZZY)


def test_candidates_for_form(resolver):
    candidates = asyncio.run(resolver.search_verb_candidates("written", 3))

    assert candidates[0].verb == "write"
    assert candidates[0].score is None
    assert len(candidates) <= 3


def test_get_verb_entry(resolver):
    entry = asyncio.run(resolver.get_verb_entry("GO"))

    assert entry["past"] == "went"

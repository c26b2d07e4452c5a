"""
Resolution layer turning free-text input into verb dictionary entries.

Key components:
- VerbResolver: exact -> form -> fuzzy escalation and candidate ranking
- FormIndexBuilder: form -> owning verb index (first writer wins)
- ApproximateVerbIndex: rapidfuzz-backed fuzzy search over verb keys
- collect_forms: text leaves of an arbitrary entry tree
"""
from .form_tree import collect_forms, to_tree, FormCollector
from .form_index import FormIndexBuilder
from .fuzzy_matcher import ApproximateVerbIndex, FuzzyMatch
from .verb_resolver import VerbResolver
from .resolver_factory import create_verb_resolver, create_dictionary_source

__all__ = [
    "collect_forms",
    "to_tree",
    "FormCollector",
    "FormIndexBuilder",
    "ApproximateVerbIndex",
    "FuzzyMatch",
    "VerbResolver",
    "create_verb_resolver",
    "create_dictionary_source",
]

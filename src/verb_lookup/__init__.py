"""
Verb lookup: resolve user-typed words to verb dictionary entries,
tolerating typos, inflected forms and partial input.
"""
from .config import VerbLookupConfig
from .config_loader import load_config_from_env
from .data_loader import (
    DictionarySource,
    FileDictionarySource,
    HttpDictionarySource,
    VerbDictionaryLoader,
)
from .exceptions import (
    ConfigurationError,
    DictionaryFetchError,
    DictionaryFormatError,
    VerbLookupError,
)
from .models import MatchKind, VerbCandidate, VerbSearchResult
from .resolution import VerbResolver, create_verb_resolver

__all__ = [
    "VerbLookupConfig",
    "load_config_from_env",
    "DictionarySource",
    "FileDictionarySource",
    "HttpDictionarySource",
    "VerbDictionaryLoader",
    "ConfigurationError",
    "DictionaryFetchError",
    "DictionaryFormatError",
    "VerbLookupError",
    "MatchKind",
    "VerbCandidate",
    "VerbSearchResult",
    "VerbResolver",
    "create_verb_resolver",
]

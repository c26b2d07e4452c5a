"""
Verb resolver: exact key -> inflected form -> fuzzy match.

Combines the dictionary loader, the form index and the approximate index
into the public query surface.
"""
import asyncio
import logging
from typing import Iterable, List, Mapping, Optional

from ..cache import AsyncOnce
from ..data_loader import VerbDictionaryLoader
from ..models import MatchKind, VerbCandidate, VerbDictionary, VerbEntry, VerbSearchResult
from .form_index import FormIndexBuilder
from .fuzzy_matcher import ApproximateVerbIndex
from .normalize import normalize_text

logger = logging.getLogger(__name__)


class VerbResolver:
    """
    Resolves user-typed words to verb dictionary entries.
    
    Escalation for a single best match:
    1. Exact verb key
    2. Inflected form found inside an entry ("ran" -> "run")
    3. Fuzzy match over verb keys ("runn" -> "run")
    
    The dictionary, form index and approximate index are built lazily on
    first use and shared by every later call.
    
    Usage:
        resolver = VerbResolver(VerbDictionaryLoader(source))
        result = await resolver.find_verb_entry("RAN ")
        if result:
            print(result.verb)  # "run"
    """
    
    def __init__(
        self,
        loader: VerbDictionaryLoader,
        fuzzy_threshold: float = 0.3,
        ignore_diacritics: bool = True,
        candidate_limit: int = 8,
    ):
        """
        Initialize verb resolver.
        
        :param loader: Memoized verb dictionary loader
        :param fuzzy_threshold: Maximum fuzzy score to accept (0.0 perfect, 1.0 anything)
        :param ignore_diacritics: Fold accents during fuzzy matching
        :param candidate_limit: Default size of candidate lists
        """
        if not 0.0 <= fuzzy_threshold <= 1.0:
            raise ValueError(f"Threshold must be between 0.0 and 1.0, got {fuzzy_threshold}")
        if candidate_limit <= 0:
            raise ValueError(f"Candidate limit must be positive, got {candidate_limit}")
        
        self._loader = loader
        self.fuzzy_threshold = fuzzy_threshold
        self.ignore_diacritics = ignore_diacritics
        self.candidate_limit = candidate_limit
        
        self._form_index: AsyncOnce[Mapping[str, str]] = AsyncOnce("form index")
        self._approximate_index: AsyncOnce[ApproximateVerbIndex] = AsyncOnce("approximate index")
    
    # ----------------------------
    # Lazily built artifacts
    # ----------------------------
    async def load_dictionary(self) -> VerbDictionary:
        return await self._loader.load()
    
    async def load_form_index(self) -> Mapping[str, str]:
        """Get the form -> verb key index, building it on first call."""
        return await self._form_index.get(self._build_form_index)
    
    async def load_approximate_index(self) -> ApproximateVerbIndex:
        """Get the fuzzy index over verb keys, building it on first call."""
        return await self._approximate_index.get(self._build_approximate_index)
    
    async def _build_form_index(self) -> Mapping[str, str]:
        dictionary = await self.load_dictionary()
        return FormIndexBuilder(dictionary).get_index()
    
    async def _build_approximate_index(self) -> ApproximateVerbIndex:
        dictionary = await self.load_dictionary()
        index = ApproximateVerbIndex(
            list(dictionary.keys()),
            threshold=self.fuzzy_threshold,
            ignore_diacritics=self.ignore_diacritics,
        )
        logger.info(f"Built approximate index over {len(index)} verbs")
        return index
    
    def reset(self) -> None:
        """Drop every cached artifact, dictionary included. Only meant for tests."""
        self._loader.reset()
        self._form_index.reset()
        self._approximate_index.reset()
    
    # ----------------------------
    # Queries
    # ----------------------------
    async def find_verb_entry(self, query: str) -> Optional[VerbSearchResult]:
        """
        Resolve a query to the single best verb entry.
        
        :param query: User input (e.g., "run", "RAN ", "runn")
        :return: VerbSearchResult, or None if nothing matches
        :raises: DictionaryFetchError, DictionaryFormatError if the dictionary cannot be loaded
        """
        normalized = normalize_text(query)
        if not normalized:
            return None
        
        dictionary = await self.load_dictionary()
        entry = dictionary.get(normalized)
        if entry is not None:
            logger.debug(f"Resolved '{normalized}' by exact key")
            return VerbSearchResult(verb=normalized, entry=entry, match_kind=MatchKind.EXACT)
        
        form_index = await self.load_form_index()
        owner = form_index.get(normalized)
        if owner:
            entry = dictionary.get(owner)
            if entry is not None:
                logger.debug(f"Resolved '{normalized}' as a form of '{owner}'")
                return VerbSearchResult(verb=owner, entry=entry, match_kind=MatchKind.FORM)
            logger.warning(f"Form index points '{normalized}' at missing verb '{owner}'")
        
        approximate_index = await self.load_approximate_index()
        matches = approximate_index.search(normalized)
        if not matches:
            logger.debug(f"No match for '{normalized}'")
            return None
        
        best = matches[0]
        entry = dictionary.get(best.verb)
        if entry is None:
            logger.warning(f"Approximate index returned missing verb '{best.verb}'")
            return None
        
        logger.debug(f"Resolved '{normalized}' fuzzily to '{best.verb}' (score={best.score:.3f})")
        return VerbSearchResult(
            verb=best.verb,
            entry=entry,
            match_kind=MatchKind.FUZZY,
            score=best.score,
        )
    
    async def find_verb_entries(self, queries: Iterable[str]) -> List[Optional[VerbSearchResult]]:
        """
        Resolve several queries concurrently.
        
        :param queries: User inputs
        :return: One result (or None) per query, in input order
        """
        return list(await asyncio.gather(*(self.find_verb_entry(q) for q in queries)))
    
    async def search_verb_candidates(
        self,
        query: str,
        limit: Optional[int] = None,
    ) -> List[VerbCandidate]:
        """
        Rank candidate verbs for autocomplete.
        
        Exact key first, then the verb owning the form, then fuzzy hits.
        No duplicates, only verbs present in the dictionary.
        
        :param query: User input
        :param limit: Maximum number of candidates. None uses candidate_limit.
        :return: Ranked VerbCandidate list (empty for empty query or limit <= 0)
        """
        if limit is None:
            limit = self.candidate_limit
        
        normalized = normalize_text(query)
        if not normalized or limit <= 0:
            return []
        
        dictionary = await self.load_dictionary()
        results: List[VerbCandidate] = []
        seen = set()
        
        def add_candidate(verb: Optional[str], score: Optional[float] = None) -> None:
            if not verb or verb in seen or dictionary.get(verb) is None:
                return
            seen.add(verb)
            results.append(VerbCandidate(verb=verb, score=score))
        
        add_candidate(normalized)
        
        form_index = await self.load_form_index()
        add_candidate(form_index.get(normalized))
        
        approximate_index = await self.load_approximate_index()
        remaining = max(limit - len(results), 0)
        if remaining:
            for match in approximate_index.search(normalized, limit=remaining):
                add_candidate(match.verb, match.score)
        
        return results[:limit]
    
    async def get_verb_entry(self, verb: str) -> Optional[VerbEntry]:
        """
        Look up an entry by verb key only (no form or fuzzy fallback).
        
        :param verb: Verb key, any case/whitespace
        :return: The entry, or None
        """
        normalized = normalize_text(verb)
        if not normalized:
            return None
        
        dictionary = await self.load_dictionary()
        return dictionary.get(normalized)

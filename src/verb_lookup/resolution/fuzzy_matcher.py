"""
Approximate matching over verb keys using rapidfuzz.

Handles typos ("runn" -> "run") and partial input ("wal" -> "walk").
"""
from dataclasses import dataclass
from typing import List, Optional, Sequence

from rapidfuzz import fuzz, process

from .normalize import fold_diacritics, normalize_text


@dataclass(frozen=True)
class FuzzyMatch:
    """
    A ranked fuzzy hit.

    Attributes:
        verb: Matched verb key
        score: 0.0 for a perfect match up to 1.0 for no similarity
    """
    verb: str
    score: float


class ApproximateVerbIndex:
    """
    Fuzzy-searchable index over verb keys.

    Scores follow the "lower is better" convention: score = 1 - similarity.
    Hits scoring above the threshold are dropped. The default WRatio scorer
    aligns a short query anywhere inside a longer key, so match position
    does not matter.
    """
    
    def __init__(
        self,
        verbs: Sequence[str],
        threshold: float = 0.3,
        ignore_diacritics: bool = True,
        scorer: str = "WRatio",
    ):
        """
        Initialize approximate index.
        
        :param verbs: Verb keys, in dictionary order
        :param threshold: Maximum score to accept a match (0.0-1.0)
        :param ignore_diacritics: Compare "esta" and "está" as equal
        :param scorer: rapidfuzz scorer to use ("WRatio", "ratio", "partial_ratio", ...)
        """
        if not 0.0 <= threshold <= 1.0:
            raise ValueError(f"Threshold must be between 0.0 and 1.0, got {threshold}")
        
        self.threshold = threshold
        self.ignore_diacritics = ignore_diacritics
        
        # Map scorer names to rapidfuzz functions
        self._scorer_map = {
            "WRatio": fuzz.WRatio,
            "ratio": fuzz.ratio,
            "partial_ratio": fuzz.partial_ratio,
            "token_sort_ratio": fuzz.token_sort_ratio,
            "token_set_ratio": fuzz.token_set_ratio,
        }
        
        if scorer not in self._scorer_map:
            raise ValueError(
                f"Unknown scorer '{scorer}'. "
                f"Must be one of: {list(self._scorer_map.keys())}"
            )
        self.scorer = scorer
        
        self._verbs = tuple(verbs)
        self._choices = [self._prepare(verb) for verb in self._verbs]
        self._score_cutoff = (1.0 - threshold) * 100.0
    
    def __len__(self) -> int:
        return len(self._verbs)
    
    def _prepare(self, text: str) -> str:
        text = normalize_text(text)
        if self.ignore_diacritics:
            text = fold_diacritics(text)
        return text
    
    def search(self, query: str, limit: Optional[int] = None) -> List[FuzzyMatch]:
        """
        Rank verb keys by similarity to the query.
        
        :param query: Free-text query
        :param limit: Maximum number of hits. None returns every hit under the threshold.
        :return: FuzzyMatch list, best first; ties keep dictionary order
        """
        if limit is not None and limit <= 0:
            return []
        
        prepared = self._prepare(query)
        if not prepared or not self._choices:
            return []
        
        hits = process.extract(
            prepared,
            self._choices,
            scorer=self._scorer_map[self.scorer],
            limit=None,
            score_cutoff=self._score_cutoff,
        )
        # (choice, similarity, index): best similarity first, then dictionary order
        hits = sorted(hits, key=lambda hit: (-hit[1], hit[2]))
        if limit is not None:
            hits = hits[:limit]
        
        return [
            FuzzyMatch(verb=self._verbs[index], score=1.0 - similarity / 100.0)
            for _, similarity, index in hits
        ]

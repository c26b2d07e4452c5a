from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional

VerbEntry = Mapping[str, Any]
VerbDictionary = Mapping[str, VerbEntry]


class MatchKind(str, Enum):
    """Tier that produced a match."""
    EXACT = "exact"
    FORM = "form"
    FUZZY = "fuzzy"


@dataclass(frozen=True)
class VerbSearchResult:
    """
    Best match for a single query.

    Attributes:
        verb: Canonical verb key
        entry: The verb's dictionary entry
        match_kind: Tier that resolved the query
        score: Fuzzy score (0.0 is perfect). None for exact and form hits.
    """
    verb: str
    entry: VerbEntry
    match_kind: MatchKind = MatchKind.EXACT
    score: Optional[float] = None

    def __post_init__(self):
        """Validate that only fuzzy hits carry a score."""
        if (self.match_kind is MatchKind.FUZZY) != (self.score is not None):
            raise ValueError(
                f"Score must be set only for fuzzy matches, "
                f"got match_kind={self.match_kind.value}, score={self.score}"
            )

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        result = {"verb": self.verb, "entry": self.entry}
        if self.score is not None:
            result["score"] = self.score
        return result


@dataclass(frozen=True)
class VerbCandidate:
    verb: str
    score: Optional[float] = None

    def to_dict(self) -> dict:
        result = {"verb": self.verb}
        if self.score is not None:
            result["score"] = self.score
        return result

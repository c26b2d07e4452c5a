from dataclasses import dataclass
from typing import Optional


@dataclass
class VerbLookupConfig:
    # Dictionary source (path wins over URL)
    dictionary_url: Optional[str] = None
    dictionary_path: Optional[str] = None
    fetch_timeout: Optional[float] = None

    # Fuzzy matching
    fuzzy_threshold: float = 0.3
    ignore_diacritics: bool = True

    # Candidate search
    candidate_limit: int = 8

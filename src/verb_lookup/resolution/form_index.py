"""
Form index builder.

Maps every inflected or alternate form found in the dictionary entries to
the verb that owns it.
"""
import logging
from types import MappingProxyType
from typing import Dict, Mapping

from ..models import VerbDictionary
from .form_tree import collect_forms

logger = logging.getLogger(__name__)


class FormIndexBuilder:
    """
    Builds the form -> verb key index from a verb dictionary.

    Verbs are visited in dictionary order. When several verbs share a
    form, the first one keeps it; later verbs are never written over it.
    e.g. with "lie" before "lay", the form "lay" (past of "lie") stays on "lie".
    """

    def __init__(self, dictionary: VerbDictionary):
        """
        Initialize form index builder with a dictionary.

        :param dictionary: Verb key -> entry mapping
        """
        self._dictionary = dictionary
        self._index: Dict[str, str] = {}
        self._shadowed = 0

        self._build_index()

    def _build_index(self):
        """Register each verb's forms, first writer wins."""
        for verb, entry in self._dictionary.items():
            for form in collect_forms(entry):
                if form in self._index:
                    if self._index[form] != verb:
                        self._shadowed += 1
                    continue
                self._index[form] = verb

        logger.info(
            f"Built form index: {len(self._index)} forms over "
            f"{len(self._dictionary)} verbs ({self._shadowed} shared forms kept by an earlier verb)"
        )

    @property
    def shadowed_count(self) -> int:
        """Number of (verb, form) pairs hidden because an earlier verb owns the form."""
        return self._shadowed

    def get_index(self) -> Mapping[str, str]:
        """Get the read-only form -> verb key index."""
        return MappingProxyType(self._index)

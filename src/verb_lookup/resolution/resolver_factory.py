"""
Factory for creating verb resolvers.

Picks the dictionary source from configuration and wires the resolver.
"""
from typing import Optional
from ..config import VerbLookupConfig
from ..data_loader import (
    DictionarySource,
    FileDictionarySource,
    HttpDictionarySource,
    VerbDictionaryLoader,
)
from ..exceptions import ConfigurationError
from .verb_resolver import VerbResolver


def create_dictionary_source(config: VerbLookupConfig) -> DictionarySource:
    """
    Choose the dictionary source: local file if configured, otherwise URL.
    
    :param config: VerbLookupConfig instance
    :return: DictionarySource
    :raises: ConfigurationError if neither a path nor a URL is set
    """
    if config.dictionary_path:
        return FileDictionarySource(config.dictionary_path)
    
    if config.dictionary_url:
        return HttpDictionarySource(config.dictionary_url, timeout=config.fetch_timeout)
    
    raise ConfigurationError(
        "Cannot build a verb resolver without a dictionary source. "
        "Set dictionary_path or dictionary_url."
    )


def create_verb_resolver(
    config: VerbLookupConfig,
    source: Optional[DictionarySource] = None,
) -> VerbResolver:
    """
    Factory function to create a VerbResolver.
    
    Nothing is fetched here; the dictionary loads on the first query.
    
    :param config: VerbLookupConfig instance
    :param source: Optional pre-built source (overrides config path/URL)
    :return: Configured VerbResolver
    """
    if source is None:
        source = create_dictionary_source(config)
    
    return VerbResolver(
        loader=VerbDictionaryLoader(source),
        fuzzy_threshold=config.fuzzy_threshold,
        ignore_diacritics=config.ignore_diacritics,
        candidate_limit=config.candidate_limit,
    )

"""
Configuration loader with validation.

Reads VERB_* environment variables (optionally from a .env file).
"""
from dotenv import load_dotenv
from .config import VerbLookupConfig
from .config_validator import (
    get_optional_env,
    parse_bool,
    validate_path,
    validate_positive_int,
    validate_threshold,
    validate_timeout,
    validate_url,
)
from .exceptions import ConfigurationError


def load_config_from_env() -> VerbLookupConfig:
    """
    Load configuration from environment variables with validation.
    
    Usage:
        config = load_config_from_env()
        resolver = create_verb_resolver(config)
    
    :return: Validated VerbLookupConfig instance
    :raises: ConfigurationError if no dictionary source is set or a value is invalid
    """
    # Load .env file if it exists (for local development)
    load_dotenv()
    
    config = VerbLookupConfig(
        dictionary_url=get_optional_env("VERB_DICTIONARY_URL", detect_placeholder=True),
        dictionary_path=get_optional_env("VERB_DICTIONARY_PATH"),
        fetch_timeout=validate_timeout(
            get_optional_env("VERB_FETCH_TIMEOUT"), "VERB_FETCH_TIMEOUT"
        ),
        fuzzy_threshold=validate_threshold(
            get_optional_env("VERB_FUZZY_THRESHOLD", "0.3"), "VERB_FUZZY_THRESHOLD"
        ),
        ignore_diacritics=parse_bool(
            get_optional_env("VERB_IGNORE_DIACRITICS"), "VERB_IGNORE_DIACRITICS", True
        ),
        candidate_limit=validate_positive_int(
            get_optional_env("VERB_CANDIDATE_LIMIT", "8"), "VERB_CANDIDATE_LIMIT"
        ),
    )
    
    if config.dictionary_path:
        validate_path(config.dictionary_path, "VERB_DICTIONARY_PATH", must_exist=True)
    elif config.dictionary_url:
        validate_url(config.dictionary_url, "VERB_DICTIONARY_URL")
    else:
        raise ConfigurationError(
            "A verb dictionary source is required.\n"
            "Set VERB_DICTIONARY_PATH to a local JSON file or "
            "VERB_DICTIONARY_URL to an http(s) URL."
        )
    
    return config

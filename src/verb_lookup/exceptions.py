class VerbLookupError(Exception):
    """Base exception for verb lookup."""


class ConfigurationError(VerbLookupError):
    """Raised when configuration is missing or invalid."""


class DictionaryFetchError(VerbLookupError):
    """Raised when the verb dictionary cannot be retrieved."""


class DictionaryFormatError(VerbLookupError):
    """Raised when the fetched verb dictionary is not a JSON object of entries."""

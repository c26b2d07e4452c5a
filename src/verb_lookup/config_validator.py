"""
Configuration validation utilities.

Every validator raises ConfigurationError with a message naming the
offending environment variable.
"""
import os
import warnings
from typing import Optional
from .exceptions import ConfigurationError


def get_optional_env(
    key: str,
    default: Optional[str] = None,
    detect_placeholder: bool = False,
) -> Optional[str]:
    """
    Get optional environment variable.
    
    :param key: Environment variable name
    :param default: Default value if not set
    :param detect_placeholder: Treat template values ("your_host", ...) as unset
    :return: Environment variable value or default
    """
    value = os.getenv(key, default)
    
    if detect_placeholder and value and _is_placeholder(value):
        # Warn but don't fail for optional configs
        warnings.warn(
            f"{key} appears to be a placeholder. Using default or None.",
            UserWarning
        )
        return default
    
    return value


def parse_bool(value: Optional[str], key: str, default: bool) -> bool:
    """
    Parse a boolean flag ("true"/"false", "1"/"0", "yes"/"no").
    
    :param value: Raw value (None means default)
    :param key: Environment variable name (for error messages)
    :param default: Value used when unset
    :return: Parsed flag
    :raises: ConfigurationError if the value is not a recognised flag
    """
    if value is None or not value.strip():
        return default
    
    lowered = value.strip().lower()
    if lowered in ("true", "1", "yes"):
        return True
    if lowered in ("false", "0", "no"):
        return False
    
    raise ConfigurationError(
        f"{key} must be true or false, got '{value}'."
    )


def validate_threshold(value: str, key: str) -> float:
    """
    Validate a fuzzy score threshold.
    
    :param value: Raw value
    :param key: Environment variable name (for error messages)
    :return: Threshold between 0.0 and 1.0
    :raises: ConfigurationError if not a number in range
    """
    try:
        threshold = float(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{key} must be a number, got '{value}'.")
    
    if not 0.0 <= threshold <= 1.0:
        raise ConfigurationError(
            f"{key} must be between 0.0 and 1.0, got {threshold}."
        )
    
    return threshold


def validate_positive_int(value: str, key: str) -> int:
    """Validate a strictly positive integer setting."""
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{key} must be an integer, got '{value}'.")
    
    if number <= 0:
        raise ConfigurationError(f"{key} must be positive, got {number}.")
    
    return number


def validate_timeout(value: Optional[str], key: str) -> Optional[float]:
    """Validate an optional timeout in seconds. Unset means no timeout."""
    if value is None or not value.strip():
        return None
    
    try:
        timeout = float(value)
    except ValueError:
        raise ConfigurationError(f"{key} must be a number of seconds, got '{value}'.")
    
    if timeout <= 0:
        raise ConfigurationError(f"{key} must be positive, got {timeout}.")
    
    return timeout


def _is_placeholder(value: str) -> bool:
    """Check if value is a placeholder."""
    if not value:
        return False
    
    placeholder_patterns = [
        "your_",
        "placeholder",
        "example.com",
        "xxx",
        "replace",
        "TODO",
    ]
    
    value_lower = value.lower()
    return any(pattern.lower() in value_lower for pattern in placeholder_patterns)


def validate_path(path: str, path_name: str, must_exist: bool = False) -> str:
    """
    Validate file/directory path.
    
    :param path: Path to validate
    :param path_name: Name of the path (for error messages)
    :param must_exist: Whether path must exist
    :return: Validated path
    :raises: ConfigurationError if invalid
    """
    if not path:
        raise ConfigurationError(f"{path_name} is required.")
    
    if must_exist and not os.path.exists(path):
        raise ConfigurationError(
            f"{path_name} does not exist: {path}\n"
            f"Please check the path and ensure the file exists."
        )
    
    return path


def validate_url(url: str, url_name: str) -> str:
    """
    Validate that a dictionary URL is absolute http(s).
    
    :param url: URL to validate
    :param url_name: Name of the setting (for error messages)
    :return: Validated URL
    :raises: ConfigurationError if invalid
    """
    if not url:
        raise ConfigurationError(f"{url_name} is required.")
    
    if not url.startswith(("http://", "https://")):
        raise ConfigurationError(
            f"{url_name} must be an http(s) URL, got '{url}'."
        )
    
    return url

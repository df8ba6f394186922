"""
Configuration and credential validation utilities.
"""

import importlib
import os
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

from dotenv import dotenv_values

from .config import (
    ARTIST_CONFIG,
    SPOTIFY_CONFIG,
    ITUNES_CONFIG,
    YOUTUBE_CONFIG,
    SYNC_CONFIG,
    LOGGING_CONFIG,
    ENV_FILE,
    ERROR_MESSAGES,
)
from .exceptions import ConfigurationError


def check_dependencies() -> Tuple[bool, List[str]]:
    """
    Check if all required dependencies are installed.
    
    Returns:
        Tuple of (all_installed, list_of_missing_dependencies)
    """
    required_packages = {
        "requests": "requests",
        "rich": "rich",
        "dotenv": "python-dotenv",
    }
    
    missing = []
    for module_name, package_name in required_packages.items():
        try:
            importlib.import_module(module_name)
        except ImportError:
            missing.append(package_name)
    
    return len(missing) == 0, missing


def load_credentials(env_file: Optional[Path] = None) -> Dict[str, str]:
    """
    Load credentials from a local key-value file.
    
    Values already present in the process environment take precedence
    over the file. A missing file yields only the environment values.
    
    Args:
        env_file: Path to the .env file (defaults to ENV_FILE)
        
    Returns:
        Mapping of credential names to non-empty values
    """
    path = Path(env_file) if env_file else ENV_FILE
    values: Dict[str, str] = {}
    if path.is_file():
        values.update({k: v for k, v in dotenv_values(path).items() if v})
    for key, value in os.environ.items():
        if value:
            values[key] = value
    return values


def require_credentials(credentials: Dict[str, str], keys: Iterable[str]) -> Dict[str, str]:
    """
    Ensure every required key is present before any network call is made.
    
    Raises:
        ConfigurationError: If one or more keys are missing
    """
    missing = [key for key in keys if not credentials.get(key)]
    if missing:
        raise ConfigurationError(
            f"{ERROR_MESSAGES['MISSING_CREDENTIALS']}: {', '.join(missing)} "
            f"(set them in your .env file or environment)"
        )
    return {key: credentials[key] for key in keys}


def validate_configuration() -> Tuple[bool, List[str]]:
    """
    Validate application configuration.
    
    Returns:
        Tuple of (is_valid, list_of_errors)
    """
    errors = []
    
    deps_ok, missing_deps = check_dependencies()
    if not deps_ok:
        errors.append(
            f"Missing required dependencies: {', '.join(missing_deps)}. "
            f"Please install them with: pip install -e ."
        )
    
    if not ARTIST_CONFIG["NAME"].strip():
        errors.append("Artist NAME must not be empty")
    
    if not ARTIST_CONFIG["SPOTIFY_ID"].strip():
        errors.append("Artist SPOTIFY_ID must not be empty")
    
    if SYNC_CONFIG["REQUEST_DELAY"] < 0:
        errors.append("REQUEST_DELAY must be >= 0")
    
    if not 1 <= SPOTIFY_CONFIG["PAGE_LIMIT"] <= 50:
        errors.append("Spotify PAGE_LIMIT must be between 1 and 50")
    
    for name, section in (("Spotify", SPOTIFY_CONFIG), ("iTunes", ITUNES_CONFIG), ("YouTube", YOUTUBE_CONFIG)):
        if section["TIMEOUT"] < 1:
            errors.append(f"{name} TIMEOUT must be >= 1")
    
    for name, section in (("iTunes", ITUNES_CONFIG), ("YouTube", YOUTUBE_CONFIG)):
        if section["MAX_RESULTS"] < 1:
            errors.append(f"{name} MAX_RESULTS must be >= 1")
    
    valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    if LOGGING_CONFIG["LEVEL"] not in valid_log_levels:
        errors.append(f"LOG_LEVEL must be one of: {', '.join(valid_log_levels)}")
    
    is_valid = len(errors) == 0
    return is_valid, errors


def validate_and_raise():
    """
    Validate configuration and raise ConfigurationError if invalid.
    """
    is_valid, errors = validate_configuration()
    if not is_valid:
        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        raise ConfigurationError(error_msg)

"""
Credential and mode loading.

Credentials come from an optional JSON file in the config_credentials.json
layout, with environment variables filling any key the file leaves out:

    {
        "mode": "DEBUG",
        "azure": {
            "azure_subscription_id": "...",
            "azure_tenant_id": "...",
            "azure_client_id": "...",
            "azure_client_secret": "..."
        }
    }

A flat object with the azure_* keys at the top level is accepted too.

Usage:
    from logic_app_deployer.core.config_loader import load_credentials

    credentials = load_credentials("config_credentials.json")
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

from logic_app_deployer import constants as CONSTANTS
from .exceptions import ConfigurationError


def _load_json_file(file_path: Path) -> Dict[str, Any]:
    """
    Load a JSON object from file.

    Raises:
        ConfigurationError: If the file is missing, unreadable, not valid
            JSON, or not a JSON object
    """
    if not file_path.exists():
        raise ConfigurationError(
            "Credentials file not found",
            config_file=str(file_path)
        )

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            content = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(
            f"Invalid JSON in credentials file: {e}",
            config_file=str(file_path)
        )
    except OSError as e:
        raise ConfigurationError(
            f"Cannot read credentials file: {e}",
            config_file=str(file_path)
        )

    if not isinstance(content, dict):
        raise ConfigurationError(
            "Credentials file must contain a JSON object",
            config_file=str(file_path)
        )
    return content


def load_config_file(path: Optional[str]) -> Dict[str, Any]:
    """Load the raw config file, or an empty dict when no path is given."""
    if not path:
        return {}
    return _load_json_file(Path(path).expanduser())


def load_credentials(
    path: Optional[str] = None,
    config: Optional[Dict[str, Any]] = None
) -> Dict[str, str]:
    """
    Load Azure credentials.

    Args:
        path: Optional credentials file path
        config: Already loaded file content (skips reading path)

    Returns:
        Dictionary with the azure_* keys that have a value. File values
        take priority over environment variables.

    Raises:
        ConfigurationError: If the file cannot be loaded
    """
    if config is None:
        config = load_config_file(path)

    section = config.get(CONSTANTS.CREDENTIALS_PROVIDER_KEY, config)
    if not isinstance(section, dict):
        raise ConfigurationError(
            f"'{CONSTANTS.CREDENTIALS_PROVIDER_KEY}' section must be a JSON object",
            config_file=path
        )

    credentials = {}
    for key, env_var in CONSTANTS.CREDENTIAL_ENV_VARS.items():
        value = section.get(key) or os.environ.get(env_var)
        if value:
            credentials[key] = value
    return credentials


def load_debug_mode(config: Dict[str, Any]) -> bool:
    """True if the config's "mode" is DEBUG (case-insensitive)."""
    mode = config.get(CONSTANTS.CONFIG_MODE_KEY) or ""
    return str(mode).upper() == CONSTANTS.DEBUG_MODE

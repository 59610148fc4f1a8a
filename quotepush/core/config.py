import json
import os
import sys
from typing import Any, Dict, Optional

DEFAULT_CONFIG_PATH = 'config.json'
TOKEN_ENV_VAR = 'QUOTEPUSH_GITHUB_TOKEN'


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """Reads the JSON config. Without an explicit path a missing file means defaults."""

    explicit = config_path is not None
    path = config_path or DEFAULT_CONFIG_PATH
    try:
        with open(path, 'r', encoding='utf-8') as f:
            config = json.load(f)
    except FileNotFoundError:
        if not explicit:
            return {}
        print(f"Error: config file '{path}' not found.")
        sys.exit(1)
    except json.JSONDecodeError:
        print(f"Error: invalid JSON in '{path}'.")
        sys.exit(1)

    if not isinstance(config, dict):
        print(f"Error: '{path}' must contain a JSON object.")
        sys.exit(1)
    return config


def token_from_env() -> str:
    return os.getenv(TOKEN_ENV_VAR, '')

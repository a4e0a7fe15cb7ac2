"""API key and model lookup for the server."""

import json
import os

from core.config import GEMINI_MODEL

CONFIG_FILE = os.path.expanduser('~/.config/kanacards/config.json')


def load_config(config_file: str = None) -> dict:
    """Load the JSON config file. Raises FileNotFoundError if it is missing."""
    config_file = config_file or CONFIG_FILE
    if not os.path.exists(config_file):
        raise FileNotFoundError(
            f"Config file not found at {config_file}\n"
            f'Please create it with: {{"gemini_api_key": "YOUR_API_KEY_HERE"}}'
        )
    with open(config_file, 'r') as f:
        return json.load(f)


def _load_config_or_empty(config_file: str = None) -> dict:
    try:
        return load_config(config_file)
    except FileNotFoundError:
        return {}


def get_api_key(config_file: str = None) -> str | None:
    """Get API key from env or config file."""
    api_key = os.environ.get('GEMINI_API_KEY')
    if not api_key:
        api_key = _load_config_or_empty(config_file).get('gemini_api_key')
    return api_key


def get_model_name(config_file: str = None) -> str:
    """Get the Gemini model name from env or config file."""
    model_name = os.environ.get('GEMINI_MODEL')
    if not model_name:
        model_name = _load_config_or_empty(config_file).get('gemini_model')
    return model_name or GEMINI_MODEL

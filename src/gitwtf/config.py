"""Configuration defaults and credential loading for git-wtf."""

import os
from pathlib import Path
from typing import Optional, Union

from dotenv import dotenv_values
from loguru import logger

from gitwtf.errors import CredentialMissing

API_KEY_NAME = "OPENAI_API_KEY"
DEFAULT_ENV_FILE = ".env"
DEFAULT_MODEL = "gpt-3.5-turbo"
DEFAULT_ENDPOINT = "https://api.openai.com/v1/chat/completions"
DEFAULT_TEMPERATURE = 0.7
DEFAULT_NUM_COMMITS = 5
DEFAULT_TIMEOUT: Optional[float] = None  # requests never times out on its own


def mask_secret(value: str) -> str:
    """Show only the first and last four characters of a secret."""
    if len(value) > 8:
        return f"{value[:4]}...{value[-4:]}"
    return "[key too short]"


def _read_env_file(env_file: Union[str, Path]) -> Optional[str]:
    path = Path(env_file)
    if not path.is_file():
        logger.warning(f"Could not find env file: {path}")
        return None

    logger.debug(f"Reading {API_KEY_NAME} from {path}")
    return dotenv_values(path).get(API_KEY_NAME)


def load_api_key(env_file: Union[str, Path] = DEFAULT_ENV_FILE) -> str:
    """Load the API key from the env file, falling back to the process environment.

    The env file is parsed directly rather than merged into ``os.environ`` so
    a key exported in the shell never shadows the one the user put in the file.

    Raises:
        CredentialMissing: if the key is absent or empty in both places.
    """
    api_key = (_read_env_file(env_file) or "").strip()
    if not api_key:
        api_key = os.environ.get(API_KEY_NAME, "").strip()
        if api_key:
            logger.debug(f"Using {API_KEY_NAME} from the process environment")

    if not api_key:
        raise CredentialMissing(f"{API_KEY_NAME} not found in {env_file} or the environment")

    logger.debug(f"Using API key: {mask_secret(api_key)}")
    return api_key

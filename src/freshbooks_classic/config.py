"""Configuration management for the fbc command line tool."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv
from platformdirs import user_config_dir

from .auth import APIToken, Credential, OAuthToken

APP_NAME = "freshbooks-classic"
CONFIG_DIR = Path(user_config_dir(APP_NAME))
CONFIG_FILE = CONFIG_DIR / "config.yaml"

DEFAULT_PER_PAGE = 25

ENV_KEYS = {
    "account": "FRESHBOOKS_ACCOUNT",
    "api_token": "FRESHBOOKS_API_TOKEN",
    "consumer_key": "FRESHBOOKS_OAUTH_CONSUMER_KEY",
    "consumer_secret": "FRESHBOOKS_OAUTH_CONSUMER_SECRET",
    "oauth_token": "FRESHBOOKS_OAUTH_TOKEN",
    "oauth_token_secret": "FRESHBOOKS_OAUTH_TOKEN_SECRET",
    "per_page": "FRESHBOOKS_PER_PAGE",
}


@dataclass
class Config:
    """Application configuration."""

    account: str
    credential: Optional[Credential] = None
    per_page: int = DEFAULT_PER_PAGE


def load_file_config(path: Path = CONFIG_FILE) -> dict:
    """Load settings from the YAML config file.

    The file mirrors the environment variables in lower case:
    ```yaml
    account: mycompany
    api_token: 0123456789abcdef
    per_page: 50
    ```
    or, for OAuth:
    ```yaml
    account: mycompany
    consumer_key: mycompany
    consumer_secret: s3cret
    oauth_token: abc
    oauth_token_secret: def
    ```
    """
    if not path.exists():
        return {}

    with open(path) as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a mapping")
    return {key: str(value) for key, value in data.items() if key in ENV_KEYS and value is not None}


def load_env_config() -> dict:
    """Load settings from the environment (and a .env file)."""
    load_dotenv()
    values = {}
    for key, env_name in ENV_KEYS.items():
        value = os.getenv(env_name)
        if value:
            values[key] = value
    return values


def build_credential(values: dict) -> Optional[Credential]:
    """Pick the credential from merged settings; an API token wins over OAuth."""
    if values.get("api_token"):
        return APIToken(values["api_token"])

    oauth_keys = ("consumer_key", "consumer_secret", "oauth_token", "oauth_token_secret")
    present = [key for key in oauth_keys if values.get(key)]
    if not present:
        return None
    if len(present) != len(oauth_keys):
        missing = ", ".join(ENV_KEYS[key] for key in oauth_keys if key not in present)
        raise ValueError(f"Incomplete OAuth credentials, missing: {missing}")

    return OAuthToken(
        consumer_key=values["consumer_key"],
        consumer_secret=values["consumer_secret"],
        token=values["oauth_token"],
        token_secret=values["oauth_token_secret"],
    )


def load_config(path: Path = CONFIG_FILE) -> Config:
    """Load complete application configuration; environment overrides the file."""
    values = {**load_file_config(path), **load_env_config()}

    account = values.get("account")
    if not account:
        raise ValueError(f"Missing {ENV_KEYS['account']} in environment, .env or {path}")

    per_page = DEFAULT_PER_PAGE
    if values.get("per_page"):
        try:
            per_page = int(values["per_page"])
        except ValueError:
            raise ValueError(f"{ENV_KEYS['per_page']} must be an integer") from None

    return Config(
        account=account,
        credential=build_credential(values),
        per_page=per_page,
    )

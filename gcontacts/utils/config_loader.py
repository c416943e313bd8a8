"""
Configuration loader for the contacts client
"""

import os
import yaml
from pathlib import Path
from typing import Optional
from pydantic import BaseModel, Field, ValidationError
import logging

from gcontacts.integrations.contracts.interfaces import ClientOptions

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "contacts_config.yml"


class ContactsAPIConfig(BaseModel):
    """Endpoints and request settings for the contacts feed and token APIs"""

    contacts_base_url: str = "https://www.google.com"
    feed_root: str = "m8"
    token_url: str = "https://accounts.google.com/o/oauth2/token"
    max_results: int = Field(default=2000, ge=1, le=10000)
    timeout_seconds: float = Field(default=20.0, gt=0.0)


def load_contacts_config(config_path: Optional[Path] = None) -> ContactsAPIConfig:
    """
    Load and validate contacts API configuration from YAML file

    Args:
        config_path: Path to config file. Defaults to config/contacts_config.yml

    Returns:
        Validated ContactsAPIConfig object

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValidationError: If config doesn't match schema
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        config_data = yaml.safe_load(f) or {}

    try:
        config = ContactsAPIConfig(**(config_data.get("contacts_api") or {}))
        logger.info(f"Successfully loaded config from {config_path}")
        return config
    except ValidationError as e:
        logger.error(f"Config validation failed: {e}")
        raise


def load_client_options_from_env() -> ClientOptions:
    """Read client credentials from GOOGLE_* environment variables (unset ones stay None)"""
    return ClientOptions(
        consumer_key=os.getenv("GOOGLE_CONSUMER_KEY"),
        consumer_secret=os.getenv("GOOGLE_CONSUMER_SECRET"),
        token=os.getenv("GOOGLE_ACCESS_TOKEN"),
        refresh_token=os.getenv("GOOGLE_REFRESH_TOKEN"),
    )

"""Database configuration and Supabase client initialization"""
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv
from supabase import create_client, Client

DEFAULT_TABLE = 'waitlist'


@dataclass(frozen=True)
class StoreConfig:
    """Remote store settings, loaded once at start-up"""
    url: str
    key: str
    table: str = DEFAULT_TABLE


def load_config(environ: Optional[Mapping[str, str]] = None) -> StoreConfig:
    """
    Load the store configuration from the environment.

    Reads SUPABASE_URL and SUPABASE_ANON_KEY (required) and WAITLIST_TABLE
    (optional). A .env file is honoured when reading the process environment.

    Raises:
        ValueError: if a required variable is missing or blank
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    url = (environ.get('SUPABASE_URL') or '').strip().rstrip('/')
    key = (environ.get('SUPABASE_ANON_KEY') or '').strip()
    table = (environ.get('WAITLIST_TABLE') or '').strip() or DEFAULT_TABLE

    # These must be set as environment variables - no defaults for security
    missing = [name for name, value in (('SUPABASE_URL', url), ('SUPABASE_ANON_KEY', key)) if not value]
    if missing:
        raise ValueError(
            f"Missing required environment variables: {' and '.join(missing)} must be set. "
            "Please configure these in your environment or .env file."
        )

    return StoreConfig(url=url, key=key, table=table)


def create_store_client(config: StoreConfig) -> Client:
    """Create the Supabase client for the configured project"""
    return create_client(config.url, config.key)

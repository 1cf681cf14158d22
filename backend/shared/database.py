"""
Supabase client for the DevHub store.

The backend connects with the service role key and enforces ownership in
the service layer, so a single process-wide client is enough.
"""

import logging
from typing import Optional
from supabase import create_client, Client

from .config import Settings, get_settings

logger = logging.getLogger(__name__)

# Probed at startup and by the readiness endpoint
PROBE_TABLE = "users"

_client: Optional[Client] = None


def create_service_client(settings: Settings) -> Client:
    """
    Build a service-role client from settings.

    Raises:
        RuntimeError: If SUPABASE_URL or SUPABASE_SERVICE_ROLE_KEY is unset
    """
    missing = [
        name
        for name, value in (
            ("SUPABASE_URL", settings.supabase_url),
            ("SUPABASE_SERVICE_ROLE_KEY", settings.supabase_service_role_key),
        )
        if not value
    ]
    if missing:
        raise RuntimeError(f"Supabase configuration missing: set {', '.join(missing)}")
    return create_client(settings.supabase_url, settings.supabase_service_role_key)


def get_supabase_client() -> Client:
    """The shared client, created on first use."""
    global _client
    if _client is None:
        _client = create_service_client(get_settings())
    return _client


def check_connection(client: Client) -> None:
    """
    Run a trivial query to make sure the store is reachable.

    Any exception propagates to the caller.
    """
    client.table(PROBE_TABLE).select("id").limit(1).execute()
    logger.info("Database connection verified")


def reset_client_cache() -> None:
    """Drop the shared client; the next call builds a new one."""
    global _client
    _client = None

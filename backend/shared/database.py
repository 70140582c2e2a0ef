"""
Document store client factory.

The store is a Supabase project accessed with the service role key.
Clients are built explicitly and handed to repositories by the
ServiceContainer; nothing here caches a process-wide client.
"""

import logging

from supabase import create_client, Client

from .config import Settings
from .exceptions import ExternalServiceError

logger = logging.getLogger(__name__)


def create_store_client(settings: Settings) -> Client:
    """
    Create a Supabase client with the service role (bypasses RLS).

    Args:
        settings: Application settings carrying the store connection info

    Returns:
        Supabase client configured with the service role key

    Raises:
        RuntimeError: If the connection settings are missing
    """
    if not settings.supabase_url or not settings.supabase_service_role_key:
        raise RuntimeError(
            "Supabase configuration missing. "
            "Set SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY environment variables."
        )
    return create_client(
        settings.supabase_url,
        settings.supabase_service_role_key,
    )


def ping_store(client: Client) -> None:
    """
    Issue a trivial query to confirm the store is reachable.

    Raises:
        ExternalServiceError: If the query fails
    """
    try:
        client.table("users").select("id").limit(1).execute()
    except Exception as e:
        raise ExternalServiceError(
            f"Document store unreachable: {e}",
            service="supabase",
            code="STORE_UNAVAILABLE",
        ) from e
    logger.info("Pinged document store successfully")

"""Configuration management for the Item Service.

Centralizes all environment variable access for better testability and maintainability.
"""

import os
from typing import Optional

DEFAULT_WORKER_POOL_SIZE = 10
DEFAULT_ITEMS_TABLE = "items"

STORE_BACKENDS = ("memory", "supabase")
PROCESSING_MODES = ("concurrent", "sequential")


def _positive_number(raw: Optional[str], cast):
    """Parse a positive number from an env value, None if missing or invalid."""
    if raw is None or not raw.strip():
        return None
    try:
        value = cast(raw)
    except ValueError:
        return None
    return value if value > 0 else None


class Config:
    """Application configuration loaded from environment variables."""

    # Supabase configuration
    @staticmethod
    def supabase_url() -> Optional[str]:
        """Get Supabase project URL from environment."""
        return os.environ.get("SUPABASE_URL")

    @staticmethod
    def supabase_service_role_key() -> Optional[str]:
        """Get Supabase service role key from environment."""
        return os.environ.get("SUPABASE_SERVICE_ROLE_KEY")

    @staticmethod
    def items_table() -> str:
        """Get the table holding items."""
        return os.environ.get("ITEMS_TABLE") or DEFAULT_ITEMS_TABLE

    # Item store
    @staticmethod
    def store_backend() -> str:
        """Get the item store backend ('memory' or 'supabase').

        Defaults to Supabase when it is configured, otherwise the in-memory store.
        """
        backend = (os.environ.get("ITEM_STORE_BACKEND") or "").strip().lower()
        if backend in STORE_BACKENDS:
            return backend
        return "supabase" if Config.is_supabase_configured() else "memory"

    # Batch processing
    @staticmethod
    def worker_pool_size() -> int:
        """Get the fixed size of the batch worker pool."""
        size = _positive_number(os.environ.get("ITEM_WORKER_POOL_SIZE"), int)
        return size or DEFAULT_WORKER_POOL_SIZE

    @staticmethod
    def batch_timeout_seconds() -> Optional[float]:
        """Get the wait-for-all timeout for a batch, None for no timeout."""
        return _positive_number(os.environ.get("ITEM_BATCH_TIMEOUT_SECONDS"), float)

    @staticmethod
    def processing_mode() -> str:
        """Get the batch processing mode ('concurrent' or 'sequential')."""
        mode = (os.environ.get("ITEM_PROCESSING_MODE") or "").strip().lower()
        return mode if mode in PROCESSING_MODES else "concurrent"

    # Helper methods
    @staticmethod
    def is_supabase_configured() -> bool:
        """Check if Supabase credentials are present."""
        return all([
            Config.supabase_url(),
            Config.supabase_service_role_key(),
        ])

    @staticmethod
    def get_missing_config() -> list[str]:
        """Get list of missing configuration keys for the selected backend."""
        missing = []
        if Config.store_backend() != "supabase":
            return missing
        if not Config.supabase_url():
            missing.append("SUPABASE_URL")
        if not Config.supabase_service_role_key():
            missing.append("SUPABASE_SERVICE_ROLE_KEY")
        return missing


# Singleton instance for easy access
config = Config()

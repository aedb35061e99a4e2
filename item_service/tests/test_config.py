"""Unit tests for Config."""

from item_service.config import DEFAULT_WORKER_POOL_SIZE, Config


class TestConfig:
    """Test environment-driven configuration."""

    def test_pool_size_default(self, monkeypatch):
        monkeypatch.delenv("ITEM_WORKER_POOL_SIZE", raising=False)

        assert Config.worker_pool_size() == DEFAULT_WORKER_POOL_SIZE

    def test_pool_size_invalid_falls_back(self, monkeypatch):
        """Test non-numeric and non-positive sizes use the default."""
        for raw in ("abc", "0", "-4"):
            monkeypatch.setenv("ITEM_WORKER_POOL_SIZE", raw)
            assert Config.worker_pool_size() == DEFAULT_WORKER_POOL_SIZE

    def test_batch_timeout(self, monkeypatch):
        monkeypatch.setenv("ITEM_BATCH_TIMEOUT_SECONDS", "2.5")
        assert Config.batch_timeout_seconds() == 2.5

        monkeypatch.setenv("ITEM_BATCH_TIMEOUT_SECONDS", "0")
        assert Config.batch_timeout_seconds() is None

    def test_processing_mode(self, monkeypatch):
        monkeypatch.setenv("ITEM_PROCESSING_MODE", "SEQUENTIAL")
        assert Config.processing_mode() == "sequential"

        monkeypatch.setenv("ITEM_PROCESSING_MODE", "turbo")
        assert Config.processing_mode() == "concurrent"

    def test_store_backend_follows_supabase(self, monkeypatch):
        """Test the backend defaults to Supabase only when configured."""
        monkeypatch.delenv("ITEM_STORE_BACKEND", raising=False)
        monkeypatch.setenv("SUPABASE_URL", "https://example.supabase.co")
        monkeypatch.setenv("SUPABASE_SERVICE_ROLE_KEY", "key")
        assert Config.store_backend() == "supabase"

        monkeypatch.setenv("ITEM_STORE_BACKEND", "memory")
        assert Config.store_backend() == "memory"

    def test_missing_config_for_supabase(self, monkeypatch):
        monkeypatch.setenv("ITEM_STORE_BACKEND", "supabase")
        monkeypatch.delenv("SUPABASE_URL", raising=False)
        monkeypatch.delenv("SUPABASE_SERVICE_ROLE_KEY", raising=False)

        assert Config.get_missing_config() == ["SUPABASE_URL", "SUPABASE_SERVICE_ROLE_KEY"]

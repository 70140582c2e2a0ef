"""Tests for shared/database.py."""

from unittest.mock import MagicMock, patch

import pytest

from shared.config import Settings
from shared.database import create_store_client, ping_store
from shared.exceptions import ExternalServiceError


class TestCreateStoreClient:
    def test_missing_config_raises(self):
        settings = Settings(supabase_url="", supabase_service_role_key="")
        with pytest.raises(RuntimeError, match="SUPABASE_URL"):
            create_store_client(settings)

    @patch("shared.database.create_client")
    def test_uses_service_role_key(self, mock_create_client):
        mock_create_client.return_value = MagicMock()
        settings = Settings(
            supabase_url="https://project.supabase.co",
            supabase_service_role_key="service-role",
        )

        client = create_store_client(settings)

        assert client is mock_create_client.return_value
        mock_create_client.assert_called_once_with(
            "https://project.supabase.co",
            "service-role",
        )


class TestPingStore:
    def test_successful_ping(self):
        client = MagicMock()
        ping_store(client)
        client.table.assert_called_once_with("users")

    def test_failed_ping_raises_external_service_error(self):
        client = MagicMock()
        client.table.return_value.select.return_value.limit.return_value.execute.side_effect = (
            ConnectionError("refused")
        )

        with pytest.raises(ExternalServiceError) as exc_info:
            ping_store(client)

        assert exc_info.value.code == "STORE_UNAVAILABLE"
        assert exc_info.value.service == "supabase"

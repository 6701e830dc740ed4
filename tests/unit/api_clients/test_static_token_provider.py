"""Tests for the pre-issued bearer token provider."""

import pytest

from archive_client.api_clients import StaticTokenProvider


class TestStaticTokenProvider:
    def test_empty_token_rejected(self):
        with pytest.raises(ValueError):
            StaticTokenProvider("")

    @pytest.mark.asyncio
    async def test_returns_same_token_for_any_scopes(self):
        provider = StaticTokenProvider("test-token")

        first = await provider.get_access_token(["https://a.example.com/.default"])
        second = await provider.get_access_token(["https://b.example.com/.default"])

        assert first.token == second.token == "test-token"

    @pytest.mark.asyncio
    async def test_keeps_no_per_call_state(self):
        """Repeated calls on a long-lived provider do not grow its state."""
        provider = StaticTokenProvider("test-token")
        state_before = dict(vars(provider))

        for _ in range(1000):
            await provider.get_access_token(["https://a.example.com/.default"])

        assert vars(provider) == state_before

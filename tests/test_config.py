"""Tests for phaseconf.config module."""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest

from phaseconf.config import ProxySettings


class TestProxySettings:
    """Tests for ProxySettings."""

    def test_defaults_are_empty(self) -> None:
        proxy = ProxySettings()
        assert proxy.http_proxy == ""
        assert proxy.https_proxy == ""
        assert proxy.no_proxy == ""
        assert proxy.items() == []

    def test_frozen(self) -> None:
        proxy = ProxySettings()
        with pytest.raises(AttributeError):
            proxy.http_proxy = "http://proxy"  # type: ignore[misc]

    def test_items_skip_empty_values(self) -> None:
        proxy = ProxySettings(https_proxy="https://proxy:8443")
        assert proxy.items() == [("HTTPS_PROXY", "https://proxy:8443")]

    def test_items_order(self) -> None:
        proxy = ProxySettings(http_proxy="h", https_proxy="s", no_proxy="n")
        assert [name for name, _ in proxy.items()] == ["HTTP_PROXY", "HTTPS_PROXY", "NO_PROXY"]


class TestFromEnvironment:
    """Tests for ProxySettings.from_environment."""

    def test_upper_case_vars(self) -> None:
        proxy = ProxySettings.from_environment(
            {"HTTP_PROXY": "http://p:3128", "NO_PROXY": "localhost"}
        )
        assert proxy == ProxySettings(http_proxy="http://p:3128", no_proxy="localhost")

    def test_lower_case_vars(self) -> None:
        proxy = ProxySettings.from_environment({"https_proxy": "https://p:8443"})
        assert proxy.https_proxy == "https://p:8443"

    def test_upper_case_wins(self) -> None:
        proxy = ProxySettings.from_environment(
            {"HTTP_PROXY": "http://upper", "http_proxy": "http://lower"}
        )
        assert proxy.http_proxy == "http://upper"

    def test_empty_environment(self) -> None:
        assert ProxySettings.from_environment({}) == ProxySettings()

    def test_reads_os_environ_by_default(self) -> None:
        with patch.dict(os.environ, {"HTTPS_PROXY": "https://ambient"}, clear=True):
            assert ProxySettings.from_environment().https_proxy == "https://ambient"

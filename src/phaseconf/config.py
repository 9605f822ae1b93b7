"""Configuration management for phaseconf."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from .constants import HTTP_PROXY_ENV, HTTPS_PROXY_ENV, NO_PROXY_ENV

DEFAULT_PLATFORM_API = "0.3"


def _env_value(environ: Mapping[str, str], name: str) -> str:
    """Read a proxy variable, preferring the upper-case spelling."""
    return environ.get(name) or environ.get(name.lower()) or ""


@dataclass(frozen=True)
class ProxySettings:
    """Proxy settings forwarded into phase containers.

    Empty strings mean "not configured".
    """

    http_proxy: str = ""
    https_proxy: str = ""
    no_proxy: str = ""

    @classmethod
    def from_environment(cls, environ: Mapping[str, str] | None = None) -> ProxySettings:
        """Load proxy settings from ambient environment variables.

        Both HTTP_PROXY and http_proxy are honoured; the upper-case form wins
        when both are set.
        """
        if environ is None:
            environ = os.environ
        return cls(
            http_proxy=_env_value(environ, HTTP_PROXY_ENV),
            https_proxy=_env_value(environ, HTTPS_PROXY_ENV),
            no_proxy=_env_value(environ, NO_PROXY_ENV),
        )

    def items(self) -> list[tuple[str, str]]:
        """Configured (variable name, value) pairs in propagation order."""
        pairs = [
            (HTTP_PROXY_ENV, self.http_proxy),
            (HTTPS_PROXY_ENV, self.https_proxy),
            (NO_PROXY_ENV, self.no_proxy),
        ]
        return [(name, value) for name, value in pairs if value]

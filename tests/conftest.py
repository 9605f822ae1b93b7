"""Pytest configuration and fixtures for phaseconf tests.

This module ensures the phaseconf package is importable during tests
without requiring installation.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

# Add src directory to path for development testing
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from phaseconf.config import ProxySettings  # noqa: E402
from phaseconf.context import ExecutionContext  # noqa: E402


@pytest.fixture
def phase_logger() -> logging.Logger:
    """Logger the phase output sinks write into."""
    logger = logging.getLogger("phaseconf.tests.phase")
    logger.setLevel(logging.DEBUG)
    return logger


@pytest.fixture
def linux_context(phase_logger: logging.Logger) -> ExecutionContext:
    """Linux execution context without proxy settings."""
    return ExecutionContext.create(
        builder_image="some/builder:latest",
        layers_volume="pack-layers-abc",
        app_volume="pack-app-abc",
        os="linux",
        platform_api="0.4",
        proxy=ProxySettings(),
        logger=phase_logger,
    )


@pytest.fixture
def windows_context(phase_logger: logging.Logger) -> ExecutionContext:
    """Windows execution context without proxy settings."""
    return ExecutionContext.create(
        builder_image="some/windows-builder:latest",
        layers_volume="pack-layers-abc",
        app_volume="pack-app-abc",
        os="windows",
        platform_api="0.4",
        proxy=ProxySettings(),
        logger=phase_logger,
    )

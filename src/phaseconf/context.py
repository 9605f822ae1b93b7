"""Execution context shared by every phase of one build.

Bundles the already-resolved inputs the phase builder reads (builder image,
target OS, platform API, volumes, proxy settings, logger) into a single
immutable object. All validation happens here, before any phase is assembled.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from .config import DEFAULT_PLATFORM_API, ProxySettings
from .constants import OS_LINUX, SUPPORTED_OS
from .errors import ValidationError
from .logging import get_logger
from .paths import MountPaths

_PLATFORM_API_RE = re.compile(r"^\d+\.\d+$")


@dataclass(frozen=True)
class ExecutionContext:
    """Read-only inputs for assembling phase specifications.

    Immutable so that several phases can be assembled concurrently from the
    same context.
    """

    builder_image: str
    layers_volume: str
    app_volume: str
    os: str = OS_LINUX
    platform_api: str = DEFAULT_PLATFORM_API
    mount_paths: MountPaths = field(default_factory=MountPaths)
    proxy: ProxySettings = field(default_factory=ProxySettings)
    logger: logging.Logger = field(default_factory=lambda: get_logger("phase"), compare=False)

    @classmethod
    def create(
        cls,
        *,
        builder_image: str,
        layers_volume: str,
        app_volume: str,
        os: str = OS_LINUX,
        platform_api: str = DEFAULT_PLATFORM_API,
        workspace: str = "",
        proxy: ProxySettings | None = None,
        logger: logging.Logger | None = None,
    ) -> ExecutionContext:
        """Create a validated ExecutionContext.

        Mount paths are resolved for the target OS. When proxy is omitted the
        ambient environment is read.

        Raises:
            ValidationError: If an input would produce an unusable container.
        """
        if not builder_image:
            raise ValidationError("Builder image must not be empty")
        if not layers_volume or not app_volume:
            raise ValidationError("Layers and app volume names must not be empty")
        if os not in SUPPORTED_OS:
            supported = ", ".join(sorted(SUPPORTED_OS))
            raise ValidationError(f"Unsupported target OS '{os}' (expected one of: {supported})")
        if not _PLATFORM_API_RE.match(platform_api):
            raise ValidationError(
                f"Invalid platform API version '{platform_api}' (expected <major>.<minor>)"
            )

        return cls(
            builder_image=builder_image,
            layers_volume=layers_volume,
            app_volume=app_volume,
            os=os,
            platform_api=platform_api,
            mount_paths=MountPaths.for_os(os, workspace),
            proxy=proxy if proxy is not None else ProxySettings.from_environment(),
            logger=logger if logger is not None else get_logger("phase"),
        )

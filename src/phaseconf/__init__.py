"""phaseconf - Container specifications for buildpack lifecycle phases."""

from __future__ import annotations

__version__ = "0.1.0"

from .config import ProxySettings
from .context import ExecutionContext
from .errors import PhaseConfError, ValidationError
from .operations import (
    AddBinds,
    AppendArgs,
    AttachPostCreateActions,
    ElevatePrivileges,
    GrantDaemonAccess,
    GrantRegistryAccess,
    NoOp,
    PhaseOperation,
    PrependFlags,
    PropagateProxy,
    SetEnv,
    SetImage,
    SetLogPrefix,
    SetNetworkMode,
)
from .phase import build_phase_spec
from .spec import ContainerConfig, ExecConfig, HostConfig, Isolation, PhaseSpec

__all__ = [
    "__version__",
    "build_phase_spec",
    "ExecutionContext",
    "ProxySettings",
    "PhaseSpec",
    "ContainerConfig",
    "HostConfig",
    "ExecConfig",
    "Isolation",
    "PhaseConfError",
    "ValidationError",
    # Operations
    "PhaseOperation",
    "AddBinds",
    "AppendArgs",
    "AttachPostCreateActions",
    "ElevatePrivileges",
    "GrantDaemonAccess",
    "GrantRegistryAccess",
    "NoOp",
    "PrependFlags",
    "PropagateProxy",
    "SetEnv",
    "SetImage",
    "SetLogPrefix",
    "SetNetworkMode",
]

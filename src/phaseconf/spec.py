"""Immutable phase container specification.

These records cross the boundary to the orchestrator and the runtime client.
Field values are passed verbatim to the container-creation API: binds and env
entries are neither deduplicated nor validated.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from .streams import Writer


class Isolation(str, Enum):
    """Container isolation technology (only meaningful on Windows hosts)."""

    DEFAULT = ""
    PROCESS = "process"
    HYPERV = "hyperv"


class PostCreateAction(Protocol):
    """Deferred action run by the orchestrator after the container is created.

    Typical actions copy the app directory or a stack file into the container
    before it starts.
    """

    def __call__(self, client: Any, container_id: str, stdout: Writer, stderr: Writer) -> None: ...


@dataclass(frozen=True)
class ContainerConfig:
    """Process descriptor: what runs inside the container."""

    image: str
    env: tuple[str, ...] = ()
    cmd: tuple[str, ...] = ()
    user: str = ""
    labels: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Read-only view over a private copy
        object.__setattr__(self, "labels", MappingProxyType(dict(self.labels)))

    def __hash__(self) -> int:
        labels = tuple(sorted(self.labels.items()))
        return hash((self.image, self.env, self.cmd, self.user, labels))

    def to_api(self) -> dict[str, Any]:
        """Render as a Docker Engine API container config payload."""
        return {
            "Image": self.image,
            "Env": list(self.env),
            "Cmd": list(self.cmd),
            "User": self.user,
            "Labels": dict(self.labels),
        }


@dataclass(frozen=True)
class HostConfig:
    """Host descriptor: how the container is attached to the host."""

    binds: tuple[str, ...] = ()
    network_mode: str = ""
    isolation: Isolation = Isolation.DEFAULT

    def to_api(self) -> dict[str, Any]:
        """Render as a Docker Engine API host config payload."""
        return {
            "Binds": list(self.binds),
            "NetworkMode": self.network_mode,
            "Isolation": self.isolation.value,
        }


@dataclass(frozen=True)
class ExecConfig:
    """Auxiliary exec run inside a live container."""

    cmd: tuple[str, ...]
    detach: bool = False
    attach_stdin: bool = False
    user: str = ""  # Empty means the runtime's default identity

    def to_api(self) -> dict[str, Any]:
        """Render as a Docker Engine API exec config payload."""
        return {
            "Cmd": list(self.cmd),
            "Detach": self.detach,
            "AttachStdin": self.attach_stdin,
            "User": self.user,
        }


@dataclass(frozen=True)
class PhaseSpec:
    """Finalized specification of one phase container.

    Produced by phaseconf.phase.build_phase_spec(); treat as read-only.
    """

    name: str
    os: str
    container: ContainerConfig
    host: HostConfig
    info_writer: Writer = field(compare=False)
    error_writer: Writer = field(compare=False)
    execs: tuple[ExecConfig, ...] = ()
    container_ops: tuple[PostCreateAction, ...] = ()

    def describe(self) -> dict[str, Any]:
        """Summarize the container settings for debug output."""
        return {
            "phase": self.name,
            "os": self.os,
            "args": list(self.container.cmd),
            "env": list(self.container.env),
            "image": self.container.image,
            "user": self.container.user,
            "labels": dict(self.container.labels),
            "binds": list(self.host.binds),
            "network_mode": self.host.network_mode,
        }

    def docker_create_args(self) -> list[str]:
        """Generate the equivalent docker create command.

        Returns:
            Argument vector starting with "docker", "create".
        """
        cmd = ["docker", "create"]

        for key, value in self.container.labels.items():
            cmd.extend(["--label", f"{key}={value}"])

        if self.container.user:
            cmd.extend(["--user", self.container.user])

        for entry in self.container.env:
            cmd.extend(["-e", entry])

        for bind in self.host.binds:
            cmd.extend(["-v", bind])

        if self.host.network_mode:
            cmd.extend(["--network", self.host.network_mode])

        if self.host.isolation is not Isolation.DEFAULT:
            cmd.extend(["--isolation", self.host.isolation.value])

        cmd.append(self.container.image)
        cmd.extend(self.container.cmd)
        return cmd

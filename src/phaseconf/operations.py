"""Configuration operations for phase containers.

Each operation is a small immutable record that mutates a PhaseConfigBuilder
when applied. Operations compare by value, so callers and tests can inspect an
operation list before it is applied. Order matters: operations are applied
exactly once, in the order given.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .config import ProxySettings
from .constants import REGISTRY_AUTH_ENV

if TYPE_CHECKING:
    from .phase import PhaseConfigBuilder
    from .spec import PostCreateAction


class PhaseOperation:
    """Base class for all phase configuration operations."""

    def apply(self, builder: PhaseConfigBuilder) -> None:
        raise NotImplementedError


@dataclass(frozen=True)
class NoOp(PhaseOperation):
    """Operation that changes nothing, for conditionally built operation lists."""

    def apply(self, builder: PhaseConfigBuilder) -> None:
        pass


@dataclass(frozen=True, init=False)
class AppendArgs(PhaseOperation):
    """Append arguments to the end of the lifecycle command."""

    args: tuple[str, ...]

    def __init__(self, *args: str) -> None:
        object.__setattr__(self, "args", args)

    def apply(self, builder: PhaseConfigBuilder) -> None:
        builder.cmd.extend(self.args)


@dataclass(frozen=True, init=False)
class PrependFlags(PhaseOperation):
    """Put flags in front of everything already in the command.

    Unlike AppendArgs, a later PrependFlags lands ahead of an earlier one.
    """

    flags: tuple[str, ...]

    def __init__(self, *flags: str) -> None:
        object.__setattr__(self, "flags", flags)

    def apply(self, builder: PhaseConfigBuilder) -> None:
        builder.cmd[:0] = self.flags


@dataclass(frozen=True, init=False)
class AddBinds(PhaseOperation):
    """Append bind mounts ("source:target[:mode]") verbatim."""

    binds: tuple[str, ...]

    def __init__(self, *binds: str) -> None:
        object.__setattr__(self, "binds", binds)

    def apply(self, builder: PhaseConfigBuilder) -> None:
        builder.binds.extend(self.binds)


@dataclass(frozen=True, init=False)
class SetEnv(PhaseOperation):
    """Append raw KEY=VALUE environment entries (duplicates are kept)."""

    entries: tuple[str, ...]

    def __init__(self, *entries: str) -> None:
        object.__setattr__(self, "entries", entries)

    def apply(self, builder: PhaseConfigBuilder) -> None:
        builder.env.extend(self.entries)


@dataclass(frozen=True)
class SetImage(PhaseOperation):
    """Replace the container image."""

    image: str

    def apply(self, builder: PhaseConfigBuilder) -> None:
        builder.image = self.image


@dataclass(frozen=True)
class SetNetworkMode(PhaseOperation):
    """Replace the container network mode."""

    mode: str

    def apply(self, builder: PhaseConfigBuilder) -> None:
        builder.network_mode = self.mode


@dataclass(frozen=True)
class SetLogPrefix(PhaseOperation):
    """Prefix every line of the phase output.

    An empty prefix is ignored. Applying this twice wraps the sinks twice.
    """

    prefix: str

    def apply(self, builder: PhaseConfigBuilder) -> None:
        builder.streams = builder.streams.with_prefix(self.prefix)


@dataclass(frozen=True)
class PropagateProxy(PhaseOperation):
    """Forward proxy settings as upper- and lower-case env entries.

    Without explicit settings the builder's execution context is used.
    """

    proxy: ProxySettings | None = None

    def apply(self, builder: PhaseConfigBuilder) -> None:
        proxy = self.proxy if self.proxy is not None else builder.context.proxy
        for name, value in proxy.items():
            builder.env.append(f"{name}={value}")
            builder.env.append(f"{name.lower()}={value}")


@dataclass(frozen=True, repr=False)
class GrantRegistryAccess(PhaseOperation):
    """Pass registry credentials (opaque payload) to the lifecycle."""

    auth_config: str

    def apply(self, builder: PhaseConfigBuilder) -> None:
        builder.env.append(f"{REGISTRY_AUTH_ENV}={self.auth_config}")

    def __repr__(self) -> str:
        # Keep credentials out of logged operation lists
        return "GrantRegistryAccess(auth_config='***')"


@dataclass(frozen=True)
class ElevatePrivileges(PhaseOperation):
    """Run as the OS administrator (root or SYSTEM)."""

    def apply(self, builder: PhaseConfigBuilder) -> None:
        builder.user = builder.policy.admin_user
        builder.execs = list(builder.policy.execs)


@dataclass(frozen=True)
class GrantDaemonAccess(PhaseOperation):
    """Elevate privileges and mount the container daemon socket."""

    def apply(self, builder: PhaseConfigBuilder) -> None:
        ElevatePrivileges().apply(builder)
        builder.binds.append(builder.policy.daemon_socket_bind)


@dataclass(frozen=True, init=False)
class AttachPostCreateActions(PhaseOperation):
    """Queue actions for the orchestrator to run after container creation."""

    actions: tuple[PostCreateAction, ...]

    def __init__(self, *actions: PostCreateAction) -> None:
        object.__setattr__(self, "actions", actions)

    def apply(self, builder: PhaseConfigBuilder) -> None:
        builder.container_ops.extend(self.actions)
